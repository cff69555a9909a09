"""Pair weather observations with the station that recorded them.

A station owns an observation when the observation's timestamp lies in the
station's inclusive ``[first_record, last_record]`` window. The reported
``source_id`` of an observation is not consulted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from brightsky_report.schemas import Response, Station, WeatherObservation

logger = logging.getLogger(__name__)


def find_owning_station(
    observation: WeatherObservation,
    stations: Iterable[Station],
) -> Station | None:
    """Find the station whose validity window contains the observation.

    Stations are scanned in the order given; when windows overlap the first
    matching station wins.

    Args:
        observation: The weather record to place.
        stations: Candidate stations, in document order.

    Returns:
        The owning station, or None if no window contains the timestamp.
    """
    for station in stations:
        if station.covers(observation.timestamp):
            return station
    return None


def associate(response: Response) -> list[tuple[WeatherObservation, Station]]:
    """Join every observation in a response with its owning station.

    Observations without an owning station are left out. Order follows
    ``response.weather``.
    """
    pairs: list[tuple[WeatherObservation, Station]] = []
    skipped = 0
    for observation in response.weather:
        station = find_owning_station(observation, response.sources)
        if station is None:
            skipped += 1
            continue
        pairs.append((observation, station))

    if skipped:
        logger.debug("Skipped %d observation(s) with no owning station", skipped)
    return pairs
