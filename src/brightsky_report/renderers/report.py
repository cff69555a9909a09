"""Text report of observations joined with their stations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from brightsky_report.analysis.association import associate
from brightsky_report.renderers import render_template
from brightsky_report.schemas import Condition, ObservationType

if TYPE_CHECKING:
    from brightsky_report.schemas import Response, Station, WeatherObservation

#: Report text when no observation could be placed.
NO_DATA = "[no data]"

#: RFC 2822 style, in the timestamp's own offset.
DEFAULT_DATE_FORMAT = "%a, %d %b %Y %H:%M:%S %z"

CONDITION_LABELS: dict[Condition, str] = {
    Condition.DRY: "Dry",
    Condition.FOG: "Fog",
    Condition.RAIN: "Rain",
    Condition.SLEET: "Sleet",
    Condition.SNOW: "Snow",
    Condition.HAIL: "Hail",
    Condition.THUNDERSTORM: "Thunder Storm",
    Condition.UNKNOWN: "Unknown",
}

OBSERVATION_TYPE_LABELS: dict[ObservationType, str] = {
    ObservationType.FORECAST: "Forecast",
    ObservationType.SYNOP: "SYNOP",
    ObservationType.CURRENT: "Current",
    ObservationType.RECENT: "Recent",
    ObservationType.HISTORICAL: "Historical",
}


def format_number(value: float) -> str:
    """Format a measurement, dropping the fraction of integral values (55.0 -> 55)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def render_block(
    observation: WeatherObservation,
    station: Station,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> str:
    """Render one observation and its station as labeled lines."""
    humidity = observation.relative_humidity
    return render_template(
        "observation.txt.j2",
        city=station.station_name,
        date=observation.timestamp.strftime(date_format),
        observation_type=OBSERVATION_TYPE_LABELS[station.observation_type],
        condition=CONDITION_LABELS[observation.condition],
        temperature=format_number(observation.temperature),
        sunshine=format_number(observation.sunshine),
        precipitation=format_number(observation.precipitation),
        wind_speed=format_number(observation.wind_speed),
        wind_gust_speed=format_number(observation.wind_gust_speed),
        cloud_cover=format_number(observation.cloud_cover),
        humidity="-" if humidity is None else f"{format_number(humidity)} %",
    )


def render_report(response: Response, *, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Render every observation that has an owning station.

    Blocks follow observation order and are separated by one blank line.

    Returns:
        The report text, or ``NO_DATA`` when no block was produced.
    """
    blocks = [
        render_block(observation, station, date_format=date_format)
        for observation, station in associate(response)
    ]
    if not blocks:
        return NO_DATA
    return "\n\n".join(blocks)
