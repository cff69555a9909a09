"""
Domain models for Bright Sky weather responses.

Pydantic models for the ``weather`` observations and the ``sources``
stations of a Bright Sky API payload. These define the canonical schema;
``parser.parse_response`` turns a decoded JSON document into a ``Response``.

All models are frozen: a Response and everything it owns is immutable
once decoded.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictInt,
    model_validator,
)

# =============================================================================
# Field types
# =============================================================================

# RFC 3339 date-time: the offset is mandatory.
_RFC3339_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:(?P<second>\d{2})"
    r"(?:\.\d+)?(?:[Zz]|[+-]\d{2}:\d{2})$"
)


def parse_rfc3339(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp string, keeping its UTC offset."""
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("timestamp has no UTC offset")
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected an RFC 3339 timestamp string, got {type(value).__name__}")
    match = _RFC3339_RE.match(value)
    if not match:
        raise ValueError(f"invalid RFC 3339 timestamp {value!r}")
    normalized = value.replace("t", "T").replace("z", "Z")
    if match["second"] == "60":
        # leap second; datetime has no :60, clamp to :59
        start, end = match.span("second")
        normalized = normalized[:start] + "59" + normalized[end:]
    try:
        return datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise ValueError(f"invalid RFC 3339 timestamp {value!r}: {exc}") from exc


def _require_number(value: Any) -> Any:
    # bool is an int subclass; JSON true/false are not measurements
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    return value


Timestamp = Annotated[datetime, BeforeValidator(parse_rfc3339)]
Number = Annotated[float, BeforeValidator(_require_number)]


# =============================================================================
# Enumerations
# =============================================================================


class ObservationType(StrEnum):
    """Kind of record a station provides."""

    FORECAST = "forecast"
    SYNOP = "synop"
    CURRENT = "current"
    RECENT = "recent"
    HISTORICAL = "historical"


class Condition(StrEnum):
    """Sky condition of an observation."""

    DRY = "dry"
    FOG = "fog"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "null"


class Icon(StrEnum):
    """Icon labels published by Bright Sky."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    WIND = "wind"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "null"


def _condition_or_unknown(value: Any) -> Any:
    return Condition.UNKNOWN if value is None else value


# =============================================================================
# Stations
# =============================================================================


class Station(BaseModel):
    """A weather station (Bright Sky ``source``) with its validity window."""

    model_config = ConfigDict(frozen=True)

    id: StrictInt = Field(..., description="Source ID, unique within a response")
    dwd_station_id: str | None = None
    wmo_station_id: str | None = None
    observation_type: ObservationType
    lat: Number
    lon: Number
    height: Number
    station_name: str
    first_record: Timestamp
    last_record: Timestamp
    distance: Number

    @model_validator(mode="after")
    def _check_window(self) -> Station:
        if self.first_record > self.last_record:
            raise ValueError(
                f"first_record {self.first_record.isoformat()} is after "
                f"last_record {self.last_record.isoformat()}"
            )
        return self

    def covers(self, timestamp: datetime) -> bool:
        """Whether ``timestamp`` falls inside the inclusive validity window."""
        return self.first_record <= timestamp <= self.last_record


# =============================================================================
# Observations
# =============================================================================


class WeatherObservation(BaseModel):
    """A single timestamped weather record (Bright Sky ``weather`` entry)."""

    model_config = ConfigDict(frozen=True)

    timestamp: Timestamp
    source_id: StrictInt = Field(..., description="Reported source; not used for matching")
    precipitation: Number
    pressure_msl: Number
    sunshine: Number
    temperature: Number
    wind_direction: Number
    wind_speed: Number
    cloud_cover: Number
    dew_point: Number
    relative_humidity: Number | None = None
    visibility: Number
    wind_gust_direction: Number | None = None
    wind_gust_speed: Number
    condition: Annotated[Condition, BeforeValidator(_condition_or_unknown)]
    icon: str
    fallback_source_ids: Any = None

    @property
    def icon_kind(self) -> Icon:
        """The icon label as an ``Icon``; ``Icon.UNKNOWN`` if unrecognized."""
        try:
            return Icon(self.icon)
        except ValueError:
            return Icon.UNKNOWN


# =============================================================================
# Response
# =============================================================================


class Response(BaseModel):
    """A decoded Bright Sky payload: observations and their stations."""

    model_config = ConfigDict(frozen=True)

    weather: tuple[WeatherObservation, ...]
    sources: tuple[Station, ...]
