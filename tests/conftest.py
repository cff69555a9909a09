"""
Pytest configuration and shared fixtures for all tests.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from brightsky_report.config import get_settings


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_text(fixtures_dir: Path) -> str:
    """Raw JSON text of a Bright Sky payload."""
    return (fixtures_dir / "brightsky.json").read_text(encoding="utf-8")


@pytest.fixture
def sample_document(sample_text: str) -> dict[str, Any]:
    """Decoded Bright Sky payload (fresh copy per test)."""
    return json.loads(sample_text)


@pytest.fixture
def make_station() -> Callable[..., dict[str, Any]]:
    """Factory for a wire-format station (Berlin, one-day window)."""

    def _make(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": 1,
            "dwd_station_id": "00433",
            "wmo_station_id": "10384",
            "observation_type": "synop",
            "lat": 52.4675,
            "lon": 13.4021,
            "height": 48.0,
            "station_name": "Berlin",
            "first_record": "2020-04-21T00:00:00+02:00",
            "last_record": "2020-04-22T00:00:00+02:00",
            "distance": 0.0,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture
def make_observation() -> Callable[..., dict[str, Any]]:
    """Factory for a wire-format weather record."""

    def _make(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "timestamp": "2020-04-21T02:00:00+00:00",
            "source_id": 1,
            "precipitation": 0,
            "pressure_msl": 1012.0,
            "sunshine": 0,
            "temperature": 13.2,
            "wind_direction": 220,
            "wind_speed": 10,
            "cloud_cover": 80,
            "dew_point": 5.1,
            "relative_humidity": None,
            "visibility": 20000,
            "wind_gust_direction": None,
            "wind_gust_speed": 15,
            "condition": "rain",
            "icon": "rain",
            "fallback_source_ids": None,
        }
        data.update(overrides)
        return data

    return _make


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Settings are cached per process; reset between tests."""
    get_settings.cache_clear()
