"""Shared test fixtures."""

import json
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from weatherapp.client.open_meteo import OpenMeteoClient
from weatherapp.config.defaults import DEFAULT_LOCATION
from weatherapp.models.location import Location
from weatherapp.models.weather import (
    CurrentConditions,
    DailyForecast,
    WeatherSnapshot,
)

FIXTURE_DIR = Path(__file__).parent / "fixtures"

FORECAST_URL = "https://test-forecast.example.com/v1/forecast"
GEOCODING_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_payload() -> dict:
    with open(FIXTURE_DIR / "open_meteo_forecast.json") as f:
        return json.load(f)


@pytest.fixture
def paris_payload() -> dict:
    with open(FIXTURE_DIR / "geocoding_paris.json") as f:
        return json.load(f)


@pytest.fixture
def client() -> OpenMeteoClient:
    return OpenMeteoClient(forecast_url=FORECAST_URL, geocoding_url=GEOCODING_URL, timeout=1.0)


@pytest.fixture
def fairport() -> Location:
    return DEFAULT_LOCATION.to_location()


@pytest.fixture
def paris() -> Location:
    return Location("Paris", 48.85341, 2.3488, "France", "Île-de-France")


def make_snapshot(latitude: float = 43.0987, longitude: float = -77.4422, temperature: float = 31.6) -> WeatherSnapshot:
    """Snapshot shaped like the client's output, with a placeholder location."""
    return WeatherSnapshot(
        current=CurrentConditions(
            temperature=temperature,
            wind_speed=12.4,
            wind_direction_degrees=275,
            observed_at="2026-02-11T14:15",
        ),
        daily=DailyForecast(
            dates=("2026-02-11", "2026-02-12", "2026-02-13"),
            temp_max=(34.2, 29.8, 36.1),
            temp_min=(21.4, 18.0, 24.6),
            weather_code=(3, 71, 2),
        ),
        location=Location.placeholder(latitude, longitude),
    )


@pytest.fixture
def fake_client() -> AsyncMock:
    """Client double whose coroutines are configured per test."""
    fake = AsyncMock(spec=OpenMeteoClient)
    fake.fetch_weather.side_effect = lambda lat, lon: make_snapshot(lat, lon)
    fake.search_locations.return_value = []
    return fake


@pytest.fixture
def snapshot_factory():
    return make_snapshot
