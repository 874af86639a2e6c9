"""Open-Meteo forecast and geocoding client."""

import logging

import httpx

from weatherapp.config.schema import FORECAST_URL, GEOCODING_URL, ApiConfig
from weatherapp.errors import ApiError, NetworkError, ResponseShapeError
from weatherapp.models.location import Location
from weatherapp.models.weather import WeatherSnapshot, parse_snapshot

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5

FORECAST_PARAMS = {
    "current": "temperature_2m,wind_speed_10m,wind_direction_10m",
    "daily": "temperature_2m_max,temperature_2m_min,weather_code",
    "temperature_unit": "fahrenheit",
    "wind_speed_unit": "mph",
    "timezone": "auto",
    "forecast_days": "7",
}


class OpenMeteoClient:
    def __init__(
        self,
        forecast_url: str = FORECAST_URL,
        geocoding_url: str = GEOCODING_URL,
        timeout: float = 10.0,
    ):
        self.forecast_url = forecast_url
        self.geocoding_url = geocoding_url
        self.timeout = timeout

    @classmethod
    def from_config(cls, api: ApiConfig) -> "OpenMeteoClient":
        return cls(
            forecast_url=api.forecast_url,
            geocoding_url=api.geocoding_url,
            timeout=api.timeout_seconds,
        )

    async def fetch_weather(self, latitude: float, longitude: float) -> WeatherSnapshot:
        """Fetch current conditions and the 7-day forecast for a coordinate.

        The returned snapshot carries a coordinates-only placeholder location.
        """
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            **FORECAST_PARAMS,
        }
        data = await self._get_json(self.forecast_url, params, endpoint="Weather")
        return parse_snapshot(data, Location.placeholder(latitude, longitude))

    async def search_locations(self, text: str) -> list[Location]:
        """Geocode free text into up to five candidate locations.

        Blank input returns an empty list without touching the network.
        """
        if not text.strip():
            return []

        params = {
            "name": text,
            "count": str(MAX_SUGGESTIONS),
            "language": "en",
            "format": "json",
        }
        data = await self._get_json(self.geocoding_url, params, endpoint="Geocoding")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise ResponseShapeError(
                f"Geocoding results should be a list, got {type(results).__name__}"
            )
        try:
            return [Location.from_geocoding(r) for r in results[:MAX_SUGGESTIONS]]
        except (KeyError, TypeError, ValueError) as e:
            raise ResponseShapeError(f"Malformed geocoding result: {e!r}") from e

    async def _get_json(self, url: str, params: dict[str, str], endpoint: str) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("%s request to %s failed: %s", endpoint, url, e)
            raise NetworkError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            logger.error("%s API %s returned %d", endpoint, url, resp.status_code)
            raise ApiError(endpoint, resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise ResponseShapeError(f"{endpoint} API returned invalid JSON") from e
        if not isinstance(data, dict):
            raise ResponseShapeError(f"{endpoint} API returned {type(data).__name__}")
        return data
