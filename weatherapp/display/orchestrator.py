"""Weather display orchestrator: current location, snapshot and load state."""

import dataclasses
import logging

from weatherapp.client.open_meteo import OpenMeteoClient
from weatherapp.errors import WeatherAppError
from weatherapp.models.location import Location
from weatherapp.models.weather import CurrentConditions, DayForecast, WeatherSnapshot

logger = logging.getLogger(__name__)

MSG_LOAD_FAILED = "Failed to load weather data"


class WeatherDisplayOrchestrator:
    def __init__(self, client: OpenMeteoClient, seed_location: Location):
        self.client = client
        self.current_location = seed_location
        self.weather: WeatherSnapshot | None = None
        self.loading = False
        self.error: str | None = None
        self._request_seq = 0

    async def start(self) -> None:
        """Initial load against the seed location."""
        await self.load_weather(self.current_location)

    async def load_weather(self, location: Location) -> None:
        """Fetch weather for a location and attach it to the snapshot.

        On failure the previous snapshot stays on screen and `error` is set.
        Responses superseded by a newer load are discarded.
        """
        self._request_seq += 1
        seq = self._request_seq
        self.loading = True
        self.error = None
        try:
            snapshot = await self.client.fetch_weather(location.latitude, location.longitude)
        except WeatherAppError as e:
            if seq == self._request_seq:
                logger.error("Weather load for %s failed: %s", location.display_name, e)
                self.error = str(e)
        except Exception:
            if seq == self._request_seq:
                logger.exception("Unexpected error loading weather for %s", location.display_name)
                self.error = MSG_LOAD_FAILED
        else:
            if seq == self._request_seq:
                self.weather = dataclasses.replace(snapshot, location=location)
                logger.info(
                    "Loaded weather for %s: %.0fF, %d forecast days",
                    location.display_name, snapshot.current.temperature, len(snapshot.daily),
                )
            else:
                logger.debug("Discarding stale weather for %s", location.display_name)
        finally:
            if seq == self._request_seq:
                self.loading = False

    async def select_location(self, location: Location) -> None:
        self.current_location = location
        await self.load_weather(location)

    async def retry(self) -> None:
        await self.load_weather(self.current_location)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def current_card(self) -> tuple[CurrentConditions, DayForecast] | None:
        """Current conditions plus today's forecast row, if loaded."""
        if self.weather is None or len(self.weather.daily) == 0:
            return None
        return self.weather.current, self.weather.daily.day(0)

    def forecast_days(self) -> list[DayForecast]:
        """Upcoming days, excluding today."""
        if self.weather is None:
            return []
        return list(self.weather.daily.days())[1:]
