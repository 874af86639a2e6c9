"""Open-Meteo weather snapshot models."""

from collections.abc import Iterator
from dataclasses import dataclass

from weatherapp.errors import ResponseShapeError
from weatherapp.models.location import Location


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    wind_speed: float
    wind_direction_degrees: float
    observed_at: str  # ISO local time, e.g. "2026-02-11T14:15"


@dataclass(frozen=True)
class DayForecast:
    date: str  # YYYY-MM-DD
    temp_max: float
    temp_min: float
    weather_code: int


@dataclass(frozen=True)
class DailyForecast:
    """Index-aligned daily series; index 0 is today."""

    dates: tuple[str, ...]
    temp_max: tuple[float, ...]
    temp_min: tuple[float, ...]
    weather_code: tuple[int, ...]

    def __post_init__(self) -> None:
        lengths = {
            len(self.dates),
            len(self.temp_max),
            len(self.temp_min),
            len(self.weather_code),
        }
        if len(lengths) != 1:
            raise ResponseShapeError(
                f"Daily forecast arrays are misaligned: "
                f"time={len(self.dates)} max={len(self.temp_max)} "
                f"min={len(self.temp_min)} code={len(self.weather_code)}"
            )

    def __len__(self) -> int:
        return len(self.dates)

    def day(self, index: int) -> DayForecast:
        return DayForecast(
            date=self.dates[index],
            temp_max=self.temp_max[index],
            temp_min=self.temp_min[index],
            weather_code=self.weather_code[index],
        )

    def days(self) -> Iterator[DayForecast]:
        for i in range(len(self.dates)):
            yield self.day(i)


@dataclass(frozen=True)
class WeatherSnapshot:
    current: CurrentConditions
    daily: DailyForecast
    location: Location


def parse_snapshot(raw: dict, placeholder: Location) -> WeatherSnapshot:
    """Map a forecast endpoint payload onto a WeatherSnapshot."""
    current = raw.get("current")
    daily = raw.get("daily")
    if not isinstance(current, dict) or not isinstance(daily, dict):
        raise ResponseShapeError("Forecast response is missing current or daily block")

    try:
        conditions = CurrentConditions(
            temperature=float(current["temperature_2m"]),
            wind_speed=float(current["wind_speed_10m"]),
            wind_direction_degrees=float(current["wind_direction_10m"]),
            observed_at=str(current["time"]),
        )
        forecast = DailyForecast(
            dates=tuple(str(d) for d in daily["time"]),
            temp_max=tuple(float(t) for t in daily["temperature_2m_max"]),
            temp_min=tuple(float(t) for t in daily["temperature_2m_min"]),
            weather_code=tuple(int(c) for c in daily["weather_code"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ResponseShapeError(f"Malformed forecast response: {e!r}") from e

    return WeatherSnapshot(current=conditions, daily=forecast, location=placeholder)
