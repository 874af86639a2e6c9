"""Plain-text renderers for the weather card, forecast list and suggestions."""

from weatherapp.client.formatting import (
    format_clock_time,
    format_day_label,
    weather_description,
    weather_icon_for,
    wind_direction_label,
)
from weatherapp.display.orchestrator import WeatherDisplayOrchestrator
from weatherapp.models.location import CURRENT_LOCATION_NAME, Location


def format_current_card(orchestrator: WeatherDisplayOrchestrator) -> str:
    card = orchestrator.current_card()
    if orchestrator.weather is None or card is None:
        return "Loading..." if orchestrator.loading else "No weather data"

    current, today = card
    name = orchestrator.weather.location.display_name if orchestrator.weather.location.name else CURRENT_LOCATION_NAME
    temp = round(current.temperature)
    wind = round(current.wind_speed)
    lines = [
        f"=== {name} ===",
        f"{weather_icon_for(today.weather_code)}  {temp}°F  {weather_description(today.weather_code)}",
        f"Wind: {wind} mph {wind_direction_label(current.wind_direction_degrees)}",
        f"High {round(today.temp_max)}°F / Low {round(today.temp_min)}°F",
        f"Updated {format_clock_time(current.observed_at)}",
    ]
    return "\n".join(lines)


def format_forecast(orchestrator: WeatherDisplayOrchestrator) -> str:
    days = orchestrator.forecast_days()
    if not days:
        return ""
    lines = ["Forecast:"]
    for day in days:
        lines.append(
            f"  {format_day_label(day.date):<12} {weather_icon_for(day.weather_code)}  "
            f"{round(day.temp_max):>3}° / {round(day.temp_min):>3}°"
        )
    return "\n".join(lines)


def format_suggestions(suggestions: list[Location]) -> str:
    return "\n".join(
        f"{i}. {loc.display_name} ({loc.latitude:.4f}, {loc.longitude:.4f})"
        for i, loc in enumerate(suggestions, start=1)
    )
