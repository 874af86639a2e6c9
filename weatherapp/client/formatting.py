"""Pure display helpers: WMO icons, compass labels, en-US time formats."""

import math
from datetime import date, datetime

CLEAR_SKY = 0

# WMO weather interpretation codes -> (icon, description)
WMO_CODES: dict[int, tuple[str, str]] = {
    0: ("☀️", "Clear sky"),
    1: ("🌤️", "Mainly clear"),
    2: ("⛅", "Partly cloudy"),
    3: ("☁️", "Overcast"),
    45: ("🌫️", "Fog"),
    48: ("🌫️", "Depositing rime fog"),
    51: ("🌦️", "Light drizzle"),
    53: ("🌦️", "Moderate drizzle"),
    55: ("🌦️", "Dense drizzle"),
    56: ("🌨️", "Light freezing drizzle"),
    57: ("🌨️", "Dense freezing drizzle"),
    61: ("🌧️", "Slight rain"),
    63: ("🌧️", "Moderate rain"),
    65: ("🌧️", "Heavy rain"),
    66: ("🌨️", "Light freezing rain"),
    67: ("🌨️", "Heavy freezing rain"),
    71: ("❄️", "Slight snow fall"),
    73: ("❄️", "Moderate snow fall"),
    75: ("❄️", "Heavy snow fall"),
    77: ("❄️", "Snow grains"),
    80: ("🌧️", "Slight rain showers"),
    81: ("🌧️", "Moderate rain showers"),
    82: ("🌧️", "Violent rain showers"),
    85: ("❄️", "Slight snow showers"),
    86: ("❄️", "Heavy snow showers"),
    95: ("⛈️", "Thunderstorm"),
    96: ("⛈️", "Thunderstorm with slight hail"),
    99: ("⛈️", "Thunderstorm with heavy hail"),
}

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def weather_icon_for(code: int) -> str:
    """Icon for a WMO code. Unknown codes fall back to clear sky."""
    return WMO_CODES.get(code, WMO_CODES[CLEAR_SKY])[0]


def weather_description(code: int) -> str:
    return WMO_CODES.get(code, WMO_CODES[CLEAR_SKY])[1]


def wind_direction_label(degrees: float) -> str:
    """16-point compass label; 348.75 and up wraps back to N."""
    # Round half up, not Python's banker's rounding.
    index = math.floor(degrees / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def format_clock_time(iso_string: str) -> str:
    """'2026-02-11T14:05' -> '2:05 PM'."""
    dt = datetime.fromisoformat(_normalize_iso(iso_string))
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"


def format_day_label(iso_string: str) -> str:
    """'2026-02-11' -> 'Wed, Feb 11'.

    Date-only strings are calendar dates; no timezone shift is applied.
    """
    value = _normalize_iso(iso_string)
    day = date.fromisoformat(value) if len(value) == 10 else datetime.fromisoformat(value).date()
    return f"{_WEEKDAYS[day.weekday()]}, {_MONTHS[day.month - 1]} {day.day}"


def _normalize_iso(value: str) -> str:
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value
