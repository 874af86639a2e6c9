"""Tests for icon, compass and date/time helpers."""

import pytest

from weatherapp.client.formatting import (
    WMO_CODES,
    format_clock_time,
    format_day_label,
    weather_description,
    weather_icon_for,
    wind_direction_label,
)

CLEAR = "☀️"


class TestWeatherIcon:
    @pytest.mark.parametrize(
        "code,icon",
        [
            (0, "☀️"),
            (1, "🌤️"),
            (2, "⛅"),
            (3, "☁️"),
            (45, "🌫️"),
            (48, "🌫️"),
            (53, "🌦️"),
            (57, "🌨️"),
            (63, "🌧️"),
            (66, "🌨️"),
            (77, "❄️"),
            (82, "🌧️"),
            (86, "❄️"),
            (99, "⛈️"),
        ],
    )
    def test_known_codes(self, code: int, icon: str):
        assert weather_icon_for(code) == icon

    def test_table_covers_documented_codes(self):
        expected = {0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
                    71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99}
        assert set(WMO_CODES) == expected

    @pytest.mark.parametrize("code", [-1, 4, 50, 60, 90, 100, 1000])
    def test_unknown_codes_default_to_clear(self, code: int):
        assert weather_icon_for(code) == CLEAR
        assert weather_description(code) == "Clear sky"

    def test_description(self):
        assert weather_description(61) == "Slight rain"
        assert weather_description(96) == "Thunderstorm with slight hail"


class TestWindDirection:
    @pytest.mark.parametrize(
        "degrees,label",
        [
            (0, "N"),
            (359, "N"),
            (360, "N"),
            (348.75, "N"),
            (348.7, "NNW"),
            (11.25, "NNE"),
            (45, "NE"),
            (90, "E"),
            (135, "SE"),
            (180, "S"),
            (202.5, "SSW"),
            (270, "W"),
            (275, "W"),
            (315, "NW"),
        ],
    )
    def test_labels(self, degrees: float, label: str):
        assert wind_direction_label(degrees) == label


class TestFormatClockTime:
    @pytest.mark.parametrize(
        "iso,expected",
        [
            ("2026-02-11T14:05", "2:05 PM"),
            ("2026-02-11T00:30", "12:30 AM"),
            ("2026-02-11T12:00", "12:00 PM"),
            ("2026-02-11T09:07:00", "9:07 AM"),
            ("2026-02-11T23:59:00Z", "11:59 PM"),
        ],
    )
    def test_format(self, iso: str, expected: str):
        assert format_clock_time(iso) == expected


class TestFormatDayLabel:
    def test_date_only(self):
        assert format_day_label("2026-02-11") == "Wed, Feb 11"

    def test_no_timezone_shift(self):
        # Date-only strings stay on the calendar day given.
        assert format_day_label("2026-01-01") == "Thu, Jan 1"

    def test_datetime_string(self):
        assert format_day_label("2026-12-25T08:00") == "Fri, Dec 25"
