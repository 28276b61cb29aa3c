"""Tests for the mock weather lookup (core/weather.py)."""

import pytest

from core.weather import lookup_weather


class TestLookupSuccess:
    """Cities in the table."""

    def test_paris_celsius(self):
        result = lookup_weather("Paris")
        assert result.status == "success"
        assert result.data["temperature"] == 18
        assert result.data["condition"] == "Partly Cloudy"
        assert result.data["temperature_display"] == "18°C"

    def test_paris_fahrenheit_rounds(self):
        """18°C is 64.4°F, stored as a whole 64."""
        result = lookup_weather("Paris", units="fahrenheit")
        assert result.data["temperature"] == 64
        assert result.data["temperature_display"] == "64°F"

    @pytest.mark.parametrize("city,expected_f", [
        ("Tokyo", 72),     # 71.6
        ("London", 54),    # 53.6
        ("Dubai", 95),
    ])
    def test_fahrenheit_conversion(self, city, expected_f):
        assert lookup_weather(city, units="fahrenheit").data["temperature"] == expected_f

    def test_case_insensitive(self):
        assert lookup_weather("NEW YORK").data["temperature"] == 15
        assert lookup_weather("rio de janeiro").data["condition"] == "Sunny"

    def test_echoes_original_city_spelling(self):
        assert lookup_weather("pArIs").data["city"] == "pArIs"

    def test_display_fields(self):
        data = lookup_weather("Paris").data
        assert data["humidity"] == "65%"
        assert data["wind_speed"] == "12 km/h"

    def test_summary_sentence(self):
        data = lookup_weather("Paris").data
        assert data["summary"] == (
            "The weather in Paris is partly cloudy with a temperature of 18°C."
        )

    def test_unknown_units_fall_back_to_celsius(self):
        assert lookup_weather("Paris", units="kelvin").data["temperature_display"] == "18°C"

    def test_table_does_not_mutate_between_calls(self):
        lookup_weather("Berlin", units="fahrenheit")
        assert lookup_weather("Berlin").data["temperature"] == 14


class TestLookupMisses:
    """Validation errors and unknown cities."""

    def test_unknown_city_is_no_data(self):
        result = lookup_weather("Atlantis")
        assert result.status == "no_data"
        assert result.data["city"] == "Atlantis"
        assert "Atlantis" in result.data["message"]

    @pytest.mark.parametrize("city", ["", "   ", None])
    def test_empty_city_is_error(self, city):
        result = lookup_weather(city)
        assert result.status == "error"
        assert "cannot be empty" in result.data["message"]

    def test_non_string_city_is_caught(self):
        result = lookup_weather(42)
        assert result.status == "error"
        assert result.data["message"].startswith("Weather service failed:")


class TestPurity:

    def test_identical_inputs_identical_outputs(self):
        assert lookup_weather("Sydney").to_dict() == lookup_weather("Sydney").to_dict()
