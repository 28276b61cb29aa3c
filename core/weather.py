# =============================================================================
# core/weather.py  -  Current Weather Lookup
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "what's the weather in <city> right now?" from a small, fixed
#   table of mock conditions, optionally converting to Fahrenheit.
#
# WHY MOCK DATA?
#   This is a function-calling demo.  The point is to show the LLM deciding
#   to call a weather tool, not to integrate a weather provider.  The
#   interface (city in, structured record out) is the same one a real
#   OpenWeatherMap/WeatherAPI client would have, so swapping in live data
#   later only touches _WEATHER_TABLE lookups in this file.
#
# RESULT STATUSES:
#   - "success": city found, full record + one-sentence summary
#   - "no_data": valid input, city not in the table (NOT an error)
#   - "error":   empty city, or something unexpected blew up
#
#   Nothing in this module raises to the caller.  An LLM can't do anything
#   useful with a Python traceback, but it CAN read {"status": "error"}.
# =============================================================================

import logging

from core.models import (
    STATUS_NO_DATA,
    STATUS_SUCCESS,
    ToolResult,
    WeatherRecord,
)

logger = logging.getLogger(__name__)

CELSIUS = "celsius"
FAHRENHEIT = "fahrenheit"


# -----------------------------------------------------------------------------
# Mock weather table
# -----------------------------------------------------------------------------
# Keys are lowercase city names.  Temperatures are Celsius; conversion
# happens per request and never touches the table.
# -----------------------------------------------------------------------------
_WEATHER_TABLE: dict[str, WeatherRecord] = {
    "paris": WeatherRecord(temperature=18, condition="Partly Cloudy", humidity=65, wind_speed=12),
    "tokyo": WeatherRecord(temperature=22, condition="Clear", humidity=55, wind_speed=8),
    "new york": WeatherRecord(temperature=15, condition="Rainy", humidity=78, wind_speed=15),
    "london": WeatherRecord(temperature=12, condition="Foggy", humidity=82, wind_speed=10),
    "sydney": WeatherRecord(temperature=25, condition="Sunny", humidity=60, wind_speed=14),
    "rio de janeiro": WeatherRecord(temperature=28, condition="Sunny", humidity=70, wind_speed=11),
    "berlin": WeatherRecord(temperature=14, condition="Overcast", humidity=68, wind_speed=13),
    "dubai": WeatherRecord(temperature=35, condition="Hot and Sunny", humidity=45, wind_speed=9),
}


def _celsius_to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to Fahrenheit, rounded to nearest integer."""
    return round(celsius * 9 / 5 + 32)


def get_weather_record(city: str) -> WeatherRecord | None:
    """Case-insensitive table lookup.  Returns None on a miss."""
    return _WEATHER_TABLE.get(city.lower())


# =============================================================================
# PUBLIC API: lookup_weather
# =============================================================================
def lookup_weather(city: str, units: str = CELSIUS) -> ToolResult:
    """Look up current weather for a city.

    Args:
        city: City name, any casing (e.g., "Paris", "new york").
        units: "celsius" (default) or "fahrenheit".  Anything other than
            "fahrenheit" is treated as Celsius.

    Returns:
        A ToolResult.  On success the data carries temperature,
        temperature_display, condition, humidity, wind_speed and summary.
    """
    try:
        if not str(city or "").strip():
            return ToolResult.error("City name cannot be empty")

        record = get_weather_record(city)
        if record is None:
            logger.debug("No weather data for %r", city)
            return ToolResult(
                status=STATUS_NO_DATA,
                data={
                    "message": f"Could not find weather data for '{city}'. Please check the city name.",
                    "city": city,
                },
            )

        return _format_success(city, record, units)
    except Exception as e:
        logger.exception("Weather lookup failed for %r", city)
        return ToolResult.error(f"Weather service failed: {e}")


def _format_success(city: str, record: WeatherRecord, units: str) -> ToolResult:
    if units == FAHRENHEIT:
        temperature = _celsius_to_fahrenheit(record.temperature)
        temp_unit = "°F"
    else:
        temperature = record.temperature
        temp_unit = "°C"

    display = f"{temperature}{temp_unit}"

    return ToolResult(
        status=STATUS_SUCCESS,
        data={
            "city": city,
            "temperature": temperature,
            "temperature_display": display,
            "condition": record.condition,
            "humidity": f"{record.humidity}%",
            "wind_speed": f"{record.wind_speed} km/h",
            "summary": (
                f"The weather in {city} is {record.condition.lower()} "
                f"with a temperature of {display}."
            ),
        },
    )
