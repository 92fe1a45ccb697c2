"""Forecast formatter: raw Open-Meteo payload to display-ready rows."""

import re
from datetime import datetime

from pydantic import ValidationError

from weathercast.errors import DecodeError, TimeParseError
from weathercast.models.forecast import (
    ForecastDisplay,
    ForecastPoint,
    ForecastResponse,
    HourlyReading,
    RawForecast,
)

TIME_FORMAT = "%Y-%m-%dT%H:%M"
# strptime alone also accepts unpadded fields such as 2024-6-1T1:05
TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}", re.ASCII)


def decode_hourly(raw: RawForecast) -> list[HourlyReading]:
    """Decode a forecast payload into (time, temperature) pairs in input order."""
    try:
        response = ForecastResponse.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"Error decoding weather response: {e}") from e

    hourly = response.hourly
    if len(hourly.time) != len(hourly.temperature_2m):
        raise DecodeError(
            f"Hourly arrays differ in length: {len(hourly.time)} times, "
            f"{len(hourly.temperature_2m)} temperatures"
        )
    return [
        HourlyReading(time=t, temperature_c=temp)
        for t, temp in zip(hourly.time, hourly.temperature_2m)
    ]


def format_date(value: str) -> str:
    """'2024-06-01T12:00' -> 'Sat, 1 Jun 12:00'."""
    if not TIME_PATTERN.fullmatch(value):
        raise TimeParseError(value)
    try:
        dt = datetime.strptime(value, TIME_FORMAT)
    except ValueError as e:
        raise TimeParseError(value) from e
    return f"{dt:%a}, {dt.day} {dt:%b %H:%M}"


def format_temperature(value: float) -> str:
    return f"{value:.1f}°C"


def format_forecast(city: str, raw: RawForecast) -> ForecastDisplay:
    """Build the display record for a city from a raw forecast payload."""
    forecasts = [
        ForecastPoint(
            date=format_date(reading.time),
            temperature=format_temperature(reading.temperature_c),
        )
        for reading in decode_hourly(raw)
    ]
    return ForecastDisplay(city=city, forecasts=forecasts)
