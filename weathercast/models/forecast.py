"""Forecast models: upstream payload schemas and display records."""

from dataclasses import asdict, dataclass
from typing import TypeAlias

from pydantic import BaseModel, Field

RawForecast: TypeAlias = str


# --- Upstream payload schemas ---

class GeoResult(BaseModel):
    latitude: float
    longitude: float


class GeoResponse(BaseModel):
    results: list[GeoResult] = []


class HourlyBlock(BaseModel):
    time: list[str]
    temperature_2m: list[float]


class ForecastResponse(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    hourly: HourlyBlock


# --- Display records ---

@dataclass(frozen=True)
class HourlyReading:
    time: str  # YYYY-MM-DDTHH:MM, local to the forecast timezone
    temperature_c: float


@dataclass(frozen=True)
class ForecastPoint:
    date: str
    temperature: str


@dataclass(frozen=True)
class ForecastDisplay:
    city: str
    forecasts: list[ForecastPoint]

    def to_dict(self) -> dict:
        return asdict(self)


class WeatherQuery(BaseModel):
    """Query parameters accepted by the /weather page."""

    city: str = Field(min_length=1)
