"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

GEOCODING_BASE_URL = "https://geocoding-api.open-meteo.com"
FORECAST_BASE_URL = "https://api.open-meteo.com"


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = GEOCODING_BASE_URL
    language: str = "en"
    count: int = Field(default=1, ge=1, le=100)
    timeout: float = Field(default=10.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = FORECAST_BASE_URL
    # None omits forecast_days and lets the upstream pick its default horizon
    forecast_days: int | None = Field(default=3, ge=1, le=16)
    timeout: float = Field(default=10.0, gt=0.0)


class DatabaseConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = "data/weathercast.db"


class AuthConfig(BaseModel):
    model_config = {"extra": "forbid"}

    username: str = "forecast"
    password: str = "forecast"


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    forecast: ForecastConfig = ForecastConfig()
    database: DatabaseConfig = DatabaseConfig()
    auth: AuthConfig = AuthConfig()
    server: ServerConfig = ServerConfig()
    recent_limit: int = Field(default=10, ge=1, le=1000)
