"""Weather lookup pipeline: resolve -> fetch -> format."""

import logging

from weathercast.config.schema import AppConfig
from weathercast.ingest.coordinate_resolver import CoordinateResolver
from weathercast.ingest.forecast_fetcher import ForecastFetcher
from weathercast.ingest.forecast_formatter import format_forecast
from weathercast.ingest.geocoding_client import GeocodingClient
from weathercast.models.forecast import ForecastDisplay
from weathercast.storage.city_repo import CityStore

logger = logging.getLogger(__name__)


class WeatherService:
    """Fail-fast lookup pipeline. Any stage error propagates unchanged."""

    def __init__(
        self,
        store: CityStore,
        resolver: CoordinateResolver,
        fetcher: ForecastFetcher,
    ):
        self.store = store
        self.resolver = resolver
        self.fetcher = fetcher

    @classmethod
    def from_config(cls, config: AppConfig, store: CityStore) -> "WeatherService":
        geocoder = GeocodingClient(
            base_url=config.geocoding.base_url,
            language=config.geocoding.language,
            count=config.geocoding.count,
            timeout=config.geocoding.timeout,
        )
        fetcher = ForecastFetcher(
            base_url=config.forecast.base_url,
            forecast_days=config.forecast.forecast_days,
            timeout=config.forecast.timeout,
        )
        return cls(store, CoordinateResolver(store, geocoder), fetcher)

    def lookup(self, city: str) -> ForecastDisplay:
        coords = self.resolver.resolve(city)
        raw = self.fetcher.fetch(coords)
        display = format_forecast(city, raw)
        logger.info(
            "Forecast for %r at %.4f,%.4f: %d hours",
            city, coords.latitude, coords.longitude, len(display.forecasts),
        )
        return display

    def recent(self, limit: int = 10) -> list[str]:
        return self.store.list_recent(limit)
