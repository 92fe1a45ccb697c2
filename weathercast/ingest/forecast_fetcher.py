"""Forecast fetcher: retrieves raw hourly temperature forecasts from Open-Meteo."""

import logging

import httpx

from weathercast.config.schema import FORECAST_BASE_URL
from weathercast.errors import UpstreamError
from weathercast.models.forecast import RawForecast
from weathercast.models.location import Coordinates

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(
        self,
        base_url: str = FORECAST_BASE_URL,
        forecast_days: int | None = 3,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.forecast_days = forecast_days
        self.timeout = timeout

    def fetch(self, coords: Coordinates) -> RawForecast:
        """Fetch the hourly 2m temperature forecast for a location.

        The status code is not inspected: whatever body comes back is
        returned verbatim and left for the formatter to decode.
        """
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": f"{coords.latitude:.6f}",
            "longitude": f"{coords.longitude:.6f}",
            "hourly": "temperature_2m",
            "timezone": "auto",
        }
        if self.forecast_days is not None:
            params["forecast_days"] = str(self.forecast_days)

        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error(
                "Forecast request failed for %.6f,%.6f: %s",
                coords.latitude, coords.longitude, e,
            )
            raise UpstreamError(f"Error making request to forecast API: {e}") from e

        if resp.status_code >= 400:
            logger.warning(
                "Forecast API returned %d, passing body through", resp.status_code
            )
        return resp.text
