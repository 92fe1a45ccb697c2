"""Open-Meteo geocoding API client."""

import logging

import httpx
from pydantic import ValidationError

from weathercast.config.schema import GEOCODING_BASE_URL
from weathercast.errors import UpstreamError
from weathercast.models.forecast import GeoResponse
from weathercast.models.location import Coordinates

logger = logging.getLogger(__name__)


class GeocodingClient:
    def __init__(
        self,
        base_url: str = GEOCODING_BASE_URL,
        language: str = "en",
        count: int = 1,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.language = language
        self.count = count
        self.timeout = timeout

    def search(self, name: str) -> list[Coordinates]:
        """Look up a place name. Returns matches in upstream order, possibly empty."""
        url = f"{self.base_url}/v1/search"
        params = {
            "name": name,
            "count": self.count,
            "language": self.language,
            "format": "json",
        }
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("Geocoding request failed for %r: %s", name, e)
            raise UpstreamError(f"Error making request to geocoding API: {e}") from e

        if resp.status_code >= 400:
            logger.error(
                "Geocoding API %d for %r: %s", resp.status_code, name, resp.text
            )
            raise UpstreamError(
                f"Geocoding API returned HTTP {resp.status_code}", resp.status_code
            )

        try:
            response = GeoResponse.model_validate_json(resp.content)
        except ValidationError as e:
            logger.error("Undecodable geocoding response for %r: %s", name, e)
            raise UpstreamError(f"Error decoding geocoding response: {e}") from e

        return [
            Coordinates(latitude=r.latitude, longitude=r.longitude)
            for r in response.results
        ]
