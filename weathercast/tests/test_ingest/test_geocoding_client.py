"""Tests for the geocoding client with mocked httpx."""

import httpx
import pytest
import respx
from pydantic import ValidationError

from weathercast.errors import UpstreamError
from weathercast.ingest.geocoding_client import GeocodingClient
from weathercast.models.location import Coordinates

SEARCH_URL = "https://test-geo.example.com/v1/search"


@pytest.fixture
def geocoder() -> GeocodingClient:
    return GeocodingClient(base_url="https://test-geo.example.com")


class TestSearch:
    @respx.mock
    def test_success(self, geocoder: GeocodingClient, berlin_geocoding: dict):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=berlin_geocoding)
        )

        results = geocoder.search("Berlin")
        assert results == [Coordinates(52.52437, 13.41053)]

    @respx.mock
    def test_query_params(self, geocoder: GeocodingClient, berlin_geocoding: dict):
        route = respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json=berlin_geocoding)
        )

        geocoder.search("São Paulo & more")
        request = route.calls[0].request
        assert request.url.params["name"] == "São Paulo & more"
        assert request.url.params["count"] == "1"
        assert request.url.params["language"] == "en"
        assert request.url.params["format"] == "json"

    @respx.mock
    def test_no_results_key(self, geocoder: GeocodingClient):
        # Open-Meteo omits "results" entirely when nothing matches
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.3})
        )
        assert geocoder.search("Atlantis") == []

    @respx.mock
    def test_empty_results(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        assert geocoder.search("Atlantis") == []

    @respx.mock
    def test_malformed_json(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, text="<html>oops</html>")
        )
        with pytest.raises(UpstreamError) as exc_info:
            geocoder.search("Berlin")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @respx.mock
    def test_schema_mismatch(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": [{"name": "Berlin"}]})
        )
        with pytest.raises(UpstreamError) as exc_info:
            geocoder.search("Berlin")
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @respx.mock
    def test_http_error_status(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(
            return_value=httpx.Response(400, json={"error": True, "reason": "bad"})
        )
        with pytest.raises(UpstreamError) as exc_info:
            geocoder.search("Berlin")
        assert exc_info.value.status_code == 400

    @respx.mock
    def test_network_error(self, geocoder: GeocodingClient):
        respx.get(SEARCH_URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(UpstreamError) as exc_info:
            geocoder.search("Berlin")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
