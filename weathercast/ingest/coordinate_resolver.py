"""Coordinate resolver: city name to coordinates, cache first."""

import logging

from weathercast.errors import NotFoundError
from weathercast.ingest.geocoding_client import GeocodingClient
from weathercast.models.location import Coordinates
from weathercast.storage.city_repo import CityStore

logger = logging.getLogger(__name__)


class CoordinateResolver:
    def __init__(self, store: CityStore, geocoder: GeocodingClient):
        self.store = store
        self.geocoder = geocoder

    def resolve(self, name: str) -> Coordinates:
        """Resolve a city name, consulting the store before geocoding.

        Cached rows never expire. The read and the insert on a miss are not
        atomic, so concurrent misses for one name can each insert a row.
        """
        cached = self.store.find_by_name(name)
        if cached is not None:
            logger.debug("Cache hit for %r", name)
            return cached

        logger.info("Cache miss for %r, querying geocoding API", name)
        results = self.geocoder.search(name)
        if not results:
            raise NotFoundError(name)

        coords = results[0]
        self.store.insert(name, coords)
        return coords
