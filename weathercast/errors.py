"""Error taxonomy for the lookup pipeline.

Each stage translates the library exception it hits (httpx, json, pydantic,
sqlite3, strptime) into one of these at its boundary and re-raises with the
original chained as ``__cause__``.
"""


class WeatherError(Exception):
    """Base class for all lookup pipeline failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WeatherError):
    """Geocoding returned no result for the requested city."""

    def __init__(self, city: str):
        super().__init__(f"No results found for city: {city}")
        self.city = city


class UpstreamError(WeatherError):
    """Network/transport failure talking to an upstream API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(WeatherError):
    """Upstream payload was not valid JSON or did not match the schema."""


class TimeParseError(WeatherError):
    """A forecast timestamp did not match YYYY-MM-DDTHH:MM."""

    def __init__(self, value: str):
        super().__init__(f"Invalid forecast timestamp: {value!r}")
        self.value = value


class StoreError(WeatherError):
    """The recent-lookups store failed to read or write."""
