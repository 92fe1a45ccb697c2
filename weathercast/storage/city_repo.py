"""Recent-lookups store over the cities table."""

import logging
import sqlite3
import threading

from weathercast.errors import StoreError
from weathercast.models.location import CityLookup, Coordinates

logger = logging.getLogger(__name__)


class CityStore:
    """Append-only record of resolved cities.

    Names are stored exactly as submitted and never deduplicated. One store
    is shared by the web server's worker threads; each statement runs under
    the store's lock so execute/commit/lastrowid never interleave on the
    shared connection. The lock covers single statements only, so a
    resolver's find-then-insert is still not atomic.
    """

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        self._lock = threading.Lock()

    def insert(self, name: str, coords: Coordinates) -> int:
        """Append a lookup row. Returns the new row id."""
        try:
            with self._lock:
                cursor = self.conn.execute(
                    "INSERT INTO cities (name, lat, long) VALUES (?, ?, ?)",
                    (name, coords.latitude, coords.longitude),
                )
                self.conn.commit()
                row_id = cursor.lastrowid
        except sqlite3.Error as e:
            logger.error("Failed to insert city %r: %s", name, e)
            raise StoreError(f"Failed to insert city {name!r}: {e}") from e
        if row_id is None:
            raise StoreError(f"Insert of city {name!r} returned no row id")
        return row_id

    def find_by_name(self, name: str) -> Coordinates | None:
        """Exact, case-sensitive lookup. The earliest row wins on duplicates."""
        try:
            with self._lock:
                row = self.conn.execute(
                    "SELECT lat, long FROM cities WHERE name = ? ORDER BY id LIMIT 1",
                    (name,),
                ).fetchone()
        except sqlite3.Error as e:
            logger.error("Failed to look up city %r: %s", name, e)
            raise StoreError(f"Failed to look up city {name!r}: {e}") from e
        if row is None:
            return None
        return Coordinates(latitude=row["lat"], longitude=row["long"])

    def list_recent(self, limit: int = 10) -> list[str]:
        """Names of the most recent lookups, newest first, duplicates included."""
        return [lookup.name for lookup in self.recent_lookups(limit)]

    def recent_lookups(self, limit: int = 10) -> list[CityLookup]:
        if limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        try:
            with self._lock:
                rows = self.conn.execute(
                    "SELECT id, name, lat, long FROM cities ORDER BY id DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        except sqlite3.Error as e:
            logger.error("Failed to list recent cities: %s", e)
            raise StoreError(f"Failed to list recent cities: {e}") from e
        return [
            CityLookup(
                id=r["id"], name=r["name"], latitude=r["lat"], longitude=r["long"]
            )
            for r in rows
        ]

    def ping(self) -> bool:
        try:
            with self._lock:
                self.conn.execute("SELECT 1")
            return True
        except sqlite3.Error:
            return False
