"""Initial schema: the cities lookup cache."""

import sqlite3

DDL = [
    # No UNIQUE on name: concurrent cache misses may append duplicates
    """
    CREATE TABLE IF NOT EXISTS cities (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        lat REAL NOT NULL,
        long REAL NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS cities_name_idx ON cities(name)",
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
