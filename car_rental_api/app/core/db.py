"""
SQLite database integration.

This module resolves the configured connection string, hands out
connections (``get_connection``) and offers a cursor context manager
for simple one-shot statements.  The schema itself is owned outside
the service; ``init_db`` only exists to bootstrap an empty development
or test database with the five tables the API reads and writes.

Dates are stored as ISO-8601 text.  No type detection is enabled on the
connection, so values come back exactly as stored and are parsed by
the response schemas.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

SQLITE_URL_PREFIX = "sqlite:///"

SCHEMA = """
CREATE TABLE IF NOT EXISTS colors (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS models (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS cars (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    vin TEXT NOT NULL,
    price_per_day INTEGER NOT NULL,
    color_id INTEGER,
    model_id INTEGER,
    FOREIGN KEY(color_id) REFERENCES colors(id),
    FOREIGN KEY(model_id) REFERENCES models(id)
);

CREATE TABLE IF NOT EXISTS clients (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    last_name TEXT NOT NULL,
    address TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS car_rentals (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    client_id INTEGER NOT NULL,
    car_id INTEGER NOT NULL,
    date_from TIMESTAMP NOT NULL,
    date_to TIMESTAMP NOT NULL,
    total_price INTEGER NOT NULL,
    discount INTEGER,
    FOREIGN KEY(client_id) REFERENCES clients(id),
    FOREIGN KEY(car_id) REFERENCES cars(id)
);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    Strips a ``sqlite:///`` prefix if present.  Absolute paths (and the
    special ``:memory:`` name) are returned as is; relative paths are
    resolved against the project root.
    """
    db_url = settings.require_database_url()
    if db_url.startswith(SQLITE_URL_PREFIX):
        db_url = db_url[len(SQLITE_URL_PREFIX):]
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be read by
    name.  Foreign key enforcement is switched on per connection since
    SQLite leaves it off by default.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Create any missing tables.

    Uses ``CREATE TABLE IF NOT EXISTS`` only, so it never alters an
    existing schema.
    """
    conn = get_connection()
    try:
        conn.executescript(SCHEMA)
        conn.commit()
    finally:
        conn.close()
