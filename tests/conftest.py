import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# The application refuses to start without a connection string; each test
# then points the settings at its own temporary database file.
os.environ.setdefault("DATABASE_URL", str(Path(__file__).resolve().parent / "unused.db"))

from car_rental_api.app.core.config import settings
from car_rental_api.app.core.db import get_cursor, init_db
from car_rental_api.app.main import app

CAR_PRICES = {5: 40, 7: 55}


@pytest.fixture()
def database(tmp_path, monkeypatch):
    """Fresh database with colors, models and two cars.

    Car 5 is a red Corolla at 40 per day.  Car 7 costs 55 per day and
    has no color, so its color shows up as ``None`` on rentals.
    """
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "rentals.db"))
    init_db()
    with get_cursor() as cursor:
        cursor.executemany("INSERT INTO colors (id, name) VALUES (?, ?)", [(1, "Red"), (2, "Blue")])
        cursor.executemany("INSERT INTO models (id, name) VALUES (?, ?)", [(1, "Corolla"), (2, "Civic")])
        cursor.executemany(
            "INSERT INTO cars (id, vin, price_per_day, color_id, model_id) VALUES (?, ?, ?, ?, ?)",
            [
                (5, "JT2BF22K1W0123456", CAR_PRICES[5], 1, 1),
                (7, "2HGFA16598H123456", CAR_PRICES[7], None, 2),
            ],
        )
    return tmp_path / "rentals.db"


@pytest.fixture()
def api(database):
    return TestClient(app)


def count_rows(table: str) -> int:
    with get_cursor() as cursor:
        return cursor.execute(f"SELECT COUNT(*) AS count FROM {table}").fetchone()["count"]


def insert_client(first_name: str = "Bob", last_name: str = "Stone", address: str = "2 Elm St") -> int:
    with get_cursor() as cursor:
        cursor.execute(
            "INSERT INTO clients (first_name, last_name, address) VALUES (?, ?, ?)",
            (first_name, last_name, address),
        )
        return cursor.lastrowid


def rental_payload(**overrides):
    payload = {
        "client": {"firstName": "Ann", "lastName": "Lee", "address": "1 Main St"},
        "carId": 5,
        "dateFrom": "2024-01-01T00:00:00",
        "dateTo": "2024-01-04T00:00:00",
    }
    payload.update(overrides)
    return payload
