"""
Business logic for clients and their car rentals.

``ClientService`` reads a client's profile together with the rental
history and creates a client with a first rental in a single
transaction.  Each call opens its own connection; nothing is shared
between requests.  The methods are synchronous and block on the
driver, so endpoints calling them are plain ``def`` functions which
FastAPI runs in its threadpool.

Data access failures never leave this module as driver exceptions:
they are logged with their detail and re-raised as ``RentalStoreError``
carrying a generic message.
"""

import logging
import sqlite3
from datetime import datetime
from typing import Dict, Iterable

from car_rental_api.app.core.db import get_connection, get_cursor
from car_rental_api.app.schemas.client import (
    ClientDetailsRead,
    ClientWithRentalCreate,
    RentalRead,
)
from car_rental_api.app.services.errors import (
    ClientNotFoundError,
    RentalRequestError,
    RentalStoreError,
)


CLIENT_WITH_RENTALS_QUERY = """
    SELECT
        cl.id AS client_id, cl.first_name, cl.last_name, cl.address,
        cr.id AS rental_id, cr.date_from, cr.date_to, cr.total_price,
        c.vin, c_color.name AS color_name, c_model.name AS model_name
    FROM clients cl
    LEFT JOIN car_rentals cr ON cl.id = cr.client_id
    LEFT JOIN cars c ON cr.car_id = c.id
    LEFT JOIN colors c_color ON c.color_id = c_color.id
    LEFT JOIN models c_model ON c.model_id = c_model.id
    WHERE cl.id = ?
"""


def rental_days(date_from: datetime, date_to: datetime) -> int:
    """Number of whole calendar days between two moments, ignoring time of day."""
    return (date_to.date() - date_from.date()).days


def fold_client_rows(rows: Iterable[sqlite3.Row]) -> Dict[int, ClientDetailsRead]:
    """Fold flat join rows into clients keyed by id.

    The first row seen for a client id creates the client; every row
    with a non-null ``rental_id`` appends one rental to it.  Rows with a
    null ``rental_id`` are the NULL-padded result of the outer join for
    a client without rentals.
    """
    clients: Dict[int, ClientDetailsRead] = {}
    for row in rows:
        client = clients.get(row["client_id"])
        if client is None:
            client = ClientDetailsRead(
                id=row["client_id"],
                first_name=row["first_name"],
                last_name=row["last_name"],
                address=row["address"],
            )
            clients[row["client_id"]] = client
        if row["rental_id"] is not None:
            client.rentals.append(
                RentalRead(
                    vin=row["vin"],
                    color=row["color_name"],
                    model=row["model_name"],
                    date_from=row["date_from"],
                    date_to=row["date_to"],
                    total_price=row["total_price"],
                )
            )
    return clients


class ClientService:
    """Service for reading clients and booking their rentals."""

    @classmethod
    def get_client_with_rentals(cls, client_id: int) -> ClientDetailsRead:
        """Return a client together with the client's rentals.

        Rentals keep the order in which the store returns them.  Raises
        ``ClientNotFoundError`` when no client has this id and
        ``RentalStoreError`` on any data access failure.
        """
        logger = logging.getLogger(__name__)
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(CLIENT_WITH_RENTALS_QUERY, (client_id,)).fetchall()
            clients = fold_client_rows(rows)
        except Exception as exc:
            logger.error("Error in get_client_with_rentals: %s", exc)
            raise RentalStoreError("An internal server error occurred.") from exc

        client = clients.get(client_id)
        if client is None:
            raise ClientNotFoundError(f"Client with ID {client_id} not found.")
        logger.info("Loaded client %s with %s rentals", client_id, len(client.rentals))
        return client

    @classmethod
    def add_client_with_rental(cls, request: ClientWithRentalCreate) -> int:
        """Create a client and the client's first rental; return the new client id.

        The request is validated before any database access.  The car's
        daily price is read outside the transaction, so a concurrent
        price change between the lookup and the insert is not detected.
        Both inserts then run in one transaction which is rolled back on
        any failure.
        """
        logger = logging.getLogger(__name__)
        client = request.client
        if client is None or client.first_name is None or client.last_name is None or client.address is None:
            raise RentalRequestError("Invalid client data. FirstName, LastName, and Address are required.")
        if (request.date_from.tzinfo is None) != (request.date_to.tzinfo is None):
            raise RentalRequestError("DateFrom and DateTo must both include a UTC offset or both omit it.")
        if request.date_to <= request.date_from:
            raise RentalRequestError("DateTo must be after DateFrom.")

        try:
            conn = get_connection()
            try:
                car = conn.execute(
                    "SELECT price_per_day FROM cars WHERE id = ?",
                    (request.car_id,),
                ).fetchone()
                if car is None or car["price_per_day"] is None:
                    raise RentalRequestError(f"Car with ID {request.car_id} not found.")
                client_id = cls._insert_client_and_rental(conn, request, car["price_per_day"])
            finally:
                conn.close()
        except (RentalRequestError, RentalStoreError):
            raise
        except sqlite3.Error as exc:
            logger.error("SQL error in add_client_with_rental: %s", exc)
            raise RentalStoreError("A database error occurred.") from exc
        except Exception as exc:
            logger.error("Error in add_client_with_rental: %s", exc)
            raise RentalStoreError("An internal server error occurred.") from exc

        logger.info("Created client %s with a rental of car %s", client_id, request.car_id)
        return client_id

    @staticmethod
    def _insert_client_and_rental(
        conn: sqlite3.Connection,
        request: ClientWithRentalCreate,
        price_per_day: int,
    ) -> int:
        """Insert the client and the rental inside one transaction."""
        logger = logging.getLogger(__name__)
        try:
            conn.execute("BEGIN")
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO clients (first_name, last_name, address) VALUES (?, ?, ?)",
                (request.client.first_name, request.client.last_name, request.client.address),
            )
            client_id = cursor.lastrowid
            if not client_id:
                conn.rollback()
                raise RentalStoreError("Failed to create client and retrieve ID.")

            days = rental_days(request.date_from, request.date_to)
            if days <= 0:
                # Same calendar day: dates differ only by time of day.
                conn.rollback()
                raise RentalRequestError("Rental duration must be at least one day.")
            total_price = days * price_per_day

            cursor.execute(
                """
                INSERT INTO car_rentals (client_id, car_id, date_from, date_to, total_price, discount)
                VALUES (?, ?, ?, ?, ?, NULL)
                """,
                (
                    client_id,
                    request.car_id,
                    request.date_from.isoformat(),
                    request.date_to.isoformat(),
                    total_price,
                ),
            )
            conn.commit()
        except (RentalRequestError, RentalStoreError):
            raise
        except Exception as exc:
            conn.rollback()
            logger.error("Error during transaction: %s", exc)
            raise RentalStoreError("An error occurred while processing your request.") from exc
        return client_id
