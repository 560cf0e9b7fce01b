"""Car Rental API client.

A thin wrapper around the REST API served by ``car_rental_api``.  It
uses the ``requests`` library and exposes one method per operation:

* :meth:`CarRentalAPI.get_client` – fetch a client with the client's rentals.
* :meth:`CarRentalAPI.add_client_with_rental` – create a client and a first rental.

Methods never raise on HTTP or network failures.  They return a tuple
``(data, error)`` where ``error`` is ``None`` on success and otherwise a
dictionary with the keys ``status_code`` and ``message``.  The API
answers validation and server errors with plain-text bodies and
not-found errors with ``{"message": ...}``; both shapes are turned into
the ``message`` entry.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class CarRentalAPI:
    """Client for interacting with the car rental API."""

    CLIENTS_PATH = "/api/clients"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("message") or body.get("detail") or str(body)
        return str(body)

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError], Optional[requests.Response]]:
        """Perform an HTTP request and return ``(data, error, response)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}, exc.response
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}, None
        if response.content:
            return response.json(), None, response
        return None, None, response

    # ------------------------------------------------------------------
    # Client operations
    # ------------------------------------------------------------------
    def get_client(self, client_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve a client and the client's rentals.

        Returns:
            A tuple ``(client, error)``.  ``client`` holds the decoded
            body, e.g. ``{"id": 1, "firstName": ..., "rentals": [...]}``.
        """
        data, error, _ = self._request("GET", f"{self.CLIENTS_PATH}/{client_id}")
        return data, error

    def add_client_with_rental(
        self,
        *,
        first_name: str,
        last_name: str,
        address: str,
        car_id: int,
        date_from: datetime,
        date_to: datetime,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a client together with a rental of ``car_id``.

        Returns:
            A tuple ``(result, error)``.  On success ``result`` contains
            ``clientId``, ``message`` and ``location`` (the URL of the
            new client's detail endpoint, taken from the ``Location``
            header).
        """
        payload = {
            "client": {"firstName": first_name, "lastName": last_name, "address": address},
            "carId": car_id,
            "dateFrom": date_from.isoformat(),
            "dateTo": date_to.isoformat(),
        }
        data, error, response = self._request("POST", self.CLIENTS_PATH, json_body=payload)
        if error:
            return None, error
        result = dict(data or {})
        result["location"] = response.headers.get("Location") if response is not None else None
        return result, None
