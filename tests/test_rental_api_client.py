import json
from datetime import datetime

import requests

from rental_api_client import CarRentalAPI


def make_response(status_code, body=None, text="", headers=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode() if body is not None else text.encode()
    response.headers.update(headers or {})
    response.url = "http://rentals.test/api/clients"
    return response


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc:
            raise self.exc
        return self.response


def test_get_client_success():
    body = {"id": 3, "firstName": "Ann", "lastName": "Lee", "address": "1 Main St", "rentals": []}
    session = FakeSession(make_response(200, body))
    api = CarRentalAPI(base_url="http://rentals.test/", session=session)

    data, error = api.get_client(3)
    assert error is None
    assert data == body
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["url"] == "http://rentals.test/api/clients/3"


def test_get_client_not_found_uses_message():
    session = FakeSession(make_response(404, {"message": "Client with ID 3 not found."}))
    data, error = CarRentalAPI(base_url="http://rentals.test", session=session).get_client(3)
    assert data is None
    assert error == {"status_code": 404, "message": "Client with ID 3 not found."}


def test_add_client_with_rental_sends_camel_case_payload():
    session = FakeSession(
        make_response(
            201,
            {"clientId": 9, "message": "Client and rental created successfully."},
            headers={"Location": "http://rentals.test/api/clients/9"},
        )
    )
    api = CarRentalAPI(base_url="http://rentals.test", session=session)

    result, error = api.add_client_with_rental(
        first_name="Ann",
        last_name="Lee",
        address="1 Main St",
        car_id=5,
        date_from=datetime(2024, 1, 1),
        date_to=datetime(2024, 1, 4),
    )
    assert error is None
    assert result["clientId"] == 9
    assert result["location"] == "http://rentals.test/api/clients/9"
    assert session.calls[0]["json"] == {
        "client": {"firstName": "Ann", "lastName": "Lee", "address": "1 Main St"},
        "carId": 5,
        "dateFrom": "2024-01-01T00:00:00",
        "dateTo": "2024-01-04T00:00:00",
    }


def test_plain_text_error_body_becomes_message():
    session = FakeSession(make_response(400, text="DateTo must be after DateFrom."))
    api = CarRentalAPI(base_url="http://rentals.test", session=session)

    result, error = api.add_client_with_rental(
        first_name="Ann",
        last_name="Lee",
        address="1 Main St",
        car_id=5,
        date_from=datetime(2024, 1, 1),
        date_to=datetime(2024, 1, 1),
    )
    assert result is None
    assert error == {"status_code": 400, "message": "DateTo must be after DateFrom."}


def test_network_failure_is_reported_not_raised():
    session = FakeSession(exc=requests.ConnectionError("connection refused"))
    data, error = CarRentalAPI(base_url="http://rentals.test", session=session).get_client(1)
    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]
