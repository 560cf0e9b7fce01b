"""
Client endpoints.

``GET /clients/{client_id}`` returns a client with the client's rental
history and ``POST /clients`` creates a client together with a first
rental.  Business rules live in ``ClientService``; this module only maps
its outcomes to HTTP responses:

* not found -> 404 with a JSON ``{"message": ...}`` body;
* invalid request -> 400 with a plain-text message;
* data access failure -> 500 with a plain-text, generic message.
"""

from fastapi import APIRouter, Path, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from car_rental_api.app.schemas.client import (
    ClientDetailsRead,
    ClientWithRentalCreate,
    ClientWithRentalCreated,
)
from car_rental_api.app.services.client_service import ClientService
from car_rental_api.app.services.errors import (
    ClientNotFoundError,
    RentalRequestError,
    RentalStoreError,
)


router = APIRouter()


@router.get(
    "/{client_id}",
    response_model=ClientDetailsRead,
    name="get_client_with_rentals",
    responses={
        status.HTTP_404_NOT_FOUND: {"description": "Client not found"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Internal error"},
    },
)
def get_client_with_rentals(
    client_id: int = Path(..., description="ID of the client"),
):
    """Return the client's profile and rentals in store order."""
    try:
        return ClientService.get_client_with_rentals(client_id)
    except ClientNotFoundError as e:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": str(e)})
    except RentalStoreError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post(
    "",
    response_model=ClientWithRentalCreated,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid client data, dates or car"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Database error"},
    },
)
def add_client_with_rental(request: Request, body: ClientWithRentalCreate) -> Response:
    """Create a client with a first rental.

    On success the response carries the new ``clientId`` and a
    ``Location`` header pointing at the client's detail endpoint.
    """
    try:
        client_id = ClientService.add_client_with_rental(body)
    except RentalRequestError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except RentalStoreError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    created = ClientWithRentalCreated(
        client_id=client_id,
        message="Client and rental created successfully.",
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=created.model_dump(by_alias=True),
        headers={"Location": str(request.url_for("get_client_with_rentals", client_id=client_id))},
    )
