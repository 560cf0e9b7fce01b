"""
Pydantic models for clients and their rentals.

Payloads use camelCase property names on the wire (``firstName``,
``carId``...).  Incoming property names are matched case-insensitively
so ``FirstName`` and ``firstname`` bind as well.  Client fields are
optional at the schema level on purpose: missing values are reported by
``ClientService`` as a plain 400 response rather than a schema error.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, model_validator


class CamelModel(BaseModel):
    """Base model serialising by alias and binding aliases case-insensitively."""

    model_config = {
        "populate_by_name": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        aliases = {
            (field.alias or name).lower(): field.alias or name
            for name, field in cls.model_fields.items()
        }
        return {aliases.get(str(key).lower(), key): value for key, value in data.items()}


class ClientCreate(CamelModel):
    """Profile of a client to be created."""

    first_name: Optional[str] = Field(None, alias="firstName", examples=["Ann"])
    last_name: Optional[str] = Field(None, alias="lastName", examples=["Lee"])
    address: Optional[str] = Field(None, alias="address", examples=["1 Main St"])


class ClientWithRentalCreate(CamelModel):
    """Request body for creating a client together with a first rental."""

    client: Optional[ClientCreate] = None
    car_id: int = Field(..., alias="carId", examples=[5])
    date_from: datetime = Field(..., alias="dateFrom", examples=["2024-01-01T00:00:00"])
    date_to: datetime = Field(..., alias="dateTo", examples=["2024-01-04T00:00:00"])


class ClientWithRentalCreated(CamelModel):
    client_id: int = Field(..., alias="clientId")
    message: str


class RentalRead(CamelModel):
    """One rental as shown on a client's profile.

    ``vin``, ``color`` and ``model`` come from outer joins and are
    ``None`` when the referenced row is missing.
    """

    vin: Optional[str] = None
    color: Optional[str] = None
    model: Optional[str] = None
    date_from: datetime = Field(..., alias="dateFrom")
    date_to: datetime = Field(..., alias="dateTo")
    total_price: int = Field(..., alias="totalPrice")


class ClientDetailsRead(CamelModel):
    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    address: str
    rentals: List[RentalRead] = Field(default_factory=list)
