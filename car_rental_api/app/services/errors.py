"""
Exceptions raised by the service layer.

Endpoints translate them into HTTP responses: ``ClientNotFoundError``
becomes 404, ``RentalRequestError`` 400 and ``RentalStoreError`` 500.
The message of a ``RentalStoreError`` is safe to show to callers; the
underlying driver error is only logged.
"""


class ClientNotFoundError(LookupError):
    """The requested client does not exist."""


class RentalRequestError(ValueError):
    """The request content is invalid (missing fields, bad dates, unknown car)."""


class RentalStoreError(RuntimeError):
    """Data access failed; the message is generic."""
