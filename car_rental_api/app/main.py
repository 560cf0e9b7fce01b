"""
Main entrypoint for the Car Rental API.

``create_app`` builds and configures the FastAPI application, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn car_rental_api.app.main:app --reload

The connection string must be configured (``DATABASE_URL``) before
this module is imported; ``create_app`` refuses to build an app
without one.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .api.router import router as api_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Sets up logging, checks that a connection string is configured,
    mounts the API routes under ``/api`` and installs exception
    handlers so that every error response is plain text: malformed
    request bodies answer 400 and unexpected exceptions answer 500
    without leaking their detail.

    Raises
    ------
    RuntimeError
        If ``DATABASE_URL`` is not set.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    settings.require_database_url()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # The schema normally exists already; bootstrapping is opt-in.
        if settings.create_schema:
            init_db()
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        logging.getLogger(__name__).info("Rejected request to %s: %s", request.url.path, exc.errors())
        return PlainTextResponse("Invalid request body.", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logging.getLogger(__name__).error("Unhandled error on %s: %s", request.url.path, exc)
        return PlainTextResponse(
            "An internal server error occurred.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return app


app = create_app()
