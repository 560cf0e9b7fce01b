"""Entry point for the Car Rental API.

Starts the FastAPI application under Uvicorn.  Intended to be executed
from the project root, for example inside Docker, where only a single
Python file is specified as the command.

Configuration is read from environment variables: ``DATABASE_URL`` is
required, ``HOST`` and ``PORT`` default to ``0.0.0.0`` and ``8000``.

Usage:
    DATABASE_URL=./car_rental.db python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server


async def main() -> None:
    """Serve the API until interrupted."""
    # Imported here so a missing DATABASE_URL surfaces as a startup error
    # rather than at module import.
    from car_rental_api.app.core.config import settings
    from car_rental_api.app.main import app

    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
