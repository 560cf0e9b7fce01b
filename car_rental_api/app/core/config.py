"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Every field except the database connection string has a
default.  The connection string is mandatory: ``create_app`` calls
``require_database_url`` so that a missing value aborts startup instead
of failing on the first request.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Car Rental API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string for the SQLite database.  Accepts a plain file
    # path or a ``sqlite:///`` URL.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "")

    # Create the tables on startup when they are missing.  The schema is
    # normally provisioned outside the service; this is only meant for
    # local development databases.
    create_schema: bool = os.getenv("CREATE_SCHEMA", "false").lower() in {"1", "true", "yes"}

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def require_database_url(self) -> str:
        """Return the connection string or raise if it is not configured."""
        if not self.database_url:
            raise RuntimeError("Connection string 'DATABASE_URL' not found.")
        return self.database_url


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
