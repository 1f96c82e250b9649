"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for every field except
the admin password, which has no sensible default: ``validate`` must
be called before the application starts serving and raises
``ConfigurationError`` if it is missing.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Fish Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Password for the ``/admin`` portal (the username is always
    # ``admin``).  A server-side secret that must be provided.
    admin_password: str = os.getenv("ADMIN_PASSWORD", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if a required value is missing."""
        if not self.admin_password:
            raise ConfigurationError("required env variable ADMIN_PASSWORD not set")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
