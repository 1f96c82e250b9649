"""Entry point for the Fish Catalog API.

Validates configuration and serves the application with Uvicorn on
the configured host and port (``0.0.0.0:8080`` by default).

The admin password must be supplied via the ``ADMIN_PASSWORD``
environment variable; without it the process exits before binding
the port.

Usage:
    ADMIN_PASSWORD=... python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from fish_catalog_api.app.core.config import settings
from fish_catalog_api.app.core.errors import ConfigurationError
from fish_catalog_api.app.core.logging_config import setup_logging
from fish_catalog_api.app.main import create_app


async def run_api() -> None:
    """Build the application and serve it until interrupted."""
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> int:
    setup_logging(settings.log_level, settings.log_file)
    try:
        asyncio.run(run_api())
    except ConfigurationError as exc:
        logging.critical("Refusing to start: %s", exc)
        return 1
    except (KeyboardInterrupt, SystemExit):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
