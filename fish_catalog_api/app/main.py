"""
Application factory for the Fish Catalog API.

``create_app`` validates settings, sets up logging, attaches the fish
store and includes the routers.  The store is passed in explicitly (or
created fresh) and kept on ``app.state``; nothing is held at module
level, so every app instance, including each one built by the test
suite, starts with its own empty catalog.

Run with uvicorn as a factory::

    uvicorn fish_catalog_api.app.main:create_app --factory --port 8080

or simply ``python run.py``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import CatalogError, catalog_error_handler
from .core.logging_config import setup_logging
from .core.store import FishStore
from .api.v1.router import router as v1_router

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[FishStore] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use; defaults to the module-level settings read
        from the environment.
    store : Optional[FishStore]
        Store to serve from; defaults to a new empty store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If the admin password is not configured.  The application
        must not start serving in that case.
    """
    settings = settings or default_settings
    settings.validate()

    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else FishStore()

    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.include_router(v1_router)

    logger.info("%s %s ready", settings.project_name, settings.api_version)
    return app
