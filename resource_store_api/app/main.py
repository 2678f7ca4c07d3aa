"""
Main entrypoint for the Resource Store API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app around an explicitly supplied resource store, and
a default seeded instance is created at module import time as
``app``, so the service can be run with uvicorn::

    uvicorn resource_store_api.app.main:app
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.resource_store import ResourceStore

SEED_RESOURCES = ("Resource 1", "Resource 2")

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[ResourceStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ResourceStore]
        Store shared by every request handler of the returned app.  If
        omitted, a new store is created and, when
        ``settings.seed_resources`` is set, filled with the seed
        records.
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = ResourceStore(SEED_RESOURCES if settings.seed_resources else ())

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.resource_store = store
    app.include_router(router)

    logger.info("Resource store ready with %d resources", len(store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
