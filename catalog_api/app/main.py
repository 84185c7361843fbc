"""
Main entrypoint for the Catalog API.

This module assembles the FastAPI application: it sets up logging,
CORS, the envelope-producing exception handlers and the routers, and
attaches a freshly seeded ``DataStore`` to ``app.state``.  The
``create_app`` function builds the app, which is then instantiated at
module import time as ``app`` so it can be served directly::

    uvicorn catalog_api.app.main:app --reload
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.endpoints import info
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import TrailingSlashMiddleware
from .core.store import DataStore


def create_app(settings: Optional[Settings] = None, store: Optional[DataStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[DataStore]
        Initial data.  Defaults to a store holding the demo records.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else DataStore.seeded()
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(TrailingSlashMiddleware)
    register_exception_handlers(app, settings)

    app.include_router(info.router, tags=["info"])
    app.include_router(api_router, prefix="/api")

    logging.getLogger(__name__).debug(
        "Application created (%s, %d users, %d products)",
        settings.environment,
        len(app.state.store.users),
        len(app.state.store.products),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
