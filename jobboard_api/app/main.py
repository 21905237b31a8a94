"""
Main entrypoint for the Job Board API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory store, installs the error handlers and CORS
middleware and mounts the API router under ``/api``.  ``create_app``
builds a fresh application; ``app`` is the instance created at import
time so uvicorn can discover it::

    uvicorn jobboard_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.store import JobBoardStore


def create_app(app_settings: Optional[Settings] = None, store: Optional[JobBoardStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
    store : Optional[JobBoardStore]
        Store to serve.  When omitted a new store is built, seeded
        according to ``app_settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the store can log
    # while seeding.
    setup_logging(app_settings.log_level, app_settings.log_file)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, debug=app_settings.debug)

    if store is None:
        store = JobBoardStore(seed=app_settings.seed_data, random_seed=app_settings.seed_random)
    app.state.store = store

    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")

    logging.getLogger(__name__).info("%s %s ready", app_settings.project_name, app_settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
