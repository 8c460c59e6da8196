"""
Main entrypoint for the StreamStore API.

This module assembles the FastAPI application, sets up logging, the
error handlers and the API routes.  ``create_app`` builds and configures
the app, which is then instantiated at module import time as ``app``,
so it can be served directly::

    uvicorn streamstore_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.db import init_db
from .core.errors import register_exception_handlers
from .core.limits import BodySizeLimitMiddleware
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file if needed and applies pending migrations.
    init_db()
    if not settings.admin_password_hash:
        logger.warning("ADMIN_PASSWORD_HASH is empty; admin login is disabled")
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    register_exception_handlers(app)

    app.add_middleware(BodySizeLimitMiddleware)

    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
