"""
Error taxonomy for the catalog.

Service-layer functions raise these exceptions instead of returning
sentinel values; ``register_exception_handlers`` turns them into JSON
responses of the form ``{"detail": message}`` with the status code
carried by each class.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CatalogError):
    """A required field is missing or a value is invalid."""

    status_code = 422


class NotFoundError(CatalogError):
    """The requested record does not exist."""

    status_code = 404

    def __init__(self, object_type: str, object_id: int):
        self.object_type = object_type
        self.object_id = object_id
        super().__init__(f"{object_type.capitalize()} {object_id} not found")


class ReferentialError(CatalogError):
    """A record references a row that does not exist."""

    status_code = 409


class StoreError(CatalogError):
    """The underlying database failed."""

    status_code = 500


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ``CatalogError`` handler to ``app``."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
