"""
Service layer for the catalog's services (subscription providers).

Deleting a service removes its products in the same transaction, so a
failure halfway leaves both tables untouched.  All queries use
parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from streamstore_api.app.core.db import get_cursor
from streamstore_api.app.core.errors import NotFoundError, ReferentialError, ValidationError
from streamstore_api.app.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate
from streamstore_api.app.services.validation import require_image, require_text

logger = logging.getLogger(__name__)


class CatalogService:
    """Service class for managing services."""

    @classmethod
    async def list_services(cls) -> List[ServiceRead]:
        """Return every service ordered by id."""
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT id, name, logo FROM services ORDER BY id").fetchall()
            return [cls._row_to_service_read(row) for row in rows]

    @classmethod
    async def get_service(cls, service_id: int) -> ServiceRead:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, logo FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("service", service_id)
            return cls._row_to_service_read(row)

    @classmethod
    async def create_service(cls, data: ServiceCreate) -> ServiceRead:
        """Insert a new service and return the created record."""
        name = require_text(data.name, "name")
        logo = require_image(data.logo, "logo")
        with get_cursor() as cursor:
            cursor.execute("INSERT INTO services (name, logo) VALUES (?, ?)", (name, logo))
            service_id = cursor.lastrowid
        logger.info("Created service %s (%s)", service_id, name)
        return ServiceRead(id=service_id, name=name, logo=logo)

    @classmethod
    async def update_service(cls, service_id: int, data: ServiceUpdate) -> ServiceRead:
        """Update an existing service.

        Only fields present in the request are changed.  Raises
        ``NotFoundError`` if the service does not exist.
        """
        changes = data.model_dump(exclude_unset=True)
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, logo FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("service", service_id)
            name = require_text(changes["name"], "name") if "name" in changes else row["name"]
            logo = require_image(changes["logo"], "logo") if "logo" in changes else row["logo"]
            cursor.execute(
                "UPDATE services SET name = ?, logo = ? WHERE id = ?",
                (name, logo, service_id),
            )
        logger.info("Updated service %s", service_id)
        return ServiceRead(id=service_id, name=name, logo=logo)

    @classmethod
    async def delete_service(cls, service_id: int) -> int:
        """Delete a service together with its products.

        Both statements run in one transaction.  Returns the number of
        products removed.  Raises ``NotFoundError`` if the service does
        not exist.
        """
        with get_cursor() as cursor:
            exists = cursor.execute(
                "SELECT 1 FROM services WHERE id = ?", (service_id,)
            ).fetchone()
            if not exists:
                raise NotFoundError("service", service_id)
            cursor.execute("DELETE FROM products WHERE service_id = ?", (service_id,))
            deleted_products = cursor.rowcount
            cursor.execute("DELETE FROM services WHERE id = ?", (service_id,))
        logger.info("Deleted service %s and %d product(s)", service_id, deleted_products)
        return deleted_products

    @staticmethod
    def _row_to_service_read(row: sqlite3.Row) -> ServiceRead:
        return ServiceRead(id=row["id"], name=row["name"], logo=row["logo"])


def ensure_service_exists(cursor: sqlite3.Cursor, service_id: int) -> None:
    """Raise ``ReferentialError`` unless ``service_id`` names a service."""
    if service_id is None:
        raise ValidationError("Field 'service_id' is required")
    row = cursor.execute("SELECT 1 FROM services WHERE id = ?", (service_id,)).fetchone()
    if not row:
        raise ReferentialError(f"Service {service_id} does not exist")
