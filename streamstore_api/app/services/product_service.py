"""
Service layer for products.

Products always belong to an existing service: the ``service_id`` is
checked on create and whenever an update changes it, and SQLite's
foreign key enforcement backs the check up.  ``description`` and
``observations`` are optional; blank values are stored as NULL.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional

from streamstore_api.app.core.db import get_cursor
from streamstore_api.app.core.errors import NotFoundError
from streamstore_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from streamstore_api.app.services.catalog_service import ensure_service_exists
from streamstore_api.app.services.validation import (
    optional_image,
    optional_text,
    require_price,
    require_text,
)

logger = logging.getLogger(__name__)

_COLUMNS = "id, service_id, name, price, description, observations, image"


class ProductService:
    """Service class for managing products."""

    @classmethod
    async def list_products(cls, service_id: Optional[int] = None) -> List[ProductRead]:
        """Return products ordered by id.

        When ``service_id`` is given only the products of that service
        are returned; an unknown service simply yields an empty list.
        """
        with get_cursor() as cursor:
            if service_id is not None:
                rows = cursor.execute(
                    f"SELECT {_COLUMNS} FROM products WHERE service_id = ? ORDER BY id",
                    (service_id,),
                ).fetchall()
            else:
                rows = cursor.execute(f"SELECT {_COLUMNS} FROM products ORDER BY id").fetchall()
            return [cls._row_to_product_read(row) for row in rows]

    @classmethod
    async def get_product(cls, product_id: int) -> ProductRead:
        with get_cursor() as cursor:
            row = cls._fetch(cursor, product_id)
            return cls._row_to_product_read(row)

    @classmethod
    async def create_product(cls, data: ProductCreate) -> ProductRead:
        """Insert a new product and return the created record.

        Raises ``ValidationError`` for invalid fields and
        ``ReferentialError`` when the service does not exist.
        """
        values = {
            "service_id": data.service_id,
            "name": require_text(data.name, "name"),
            "price": require_price(data.price),
            "description": optional_text(data.description),
            "observations": optional_text(data.observations),
            "image": optional_image(data.image, "image"),
        }
        with get_cursor() as cursor:
            ensure_service_exists(cursor, data.service_id)
            cursor.execute(
                """
                INSERT INTO products (service_id, name, price, description, observations, image)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    values["service_id"],
                    values["name"],
                    values["price"],
                    values["description"],
                    values["observations"],
                    values["image"],
                ),
            )
            product_id = cursor.lastrowid
        logger.info("Created product %s (%s) for service %s", product_id, values["name"], data.service_id)
        return ProductRead(id=product_id, **values)

    @classmethod
    async def update_product(cls, product_id: int, data: ProductUpdate) -> ProductRead:
        """Update an existing product.

        Only fields present in the request are changed.  Moving the
        product to another service re‑checks that the service exists.
        """
        changes = data.model_dump(exclude_unset=True)
        with get_cursor() as cursor:
            current = dict(cls._fetch(cursor, product_id))
            if "service_id" in changes and changes["service_id"] != current["service_id"]:
                ensure_service_exists(cursor, changes["service_id"])
                current["service_id"] = changes["service_id"]
            if "name" in changes:
                current["name"] = require_text(changes["name"], "name")
            if "price" in changes:
                current["price"] = require_price(changes["price"])
            if "description" in changes:
                current["description"] = optional_text(changes["description"])
            if "observations" in changes:
                current["observations"] = optional_text(changes["observations"])
            if "image" in changes:
                current["image"] = optional_image(changes["image"], "image")
            cursor.execute(
                """
                UPDATE products
                SET service_id = ?, name = ?, price = ?, description = ?, observations = ?, image = ?
                WHERE id = ?
                """,
                (
                    current["service_id"],
                    current["name"],
                    current["price"],
                    current["description"],
                    current["observations"],
                    current["image"],
                    product_id,
                ),
            )
        logger.info("Updated product %s", product_id)
        return ProductRead(**current)

    @classmethod
    async def delete_product(cls, product_id: int) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM products WHERE id = ?", (product_id,))
            if cursor.rowcount == 0:
                raise NotFoundError("product", product_id)
        logger.info("Deleted product %s", product_id)

    @staticmethod
    def _fetch(cursor: sqlite3.Cursor, product_id: int) -> sqlite3.Row:
        row = cursor.execute(
            f"SELECT {_COLUMNS} FROM products WHERE id = ?", (product_id,)
        ).fetchone()
        if not row:
            raise NotFoundError("product", product_id)
        return row

    @staticmethod
    def _row_to_product_read(row: sqlite3.Row) -> ProductRead:
        return ProductRead(
            id=row["id"],
            service_id=row["service_id"],
            name=row["name"],
            price=row["price"],
            description=row["description"],
            observations=row["observations"],
            image=row["image"],
        )
