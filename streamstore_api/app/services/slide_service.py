"""
Service layer for promotional slides.
"""

from __future__ import annotations

import logging
from typing import List

from streamstore_api.app.core.db import get_cursor
from streamstore_api.app.core.errors import NotFoundError
from streamstore_api.app.schemas.slide import SlideCreate, SlideRead, SlideUpdate
from streamstore_api.app.services.validation import require_image, require_text

logger = logging.getLogger(__name__)


class SlideService:
    """Service class for managing slides."""

    @classmethod
    async def list_slides(cls) -> List[SlideRead]:
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT id, message, image FROM slides ORDER BY id").fetchall()
            return [SlideRead(id=row["id"], message=row["message"], image=row["image"]) for row in rows]

    @classmethod
    async def get_slide(cls, slide_id: int) -> SlideRead:
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, message, image FROM slides WHERE id = ?", (slide_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("slide", slide_id)
            return SlideRead(id=row["id"], message=row["message"], image=row["image"])

    @classmethod
    async def create_slide(cls, data: SlideCreate) -> SlideRead:
        message = require_text(data.message, "message")
        image = require_image(data.image, "image")
        with get_cursor() as cursor:
            cursor.execute("INSERT INTO slides (message, image) VALUES (?, ?)", (message, image))
            slide_id = cursor.lastrowid
        logger.info("Created slide %s", slide_id)
        return SlideRead(id=slide_id, message=message, image=image)

    @classmethod
    async def update_slide(cls, slide_id: int, data: SlideUpdate) -> SlideRead:
        """Update the fields present in ``data``; raises ``NotFoundError`` if absent."""
        changes = data.model_dump(exclude_unset=True)
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT message, image FROM slides WHERE id = ?", (slide_id,)
            ).fetchone()
            if not row:
                raise NotFoundError("slide", slide_id)
            message = require_text(changes["message"], "message") if "message" in changes else row["message"]
            image = require_image(changes["image"], "image") if "image" in changes else row["image"]
            cursor.execute(
                "UPDATE slides SET message = ?, image = ? WHERE id = ?",
                (message, image, slide_id),
            )
        logger.info("Updated slide %s", slide_id)
        return SlideRead(id=slide_id, message=message, image=image)

    @classmethod
    async def delete_slide(cls, slide_id: int) -> None:
        with get_cursor() as cursor:
            cursor.execute("DELETE FROM slides WHERE id = ?", (slide_id,))
            if cursor.rowcount == 0:
                raise NotFoundError("slide", slide_id)
        logger.info("Deleted slide %s", slide_id)
