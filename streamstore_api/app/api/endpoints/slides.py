"""
Slide endpoints for the home page carousel.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from streamstore_api.app.core.security import require_admin
from streamstore_api.app.schemas.slide import SlideCreate, SlideRead, SlideUpdate
from streamstore_api.app.services.slide_service import SlideService

router = APIRouter()


@router.get("", response_model=List[SlideRead])
async def list_slides() -> List[SlideRead]:
    return await SlideService.list_slides()


@router.get("/{slide_id}", response_model=SlideRead)
async def get_slide(slide_id: int) -> SlideRead:
    return await SlideService.get_slide(slide_id)


@router.post("", response_model=SlideRead, status_code=status.HTTP_201_CREATED)
async def create_slide(
    slide_in: SlideCreate,
    current_user: dict = Depends(require_admin),
) -> SlideRead:
    """Create a slide (admin only)."""
    return await SlideService.create_slide(slide_in)


@router.put("/{slide_id}", response_model=SlideRead)
async def update_slide(
    slide_id: int,
    slide_in: SlideUpdate,
    current_user: dict = Depends(require_admin),
) -> SlideRead:
    """Update a slide (admin only)."""
    return await SlideService.update_slide(slide_id, slide_in)


@router.delete("/{slide_id}")
async def delete_slide(
    slide_id: int,
    current_user: dict = Depends(require_admin),
) -> dict:
    """Delete a slide (admin only)."""
    await SlideService.delete_slide(slide_id)
    return {"success": True}
