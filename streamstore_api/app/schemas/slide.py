"""
Pydantic models for promotional slides shown in the home page carousel.
"""

from typing import Optional

from pydantic import BaseModel, Field


class SlideBase(BaseModel):
    message: str = Field(..., examples=["Promoções exclusivas"])
    image: str = Field(..., examples=["https://example.com/banner.jpg"])


class SlideCreate(SlideBase):
    """Schema for creating a slide."""
    pass


class SlideUpdate(BaseModel):
    message: Optional[str] = None
    image: Optional[str] = None


class SlideRead(SlideBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
