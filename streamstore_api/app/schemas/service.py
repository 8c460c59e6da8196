"""
Pydantic models for services (subscription providers).

A service is the brand a product belongs to, e.g. a streaming platform.
``logo`` holds either a URL or an embedded ``data:image/...`` URI
produced by the admin upload form.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ServiceBase(BaseModel):
    name: str = Field(..., examples=["Netflix"])
    logo: str = Field(..., examples=["https://example.com/netflix.svg"])


class ServiceCreate(ServiceBase):
    """Schema for creating a service."""
    pass


class ServiceUpdate(BaseModel):
    """Schema for updating a service.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    logo: Optional[str] = None


class ServiceRead(ServiceBase):
    """Schema for reading a service from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
