"""
Pydantic models for products.

A product is a purchasable plan of a service.  ``description`` and
``observations`` are optional free text shown on the product card;
``image`` is an optional URL or ``data:image/...`` URI.  Prices are
plain numbers in the store currency.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProductBase(BaseModel):
    service_id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["4K 30 Dias | 1 tela com PIN"])
    price: float = Field(..., examples=[24.9])
    description: Optional[str] = Field(None, examples=["Acesso premium 4K por 30 dias."])
    observations: Optional[str] = Field(None, examples=["Entrega imediata via WhatsApp."])
    image: Optional[str] = Field(None, examples=["https://example.com/netflix.png"])


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional; only provided fields will be updated.
    Sending ``null`` for ``description``, ``observations`` or ``image``
    clears the value.
    """

    service_id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    observations: Optional[str] = None
    image: Optional[str] = None


class ProductRead(ProductBase):
    """Schema for reading a product from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
