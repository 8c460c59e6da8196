"""
Product endpoints.

``GET /products`` accepts an optional ``serviceId`` query parameter to
restrict the list to one service, which is what the storefront uses
when a service is opened.  Mutations require the administrator token.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from streamstore_api.app.core.security import require_admin
from streamstore_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from streamstore_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=List[ProductRead])
async def list_products(
    service_id: Optional[int] = Query(None, alias="serviceId", description="Only products of this service"),
) -> List[ProductRead]:
    """Return all products, or those of one service."""
    return await ProductService.list_products(service_id=service_id)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int) -> ProductRead:
    return await ProductService.get_product(product_id)


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    current_user: dict = Depends(require_admin),
) -> ProductRead:
    """Create a product (admin only).

    Responds with 409 when ``service_id`` does not name an existing service.
    """
    return await ProductService.create_product(product_in)


@router.put("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: int,
    product_in: ProductUpdate,
    current_user: dict = Depends(require_admin),
) -> ProductRead:
    return await ProductService.update_product(product_id, product_in)


@router.delete("/{product_id}")
async def delete_product(
    product_id: int,
    current_user: dict = Depends(require_admin),
) -> dict:
    await ProductService.delete_product(product_id)
    return {"success": True}
