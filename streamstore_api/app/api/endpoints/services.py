"""
Service endpoints.

Listing and reading services is public so the storefront can render the
catalog; creating, updating and deleting require the administrator
token.  Deleting a service also deletes its products.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from streamstore_api.app.core.security import require_admin
from streamstore_api.app.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate
from streamstore_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=List[ServiceRead])
async def list_services() -> List[ServiceRead]:
    """Return all services."""
    return await CatalogService.list_services()


@router.get("/{service_id}", response_model=ServiceRead)
async def get_service(service_id: int) -> ServiceRead:
    return await CatalogService.get_service(service_id)


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
async def create_service(
    service_in: ServiceCreate,
    current_user: dict = Depends(require_admin),
) -> ServiceRead:
    """Create a new service (admin only)."""
    return await CatalogService.create_service(service_in)


@router.put("/{service_id}", response_model=ServiceRead)
async def update_service(
    service_id: int,
    service_in: ServiceUpdate,
    current_user: dict = Depends(require_admin),
) -> ServiceRead:
    """Update a service (admin only)."""
    return await CatalogService.update_service(service_id, service_in)


@router.delete("/{service_id}")
async def delete_service(
    service_id: int,
    current_user: dict = Depends(require_admin),
) -> dict:
    """Delete a service and all of its products (admin only)."""
    deleted_products = await CatalogService.delete_service(service_id)
    return {"success": True, "deleted_products": deleted_products}
