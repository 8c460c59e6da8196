"""
Top‑level API router.

Aggregates the entity routers under their path prefixes.  When a new
entity is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import auth, products, services, slides

router = APIRouter()

router.include_router(services.router, prefix="/services", tags=["services"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(slides.router, prefix="/slides", tags=["slides"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
