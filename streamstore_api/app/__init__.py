"""
Application package initializer.

The storefront backend is split into ``core`` (configuration, logging,
database, security and errors), ``schemas`` (request/response models),
``services`` (catalog business logic over SQLite) and ``api`` (FastAPI
routers).  Each catalog entity (services, products, slides) has its own
schema module, service class and router.
"""

from .main import app  # noqa: F401
