"""
Endpoint subpackage.

Each module defines an APIRouter for one catalog entity (services,
products, slides) or for administrator authentication.
"""
