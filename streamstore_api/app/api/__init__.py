"""
API package containing the HTTP routes.

``router.py`` aggregates the per-entity routers defined in
``endpoints``; the application mounts the result under ``/api``.
"""
