"""
Service layer.

Each service class encapsulates the SQL and the rules for one catalog
entity.  API handlers stay thin: they parse the request, call a service
and return its result, while errors travel as ``CatalogError``
subclasses.
"""
