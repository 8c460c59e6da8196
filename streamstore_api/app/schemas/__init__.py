"""
Pydantic schema definitions for API payloads.

Each catalog entity defines its own models for request and response
bodies.  Schemas are kept separate from the SQL in the service layer so
the API representation can evolve independently of persistence.
"""
