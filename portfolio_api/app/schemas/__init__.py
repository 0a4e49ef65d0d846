"""
Pydantic schema definitions for API payloads.

Each entity (user, skills, projects, etc.) defines its own Pydantic
models for request and response bodies: a ``Create`` input, a ``Read``
record and, where the entity supports it, ``Update`` and ``Query``
inputs.  Schemas are separated from the SQL in the services to
decouple API representation from persistence.
"""
