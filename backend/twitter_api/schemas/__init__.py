# Schemas package init
"""
Twitter API — Pydantic Request/Response Schemas
=================================================

Schemas are the API contract and are kept apart from the ORM models and
entity records: request DTOs declare exactly the fields each endpoint reads,
response models declare exactly what may leave the service.
"""
