"""Pydantic Schemas — response envelopes and documented request bodies.

Invariants:
    - Schemas describe the system boundary (API responses, OpenAPI bodies)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
