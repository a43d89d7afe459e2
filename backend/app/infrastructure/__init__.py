"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/
    - All storage failures surface as DatabaseError (core/errors.py)

Design Decisions:
    - Repository implementations live here; their contracts live in core/
"""
