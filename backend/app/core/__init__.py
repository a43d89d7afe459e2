"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/, or db/
    - Domain types, repository contracts and error construction are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: routes orchestrate IO around core types
"""
