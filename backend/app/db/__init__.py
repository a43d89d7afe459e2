"""Database Declarations — SQLAlchemy Base shared by models and migrations.

Invariants:
    - Single async engine per process (owned by infrastructure/database.py)
"""
