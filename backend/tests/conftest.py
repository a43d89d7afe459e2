"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or a real frontend origin
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("FRONTEND_URL", "http://localhost:5173")
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")
