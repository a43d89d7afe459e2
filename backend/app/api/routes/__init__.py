"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never talk to AsyncSession directly (repository via dependencies.py)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
