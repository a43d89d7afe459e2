"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId is a store-assigned integer, immutable after creation
    - Valid ids fit the BIGINT primary key; anything outside can never exist
    - ProductFields carries only client-writable columns (never id)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - TypedDict for write payloads: repository stays decoupled from request schemas
"""

from typing import NewType, TypedDict


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)

MIN_PRODUCT_ID = -(2 ** 63)
MAX_PRODUCT_ID = 2 ** 63 - 1


# ─── Value Types ─────────────────────────────────────────────────

class ProductFields(TypedDict, total=False):
    """Writable Product columns — availability omitted means "leave as is"."""
    name: str
    price: float
    availability: bool
