"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; routes await them directly
"""

from typing import Protocol

from app.core.domain_types import ProductFields, ProductId


class ProductLike(Protocol):
    """Structural contract for Product records returned by a repository.

    Avoids coupling routes and tests to the ORM model.
    """
    id: int
    name: str
    price: float
    availability: bool


class ProductRepository(Protocol):
    """Contract for Product persistence — implemented by shell."""
    async def list_all(self) -> list[ProductLike]: ...
    async def find_by_id(
        self, product_id: ProductId, *, for_update: bool = False,
    ) -> ProductLike | None: ...
    async def insert(self, fields: ProductFields) -> ProductLike: ...
    async def replace(
        self, product: ProductLike, fields: ProductFields,
    ) -> ProductLike: ...
    async def delete(self, product: ProductLike) -> None: ...
