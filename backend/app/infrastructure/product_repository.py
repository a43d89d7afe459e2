"""SQLAlchemy Product Repository — implements ProductRepository over an AsyncSession.

Invariants:
    - One repository per request session; never shared across requests
    - Every mutation commits and refreshes before returning
    - SQLAlchemyError never escapes: rolled back and mapped to DatabaseError

Design Decisions:
    - Error mapping here as well as in DatabaseSessionManager: route-level failures
      must reach the ProductApiError handler inside the request, not during
      dependency teardown
    - for_update issues SELECT ... FOR UPDATE; SQLite ignores it, PostgreSQL
      serializes concurrent mutations of the same row
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ProductFields, ProductId
from app.core.errors import DatabaseError
from app.models.product import Product

logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository:
    """ProductRepository backed by the products table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncGenerator[None, None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Product {name} failed: {e}",
                extra={"operation": name, "error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(type(e).__name__, name) from e

    async def list_all(self) -> list[Product]:
        async with self._operation("list"):
            result = await self._db.execute(
                select(Product).order_by(Product.id.desc()),
            )
            return list(result.scalars().all())

    async def find_by_id(
        self, product_id: ProductId, *, for_update: bool = False,
    ) -> Product | None:
        query = select(Product).where(Product.id == product_id)
        if for_update:
            query = query.with_for_update()
        async with self._operation("find"):
            result = await self._db.execute(query)
            return result.scalar_one_or_none()

    async def insert(self, fields: ProductFields) -> Product:
        product = Product(**fields)
        async with self._operation("insert"):
            self._db.add(product)
            await self._db.commit()
            await self._db.refresh(product)
        logger.info("Product created", extra={"product_id": product.id})
        return product

    async def replace(self, product: Product, fields: ProductFields) -> Product:
        for column, value in fields.items():
            setattr(product, column, value)
        async with self._operation("update"):
            await self._db.commit()
            await self._db.refresh(product)
        logger.info("Product updated", extra={"product_id": product.id})
        return product

    async def delete(self, product: Product) -> None:
        product_id = product.id
        async with self._operation("delete"):
            await self._db.delete(product)
            await self._db.commit()
        logger.info("Product deleted", extra={"product_id": product_id})
