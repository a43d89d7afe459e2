"""Request Dependencies — repository injection.

Invariants:
    - One repository per request, bound to that request's AsyncSession
    - Handlers never see AsyncSession directly

Design Decisions:
    - Resolved from get_db so tests override a single dependency for storage
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.repository_protocols import ProductRepository
from app.infrastructure.database import get_db
from app.infrastructure.product_repository import SqlAlchemyProductRepository


async def get_product_repository(
    db: AsyncSession = Depends(get_db),
) -> ProductRepository:
    return SqlAlchemyProductRepository(db)
