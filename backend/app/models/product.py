"""Product ORM — the single persisted resource of the catalog.

Invariants:
    - id is an autoincrement BIGINT primary key, assigned by the store; every id
      the API accepts on a path (signed 64-bit) fits the column
    - name is non-nullable, price is non-nullable and always > 0
    - availability defaults to True on insert

Design Decisions:
    - Float for price: matches the JSON number the API exchanges (ADR: no currency math here)
    - Positivity enforced by request validation, not a CHECK constraint, so the
      client always gets a field-level message instead of an integrity error
"""

from sqlalchemy import BigInteger, Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Product(Base):
    """Product row — name, price and availability."""
    __tablename__ = "products"

    # SQLite only autoincrements a column declared exactly INTEGER (already 64-bit)
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer(), "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )

    def __repr__(self) -> str:
        return (
            f"Product(id={self.id!r}, name={self.name!r}, "
            f"price={self.price!r}, availability={self.availability!r})"
        )
