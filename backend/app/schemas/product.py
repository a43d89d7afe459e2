"""Product Schemas — Pydantic request bodies and response envelopes.

Invariants:
    - Every success body is {"data": ...}
    - ProductResponse reads ORM rows directly (from_attributes)
    - ProductCreate/ProductUpdate are the bound request bodies: a request that fails
      them never reaches a handler
    - Missing or blank name/price report "<field> must not be empty", never "Field required"
    - name fits the VARCHAR(100) column; price is finite and > 0
    - Client-supplied id is ignored (extra="ignore"); ProductCreate also ignores availability

Design Decisions:
    - Defaults of None + validate_default: missing fields flow through the same
      before-validator as blank ones, so both get the field's own message
    - availability is strict: only JSON true/false, no "yes"/1 coercion
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.domain_types import ProductFields

NAME_MAX_LENGTH = 100


def _is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


class ProductCreate(BaseModel):
    """Body of POST /api/products."""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(
        None, min_length=1, max_length=NAME_MAX_LENGTH,
        validate_default=True, examples=["Curved Monitor 49 Inch"],
    )
    price: float = Field(
        None, allow_inf_nan=False, validate_default=True, examples=[399],
    )

    @field_validator("name", mode="before")
    @classmethod
    def name_not_empty(cls, v: Any) -> Any:
        if _is_blank(v):
            raise ValueError("name must not be empty")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def price_not_empty(cls, v: Any) -> Any:
        if _is_blank(v):
            raise ValueError("price must not be empty")
        if isinstance(v, bool):
            raise ValueError("price must be numeric")
        return v

    @field_validator("price")
    @classmethod
    def price_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("invalid price")
        return v

    def to_fields(self) -> ProductFields:
        return {"name": self.name, "price": self.price}


class ProductUpdate(ProductCreate):
    """Body of PUT /api/products/{id}. availability omitted keeps the stored value."""
    availability: bool | None = Field(None, strict=True, examples=[True])

    def to_fields(self) -> ProductFields:
        fields = super().to_fields()
        if self.availability is not None:
            fields["availability"] = self.availability
        return fields


class ProductResponse(BaseModel):
    """Product as returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="The Product ID", examples=[1])
    name: str = Field(description="The Product Name", examples=["Curved Monitor"])
    price: float = Field(description="The Product Price", examples=[300])
    availability: bool = Field(description="The Product availability", examples=[True])


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: list[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(examples=["product deleted"])


class FieldErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope produced by api/error_handlers.py."""
    error: str
    code: str
    category: str
    severity: str
    timestamp: str | None = None
    errors: list[FieldErrorDetail] | None = None
