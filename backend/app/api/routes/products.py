"""Products — CRUD endpoints for the single Product resource.

Invariants:
    - Path id and body are validated by FastAPI/Pydantic before the handler body runs
    - Each handler makes one repository call, or a locked find then one mutation
    - Missing ids raise ResourceNotFoundError("product") → 404 "product not found"
    - Handlers never catch storage errors: the global handlers own the response

Design Decisions:
    - POST returns 200, not 201: kept from the service this API replaces so
      existing clients keep working
    - find_by_id(for_update=True) before update/toggle/delete: row lock instead of
      a version column (ADR: minimal scope, no schema change)
    - get_product_or_404 shared by every by-id handler
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.api.dependencies import get_product_repository
from app.core.domain_types import MAX_PRODUCT_ID, MIN_PRODUCT_ID, ProductId
from app.core.errors import ResourceNotFoundError
from app.core.repository_protocols import ProductLike, ProductRepository
from app.schemas.product import (
    ErrorResponse, MessageEnvelope, ProductCreate, ProductEnvelope,
    ProductListEnvelope, ProductResponse, ProductUpdate,
)

router = APIRouter(prefix="/api/products", tags=["Products"])

DELETED_MESSAGE = "product deleted"

Repository = Annotated[ProductRepository, Depends(get_product_repository)]
ProductIdParam = Annotated[
    int,
    Path(
        alias="id", ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID,
        description="The id of the product", examples=[1],
    ),
]

_BY_ID_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse, "description": "Bad Request - invalid id or input data",
    },
    status.HTTP_404_NOT_FOUND: {
        "model": ErrorResponse, "description": "Product not found",
    },
}


def _envelope(product: ProductLike) -> ProductEnvelope:
    return ProductEnvelope(data=ProductResponse.model_validate(product))


async def get_product_or_404(
    repo: ProductRepository, product_id: int, *, for_update: bool = False,
) -> ProductLike:
    product = await repo.find_by_id(ProductId(product_id), for_update=for_update)
    if product is None:
        raise ResourceNotFoundError("product", product_id)
    return product


@router.get(
    "", response_model=ProductListEnvelope,
    summary="Get a list of products",
    description="Return every product, newest (highest id) first",
)
@router.get("/", response_model=ProductListEnvelope, include_in_schema=False)
async def list_products(repo: Repository):
    products = await repo.list_all()
    return ProductListEnvelope(
        data=[ProductResponse.model_validate(p) for p in products],
    )


@router.get(
    "/{id}", response_model=ProductEnvelope,
    summary="Get a product by id",
    description="Return a product based on its unique id",
    responses=_BY_ID_ERRORS,
)
async def get_product(product_id: ProductIdParam, repo: Repository):
    return _envelope(await get_product_or_404(repo, product_id))


@router.post(
    "", response_model=ProductEnvelope, status_code=status.HTTP_200_OK,
    summary="Create a new product",
    description="Store a new product; availability starts as true",
    responses={status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse, "description": "Bad Request - invalid input data",
    }},
)
@router.post(
    "/", response_model=ProductEnvelope, status_code=status.HTTP_200_OK,
    include_in_schema=False,
)
async def create_product(body: ProductCreate, repo: Repository):
    product = await repo.insert(body.to_fields())
    return _envelope(product)


@router.put(
    "/{id}", response_model=ProductEnvelope,
    summary="Update a product with user input",
    description="Replace name and price, and availability when given",
    responses=_BY_ID_ERRORS,
)
async def update_product(
    product_id: ProductIdParam, body: ProductUpdate, repo: Repository,
):
    product = await get_product_or_404(repo, product_id, for_update=True)
    product = await repo.replace(product, body.to_fields())
    return _envelope(product)


@router.patch(
    "/{id}", response_model=ProductEnvelope,
    summary="Toggle product availability",
    description="Flip availability and return the updated product",
    responses=_BY_ID_ERRORS,
)
async def toggle_availability(product_id: ProductIdParam, repo: Repository):
    product = await get_product_or_404(repo, product_id, for_update=True)
    product = await repo.replace(
        product, {"availability": not product.availability},
    )
    return _envelope(product)


@router.delete(
    "/{id}", response_model=MessageEnvelope,
    summary="Delete a product by id",
    description="Remove the product permanently and return a confirmation message",
    responses=_BY_ID_ERRORS,
)
async def delete_product(product_id: ProductIdParam, repo: Repository):
    product = await get_product_or_404(repo, product_id, for_update=True)
    await repo.delete(product)
    return MessageEnvelope(data=DELETED_MESSAGE)
