"""Product API endpoints.

Provides endpoints for browsing products and managing the wishlist:
- GET /api/products - list products (paginated)
- GET /api/products/search - search products by name/description (paginated)
- GET /api/products/{id} - product details
- POST /api/products/addWishlist/{id} - add product to wishlist
- POST /api/products/removeWishlist/{id} - remove product from wishlist
- GET /api/products/Wishlist - list wishlist products
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from productsearch.api.schemas import ErrorResponse, PagedProductsResponse, ProductSchema
from productsearch.catalog.exceptions import MAX_PAGE_NUMBER
from productsearch.catalog.models import Product
from productsearch.catalog.service import PagedResult, PaginationParams, ProductQueryService
from productsearch.infrastructure.config import settings
from productsearch.infrastructure.database import get_session

router = APIRouter(prefix="/api/products", tags=["Products"])


# ============================================================================
# Dependencies
# ============================================================================


def get_service(session: Annotated[AsyncSession, Depends(get_session)]) -> ProductQueryService:
    """Get product query service bound to the request session."""
    return ProductQueryService(session)


def get_pagination(
    page_number: Annotated[
        int,
        Query(alias="pageNumber", ge=1, le=MAX_PAGE_NUMBER, description="Page number (1-based)"),
    ] = 1,
    page_size: Annotated[
        int,
        Query(alias="pageSize", ge=1, le=settings.max_page_size, description="Items per page"),
    ] = settings.default_page_size,
) -> PaginationParams:
    """Read pagination parameters from the query string."""
    return PaginationParams(page=page_number, page_size=page_size)


# ============================================================================
# Converters
# ============================================================================


def page_to_response(result: PagedResult[Product]) -> PagedProductsResponse:
    """Convert a PagedResult to PagedProductsResponse."""
    return PagedProductsResponse(
        items=[ProductSchema.model_validate(product) for product in result.items],
        total_items=result.total_items,
        page_number=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
        has_next=result.has_next,
        has_prev=result.has_prev,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=PagedProductsResponse,
    summary="List products",
    description="Get a page of products ordered by ID.",
)
async def list_products(
    service: Annotated[ProductQueryService, Depends(get_service)],
    pagination: Annotated[PaginationParams, Depends(get_pagination)],
) -> PagedProductsResponse:
    """List products with pagination.

    A page past the end returns an empty item list, not an error.
    """
    result = await service.list_products(pagination)
    return page_to_response(result)


@router.get(
    "/search",
    response_model=PagedProductsResponse,
    summary="Search products",
    description=(
        "Case-insensitive substring search over product name and description. "
        "A missing or blank query lists all products."
    ),
)
async def search_products(
    service: Annotated[ProductQueryService, Depends(get_service)],
    pagination: Annotated[PaginationParams, Depends(get_pagination)],
    query: Annotated[str | None, Query(description="Text to search for")] = None,
) -> PagedProductsResponse:
    """Search products by name or description."""
    result = await service.search_products(query, pagination)
    return page_to_response(result)


@router.get(
    "/Wishlist",
    response_model=list[ProductSchema],
    summary="List wishlist",
    description="Get every product on the wishlist. Not paginated.",
)
@router.get("/wishlist", response_model=list[ProductSchema], include_in_schema=False)
async def list_wishlist(
    service: Annotated[ProductQueryService, Depends(get_service)],
) -> list[ProductSchema]:
    """List all desired products."""
    products = await service.list_desired()
    return [ProductSchema.model_validate(product) for product in products]


@router.get(
    "/{product_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Get a single product by ID.",
)
async def get_product(
    product_id: int,
    service: Annotated[ProductQueryService, Depends(get_service)],
) -> ProductSchema:
    """Get a product by ID.

    Raises:
        ProductNotFoundError: Rendered as 404 by the API error handlers.
    """
    product = await service.get_product(product_id)
    return ProductSchema.model_validate(product)


@router.post(
    "/addWishlist/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Add to wishlist",
)
async def add_to_wishlist(
    product_id: int,
    service: Annotated[ProductQueryService, Depends(get_service)],
) -> Response:
    """Mark a product as desired.

    Raises:
        ProductNotFoundError: Rendered as 404 by the API error handlers.
    """
    await service.add_to_wishlist(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/removeWishlist/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
    summary="Remove from wishlist",
)
async def remove_from_wishlist(
    product_id: int,
    service: Annotated[ProductQueryService, Depends(get_service)],
) -> Response:
    """Clear the desired flag on a product.

    Raises:
        ProductNotFoundError: Rendered as 404 by the API error handlers.
    """
    await service.remove_from_wishlist(product_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
