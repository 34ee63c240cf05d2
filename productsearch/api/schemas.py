"""API schemas for the Product Search API.

Pydantic models for response serialization. Field names are
snake_case in Python and camelCase on the wire.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list = Field(default_factory=list, description="Additional error details")
    request_id: str | None = Field(default=None, description="Request ID for correlation")


# ============================================================================
# Product Schemas
# ============================================================================


class ProductSchema(CamelModel):
    """Product representation."""

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name")
    description: str | None = Field(default=None, description="Product description")
    price: int = Field(..., description="Price in smallest currency unit (cents)")
    currency: str = Field(default="USD", description="Currency code")
    category: str | None = Field(default=None, description="Category name")
    image_url: str | None = Field(default=None, description="Product image URL")
    is_desired: bool = Field(default=False, description="Whether the product is on the wishlist")
    created_at: datetime | None = Field(default=None, description="When the product was created")
    updated_at: datetime | None = Field(default=None, description="When the product was last updated")


class PagedProductsResponse(CamelModel):
    """One page of products."""

    items: list[ProductSchema] = Field(..., description="Products on this page")
    total_items: int = Field(..., description="Count of all matching products")
    page_number: int = Field(..., description="Current page number (1-based)")
    page_size: int = Field(..., description="Requested page size")
    total_pages: int = Field(..., description="Number of pages for the current page size")
    has_next: bool = Field(..., description="Whether a later page exists")
    has_prev: bool = Field(..., description="Whether an earlier page exists")
