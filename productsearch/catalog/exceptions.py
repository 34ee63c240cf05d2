"""Catalog exceptions.

Errors raised by the product query service. The API layer maps
these to HTTP responses.
"""

from typing import Any

# Upper bound on page number; (page - 1) * page_size must fit a 64-bit offset
MAX_PAGE_NUMBER = 2**31 - 1


class DomainError(Exception):
    """Base class for all catalog exceptions."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ProductNotFoundError(DomainError):
    """Raised when no product row has the requested ID."""

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The ID that was looked up.
        """
        super().__init__(
            f"Product not found: {product_id}",
            details={"product_id": product_id},
        )
        self.product_id = product_id


class InvalidPaginationError(DomainError):
    """Raised when page number or page size is out of range."""

    def __init__(self, page: int, page_size: int) -> None:
        """Initialize invalid pagination error.

        Args:
            page: Requested page number.
            page_size: Requested page size.
        """
        super().__init__(
            f"Invalid pagination: page={page}, page_size={page_size} "
            f"(page must be 1..{MAX_PAGE_NUMBER}, page_size must be >= 1)",
            details={"page": page, "page_size": page_size},
        )
