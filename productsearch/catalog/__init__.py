"""Product Catalog.

Product model, repository, query service and the development
catalog generator.
"""

from productsearch.catalog.exceptions import (
    DomainError,
    InvalidPaginationError,
    ProductNotFoundError,
)
from productsearch.catalog.generator import GeneratorConfig, ProductGenerator
from productsearch.catalog.models import Product
from productsearch.catalog.repository import ProductRepository
from productsearch.catalog.service import PagedResult, PaginationParams, ProductQueryService

__all__ = [
    # Exceptions
    "DomainError",
    "InvalidPaginationError",
    "ProductNotFoundError",
    # Models
    "Product",
    # Generator
    "GeneratorConfig",
    "ProductGenerator",
    # Repository
    "ProductRepository",
    # Service
    "PagedResult",
    "PaginationParams",
    "ProductQueryService",
]
