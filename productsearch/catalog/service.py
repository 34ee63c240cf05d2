"""Product query service.

Paged listing, text search, lookup by ID and wishlist updates on top
of the product repository.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from productsearch.catalog.exceptions import (
    MAX_PAGE_NUMBER,
    InvalidPaginationError,
    ProductNotFoundError,
)
from productsearch.catalog.generator import GeneratorConfig, ProductGenerator
from productsearch.catalog.models import MAX_PRODUCT_ID, Product
from productsearch.catalog.repository import ProductRepository

T = TypeVar("T")

logger = structlog.get_logger()


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        page: Page number (1-indexed).
        page_size: Items per page.
    """

    page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if not 1 <= self.page <= MAX_PAGE_NUMBER or self.page_size < 1:
            raise InvalidPaginationError(self.page, self.page_size)

    @property
    def offset(self) -> int:
        """Calculate offset from page number."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit (alias for page_size)."""
        return self.page_size


@dataclass
class PagedResult(Generic[T]):
    """Paged result container.

    Attributes:
        items: Items on this page.
        total_items: Count of all matching items before pagination.
        page_number: Current page.
        page_size: Items per page.
    """

    items: list[T]
    total_items: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        """Calculate total pages."""
        return (self.total_items + self.page_size - 1) // self.page_size

    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        return self.page_number < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Check if there's a previous page."""
        return self.page_number > 1


class ProductQueryService:
    """Service for product catalog queries and wishlist updates.

    Count and page are read with two separate statements, so under
    concurrent writes total_items may not match the rows in items.
    Wishlist updates are last-write-wins.

    Example usage:
        async with async_session_factory() as session:
            service = ProductQueryService(session)
            page = await service.search_products("shirt", PaginationParams(page=1))
            await service.add_to_wishlist(page.items[0].id)
            await session.commit()
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session
        self.repository = ProductRepository(session)

    async def list_products(self, pagination: PaginationParams) -> PagedResult[Product]:
        """List all products, one page at a time.

        Args:
            pagination: Pagination parameters.

        Returns:
            Page of products ordered by ID. Pages past the end are empty.
        """
        return await self._paged(None, pagination)

    async def search_products(
        self,
        query: str | None,
        pagination: PaginationParams,
    ) -> PagedResult[Product]:
        """Search products by name or description.

        A None or blank query behaves exactly like list_products.

        Args:
            query: Case-insensitive substring to look for.
            pagination: Pagination parameters.

        Returns:
            Page of matching products.
        """
        return await self._paged(query, pagination)

    async def get_product(self, product_id: int) -> Product:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            The product.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        # IDs outside the key column range cannot exist
        product = None
        if 1 <= product_id <= MAX_PRODUCT_ID:
            product = await self.repository.get_by_id(product_id)
        if product is None:
            logger.info("Product not found", product_id=product_id)
            raise ProductNotFoundError(product_id)
        return product

    async def set_desired(self, product_id: int, desired: bool) -> Product:
        """Set or clear the wishlist flag on a product.

        Args:
            product_id: Product ID.
            desired: New flag value.

        Returns:
            The updated product (flushed, not committed).

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self.get_product(product_id)
        product.is_desired = desired
        await self.session.flush()

        logger.info("Wishlist updated", product_id=product_id, is_desired=desired)
        return product

    async def add_to_wishlist(self, product_id: int) -> Product:
        """Mark a product as desired."""
        return await self.set_desired(product_id, True)

    async def remove_from_wishlist(self, product_id: int) -> Product:
        """Clear the desired flag on a product."""
        return await self.set_desired(product_id, False)

    async def list_desired(self) -> list[Product]:
        """List every product on the wishlist.

        Returns:
            All desired products, unpaginated.
        """
        return list(await self.repository.find_desired())

    async def seed_catalog(
        self,
        mode: str = "small",
        clear_existing: bool = True,
    ) -> dict[str, Any]:
        """Seed the product table with generated products.

        Args:
            mode: Catalog size ("small" or "full").
            clear_existing: Whether to delete existing products first.

        Returns:
            Seeding result with counts.
        """
        if mode == "full":
            config = GeneratorConfig.full()
        else:
            config = GeneratorConfig.small()

        deleted = 0
        if clear_existing:
            deleted = await self.repository.delete_all()

        products = ProductGenerator(config).generate_list()
        await self.repository.save_all(products)
        await self.session.commit()

        logger.info(
            "Catalog seeded",
            mode=mode,
            deleted=deleted,
            products_created=len(products),
        )

        return {
            "mode": mode,
            "deleted": deleted,
            "products_created": len(products),
            "categories_used": len(set(p.category for p in products)),
        }

    async def _paged(
        self,
        search: str | None,
        pagination: PaginationParams,
    ) -> PagedResult[Product]:
        total = await self.repository.count(search=search)
        products = await self.repository.find_all(
            search=search,
            limit=pagination.limit,
            offset=pagination.offset,
        )

        return PagedResult(
            items=list(products),
            total_items=total,
            page_number=pagination.page,
            page_size=pagination.page_size,
        )
