"""Product repository for database operations.

Provides lookups, filtered counts and paged queries over products.
"""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from productsearch.catalog.models import Product


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with async_session_factory() as session:
            repo = ProductRepository(session)
            total = await repo.count(search="shirt")
            page = await repo.find_all(search="shirt", limit=10, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def save_all(self, products: list[Product]) -> list[Product]:
        """Save multiple products to database.

        Args:
            products: Products to save.

        Returns:
            Saved products.
        """
        self.session.add_all(products)
        await self.session.flush()
        return products

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        return await self.session.get(Product, product_id)

    async def find_all(
        self,
        search: str | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> Sequence[Product]:
        """Find products ordered by ID, optionally filtered by text.

        Args:
            search: Substring to match in name or description.
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of matching products.
        """
        query = select(Product)

        condition = self._search_condition(search)
        if condition is not None:
            query = query.where(condition)

        query = query.order_by(Product.id.asc()).limit(limit).offset(offset)

        result = await self.session.execute(query)
        return result.scalars().all()

    async def count(self, search: str | None = None) -> int:
        """Count products matching the text filter.

        Args:
            search: Substring to match in name or description.

        Returns:
            Count of matching products.
        """
        query = select(func.count(Product.id))

        condition = self._search_condition(search)
        if condition is not None:
            query = query.where(condition)

        result = await self.session.execute(query)
        return result.scalar_one()

    async def find_desired(self) -> Sequence[Product]:
        """Find all products on the wishlist.

        Returns:
            Every product with is_desired set, ordered by ID.
        """
        query = select(Product).where(Product.is_desired.is_(True)).order_by(Product.id.asc())
        result = await self.session.execute(query)
        return result.scalars().all()

    async def delete_all(self) -> int:
        """Delete every product.

        Returns:
            Number of deleted products.
        """
        count = await self.count()
        await self.session.execute(delete(Product))
        await self.session.flush()
        return count

    def _search_condition(self, search: str | None) -> Any:
        """Build the name/description filter.

        LIKE wildcards in the search text are escaped, so the text is
        matched as a literal case-insensitive substring.

        Args:
            search: Search text; None or blank means no filter.

        Returns:
            SQLAlchemy condition, or None.
        """
        if search is None or not search.strip():
            return None

        return or_(
            Product.name.icontains(search, autoescape=True),
            Product.description.icontains(search, autoescape=True),
        )
