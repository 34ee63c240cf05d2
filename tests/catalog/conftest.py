"""Fixtures for catalog tests running directly against the database."""

from typing import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from productsearch.catalog.models import Product
from productsearch.catalog.service import ProductQueryService
from productsearch.infrastructure.database import Base


@pytest.fixture
async def session(db_engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    """Create tables and open a session on the test database."""
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await db_engine.dispose()


@pytest.fixture
async def seeded(session: AsyncSession, sample_products: list[Product]) -> list[Product]:
    """Insert the sample products."""
    session.add_all(sample_products)
    await session.commit()
    return sample_products


@pytest.fixture
def service(session: AsyncSession) -> ProductQueryService:
    """Create product query service."""
    return ProductQueryService(session)
