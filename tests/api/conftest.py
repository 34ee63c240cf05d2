"""Shared fixtures for API tests.

The app's session dependency is pointed at an in-memory SQLite
database. Schema creation and seeding run on the test client's own
event loop so the engine is only ever used from one loop.
"""

from collections.abc import AsyncGenerator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from productsearch.catalog.models import Product
from productsearch.infrastructure.database import Base, get_session
from productsearch.main import app


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def client(
    db_engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
    sample_products: list[Product],
) -> Iterator[TestClient]:
    """Create test client over a seeded database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def setup() -> None:
        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with session_factory() as session:
            session.add_all(sample_products)
            await session.commit()

    app.dependency_overrides[get_session] = override_get_session
    try:
        with TestClient(app) as test_client:
            test_client.portal.call(setup)
            yield test_client
            test_client.portal.call(db_engine.dispose)
    finally:
        app.dependency_overrides.clear()
