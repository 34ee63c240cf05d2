"""Shared fixtures for all tests."""

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from productsearch.catalog.models import Product

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def db_engine() -> AsyncEngine:
    """Create an in-memory SQLite engine shared by every session in a test."""
    return create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def sample_products() -> list[Product]:
    """Create unsaved sample products (IDs 1-5 once inserted in order)."""
    return [
        Product(
            name="Red Shirt",
            description="Soft cotton tee",
            price=1999,
            category="Shirts",
        ),
        Product(
            name="Blue Hat",
            description="Wool winter hat",
            price=2499,
            category="Hats",
        ),
        Product(
            name="Green Mug",
            description="Ceramic mug, 100% dishwasher safe",
            price=1299,
            category="Kitchen",
        ),
        Product(
            name="Travel Bag",
            description="Packs a folded shirt flat",
            price=5999,
            category="Bags",
        ),
        Product(
            name="Desk Lamp",
            description=None,
            price=3499,
            category="Lighting",
        ),
    ]
