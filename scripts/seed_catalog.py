#!/usr/bin/env python3
"""Seed product catalog script.

Generates and seeds the product table with deterministic
synthetic products.

Usage:
    python scripts/seed_catalog.py --mode small
    python scripts/seed_catalog.py --mode full --no-clear
"""

import argparse
import asyncio

from productsearch.catalog.service import ProductQueryService
from productsearch.infrastructure.database import Base, async_session_factory, engine


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed(mode: str, clear: bool = True) -> dict:
    """Seed the catalog.

    Args:
        mode: Catalog size (small/full).
        clear: Whether to clear existing products.

    Returns:
        Seeding result.
    """
    async with async_session_factory() as session:
        service = ProductQueryService(session)
        return await service.seed_catalog(mode=mode, clear_existing=clear)


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog",
    )
    parser.add_argument(
        "--mode",
        choices=["small", "full"],
        default="small",
        help="Catalog size: small (~30 products) or full (~300 products)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear existing products before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Product Catalog Seeder")
    print("=" * 60)
    print(f"Mode: {args.mode}")
    print(f"Clear existing: {not args.no_clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    result = await seed(mode=args.mode, clear=not args.no_clear)

    print(f"  Deleted: {result['deleted']} existing products")
    print(f"  Created: {result['products_created']} products")
    print(f"  Categories: {result['categories_used']}")
    print()

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
