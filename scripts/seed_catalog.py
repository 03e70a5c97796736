#!/usr/bin/env python3
"""Seed product catalog script.

Creates the catalog tables and loads the sample categories, products
and variants.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --clear
"""

import argparse
import asyncio

from catalog_api.catalog.seed import seed_catalog
from catalog_api.infrastructure.database import async_session_factory, create_tables, engine


async def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Seed the product catalog with sample data",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete existing categories, products and variants before seeding",
    )

    args = parser.parse_args()

    print("=" * 60)
    print("Catalog Seeder")
    print("=" * 60)
    print(f"Clear existing: {args.clear}")
    print()

    print("Creating database tables...")
    await create_tables()
    print("Tables ready.")
    print()

    try:
        async with async_session_factory() as session:
            result = await seed_catalog(session, clear=args.clear)
    finally:
        await engine.dispose()

    print(f"  ✓ Categories: {result['categories_created']}")
    print(f"  ✓ Products: {result['products_created']}")
    print(f"  ✓ Variants: {result['variants_created']}")
    print()
    print("=" * 60)
    print("Seeding complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
