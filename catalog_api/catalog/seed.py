"""Sample catalog data.

Loads a small fixed catalog of categories, products and variants.
Products and variants have no write endpoint, so this is how a fresh
database gets data.
"""

from decimal import Decimal
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.catalog.models import Category, Product, Variant

SAMPLE_CATEGORIES: list[dict[str, str]] = [
    {"code": "clothing", "name": "Clothing"},
    {"code": "shoes", "name": "Shoes"},
    {"code": "accessories", "name": "Accessories"},
]

# Variant price None inherits the product price.
SAMPLE_PRODUCTS: list[dict[str, Any]] = [
    {
        "code": "PROD001",
        "price": Decimal("10.99"),
        "category": "clothing",
        "variants": [
            {"name": "Variant A", "sku": "SKU001A", "price": Decimal("11.99")},
            {"name": "Variant B", "sku": "SKU001B", "price": None},
        ],
    },
    {
        "code": "PROD002",
        "price": Decimal("12.49"),
        "category": "shoes",
        "variants": [
            {"name": "Size 40", "sku": "SKU002A", "price": None},
            {"name": "Size 42", "sku": "SKU002B", "price": None},
        ],
    },
    {
        "code": "PROD003",
        "price": Decimal("8.75"),
        "category": "accessories",
        "variants": [
            {"name": "Black", "sku": "SKU003A", "price": Decimal("9.25")},
        ],
    },
    {
        "code": "PROD004",
        "price": Decimal("15.00"),
        "category": "clothing",
        "variants": [],
    },
    {
        "code": "PROD005",
        "price": Decimal("99.99"),
        "category": "shoes",
        "variants": [
            {"name": "Leather", "sku": "SKU005A", "price": Decimal("129.99")},
            {"name": "Canvas", "sku": "SKU005B", "price": None},
        ],
    },
    {
        "code": "PROD006",
        "price": Decimal("4.50"),
        "category": None,
        "variants": [],
    },
]


async def clear_catalog(session: AsyncSession) -> None:
    """Delete all variants, products and categories."""
    await session.execute(delete(Variant))
    await session.execute(delete(Product))
    await session.execute(delete(Category))
    await session.flush()
    session.expunge_all()


async def seed_catalog(session: AsyncSession, clear: bool = False) -> dict[str, int]:
    """Load the sample catalog.

    Rows whose code already exists are left untouched, so running the
    seed twice creates nothing the second time.

    Args:
        session: Async SQLAlchemy session.
        clear: Delete existing catalog rows first.

    Returns:
        Counts of created categories, products and variants.
    """
    if clear:
        await clear_catalog(session)

    result = await session.execute(select(Category))
    categories = {c.code: c for c in result.scalars().all()}

    created_categories = 0
    for entry in SAMPLE_CATEGORIES:
        if entry["code"] in categories:
            continue
        category = Category(code=entry["code"], name=entry["name"])
        session.add(category)
        categories[category.code] = category
        created_categories += 1
    await session.flush()

    result = await session.execute(select(Product.code))
    existing_products = set(result.scalars().all())

    created_products = 0
    created_variants = 0
    for entry in SAMPLE_PRODUCTS:
        if entry["code"] in existing_products:
            continue
        product = Product(
            code=entry["code"],
            price=entry["price"],
            category_id=categories[entry["category"]].id if entry["category"] else None,
            variants=[
                Variant(name=v["name"], sku=v["sku"], price=v["price"])
                for v in entry["variants"]
            ],
        )
        session.add(product)
        created_products += 1
        created_variants += len(product.variants)

    await session.commit()

    return {
        "categories_created": created_categories,
        "products_created": created_products,
        "variants_created": created_variants,
    }
