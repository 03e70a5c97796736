"""Product catalog.

Models, repositories and query parameters for categories, products
and variants.
"""

from catalog_api.catalog.models import Category, Product, Variant, resolve_variant_price
from catalog_api.catalog.repository import (
    CategoryRepository,
    ProductRepository,
    SqlCategoryRepository,
    SqlProductRepository,
)
from catalog_api.catalog.service import PaginatedResult, PaginationParams, ProductFilter

__all__ = [
    # Models
    "Category",
    "Product",
    "Variant",
    "resolve_variant_price",
    # Repositories
    "CategoryRepository",
    "ProductRepository",
    "SqlCategoryRepository",
    "SqlProductRepository",
    # Query parameters
    "PaginatedResult",
    "PaginationParams",
    "ProductFilter",
]
