"""API schemas for the catalog API.

Pydantic models for request/response validation and serialization.
"""

from pydantic import BaseModel, Field


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error: str = Field(..., description="Human-readable error message")


class CategorySummary(BaseModel):
    """Category as embedded in product responses."""

    code: str = Field(..., description="Category code")
    name: str = Field(..., description="Category name")


# ============================================================================
# Catalog Schemas
# ============================================================================


class ProductResponse(BaseModel):
    """Product entry in a catalog listing."""

    code: str = Field(..., description="Product code")
    price: float = Field(..., description="Price in major currency units")
    category: CategorySummary | None = Field(
        default=None, description="Category, omitted when the product has none"
    )


class CatalogResponse(BaseModel):
    """Page of products."""

    products: list[ProductResponse] = Field(..., description="Products on this page")
    total: int = Field(..., description="Products matching the filters, ignoring pagination")


class VariantResponse(BaseModel):
    """Variant of a product."""

    name: str
    sku: str
    price: float = Field(..., description="Variant price, or the product price when unset")


class ProductDetailsResponse(BaseModel):
    """Single product with its variants."""

    code: str
    price: float
    category: CategorySummary | None = None
    variants: list[VariantResponse] = Field(default_factory=list)


# ============================================================================
# Category Schemas
# ============================================================================


class CategoryResponse(BaseModel):
    """Category."""

    code: str
    name: str


class CategoryCreateRequest(BaseModel):
    """Request to create a category.

    Missing or null fields are kept as None so the handler can report
    them as a single "required" error.
    """

    code: str | None = None
    name: str | None = None
