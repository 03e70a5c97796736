"""SQLAlchemy models for product catalog.

Defines Category, Product and Variant tables for persistent storage.
"""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.infrastructure.database import Base


class Category(Base):
    """Product category.

    Attributes:
        id: Surrogate primary key.
        code: Unique category code used in URLs and filters.
        name: Display name.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Relationships
    products: Mapped[list["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Category(id={self.id}, code={self.code})>"


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Surrogate primary key.
        code: Unique product code.
        price: Price in major currency units, two decimal places.
        category_id: Optional category foreign key.
        category: Resolved category, if any.
        variants: Variants owned by this product.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("categories.id"),
        nullable=True,
        index=True,
    )

    # Relationships
    category: Mapped["Category | None"] = relationship("Category", back_populates="products")
    variants: Mapped[list["Variant"]] = relationship(
        "Variant",
        back_populates="product",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, code={self.code}, price={self.price})>"


class Variant(Base):
    """Product variant (e.g. size or colour).

    A variant with no price, or a stored price of exactly zero, sells at
    the owning product's price. See ``effective_price``.

    Attributes:
        id: Surrogate primary key.
        product_id: Owning product.
        name: Variant name (e.g. "Red, Large").
        sku: Stock keeping unit.
        price: Price override, or None/zero to inherit.
    """

    __tablename__ = "variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="variants")

    def __repr__(self) -> str:
        """String representation."""
        return f"<Variant(id={self.id}, sku={self.sku})>"

    def effective_price(self, product_price: Decimal) -> Decimal:
        """Get the price this variant sells at.

        Args:
            product_price: Price of the owning product.

        Returns:
            The variant's own price, or ``product_price`` when unset.
        """
        return resolve_variant_price(self.price, product_price)


def resolve_variant_price(variant_price: Decimal | None, product_price: Decimal) -> Decimal:
    """Resolve a variant price against its product price.

    NULL is the explicit "no override" marker. A stored zero is the older
    convention for the same thing and is still honoured, so a variant can
    never be listed as free.

    Args:
        variant_price: Stored variant price.
        product_price: Price of the owning product.

    Returns:
        Price to present for the variant.
    """
    if variant_price is None or variant_price == 0:
        return product_price
    return variant_price
