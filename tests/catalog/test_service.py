"""Tests for catalog query parameter parsing."""

from decimal import Decimal

import pytest

from catalog_api.catalog.models import Variant, resolve_variant_price
from catalog_api.catalog.service import (
    DEFAULT_LIMIT,
    PaginationParams,
    ProductFilter,
    parse_price,
)


class TestPaginationParams:
    """Tests for PaginationParams.from_query."""

    def test_defaults(self) -> None:
        """Absent values keep the defaults."""
        params = PaginationParams.from_query()
        assert params == PaginationParams(offset=0, limit=10)

    @pytest.mark.parametrize("raw", ["0", "1", "50", "99", "100", "101", "200", "-3", "100000"])
    def test_limit_always_in_range(self, raw: str) -> None:
        """Any numeric limit lands in [1, 100]."""
        params = PaginationParams.from_query(limit=raw)
        assert 1 <= params.limit <= 100

    def test_limit_clamping(self) -> None:
        """Out-of-range limits clamp to the nearest bound."""
        assert PaginationParams.from_query(limit="200").limit == 100
        assert PaginationParams.from_query(limit="0").limit == 1
        assert PaginationParams.from_query(limit="42").limit == 42

    @pytest.mark.parametrize("raw", ["", "ten", "1.5"])
    def test_non_numeric_limit_keeps_default(self, raw: str) -> None:
        """Unparsable limits are ignored."""
        assert PaginationParams.from_query(limit=raw).limit == DEFAULT_LIMIT

    @pytest.mark.parametrize("raw", ["-1", "abc", "", "2.5"])
    def test_invalid_offset_keeps_default(self, raw: str) -> None:
        """Negative or unparsable offsets are ignored."""
        assert PaginationParams.from_query(offset=raw).offset == 0

    @pytest.mark.parametrize("raw", [" 5", "5 ", "1_0", "٣", "99999999999999999999", "0x10"])
    def test_loose_integers_keep_defaults(self, raw: str) -> None:
        """Only plain ASCII integers in the 64-bit range are accepted."""
        params = PaginationParams.from_query(offset=raw, limit=raw)
        assert params == PaginationParams(offset=0, limit=DEFAULT_LIMIT)

    def test_signed_integers(self) -> None:
        assert PaginationParams.from_query(offset="+7", limit="+20") == PaginationParams(
            offset=7, limit=20
        )
        assert PaginationParams.from_query(limit="-9223372036854775808").limit == 1

    def test_offset(self) -> None:
        """Non-negative offsets pass through."""
        assert PaginationParams.from_query(offset="0").offset == 0
        assert PaginationParams.from_query(offset="30").offset == 30


class TestProductFilter:
    """Tests for ProductFilter.from_query."""

    def test_empty_category_means_no_filter(self) -> None:
        """Empty category is treated as absent."""
        assert ProductFilter.from_query(category="").category_code is None

    def test_category(self) -> None:
        assert ProductFilter.from_query(category="shoes").category_code == "shoes"

    def test_invalid_price_equals_absent(self) -> None:
        """An invalid price produces the same filter as no price."""
        assert ProductFilter.from_query(price_less_than="abc") == ProductFilter.from_query()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("15.00", Decimal("15.00")),
            ("0.5", Decimal("0.5")),
            ("20", Decimal("20")),
            (None, None),
            ("", None),
            ("abc", None),
            ("NaN", None),
            ("Infinity", None),
        ],
    )
    def test_parse_price(self, raw: str | None, expected: Decimal | None) -> None:
        assert parse_price(raw) == expected


class TestVariantPrice:
    """Tests for variant price resolution."""

    def test_zero_inherits_product_price(self) -> None:
        """A stored zero resolves to the product price."""
        assert resolve_variant_price(Decimal("0.00"), Decimal("10.99")) == Decimal("10.99")

    def test_none_inherits_product_price(self) -> None:
        """An unset price resolves to the product price."""
        assert resolve_variant_price(None, Decimal("10.99")) == Decimal("10.99")

    def test_override_passes_through(self) -> None:
        """A non-zero price is used as is."""
        assert resolve_variant_price(Decimal("11.99"), Decimal("10.99")) == Decimal("11.99")

    def test_variant_effective_price(self) -> None:
        variant = Variant(name="Variant B", sku="SKU001B", price=Decimal("0"))
        assert variant.effective_price(Decimal("7.50")) == Decimal("7.50")
