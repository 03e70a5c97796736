"""Catalog query parameters.

Lenient parsing of listing parameters into filter and pagination
values. Malformed input never fails a request; it falls back to the
default for that parameter.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 100

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int(raw: str | None) -> int | None:
    """Parse a signed 64-bit base-10 integer.

    Only ASCII digits with an optional sign are accepted; whitespace,
    underscores and out-of-range values count as not an integer.
    """
    if raw is None or not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def parse_price(raw: str | None) -> Decimal | None:
    """Parse a decimal price string.

    Args:
        raw: Raw query value (e.g. "15.00").

    Returns:
        Decimal value, or None when absent or not a finite number.
    """
    if raw is None or raw.strip() == "":
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


@dataclass
class ProductFilter:
    """Filter parameters for product listing.

    Attributes:
        category_code: Only products in this category.
        price_less_than: Only products strictly cheaper than this.
    """

    category_code: str | None = None
    price_less_than: Decimal | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        price_less_than: str | None = None,
    ) -> "ProductFilter":
        """Build filters from raw query values.

        Args:
            category: Category code; empty means no filter.
            price_less_than: Decimal string; invalid means no filter.

        Returns:
            Parsed filters.
        """
        return cls(
            category_code=category or None,
            price_less_than=parse_price(price_less_than),
        )


@dataclass
class PaginationParams:
    """Offset/limit pagination.

    Attributes:
        offset: Number of rows to skip (>= 0).
        limit: Maximum rows to return, within [MIN_LIMIT, MAX_LIMIT].
    """

    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_query(
        cls,
        offset: str | None = None,
        limit: str | None = None,
    ) -> "PaginationParams":
        """Build pagination from raw query values.

        Negative or non-numeric offsets keep the default. Numeric limits are
        clamped into range; non-numeric limits keep the default.

        Args:
            offset: Raw offset value.
            limit: Raw limit value.

        Returns:
            Parsed pagination.
        """
        params = cls()

        parsed_offset = _parse_int(offset)
        if parsed_offset is not None and parsed_offset >= 0:
            params.offset = parsed_offset

        parsed_limit = _parse_int(limit)
        if parsed_limit is not None:
            params.limit = max(MIN_LIMIT, min(MAX_LIMIT, parsed_limit))

        return params


@dataclass
class PaginatedResult(Generic[T]):
    """Page of items with the total count ignoring pagination.

    Attributes:
        items: Rows on this page.
        total: Rows matching the filters across all pages.
    """

    items: list[T]
    total: int
