"""Validate product input and enforce field constraints."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from catalog.core.errors import FieldError, ValidationError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
# Upper bound of the 32-bit INTEGER stock column
STOCK_MAX = 2**31 - 1

MUST_NOT_BE_NULL = "must not be null"
MUST_NOT_BE_BLANK = "must not be blank"
MUST_NOT_BE_NEGATIVE = "must not be negative"
MUST_BE_FINITE = "must be a finite number"
STOCK_TOO_LARGE = f"must not exceed {STOCK_MAX}"
NAME_LENGTH = (
    f"length must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
)
DESCRIPTION_LENGTH = f"length must not exceed {DESCRIPTION_MAX_LENGTH} characters"

# A check passes when its predicate returns True for the field value.
Check = tuple[str, Callable[[Any], bool], str]


def _not_null(value: Any) -> bool:
    return value is not None


def _not_blank(value: str | None) -> bool:
    return value is None or bool(value.strip())


def _name_length(value: str | None) -> bool:
    return value is None or NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH


def _description_length(value: str | None) -> bool:
    return value is None or len(value) <= DESCRIPTION_MAX_LENGTH


def _finite(value: float | int | None) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


def _non_negative(value: float | int | None) -> bool:
    # NaN is reported by _finite only
    if isinstance(value, float) and math.isnan(value):
        return True
    return value is None or value >= 0


def _fits_stock_column(value: int | None) -> bool:
    return value is None or value <= STOCK_MAX


PRODUCT_CHECKS: list[Check] = [
    ("name", _not_null, MUST_NOT_BE_NULL),
    ("name", _not_blank, MUST_NOT_BE_BLANK),
    ("name", _name_length, NAME_LENGTH),
    ("description", _description_length, DESCRIPTION_LENGTH),
    ("price", _not_null, MUST_NOT_BE_NULL),
    ("price", _finite, MUST_BE_FINITE),
    ("price", _non_negative, MUST_NOT_BE_NEGATIVE),
    ("stock", _not_null, MUST_NOT_BE_NULL),
    ("stock", _non_negative, MUST_NOT_BE_NEGATIVE),
    ("stock", _fits_stock_column, STOCK_TOO_LARGE),
    ("category", _not_null, MUST_NOT_BE_NULL),
]

STOCK_CHECKS: list[Check] = [
    ("stock", _not_null, MUST_NOT_BE_NULL),
    ("stock", _non_negative, MUST_NOT_BE_NEGATIVE),
    ("stock", _fits_stock_column, STOCK_TOO_LARGE),
]


def collect_errors(values: dict[str, Any], checks: list[Check]) -> list[FieldError]:
    """Run every check in order and return all failures."""
    return [
        FieldError(field, message)
        for field, predicate, message in checks
        if not predicate(values.get(field))
    ]


def validate_product(values: dict[str, Any]) -> None:
    """Raise ValidationError listing every violated product constraint."""
    errors = collect_errors(values, PRODUCT_CHECKS)
    if errors:
        raise ValidationError(errors)


def validate_stock(stock: int | None) -> None:
    """Raise ValidationError when a stock value is missing or negative."""
    errors = collect_errors({"stock": stock}, STOCK_CHECKS)
    if errors:
        raise ValidationError(errors)
