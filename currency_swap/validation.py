"""Input validation helpers."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from .decimal_utils import try_decimal
from .errors import CurrencySwapError

# Amount text with this many integer digits or more is not accepted.
MAX_AMOUNT_INTEGER_DIGITS = 30


def _parse_number(text: str) -> Optional[Decimal]:
    if not isinstance(text, str) or not text.strip() or "_" in text:
        return None
    return try_decimal(text)


def parse_amount_text(text: str) -> Optional[Decimal]:
    """Parse user amount text, returning ``None`` for anything but a finite number >= 0."""

    value = _parse_number(text)
    if value is None or value < 0:
        return None
    return value


def validate_amount_text(text: Any) -> str:
    if not isinstance(text, str):
        raise CurrencySwapError.invalid_amount_error(text, "not_text")
    if text == "":
        return text
    value = _parse_number(text)
    if value is None:
        raise CurrencySwapError.invalid_amount_error(text, "not_a_number")
    if value < 0:
        raise CurrencySwapError.invalid_amount_error(text, "negative")
    if value and value.adjusted() >= MAX_AMOUNT_INTEGER_DIGITS:
        raise CurrencySwapError.invalid_amount_error(text, "too_large")
    return text


def is_acceptable_amount_text(text: str) -> bool:
    try:
        validate_amount_text(text)
    except CurrencySwapError:
        return False
    return True


def validate_price(currency: str, price: Any) -> Decimal:
    value = try_decimal(price)
    if value is None or value <= 0:
        raise CurrencySwapError.invalid_price_error(currency, price)
    return value


def validate_currency(currency: Any) -> str:
    if not isinstance(currency, str) or not currency.strip():
        raise CurrencySwapError(
            "Invalid currency: must be a non-empty string",
            "VALIDATION_ERROR",
            {"type": "INVALID_CURRENCY", "value": currency},
        )
    return currency
