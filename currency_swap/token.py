"""Token representation and ordering helpers."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple

from .decimal_utils import format_fixed
from .validation import validate_currency, validate_price

DEFAULT_ICON_BASE_URL = "https://raw.githubusercontent.com/Switcheo/token-icons/main/tokens"
PLACEHOLDER_ICON_URL = "https://placehold.co/40x40/2d3748/ffffff?text=?"


@dataclass(slots=True, frozen=True)
class Token:
    """A tradable currency with its spot price in USD and icon URL."""

    currency: str
    price: Decimal
    icon: str

    def __post_init__(self) -> None:
        validate_currency(self.currency)
        object.__setattr__(self, "price", validate_price(self.currency, self.price))

    def display_price(self) -> str:
        return format_fixed(self.price, 6)


def icon_url_for(currency: str, *, base_url: str = DEFAULT_ICON_BASE_URL) -> str:
    """Return the icon URL for ``currency``; no request is made."""

    return f"{base_url.rstrip('/')}/{currency}.svg"


def currency_sort_key(currency: str) -> Tuple[str, str]:
    return (currency.casefold(), currency)


def same_currency(first: "Token | None", second: "Token | None") -> bool:
    return first is not None and second is not None and first.currency == second.currency
