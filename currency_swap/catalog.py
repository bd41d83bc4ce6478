"""Construction of the token catalog from a raw price feed."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .decimal_utils import try_decimal
from .token import DEFAULT_ICON_BASE_URL, Token, currency_sort_key, icon_url_for

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RawPriceRecord:
    currency: str
    price: Optional[Any]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "RawPriceRecord":
        currency = payload.get("currency")
        return cls(
            currency=currency if isinstance(currency, str) else "",
            price=try_decimal(payload.get("price")),
        )


@dataclass(slots=True)
class TokenCatalogBuilder:
    """Builds the de-duplicated, ordered token catalog."""

    icon_base_url: str = DEFAULT_ICON_BASE_URL

    def build(self, records: Iterable[RawPriceRecord]) -> List[Token]:
        tokens: Dict[str, Token] = {}
        dropped = 0
        for record in records:
            price = try_decimal(record.price)
            currency = record.currency
            if not isinstance(currency, str) or not currency.strip() or price is None or price <= 0:
                dropped += 1
                continue
            # Later records for the same currency replace earlier ones.
            tokens[currency] = Token(
                currency=currency,
                price=price,
                icon=icon_url_for(currency, base_url=self.icon_base_url),
            )

        catalog = sorted(tokens.values(), key=lambda token: currency_sort_key(token.currency))
        logger.debug("Built token catalog with %d tokens (%d records dropped)", len(catalog), dropped)
        return catalog


def build_token_catalog(
    records: Iterable[RawPriceRecord], *, icon_base_url: str = DEFAULT_ICON_BASE_URL
) -> List[Token]:
    return TokenCatalogBuilder(icon_base_url).build(records)
