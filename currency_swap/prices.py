"""Price feed access."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from .catalog import RawPriceRecord
from .errors import CurrencySwapError
from .http import HttpClient

DEFAULT_PRICES_URL = "https://interview.switcheo.com/prices.json"


@dataclass(slots=True)
class PriceFeed:
    """Service responsible for fetching raw price records."""

    prices_url: str
    http_client: HttpClient

    def fetch_records(self) -> List[RawPriceRecord]:
        payload = self.http_client.send_get_request(self.prices_url)
        if not isinstance(payload, list):
            raise CurrencySwapError.fetch_failed_error(
                self.prices_url, "expected a JSON array of price records"
            )

        return [
            RawPriceRecord.from_payload(item)
            for item in payload
            if isinstance(item, Mapping)
        ]
