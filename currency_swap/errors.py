"""Custom exceptions for the currency swap package."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(eq=False)
class CurrencySwapError(Exception):
    """Base exception raised by the currency swap package."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @classmethod
    def fetch_failed_error(cls, url: str, reason: Any) -> "CurrencySwapError":
        return cls(
            f"Failed to fetch token prices from {url}",
            "FETCH_FAILED",
            {"url": url, "reason": str(reason)},
        )

    @classmethod
    def from_http_response(cls, url: str, status: int, body: Any) -> "CurrencySwapError":
        return cls(
            f"Unexpected HTTP Error {status} from {url}",
            "FETCH_FAILED",
            {"status": status, "body": body, "url": url},
        )

    @classmethod
    def invalid_amount_error(cls, value: Any, reason: str) -> "CurrencySwapError":
        return cls(
            "Invalid amount: must be empty or a non-negative number",
            "VALIDATION_ERROR",
            {"type": "INVALID_AMOUNT_INPUT", "value": value, "reason": reason},
        )

    @classmethod
    def invalid_price_error(cls, currency: str, price: Any) -> "CurrencySwapError":
        return cls(
            f"Invalid price for {currency}: must be a positive number",
            "VALIDATION_ERROR",
            {"type": "INVALID_PRICE", "currency": currency, "value": str(price)},
        )
