"""Public entry point for the currency swap package."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from .balances import (
    DEFAULT_BLOCKCHAIN_PRIORITIES,
    FormattedWalletBalance,
    PriorityTable,
    WalletBalance,
    format_balances,
    select_balances,
)
from .catalog import TokenCatalogBuilder
from .errors import CurrencySwapError
from .http import HttpClient, HttpRequestor
from .prices import DEFAULT_PRICES_URL, PriceFeed
from .state_machine import constant_balance
from .swap_form import DEFAULT_SETTLE_DELAY_SECONDS, SwapForm, TimerFactory
from .token import DEFAULT_ICON_BASE_URL, Token

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to load token prices. Please refresh the page to try again."


@dataclass(slots=True)
class CurrencySwapOptions:
    prices_url: str = DEFAULT_PRICES_URL
    icon_base_url: str = DEFAULT_ICON_BASE_URL
    settle_delay_seconds: float = DEFAULT_SETTLE_DELAY_SECONDS
    available_balance: Decimal = Decimal(10)
    default_from_currency: Optional[str] = "ETH"
    default_to_currency: Optional[str] = "USDC"
    blockchain_priorities: Dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_BLOCKCHAIN_PRIORITIES)
    )
    http_requestor: Optional[HttpRequestor] = None
    timer_factory: Optional[TimerFactory] = None


class CurrencySwap:
    """Wires the price feed, the token catalog and the swap form together."""

    def __init__(
        self,
        options: Optional[CurrencySwapOptions] = None,
        http_client: Optional[HttpClient] = None,
    ) -> None:
        self.options = options or CurrencySwapOptions()

        self._http_client = http_client or HttpClient(self.options.http_requestor)
        self.price_feed = PriceFeed(self.options.prices_url, self._http_client)
        self.catalog_builder = TokenCatalogBuilder(self.options.icon_base_url)
        self.priority_table = PriorityTable(dict(self.options.blockchain_priorities))
        self.form = SwapForm(
            constant_balance(self.options.available_balance),
            settle_delay_seconds=self.options.settle_delay_seconds,
            timer_factory=self.options.timer_factory,
        )

        self._tokens: Optional[List[Token]] = None
        self.fetch_error: str = ""

    @property
    def loaded(self) -> bool:
        return self._tokens is not None

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens or [])

    def load(self) -> List[Token]:
        """Fetch prices once, build the catalog and select the default pair.

        A failed fetch is reported through :attr:`fetch_error` and leaves the
        catalog empty; reloading requires a new instance.
        """

        if self._tokens is not None:
            return list(self._tokens)

        try:
            records = self.price_feed.fetch_records()
        except CurrencySwapError as exc:
            logger.warning("Failed to fetch token prices: %s", exc.message, extra={"details": exc.details})
            self.fetch_error = FETCH_FAILED_MESSAGE
            self._tokens = []
            return []

        tokens = self.catalog_builder.build(records)
        self._tokens = tokens
        self.form.set_tokens(tokens)
        self._select_defaults(tokens)
        return list(tokens)

    def _select_defaults(self, tokens: Iterable[Token]) -> None:
        by_currency = {token.currency: token for token in tokens}
        from_token = by_currency.get(self.options.default_from_currency or "")
        to_token = by_currency.get(self.options.default_to_currency or "")
        if from_token is not None:
            self.form.select_from_token(from_token)
        if to_token is not None:
            self.form.select_to_token(to_token)

    def price_map(self) -> Dict[str, Decimal]:
        return {token.currency: token.price for token in self.tokens}

    def wallet_rows(self, balances: Iterable[WalletBalance]) -> List[FormattedWalletBalance]:
        """Supported positive balances, highest priority first, with USD values."""

        selected = select_balances(
            balances, self.priority_table, unsupported=self.priority_table.unsupported
        )
        return format_balances(selected, self.price_map())

    def close(self) -> None:
        self.form.close()
