"""Selection and ordering of wallet balances by blockchain priority."""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, Iterable, List, Mapping

from .decimal_utils import decimal_context, format_fixed, try_decimal

UNSUPPORTED_PRIORITY = -99

DEFAULT_BLOCKCHAIN_PRIORITIES: Mapping[str, int] = {
    "Osmosis": 100,
    "Ethereum": 50,
    "Arbitrum": 30,
    "Zilliqa": 20,
    "Neo": 20,
}

PriorityLookup = Callable[[str], int]


@dataclass(slots=True, frozen=True)
class WalletBalance:
    currency: str
    amount: Decimal
    blockchain: str


@dataclass(slots=True, frozen=True)
class FormattedWalletBalance:
    currency: str
    blockchain: str
    amount: Decimal
    usd_value: Decimal
    formatted_amount: str
    formatted_usd_value: str


@dataclass(slots=True)
class PriorityTable:
    """Blockchain name to priority mapping; unknown names are unsupported."""

    priorities: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_BLOCKCHAIN_PRIORITIES))
    unsupported: int = UNSUPPORTED_PRIORITY

    def __call__(self, blockchain: str) -> int:
        return self.priorities.get(blockchain, self.unsupported)

    def is_supported(self, blockchain: str) -> bool:
        return self(blockchain) > self.unsupported


def select_balances(
    balances: Iterable[WalletBalance],
    priority_of: PriorityLookup,
    *,
    unsupported: int = UNSUPPORTED_PRIORITY,
) -> List[WalletBalance]:
    """Return supported, positive balances ordered by priority, highest first.

    Balances whose blockchain maps to ``unsupported`` (or lower) and balances
    with a non-positive amount are dropped.  The sort is stable, so balances
    on equally ranked blockchains keep their input order.
    """

    ranked = []
    for balance in balances:
        priority = priority_of(balance.blockchain)
        if priority <= unsupported or balance.amount <= 0:
            continue
        ranked.append((priority, balance))

    ranked.sort(key=lambda item: item[0], reverse=True)
    return [balance for _, balance in ranked]


def format_balances(
    balances: Iterable[WalletBalance], prices: Mapping[str, object]
) -> List[FormattedWalletBalance]:
    """Attach USD values and display strings without changing the order."""

    rows: List[FormattedWalletBalance] = []
    for balance in balances:
        price = try_decimal(prices.get(balance.currency)) or Decimal(0)
        with decimal_context():
            usd_value = price * balance.amount
        rows.append(
            FormattedWalletBalance(
                currency=balance.currency,
                blockchain=balance.blockchain,
                amount=balance.amount,
                usd_value=usd_value,
                formatted_amount=format_fixed(balance.amount, 6),
                formatted_usd_value=format_fixed(usd_value, 2),
            )
        )
    return rows
