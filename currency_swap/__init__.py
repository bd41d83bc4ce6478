"""Swap-quote engine and token catalog for a currency conversion form."""
from .balances import (
    DEFAULT_BLOCKCHAIN_PRIORITIES,
    UNSUPPORTED_PRIORITY,
    FormattedWalletBalance,
    PriorityTable,
    WalletBalance,
    format_balances,
    select_balances,
)
from .catalog import RawPriceRecord, TokenCatalogBuilder, build_token_catalog
from .client import CurrencySwap, CurrencySwapOptions
from .errors import CurrencySwapError
from .prices import PriceFeed
from .state_machine import reduce, recompute
from .swap_form import SwapForm
from .token import PLACEHOLDER_ICON_URL, Token
from .types import ErrorKind, Side, SwapState, SwapStatus

__all__ = [
    "CurrencySwap",
    "CurrencySwapOptions",
    "CurrencySwapError",
    "DEFAULT_BLOCKCHAIN_PRIORITIES",
    "ErrorKind",
    "FormattedWalletBalance",
    "PLACEHOLDER_ICON_URL",
    "PriceFeed",
    "PriorityTable",
    "RawPriceRecord",
    "Side",
    "SwapForm",
    "SwapState",
    "SwapStatus",
    "Token",
    "TokenCatalogBuilder",
    "UNSUPPORTED_PRIORITY",
    "WalletBalance",
    "build_token_catalog",
    "format_balances",
    "recompute",
    "reduce",
    "select_balances",
]
