"""Typed structures describing the swap form."""
from .events import (
    ChangeFromAmount,
    ChangeSearchTerm,
    CloseSelector,
    FlipSides,
    OpenSelector,
    Recompute,
    SelectFromToken,
    SelectToToken,
    SettleSwap,
    SwapEvent,
    TriggerSwap,
)
from .state import ErrorKind, Side, SwapState, SwapStatus

__all__ = [
    "ChangeFromAmount",
    "ChangeSearchTerm",
    "CloseSelector",
    "ErrorKind",
    "FlipSides",
    "OpenSelector",
    "Recompute",
    "SelectFromToken",
    "SelectToToken",
    "SettleSwap",
    "Side",
    "SwapEvent",
    "SwapState",
    "SwapStatus",
    "TriggerSwap",
]
