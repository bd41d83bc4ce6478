"""Events accepted by the swap state reducer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..token import Token
from .state import Side


@dataclass(slots=True, frozen=True)
class SelectFromToken:
    token: Token


@dataclass(slots=True, frozen=True)
class SelectToToken:
    token: Token


@dataclass(slots=True, frozen=True)
class ChangeFromAmount:
    text: str


@dataclass(slots=True, frozen=True)
class Recompute:
    pass


@dataclass(slots=True, frozen=True)
class FlipSides:
    pass


@dataclass(slots=True, frozen=True)
class TriggerSwap:
    pass


@dataclass(slots=True, frozen=True)
class SettleSwap:
    pass


@dataclass(slots=True, frozen=True)
class OpenSelector:
    side: Side


@dataclass(slots=True, frozen=True)
class CloseSelector:
    pass


@dataclass(slots=True, frozen=True)
class ChangeSearchTerm:
    text: str


SwapEvent = Union[
    SelectFromToken,
    SelectToToken,
    ChangeFromAmount,
    Recompute,
    FlipSides,
    TriggerSwap,
    SettleSwap,
    OpenSelector,
    CloseSelector,
    ChangeSearchTerm,
]
