"""State held by the swap form."""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..token import Token
from ..validation import parse_amount_text


class Side(str, Enum):
    FROM = "from"
    TO = "to"

    @property
    def opposite(self) -> "Side":
        return Side.TO if self is Side.FROM else Side.FROM


class ErrorKind(str, Enum):
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"


class SwapStatus(str, Enum):
    IDLE = "idle"
    AMOUNT_ENTERED = "amount_entered"
    INVALID = "invalid"
    SWAPPING = "swapping"


@dataclass(slots=True, frozen=True)
class SwapState:
    from_token: Optional[Token] = None
    to_token: Optional[Token] = None
    from_amount: str = ""
    to_amount: Optional[Decimal] = None
    error_kind: Optional[ErrorKind] = None
    swapping: bool = False
    open_selector: Optional[Side] = None
    search_term: str = ""

    @property
    def status(self) -> SwapStatus:
        if self.swapping:
            return SwapStatus.SWAPPING
        if self.error_kind is not None:
            return SwapStatus.INVALID
        amount = parse_amount_text(self.from_amount)
        if amount is not None and amount > 0:
            return SwapStatus.AMOUNT_ENTERED
        return SwapStatus.IDLE

    def token_for(self, side: Side) -> Optional[Token]:
        return self.from_token if side is Side.FROM else self.to_token

    def with_changes(self, **changes: object) -> "SwapState":
        return replace(self, **changes)
