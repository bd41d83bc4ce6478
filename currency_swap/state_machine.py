"""Pure reducer driving the swap form.

Every change to :class:`~currency_swap.types.SwapState` goes through
:func:`reduce`.  The reducer never raises for user input: rejected amount text
and events that are not allowed in the current state return the state
unchanged.  After each token or amount change the derived fields are rebuilt by
:func:`recompute`, which depends only on the state and the balance lookup and
is therefore idempotent.
"""
from __future__ import annotations

import logging
from decimal import Decimal, DecimalException
from typing import Callable, List, Optional, Sequence

from .decimal_utils import QUOTE_PLACES, decimal_context, quantize
from .token import Token, same_currency
from .types.events import (
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
from .types.state import ErrorKind, Side, SwapState
from .validation import is_acceptable_amount_text, parse_amount_text

logger = logging.getLogger(__name__)

BalanceLookup = Callable[[str], Decimal]


def constant_balance(amount: Decimal) -> BalanceLookup:
    """Return a balance lookup reporting ``amount`` for every currency."""

    def _balance_of(currency: str) -> Decimal:
        return amount

    return _balance_of


def entered_amount(state: SwapState) -> Decimal:
    return parse_amount_text(state.from_amount) or Decimal(0)


def quote_amount(amount: Decimal, from_token: Token, to_token: Token) -> Optional[Decimal]:
    """Convert ``amount`` of ``from_token`` into ``to_token`` at spot prices.

    Returns ``None`` when the result cannot be represented.
    """

    try:
        with decimal_context():
            converted = amount * (from_token.price / to_token.price)
        return quantize(converted, QUOTE_PLACES)
    except DecimalException:
        logger.debug("No quote for %s %s -> %s", amount, from_token.currency, to_token.currency)
        return None


def recompute(state: SwapState, balance_of: BalanceLookup) -> SwapState:
    amount = entered_amount(state)

    error_kind: Optional[ErrorKind] = None
    if state.from_token is not None and amount > balance_of(state.from_token.currency):
        error_kind = ErrorKind.INSUFFICIENT_BALANCE

    to_amount: Optional[Decimal] = None
    if amount > 0 and state.from_token is not None and state.to_token is not None:
        to_amount = quote_amount(amount, state.from_token, state.to_token)

    if to_amount == state.to_amount and error_kind == state.error_kind:
        return state
    return state.with_changes(to_amount=to_amount, error_kind=error_kind)


def can_trigger_swap(state: SwapState) -> bool:
    amount = parse_amount_text(state.from_amount)
    return (
        not state.swapping
        and state.error_kind is None
        and amount is not None
        and amount > 0
    )


def is_swap_disabled(state: SwapState) -> bool:
    return not can_trigger_swap(state)


def _select(state: SwapState, side: Side, token: Token, balance_of: BalanceLookup) -> SwapState:
    if state.swapping:
        return state

    opposite = state.token_for(side.opposite)
    previous = state.token_for(side)
    changes = {"open_selector": None, "search_term": ""}
    if same_currency(opposite, token):
        # Reselecting the other side's currency swaps the pair.
        changes["to_token" if side is Side.FROM else "from_token"] = previous
    changes["from_token" if side is Side.FROM else "to_token"] = token
    return recompute(state.with_changes(**changes), balance_of)


def _flip(state: SwapState, balance_of: BalanceLookup) -> SwapState:
    if state.swapping:
        return state

    from_amount = format(state.to_amount, "f") if state.to_amount is not None else ""
    flipped = state.with_changes(
        from_token=state.to_token,
        to_token=state.from_token,
        from_amount=from_amount,
    )
    return recompute(flipped, balance_of)


def reduce(state: SwapState, event: SwapEvent, balance_of: BalanceLookup) -> SwapState:
    """Return the state that results from applying ``event`` to ``state``."""

    if isinstance(event, SelectFromToken):
        return _select(state, Side.FROM, event.token, balance_of)
    if isinstance(event, SelectToToken):
        return _select(state, Side.TO, event.token, balance_of)

    if isinstance(event, ChangeFromAmount):
        if state.swapping:
            return state
        if not is_acceptable_amount_text(event.text):
            logger.debug("Rejected amount input %r", event.text)
            return state
        return recompute(state.with_changes(from_amount=event.text), balance_of)

    if isinstance(event, Recompute):
        return recompute(state, balance_of)

    if isinstance(event, FlipSides):
        return _flip(state, balance_of)

    if isinstance(event, TriggerSwap):
        if not can_trigger_swap(state):
            return state
        return state.with_changes(swapping=True, open_selector=None)

    if isinstance(event, SettleSwap):
        if not state.swapping:
            return state
        settled = state.with_changes(from_amount="", to_amount=None, swapping=False)
        return recompute(settled, balance_of)

    if isinstance(event, OpenSelector):
        if state.swapping:
            return state
        return state.with_changes(open_selector=event.side)
    if isinstance(event, CloseSelector):
        return state.with_changes(open_selector=None)
    if isinstance(event, ChangeSearchTerm):
        return state.with_changes(search_term=event.text)

    raise TypeError(f"Unsupported swap event: {event!r}")


def error_message(state: SwapState) -> str:
    if state.error_kind is ErrorKind.INSUFFICIENT_BALANCE and state.from_token is not None:
        return f"Insufficient {state.from_token.currency} balance"
    return ""


def button_label(state: SwapState) -> str:
    if state.swapping:
        return "Swapping..."
    return error_message(state) or "Swap"


def exchange_rate(state: SwapState) -> Optional[Decimal]:
    """Units of ``to_token`` received per unit of ``from_token``."""

    if state.from_token is None or state.to_token is None:
        return None
    with decimal_context():
        return state.from_token.price / state.to_token.price


def selectable_tokens(catalog: Sequence[Token], state: SwapState, side: Side) -> List[Token]:
    """Tokens offered by the selector for ``side``, filtered by the search term."""

    excluded = state.token_for(side.opposite)
    needle = state.search_term.lower()
    return [
        token
        for token in catalog
        if (excluded is None or token.currency != excluded.currency)
        and needle in token.currency.lower()
    ]
