"""Stateful owner of the swap form state and its settle timer."""
from __future__ import annotations

import logging
import threading
from collections import defaultdict
from decimal import Decimal
from typing import Any, Callable, DefaultDict, List, Optional, Protocol, Sequence

from . import state_machine
from .decimal_utils import format_fixed
from .state_machine import BalanceLookup
from .token import Token
from .types.events import (
    ChangeFromAmount,
    ChangeSearchTerm,
    CloseSelector,
    FlipSides,
    OpenSelector,
    SelectFromToken,
    SelectToToken,
    SettleSwap,
    SwapEvent,
    TriggerSwap,
)
from .types.state import Side, SwapState, SwapStatus

logger = logging.getLogger(__name__)

DEFAULT_SETTLE_DELAY_SECONDS = 2.0

StateListener = Callable[[SwapState], None]


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(delay: float, callback: Callable[[], None]) -> TimerHandle:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


class SwapForm:
    """Owns a :class:`SwapState` and applies events to it.

    The state is only replaced through :meth:`dispatch`.  Starting a swap
    schedules a settle timer; when it fires the amounts are cleared and the
    form returns to idle.  :meth:`close` cancels a pending timer.
    """

    def __init__(
        self,
        balance_of: BalanceLookup,
        *,
        tokens: Sequence[Token] = (),
        settle_delay_seconds: float = DEFAULT_SETTLE_DELAY_SECONDS,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        if settle_delay_seconds < 0:
            raise ValueError("settle_delay_seconds must not be negative")
        self._balance_of = balance_of
        self._tokens: List[Token] = list(tokens)
        self._settle_delay = settle_delay_seconds
        self._timer_factory = timer_factory or _thread_timer
        self._lock = threading.RLock()
        self._state = SwapState()
        self._timer: Optional[TimerHandle] = None
        self._listeners: DefaultDict[str, List[StateListener]] = defaultdict(list)

    # ------------------------------------------------------------------
    # State access
    @property
    def state(self) -> SwapState:
        return self._state

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    @property
    def status(self) -> SwapStatus:
        return self._state.status

    @property
    def is_swap_disabled(self) -> bool:
        return state_machine.is_swap_disabled(self._state)

    @property
    def error_message(self) -> str:
        return state_machine.error_message(self._state)

    @property
    def button_label(self) -> str:
        return state_machine.button_label(self._state)

    @property
    def exchange_rate(self) -> Optional[Decimal]:
        return state_machine.exchange_rate(self._state)

    def available_balance(self) -> Decimal:
        token = self._state.from_token
        if token is None:
            return Decimal(0)
        return self._balance_of(token.currency)

    def display_balance(self) -> str:
        return format_fixed(self.available_balance(), 4)

    def selectable_tokens(self, side: Side) -> List[Token]:
        return state_machine.selectable_tokens(self._tokens, self._state, side)

    # ------------------------------------------------------------------
    # Listeners
    def on(self, event: str, callback: StateListener) -> None:
        self._listeners[event].append(callback)

    def off(self, event: str, callback: StateListener) -> None:
        listeners = self._listeners.get(event)
        if not listeners:
            return
        if callback in listeners:
            listeners.remove(callback)

    def _emit(self, event: str, *args: Any) -> None:
        for callback in list(self._listeners.get(event, [])):
            callback(*args)

    # ------------------------------------------------------------------
    # Events
    def set_tokens(self, tokens: Sequence[Token]) -> None:
        with self._lock:
            self._tokens = list(tokens)

    def dispatch(self, event: SwapEvent) -> SwapState:
        with self._lock:
            previous = self._state
            current = state_machine.reduce(previous, event, self._balance_of)
            if current is previous:
                return current
            self._state = current
            started = current.swapping and not previous.swapping

        self._emit("change", current)
        if started:
            # Scheduled after listeners have seen the swapping state.
            self._schedule_settle(current)
        return current

    def select_from_token(self, token: Token) -> SwapState:
        return self.dispatch(SelectFromToken(token))

    def select_to_token(self, token: Token) -> SwapState:
        return self.dispatch(SelectToToken(token))

    def change_from_amount(self, text: str) -> SwapState:
        return self.dispatch(ChangeFromAmount(text))

    def flip_sides(self) -> SwapState:
        return self.dispatch(FlipSides())

    def trigger_swap(self) -> SwapState:
        return self.dispatch(TriggerSwap())

    def open_selector(self, side: Side) -> SwapState:
        return self.dispatch(OpenSelector(side))

    def close_selector(self) -> SwapState:
        return self.dispatch(CloseSelector())

    def change_search_term(self, text: str) -> SwapState:
        return self.dispatch(ChangeSearchTerm(text))

    def close(self) -> None:
        """Cancel any pending settle timer."""

        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
            logger.debug("Cancelled pending swap settle timer")

    # ------------------------------------------------------------------
    def _schedule_settle(self, state: SwapState) -> None:
        logger.info(
            "Swapping %s %s for %s",
            state.from_amount,
            state.from_token.currency if state.from_token else "?",
            state.to_token.currency if state.to_token else "?",
        )
        timer: Optional[TimerHandle] = None

        def _settle() -> None:
            with self._lock:
                if self._timer is not timer:
                    return
                self._timer = None
            logger.info("Swap settled")
            self.dispatch(SettleSwap())

        with self._lock:
            timer = self._timer_factory(self._settle_delay, _settle)
            self._timer = timer
        timer.start()
