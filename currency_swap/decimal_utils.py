"""Helpers for working with :class:`decimal.Decimal`."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, localcontext
from typing import ContextManager, Optional

QUOTE_PLACES = 6

# Price ratios and products run under this context on every thread.
DECIMAL_CONTEXT = Context(prec=50, rounding=ROUND_HALF_UP)


def decimal_context() -> ContextManager[Context]:
    return localcontext(DECIMAL_CONTEXT)


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value

    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal") from exc


def try_decimal(value: object) -> Optional[Decimal]:
    """Return ``value`` as a finite Decimal, or ``None`` when it is not one."""

    if value is None or isinstance(value, bool):
        return None
    try:
        result = to_decimal(value)
    except ValueError:
        return None
    if not result.is_finite():
        return None
    return result


def quantize(value: Decimal, places: int = QUOTE_PLACES) -> Decimal:
    """Round half away from zero to a fixed number of decimal places.

    The working precision grows with the magnitude of ``value`` so that any
    finite value can be quantized.
    """

    quant = Decimal(1).scaleb(-places)
    digits = max(value.adjusted(), 0) + places + 2
    with localcontext(DECIMAL_CONTEXT) as ctx:
        ctx.prec = max(ctx.prec, digits)
        return value.quantize(quant)


def format_fixed(value: Decimal, places: int = QUOTE_PLACES) -> str:
    return format(quantize(value, places), "f")
