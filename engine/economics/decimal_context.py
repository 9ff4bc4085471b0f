"""Decimal arithmetic substrate for the financial engine.

Every money and energy quantity handled by :mod:`engine.economics` is a
:class:`decimal.Decimal`.  The 25-year projection compounds small per-kWh
rates over many periods, so binary floats would drift by whole cents
between platforms.

The process-wide context (precision and rounding mode) is installed once
at start-up with :func:`configure_decimal_context` and never changed
afterwards.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Context, Decimal

# ======================================================================
# Constants
# ======================================================================

DEFAULT_PRECISION: int = 20
MIN_PRECISION: int = 20

ZERO = Decimal(0)
ONE = Decimal(1)
HUNDRED = Decimal(100)

CURRENCY_PLACES: int = 2
RATE_PLACES: int = 4

FINANCE_CONTEXT = Context(prec=DEFAULT_PRECISION, rounding=ROUND_HALF_UP)

# Wide enough that quantizing a large total never overflows the coefficient.
_QUANTIZE_CONTEXT = Context(prec=60, rounding=ROUND_HALF_UP)


# ======================================================================
# Context configuration
# ======================================================================

def configure_decimal_context(precision: int = DEFAULT_PRECISION) -> Context:
    """Install the financial decimal context for this process.

    Sets precision and ``ROUND_HALF_UP`` on both ``decimal.DefaultContext``
    (template for threads started later) and the calling thread's context.
    Calling it again with the same precision is a no-op in effect.

    Parameters
    ----------
    precision : int
        Significant digits, at least ``MIN_PRECISION``.

    Returns
    -------
    Context
        The context now active in the calling thread.
    """
    if precision < MIN_PRECISION:
        raise ValueError(
            f"decimal precision must be >= {MIN_PRECISION}, got {precision}"
        )

    FINANCE_CONTEXT.prec = precision
    FINANCE_CONTEXT.rounding = ROUND_HALF_UP

    decimal.DefaultContext.prec = precision
    decimal.DefaultContext.rounding = ROUND_HALF_UP

    decimal.setcontext(FINANCE_CONTEXT.copy())
    return decimal.getcontext()


# ======================================================================
# Conversion and arithmetic helpers
# ======================================================================

def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a plain number to :class:`Decimal` without binary noise.

    Floats go through their shortest ``repr`` so that ``2.5`` becomes
    ``Decimal("2.5")`` rather than the exact binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("booleans are not numeric amounts")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except decimal.InvalidOperation as exc:
            raise ValueError(f"not a decimal number: {value!r}") from exc
    raise ValueError(f"cannot convert {type(value).__name__} to Decimal")


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide without raising on a zero denominator.

    ``x / 0`` is an infinity carrying the sign of ``x``; ``0 / 0`` is NaN.
    """
    if denominator == 0:
        if numerator == 0:
            return Decimal("NaN")
        return Decimal("Infinity").copy_sign(numerator)
    return numerator / denominator


def compound(base: Decimal, periods: int) -> Decimal:
    """``base ** periods`` with ``compound(x, 0) == 1`` for every base, zero included."""
    if periods == 0:
        return ONE
    return base ** periods


def quantize_places(value: Decimal, places: int) -> Decimal:
    """Round half-up to *places* decimal places (display only)."""
    exponent = Decimal(1).scaleb(-places)
    return value.quantize(exponent, rounding=ROUND_HALF_UP, context=_QUANTIZE_CONTEXT)
