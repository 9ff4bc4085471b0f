"""Simple (single-year) payback period.

Quick-look metric: no degradation, no inflation, no maintenance.  The
25-year view lives in :mod:`engine.economics.projection`.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal

from .decimal_context import ONE


@dataclass(frozen=True)
class PaybackInput:
    system_cost: Decimal
    annual_production_kwh: Decimal
    electricity_rate: Decimal  # DKK/kWh
    self_consumption_rate: Decimal  # 0..1
    grid_feed_in_rate: Decimal  # DKK/kWh for exported energy


@dataclass(frozen=True)
class PaybackResult:
    self_consumption_savings: Decimal
    grid_export_earnings: Decimal
    annual_savings: Decimal
    payback_years: Decimal
    break_even_year: int


def payback_period(cost: Decimal, annual_savings: Decimal) -> Decimal:
    """Years of *annual_savings* needed to recover *cost*.

    Savings of zero or less never pay anything back; the result is then
    ``Decimal("Infinity")`` rather than an exception.
    """
    if annual_savings <= 0:
        return Decimal("Infinity")
    return cost / annual_savings


def calculate_payback(inp: PaybackInput) -> PaybackResult:
    """Annual savings split into self-consumption and export, plus payback.

    ``break_even_year`` is the payback period rounded up to a whole year,
    or 0 when the system never pays back.
    """
    self_consumed_kwh = inp.annual_production_kwh * inp.self_consumption_rate
    self_consumption_savings = self_consumed_kwh * inp.electricity_rate

    exported_kwh = inp.annual_production_kwh * (ONE - inp.self_consumption_rate)
    grid_export_earnings = exported_kwh * inp.grid_feed_in_rate

    annual_savings = self_consumption_savings + grid_export_earnings
    payback_years = payback_period(inp.system_cost, annual_savings)

    if payback_years.is_finite():
        break_even_year = int(payback_years.to_integral_value(rounding=ROUND_CEILING))
    else:
        break_even_year = 0

    return PaybackResult(
        self_consumption_savings=self_consumption_savings,
        grid_export_earnings=grid_export_earnings,
        annual_savings=annual_savings,
        payback_years=payback_years,
        break_even_year=break_even_year,
    )
