"""25-year financial projection for a residential PV installation.

Builds a year-by-year schedule of production, prices, savings and
maintenance, in both nominal money (the currency of the year the cash
flow occurs) and real money (discounted back to today's purchasing
power), and summarises it as totals, break-even years and ROI.

Model assumptions
-----------------
* Year 1 loses ``degradation_rate_first_year`` to light-induced
  degradation (LID).  That degraded figure is the baseline for every later
  year, which compounds ``degradation_rate_annual`` ``year - 1`` times.
* Retail and feed-in prices both inflate at ``electricity_inflation_rate``.
* Maintenance inflates at the general ``inflation_rate``.
* Real values are discounted at the general ``inflation_rate``.  Real
  maintenance therefore stays at the year-1 figure.

Everything is :class:`decimal.Decimal`; the only state is the running
cumulative total carried from one year to the next.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from .decimal_context import HUNDRED, ONE, ZERO, compound, safe_divide

logger = logging.getLogger(__name__)

PROJECTION_YEARS: int = 25


# ======================================================================
# Value objects
# ======================================================================

@dataclass(frozen=True)
class ProjectionInput:
    """Inputs for :func:`calculate_projection`.

    ``annual_production_kwh`` is the nameplate (pre-degradation) estimate.
    Rates are fractions, e.g. ``Decimal("0.02")`` for 2 %.
    """

    system_cost: Decimal
    annual_production_kwh: Decimal
    electricity_rate_dkk: Decimal
    self_consumption_rate: Decimal
    grid_feed_in_rate: Decimal
    inflation_rate: Decimal
    electricity_inflation_rate: Decimal
    maintenance_cost_year1: Decimal
    degradation_rate_first_year: Decimal
    degradation_rate_annual: Decimal


@dataclass(frozen=True)
class YearResult:
    year: int
    production_kwh: Decimal
    electricity_rate: Decimal
    grid_feed_in_rate: Decimal
    self_consumption_savings: Decimal
    grid_export_earnings: Decimal
    savings_nominal: Decimal
    savings_real: Decimal
    maintenance_cost: Decimal
    net_savings_nominal: Decimal
    net_savings_real: Decimal
    cumulative_nominal: Decimal
    cumulative_real: Decimal


@dataclass(frozen=True)
class ProjectionSummary:
    total_savings_nominal: Decimal
    total_savings_real: Decimal
    total_maintenance_cost: Decimal
    break_even_year_nominal: int  # 0 = not reached
    break_even_year_real: int  # 0 = not reached
    roi_25_year: Decimal  # percent


@dataclass(frozen=True)
class ProjectionResult:
    years: tuple[YearResult, ...]
    summary: ProjectionSummary


# ======================================================================
# Projection
# ======================================================================

def _non_negative(value: Decimal) -> bool:
    # NaN never counts as break-even
    return not value.is_nan() and value >= 0


def calculate_projection(inp: ProjectionInput) -> ProjectionResult:
    """Compute the 25-year schedule and its summary.

    Never raises for numeric input: a zero production simply yields zero
    savings in every year, and a zero system cost gives a non-finite ROI.
    """
    baseline_kwh = inp.annual_production_kwh * (ONE - inp.degradation_rate_first_year)
    annual_retention = ONE - inp.degradation_rate_annual
    price_growth = ONE + inp.electricity_inflation_rate
    general_growth = ONE + inp.inflation_rate
    export_share = ONE - inp.self_consumption_rate

    cumulative_nominal = -inp.system_cost
    cumulative_real = -inp.system_cost
    break_even_nominal = 0
    break_even_real = 0
    total_nominal = ZERO
    total_real = ZERO
    total_maintenance = ZERO

    years: list[YearResult] = []

    for year in range(1, PROJECTION_YEARS + 1):
        elapsed = year - 1

        if year == 1:
            production = baseline_kwh
        else:
            production = baseline_kwh * compound(annual_retention, elapsed)

        electricity_rate = inp.electricity_rate_dkk * compound(price_growth, elapsed)
        grid_feed_in_rate = inp.grid_feed_in_rate * compound(price_growth, elapsed)

        self_consumption_savings = (
            production * inp.self_consumption_rate * electricity_rate
        )
        grid_export_earnings = production * export_share * grid_feed_in_rate
        savings_nominal = self_consumption_savings + grid_export_earnings

        discount_factor = compound(general_growth, elapsed)
        savings_real = safe_divide(savings_nominal, discount_factor)

        maintenance_nominal = inp.maintenance_cost_year1 * discount_factor
        maintenance_real = inp.maintenance_cost_year1

        net_nominal = savings_nominal - maintenance_nominal
        net_real = savings_real - maintenance_real

        cumulative_nominal += net_nominal
        cumulative_real += net_real

        if break_even_nominal == 0 and _non_negative(cumulative_nominal):
            break_even_nominal = year
        if break_even_real == 0 and _non_negative(cumulative_real):
            break_even_real = year

        total_nominal += net_nominal
        total_real += net_real
        total_maintenance += maintenance_nominal

        years.append(
            YearResult(
                year=year,
                production_kwh=production,
                electricity_rate=electricity_rate,
                grid_feed_in_rate=grid_feed_in_rate,
                self_consumption_savings=self_consumption_savings,
                grid_export_earnings=grid_export_earnings,
                savings_nominal=savings_nominal,
                savings_real=savings_real,
                maintenance_cost=maintenance_nominal,
                net_savings_nominal=net_nominal,
                net_savings_real=net_real,
                cumulative_nominal=cumulative_nominal,
                cumulative_real=cumulative_real,
            )
        )

    roi = safe_divide(total_nominal, inp.system_cost) * HUNDRED

    logger.debug(
        "Projection: break-even nominal=%d real=%d, ROI %s%%",
        break_even_nominal,
        break_even_real,
        roi,
    )

    return ProjectionResult(
        years=tuple(years),
        summary=ProjectionSummary(
            total_savings_nominal=total_nominal,
            total_savings_real=total_real,
            total_maintenance_cost=total_maintenance,
            break_even_year_nominal=break_even_nominal,
            break_even_year_real=break_even_real,
            roi_25_year=roi,
        ),
    )

