"""
Area-based annual production estimate.

Fallback used when no irradiance-based figure is supplied for a roof:

    kWh/yr = area * efficiency * sun hours * performance ratio

with Danish defaults (20 % modules, 950 equivalent sun hours, PR 0.8).
"""

from __future__ import annotations

from decimal import Decimal

from engine.economics.decimal_context import HUNDRED, safe_divide

DEFAULT_EFFICIENCY_PERCENT = Decimal("20")  # modern mono-Si
DEFAULT_SUN_HOURS_PER_YEAR = Decimal("950")  # Denmark average
PERFORMANCE_RATIO = Decimal("0.8")
KW_PER_M2 = Decimal("0.2")  # ~200 W/m^2 of roof


def estimate_production_from_area(
    roof_area_m2: Decimal,
    efficiency_percent: Decimal = DEFAULT_EFFICIENCY_PERCENT,
    sun_hours_per_year: Decimal = DEFAULT_SUN_HOURS_PER_YEAR,
) -> Decimal:
    """Estimated annual production in kWh for *roof_area_m2* of panels."""
    return (
        roof_area_m2
        * (efficiency_percent / HUNDRED)
        * sun_hours_per_year
        * PERFORMANCE_RATIO
    )


def system_size_kw(roof_area_m2: Decimal) -> Decimal:
    return roof_area_m2 * KW_PER_M2


def estimated_yield(annual_production_kwh: Decimal, size_kw: Decimal) -> Decimal:
    """Specific yield in kWh per kWp."""
    return safe_divide(annual_production_kwh, size_kw)
