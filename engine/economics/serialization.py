"""Wire representation of calculation results.

JSON has no decimal type, so decimals cross the boundary as fixed-place
strings: 2 places for money and energy, 4 for rates.  Integer years pass
through unchanged.  Values that are only ever plotted may be sent as
floats via :func:`serialize_decimal_to_number`.

Infinity and NaN (e.g. the payback of a system that never saves money)
have no JSON form; every serializer here emits ``None`` for them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from .co2_savings import CO2SavingsResult
from .decimal_context import CURRENCY_PLACES, RATE_PLACES, quantize_places
from .payback import PaybackResult
from .projection import ProjectionResult, YearResult
from .setup_cost import SetupCostResult
from .tax_scenarios import TaxScenarioResult


def serialize_decimal(d: Decimal) -> str | None:
    """Full-precision plain string, no exponent."""
    if not d.is_finite():
        return None
    return format(d, "f")


def serialize_decimal_fixed(d: Decimal, places: int = CURRENCY_PLACES) -> str | None:
    if not d.is_finite():
        return None
    return format(quantize_places(d, places), "f")


def serialize_decimal_to_number(d: Decimal) -> float | None:
    """Lossy float conversion for charting only."""
    if not d.is_finite():
        return None
    return float(d)


def _money(d: Decimal) -> str | None:
    return serialize_decimal_fixed(d, CURRENCY_PLACES)


def _rate(d: Decimal) -> str | None:
    return serialize_decimal_fixed(d, RATE_PLACES)


# ======================================================================
# Result serializers
# ======================================================================

def serialize_setup_cost(result: SetupCostResult) -> dict[str, Any]:
    return {
        "panels_cost": _money(result.panels_cost),
        "inverter_cost": _money(result.inverter_cost),
        "installation_cost": _money(result.installation_cost),
        "mounting_kit_cost": _money(result.mounting_kit_cost),
        "battery_cost": _money(result.battery_cost),
        "subtotal": _money(result.subtotal),
        "vat_rate": _rate(result.vat_rate),
        "vat_amount": _money(result.vat_amount),
        "total_with_vat": _money(result.total_with_vat),
    }


def serialize_payback(result: PaybackResult) -> dict[str, Any]:
    return {
        "annual_savings": _money(result.annual_savings),
        "self_consumption_savings": _money(result.self_consumption_savings),
        "grid_export_earnings": _money(result.grid_export_earnings),
        "payback_years": _money(result.payback_years),
        "break_even_year": result.break_even_year,
    }


def serialize_tax_scenario(result: TaxScenarioResult) -> dict[str, Any]:
    return {
        "scenario": result.scenario.value,
        "eligible_amount": _money(result.eligible_amount),
        "deduction_rate": _rate(result.deduction_rate),
        "tax_deduction": _money(result.tax_deduction),
        "max_deduction": _money(result.max_deduction),
        "effective_cost": _money(result.effective_cost),
        "effective_payback_years": _money(result.effective_payback_years),
        "assumptions": list(result.assumptions),
    }


def serialize_co2_savings(result: CO2SavingsResult) -> dict[str, Any]:
    return {
        "annual_co2_savings_kg": _money(result.annual_co2_savings_kg),
        "annual_co2_savings_tonnes": _money(result.annual_co2_savings_tonnes),
        "lifetime_co2_savings_tonnes": _money(result.lifetime_co2_savings_tonnes),
        "emission_factor_kg_per_kwh": _rate(result.emission_factor_kg_per_kwh),
        "equivalent_car_km": _money(result.equivalent_car_km),
        "equivalent_trees_year": _money(result.equivalent_trees_year),
    }


def _serialize_year(y: YearResult) -> dict[str, Any]:
    return {
        "year": y.year,
        "production_kwh": _money(y.production_kwh),
        "electricity_rate": _rate(y.electricity_rate),
        "grid_feed_in_rate": _rate(y.grid_feed_in_rate),
        "self_consumption_savings": _money(y.self_consumption_savings),
        "grid_export_earnings": _money(y.grid_export_earnings),
        "savings_nominal": _money(y.savings_nominal),
        "savings_real": _money(y.savings_real),
        "maintenance_cost": _money(y.maintenance_cost),
        "net_savings_nominal": _money(y.net_savings_nominal),
        "net_savings_real": _money(y.net_savings_real),
        "cumulative_nominal": _money(y.cumulative_nominal),
        "cumulative_real": _money(y.cumulative_real),
    }


def serialize_projection(result: ProjectionResult) -> dict[str, Any]:
    summary = result.summary
    return {
        "years": [_serialize_year(y) for y in result.years],
        "summary": {
            "total_savings_nominal": _money(summary.total_savings_nominal),
            "total_savings_real": _money(summary.total_savings_real),
            "total_maintenance_cost": _money(summary.total_maintenance_cost),
            "break_even_year_nominal": summary.break_even_year_nominal,
            "break_even_year_real": summary.break_even_year_real,
            "roi_25_year": _money(summary.roi_25_year),
        },
    }


def projection_chart_points(result: ProjectionResult) -> list[dict[str, Any]]:
    """Per-year float values for charting, never for recomputation."""
    return [
        {
            "year": y.year,
            "savings_nominal": serialize_decimal_to_number(y.net_savings_nominal),
            "savings_real": serialize_decimal_to_number(y.net_savings_real),
            "cumulative_nominal": serialize_decimal_to_number(y.cumulative_nominal),
            "cumulative_real": serialize_decimal_to_number(y.cumulative_real),
            "production_kwh": serialize_decimal_to_number(y.production_kwh),
        }
        for y in result.years
    ]
