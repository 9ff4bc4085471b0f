"""Builds engine inputs from validated requests.

Request bodies arrive as floats (JSON numbers).  They are turned into
decimals here, defaults for optional fields are filled in, and the fixed
degradation assumptions are injected.
"""

from __future__ import annotations

from decimal import Decimal

from app.config import settings
from app.schemas.calculate import CalculateRequest, ProjectionSettings
from engine.economics.danish_presets import (
    DEGRADATION_RATE_ANNUAL,
    DEGRADATION_RATE_FIRST_YEAR,
    default_grid_feed_in_rate,
)
from engine.economics.decimal_context import to_decimal
from engine.economics.projection import ProjectionInput
from engine.economics.setup_cost import SetupCostInput
from engine.solar.production import estimate_production_from_area


def _or_default(value: float | None, default: float) -> Decimal:
    return to_decimal(default if value is None else value)


def feed_in_rate(electricity_rate: Decimal, supplied: float | None) -> Decimal:
    if supplied is not None:
        return to_decimal(supplied)
    return default_grid_feed_in_rate(
        electricity_rate, to_decimal(settings.grid_feed_in_ratio)
    )


def build_projection_input(
    body: ProjectionSettings,
    *,
    system_cost: Decimal,
    annual_production_kwh: Decimal,
    electricity_rate: Decimal,
    self_consumption_rate: Decimal,
    grid_feed_in_rate: Decimal,
) -> ProjectionInput:
    return ProjectionInput(
        system_cost=system_cost,
        annual_production_kwh=annual_production_kwh,
        electricity_rate_dkk=electricity_rate,
        self_consumption_rate=self_consumption_rate,
        grid_feed_in_rate=grid_feed_in_rate,
        inflation_rate=_or_default(body.inflation_rate, settings.default_inflation_rate),
        electricity_inflation_rate=_or_default(
            body.electricity_inflation_rate, settings.default_electricity_inflation_rate
        ),
        maintenance_cost_year1=_or_default(
            body.maintenance_cost_year1, settings.default_maintenance_cost_year1
        ),
        degradation_rate_first_year=DEGRADATION_RATE_FIRST_YEAR,
        degradation_rate_annual=DEGRADATION_RATE_ANNUAL,
    )


def setup_cost_input(body: CalculateRequest) -> SetupCostInput:
    return SetupCostInput(
        panels_cost=to_decimal(body.panels_cost),
        inverter_cost=to_decimal(body.inverter_cost),
        installation_cost=to_decimal(body.installation_cost),
        mounting_kit_cost=to_decimal(body.mounting_kit_cost),
        battery_cost=to_decimal(body.battery_cost),
    )


def annual_production(body: CalculateRequest) -> tuple[Decimal, str]:
    """Caller-supplied production if present, otherwise the area estimate."""
    if body.annual_production_kwh is not None:
        return to_decimal(body.annual_production_kwh), "provided"
    return estimate_production_from_area(to_decimal(body.roof_area_m2)), "estimate"
