"""Avoided CO2 emissions from solar production.

Each kWh produced is assumed to displace one kWh of average Danish grid
electricity.  The grid mix actually varies by hour and season, and
self-consumed versus exported energy is not distinguished, so this is a
conservative average-factor estimate.

The lifetime figure is a flat 25 x the annual figure.  It deliberately
does not apply the degradation curve used by the financial projection.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .danish_presets import DANISH_GRID_CO2_KG_PER_KWH, SYSTEM_LIFETIME_YEARS

CAR_CO2_KG_PER_KM = Decimal("0.12")  # average car, 120 g/km
TREE_CO2_KG_PER_YEAR = Decimal("21")
KG_PER_TONNE = Decimal(1000)


@dataclass(frozen=True)
class CO2SavingsInput:
    annual_production_kwh: Decimal
    emission_factor_kg_per_kwh: Decimal | None = None


@dataclass(frozen=True)
class CO2SavingsResult:
    annual_co2_savings_kg: Decimal
    annual_co2_savings_tonnes: Decimal
    lifetime_co2_savings_tonnes: Decimal
    emission_factor_kg_per_kwh: Decimal
    equivalent_car_km: Decimal
    equivalent_trees_year: Decimal


def calculate_co2_savings(inp: CO2SavingsInput) -> CO2SavingsResult:
    emission_factor = inp.emission_factor_kg_per_kwh
    if emission_factor is None:
        emission_factor = DANISH_GRID_CO2_KG_PER_KWH

    annual_kg = inp.annual_production_kwh * emission_factor
    annual_tonnes = annual_kg / KG_PER_TONNE

    return CO2SavingsResult(
        annual_co2_savings_kg=annual_kg,
        annual_co2_savings_tonnes=annual_tonnes,
        lifetime_co2_savings_tonnes=annual_tonnes * SYSTEM_LIFETIME_YEARS,
        emission_factor_kg_per_kwh=emission_factor,
        equivalent_car_km=annual_kg / CAR_CO2_KG_PER_KM,
        equivalent_trees_year=annual_kg / TREE_CO2_KG_PER_YEAR,
    )
