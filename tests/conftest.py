"""Shared test fixtures for SolarCalc engine and API tests."""

from __future__ import annotations

from decimal import Decimal

import pytest

from engine.economics.decimal_context import configure_decimal_context
from engine.economics.payback import PaybackInput
from engine.economics.projection import ProjectionInput
from engine.economics.setup_cost import SetupCostInput
from engine.economics.tax_scenarios import TaxScenarioInput


def d(value: str | int) -> Decimal:
    """Shorthand for building decimals from literals."""
    return Decimal(value)


@pytest.fixture(autouse=True, scope="session")
def decimal_context():
    """Install the financial decimal context once, as the app does at start-up."""
    return configure_decimal_context()


# ======================================================================
# Reference system: 8800 kWh/yr, 161 300 DKK incl. VAT
# ======================================================================

@pytest.fixture
def reference_setup_input() -> SetupCostInput:
    return SetupCostInput(
        panels_cost=d("47400"),
        inverter_cost=d("20625"),
        installation_cost=d("49335"),
        mounting_kit_cost=d("11680"),
    )


@pytest.fixture
def reference_payback_input() -> PaybackInput:
    return PaybackInput(
        system_cost=d("161300"),
        annual_production_kwh=d("8800"),
        electricity_rate=d("2.50"),
        self_consumption_rate=d("0.70"),
        grid_feed_in_rate=d("2.00"),
    )


@pytest.fixture
def reference_tax_input() -> TaxScenarioInput:
    return TaxScenarioInput(
        system_cost=d("161300"),
        installation_labor_cost=d("49335"),
        panels_cost=d("47400"),
        inverter_cost=d("20625"),
        annual_savings=d("20680"),
    )


@pytest.fixture
def reference_projection_input() -> ProjectionInput:
    return ProjectionInput(
        system_cost=d("161300"),
        annual_production_kwh=d("8800"),
        electricity_rate_dkk=d("2.50"),
        self_consumption_rate=d("0.70"),
        grid_feed_in_rate=d("2.00"),
        inflation_rate=d("0.02"),
        electricity_inflation_rate=d("0.03"),
        maintenance_cost_year1=d("1000"),
        degradation_rate_first_year=d("0.03"),
        degradation_rate_annual=d("0.005"),
    )
