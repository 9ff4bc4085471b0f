"""Economic analysis module."""

from .co2_savings import CO2SavingsInput, CO2SavingsResult, calculate_co2_savings
from .decimal_context import configure_decimal_context, to_decimal
from .payback import PaybackInput, PaybackResult, calculate_payback
from .projection import (
    ProjectionInput,
    ProjectionResult,
    ProjectionSummary,
    YearResult,
    calculate_projection,
)
from .setup_cost import SetupCostInput, SetupCostResult, calculate_setup_cost
from .tax_scenarios import (
    TaxScenarioInput,
    TaxScenarioResult,
    TaxScenarioType,
    calculate_tax_scenario,
    compare_tax_scenarios,
)

__all__ = [
    "configure_decimal_context",
    "to_decimal",
    # setup_cost
    "SetupCostInput",
    "SetupCostResult",
    "calculate_setup_cost",
    # payback
    "PaybackInput",
    "PaybackResult",
    "calculate_payback",
    # tax_scenarios
    "TaxScenarioType",
    "TaxScenarioInput",
    "TaxScenarioResult",
    "calculate_tax_scenario",
    "compare_tax_scenarios",
    # co2_savings
    "CO2SavingsInput",
    "CO2SavingsResult",
    "calculate_co2_savings",
    # projection
    "ProjectionInput",
    "ProjectionResult",
    "ProjectionSummary",
    "YearResult",
    "calculate_projection",
]
