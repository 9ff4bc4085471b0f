"""Danish tax-deduction scenarios for a solar installation.

The labour deduction follows the håndværkerfradrag pattern: only the
installation labour is eligible, never the equipment.  The rate and the
annual cap below are placeholder estimates that have not been checked
against current SKAT rules, so every labour-deduction result carries a
disclaimer in its ``assumptions`` list for the caller to show end users.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .decimal_context import HUNDRED, ZERO, quantize_places
from .payback import payback_period

# Placeholder policy values, see module docstring.
LABOR_DEDUCTION_RATE = Decimal("0.26")
MAX_DEDUCTION_DKK = Decimal("25000")

PLACEHOLDER_DISCLAIMER = "PLACEHOLDER VALUES - Verify with SKAT 2026 rules before use"

_BASE_ASSUMPTIONS: tuple[str, ...] = (
    "Danish home improvement deduction (håndværkerfradrag) rules",
    "Standard tax bracket assumed",
    "Single-year deduction (not spread across years)",
)


class TaxScenarioType(str, Enum):
    NO_TAX = "NO_TAX"
    LABOR_DEDUCTION = "LABOR_DEDUCTION"


@dataclass(frozen=True)
class TaxScenarioInput:
    system_cost: Decimal
    installation_labor_cost: Decimal
    panels_cost: Decimal
    inverter_cost: Decimal
    annual_savings: Decimal


@dataclass(frozen=True)
class TaxScenarioResult:
    scenario: TaxScenarioType
    eligible_amount: Decimal
    deduction_rate: Decimal
    tax_deduction: Decimal
    max_deduction: Decimal
    effective_cost: Decimal
    effective_payback_years: Decimal
    assumptions: tuple[str, ...]


def _labor_assumptions() -> tuple[str, ...]:
    rate_pct = quantize_places(LABOR_DEDUCTION_RATE * HUNDRED, 0)
    cap = quantize_places(MAX_DEDUCTION_DKK, 0)
    return _BASE_ASSUMPTIONS + (
        f"Deduction rate: {rate_pct}% tax value",
        f"Maximum deduction: {cap} DKK",
        "Deduction applies to labor costs only (not equipment)",
        PLACEHOLDER_DISCLAIMER,
    )


def calculate_tax_scenario(
    inp: TaxScenarioInput,
    scenario: TaxScenarioType | str,
) -> TaxScenarioResult:
    """Effective cost and payback under one tax scenario.

    Parameters
    ----------
    inp : TaxScenarioInput
        Cost breakdown and first-year savings.
    scenario : TaxScenarioType or str
        ``"NO_TAX"`` or ``"LABOR_DEDUCTION"``.

    Returns
    -------
    TaxScenarioResult
    """
    scenario = TaxScenarioType(scenario)

    if scenario is TaxScenarioType.NO_TAX:
        return TaxScenarioResult(
            scenario=scenario,
            eligible_amount=ZERO,
            deduction_rate=ZERO,
            tax_deduction=ZERO,
            max_deduction=ZERO,
            effective_cost=inp.system_cost,
            effective_payback_years=payback_period(inp.system_cost, inp.annual_savings),
            assumptions=("No tax deduction applied",),
        )

    eligible_amount = inp.installation_labor_cost
    tax_deduction = min(eligible_amount * LABOR_DEDUCTION_RATE, MAX_DEDUCTION_DKK)
    effective_cost = inp.system_cost - tax_deduction

    return TaxScenarioResult(
        scenario=scenario,
        eligible_amount=eligible_amount,
        deduction_rate=LABOR_DEDUCTION_RATE,
        tax_deduction=tax_deduction,
        max_deduction=MAX_DEDUCTION_DKK,
        effective_cost=effective_cost,
        effective_payback_years=payback_period(effective_cost, inp.annual_savings),
        assumptions=_labor_assumptions(),
    )


def compare_tax_scenarios(inp: TaxScenarioInput) -> list[TaxScenarioResult]:
    """Run every scenario, ``NO_TAX`` first."""
    return [calculate_tax_scenario(inp, s) for s in TaxScenarioType]
