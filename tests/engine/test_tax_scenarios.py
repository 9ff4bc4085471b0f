"""Tests for engine.economics.tax_scenarios — labour deduction."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from engine.economics.decimal_context import quantize_places
from engine.economics.tax_scenarios import (
    LABOR_DEDUCTION_RATE,
    MAX_DEDUCTION_DKK,
    PLACEHOLDER_DISCLAIMER,
    TaxScenarioInput,
    TaxScenarioResult,
    TaxScenarioType,
    calculate_tax_scenario,
    compare_tax_scenarios,
)


# ======================================================================
# No deduction
# ======================================================================


class TestNoTax:
    def test_cost_unchanged(self, reference_tax_input):
        result = calculate_tax_scenario(reference_tax_input, TaxScenarioType.NO_TAX)
        assert result.effective_cost == Decimal("161300")
        assert result.tax_deduction == 0
        assert result.eligible_amount == 0
        assert result.deduction_rate == 0

    def test_payback_matches_simple_payback(self, reference_tax_input):
        result = calculate_tax_scenario(reference_tax_input, "NO_TAX")
        assert quantize_places(result.effective_payback_years, 2) == Decimal("7.80")

    def test_assumptions(self, reference_tax_input):
        result = calculate_tax_scenario(reference_tax_input, TaxScenarioType.NO_TAX)
        assert result.assumptions == ("No tax deduction applied",)


# ======================================================================
# Labour deduction
# ======================================================================


class TestLaborDeduction:
    def test_reference_deduction(self, reference_tax_input):
        """26 % of 49 335 DKK labour = 12 827.10 DKK."""
        result = calculate_tax_scenario(
            reference_tax_input, TaxScenarioType.LABOR_DEDUCTION
        )
        assert result.eligible_amount == Decimal("49335")
        assert result.tax_deduction == Decimal("12827.10")
        assert result.effective_cost == Decimal("148472.90")
        assert quantize_places(result.effective_payback_years, 2) == Decimal("7.18")

    def test_deduction_capped(self, reference_tax_input):
        inp = replace(reference_tax_input, installation_labor_cost=Decimal("500000"))
        result = calculate_tax_scenario(inp, "LABOR_DEDUCTION")
        assert result.tax_deduction == MAX_DEDUCTION_DKK
        assert result.effective_cost == Decimal("136300")

    def test_equipment_not_eligible(self, reference_tax_input):
        """Panel and inverter prices do not affect the deduction."""
        inp = replace(
            reference_tax_input,
            panels_cost=Decimal("999999"),
            inverter_cost=Decimal("999999"),
        )
        base = calculate_tax_scenario(reference_tax_input, "LABOR_DEDUCTION")
        result = calculate_tax_scenario(inp, "LABOR_DEDUCTION")
        assert result.tax_deduction == base.tax_deduction

    def test_rate_and_cap_reported(self, reference_tax_input):
        result = calculate_tax_scenario(reference_tax_input, "LABOR_DEDUCTION")
        assert result.deduction_rate == LABOR_DEDUCTION_RATE
        assert result.max_deduction == MAX_DEDUCTION_DKK

    def test_assumptions_carry_disclaimer(self, reference_tax_input):
        result = calculate_tax_scenario(reference_tax_input, "LABOR_DEDUCTION")
        assert PLACEHOLDER_DISCLAIMER in result.assumptions
        assert "Deduction rate: 26% tax value" in result.assumptions
        assert "Maximum deduction: 25000 DKK" in result.assumptions

    def test_zero_savings_is_infinite_payback(self, reference_tax_input):
        inp = replace(reference_tax_input, annual_savings=Decimal("0"))
        result = calculate_tax_scenario(inp, "LABOR_DEDUCTION")
        assert result.effective_payback_years.is_infinite()


class TestScenarioSelection:
    def test_unknown_scenario_rejected(self, reference_tax_input):
        with pytest.raises(ValueError):
            calculate_tax_scenario(reference_tax_input, "FULL_REFUND")

    def test_compare_returns_both_in_order(self, reference_tax_input):
        results = compare_tax_scenarios(reference_tax_input)
        assert [r.scenario for r in results] == [
            TaxScenarioType.NO_TAX,
            TaxScenarioType.LABOR_DEDUCTION,
        ]

    def test_every_scenario_lists_assumptions(self, reference_tax_input):
        for result in compare_tax_scenarios(reference_tax_input):
            assert len(result.assumptions) > 0

    def test_result_requires_assumptions(self):
        zero = Decimal("0")
        with pytest.raises(TypeError):
            TaxScenarioResult(  # type: ignore[call-arg]
                scenario=TaxScenarioType.NO_TAX,
                eligible_amount=zero,
                deduction_rate=zero,
                tax_deduction=zero,
                max_deduction=zero,
                effective_cost=zero,
                effective_payback_years=zero,
            )


# ======================================================================
# Properties
# ======================================================================


class TestTaxProperties:
    @given(
        cost=st.decimals(min_value=Decimal("10000"), max_value=Decimal("1000000"), places=2),
        labor=st.decimals(min_value=Decimal("0"), max_value=Decimal("200000"), places=2),
        savings=st.decimals(min_value=Decimal("100"), max_value=Decimal("100000"), places=2),
    )
    def test_deduction_never_worse(self, cost, labor, savings):
        inp = TaxScenarioInput(
            system_cost=cost,
            installation_labor_cost=labor,
            panels_cost=Decimal("0"),
            inverter_cost=Decimal("0"),
            annual_savings=savings,
        )
        no_tax, labor_result = compare_tax_scenarios(inp)
        assert 0 <= labor_result.tax_deduction <= MAX_DEDUCTION_DKK
        assert labor_result.effective_cost <= no_tax.effective_cost
        assert labor_result.effective_payback_years <= no_tax.effective_payback_years
