"""Tests for engine.economics.payback — simple payback period."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from hypothesis import given, strategies as st

from engine.economics.decimal_context import quantize_places
from engine.economics.payback import PaybackInput, calculate_payback, payback_period


class TestCalculatePayback:
    """Tests for calculate_payback()."""

    def test_reference_savings(self, reference_payback_input):
        """8800 kWh: 70 % at 2.50 + 30 % at 2.00 = 15 400 + 5 280."""
        result = calculate_payback(reference_payback_input)
        assert result.self_consumption_savings == Decimal("15400")
        assert result.grid_export_earnings == Decimal("5280")
        assert result.annual_savings == Decimal("20680.00")

    def test_reference_payback(self, reference_payback_input):
        result = calculate_payback(reference_payback_input)
        assert quantize_places(result.payback_years, 2) == Decimal("7.80")
        assert result.break_even_year == 8

    def test_savings_is_sum_of_parts(self, reference_payback_input):
        result = calculate_payback(reference_payback_input)
        assert result.annual_savings == (
            result.self_consumption_savings + result.grid_export_earnings
        )

    def test_full_self_consumption(self, reference_payback_input):
        """No export when everything is consumed on site."""
        inp = replace(reference_payback_input, self_consumption_rate=Decimal("1"))
        result = calculate_payback(inp)
        assert result.grid_export_earnings == 0
        assert result.annual_savings == Decimal("22000")

    def test_exact_whole_year_payback(self):
        """A payback of exactly 5.0 years breaks even in year 5, not 6."""
        inp = PaybackInput(
            system_cost=Decimal("50000"),
            annual_production_kwh=Decimal("4000"),
            electricity_rate=Decimal("2.50"),
            self_consumption_rate=Decimal("1"),
            grid_feed_in_rate=Decimal("0"),
        )
        result = calculate_payback(inp)
        assert result.payback_years == 5
        assert result.break_even_year == 5

    def test_zero_production_is_infinite(self, reference_payback_input):
        """No savings: payback is an infinity sentinel and never breaks even."""
        inp = replace(reference_payback_input, annual_production_kwh=Decimal("0"))
        result = calculate_payback(inp)
        assert result.annual_savings == 0
        assert result.payback_years.is_infinite()
        assert result.payback_years > 0
        assert result.break_even_year == 0

    def test_idempotent(self, reference_payback_input):
        assert calculate_payback(reference_payback_input) == calculate_payback(
            reference_payback_input
        )


class TestPaybackPeriod:
    """Tests for payback_period()."""

    def test_positive_savings(self):
        assert payback_period(Decimal("1000"), Decimal("250")) == 4

    def test_negative_savings_is_infinite(self):
        assert payback_period(Decimal("1000"), Decimal("-5")).is_infinite()


# ======================================================================
# Properties
# ======================================================================

rates = st.decimals(min_value=Decimal("0.50"), max_value=Decimal("10.00"), places=2)


class TestPaybackProperties:
    @given(
        production=st.decimals(min_value=Decimal("1000"), max_value=Decimal("20000"), places=0),
        self_consumption=st.decimals(min_value=Decimal("0.10"), max_value=Decimal("1.00"), places=2),
        cost=st.decimals(min_value=Decimal("10000"), max_value=Decimal("500000"), places=0),
        rate_a=rates,
        rate_b=rates,
    )
    def test_higher_rate_pays_back_sooner(self, production, self_consumption, cost, rate_a, rate_b):
        """With feed-in at 80 % of retail, a higher retail rate strictly shortens payback."""
        low, high = sorted((rate_a, rate_b))
        if low == high:
            high = low + Decimal("0.01")

        def payback(rate: Decimal) -> Decimal:
            return calculate_payback(
                PaybackInput(
                    system_cost=cost,
                    annual_production_kwh=production,
                    electricity_rate=rate,
                    self_consumption_rate=self_consumption,
                    grid_feed_in_rate=rate * Decimal("0.8"),
                )
            ).payback_years

        assert payback(high) < payback(low)

    @given(
        production=st.decimals(min_value=Decimal("1"), max_value=Decimal("20000"), places=0),
        rate=rates,
    )
    def test_positive_savings_give_finite_payback(self, production, rate):
        result = calculate_payback(
            PaybackInput(
                system_cost=Decimal("100000"),
                annual_production_kwh=production,
                electricity_rate=rate,
                self_consumption_rate=Decimal("0.7"),
                grid_feed_in_rate=rate * Decimal("0.8"),
            )
        )
        assert result.payback_years.is_finite()
        assert result.payback_years > 0
        assert result.break_even_year >= 1
