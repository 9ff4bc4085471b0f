"""Tests for engine.economics.formatting — Danish display strings."""

from __future__ import annotations

from decimal import Decimal

import pytest

from engine.economics.co2_savings import CO2SavingsInput, calculate_co2_savings
from engine.economics.formatting import (
    format_co2_savings,
    format_dkk,
    format_kw,
    format_kwh,
    format_m2,
    format_percent,
    format_years,
    parse_number,
)


class TestFormatters:
    def test_dkk(self):
        assert format_dkk(Decimal("161300")) == "161.300 kr."
        assert format_dkk(Decimal("1234.5")) == "1.235 kr."
        assert format_dkk(Decimal("1234.5"), 2) == "1.234,50 kr."

    def test_dkk_negative(self):
        assert format_dkk(Decimal("-142240.4")) == "-142.240 kr."

    def test_dkk_millions(self):
        assert format_dkk(Decimal("1234567.891"), 2) == "1.234.567,89 kr."

    def test_kwh(self):
        assert format_kwh(Decimal("8536")) == "8.536 kWh"

    def test_kw(self):
        assert format_kw(Decimal("10")) == "10,0 kW"
        assert format_kw(Decimal("7.25"), 2) == "7,25 kW"

    def test_m2(self):
        assert format_m2(Decimal("50")) == "50 m²"

    def test_percent_from_fraction(self):
        assert format_percent(Decimal("0.7")) == "70%"
        assert format_percent(Decimal("0.025"), 1) == "2,5%"

    def test_percent_already_scaled(self):
        assert format_percent(Decimal("25")) == "25%"

    def test_years(self):
        assert format_years(Decimal("7.7998")) == "7,8 år"
        assert format_years(Decimal("8")) == "8 år"
        assert format_years(Decimal("7.96")) == "8 år"


class TestParseNumber:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("1.234,56", "1234.56"),
            ("1,234.56", "1234.56"),
            ("2,5", "2.5"),
            ("2.5", "2.5"),
            ("1 000", "1000"),
            (" 161.300,00 ", "161300.00"),
            ("-3,75", "-3.75"),
        ],
    )
    def test_notations(self, text, expected):
        assert parse_number(text) == Decimal(expected)

    def test_garbage_rejected(self):
        with pytest.raises(ValueError):
            parse_number("abc")


class TestFormatCO2:
    def test_reference_production(self):
        result = calculate_co2_savings(CO2SavingsInput(Decimal("8800")))
        assert format_co2_savings(result) == {
            "annual": "4,4 ton CO₂/år",
            "lifetime": "110 ton CO₂ over 25 år",
            "car_km": "36.667 km i bil",
            "trees": "210 træer",
        }
