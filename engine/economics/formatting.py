"""Danish display formatting for calculation results.

Danish notation groups thousands with ``.`` and separates decimals with
``,`` (``1.234,50 kr.``).  All rounding is half-up on decimals; floats are
never involved.
"""

from __future__ import annotations

from decimal import Decimal

from .co2_savings import CO2SavingsResult
from .danish_presets import SYSTEM_LIFETIME_YEARS
from .decimal_context import HUNDRED, quantize_places, to_decimal

_TO_DANISH = str.maketrans({",": ".", ".": ","})


def _danish_number(value: Decimal, decimals: int) -> str:
    rounded = quantize_places(value, decimals)
    return format(rounded, ",f").translate(_TO_DANISH)


def format_dkk(value: Decimal, decimals: int = 0) -> str:
    """``Decimal("1234.5")`` -> ``"1.235 kr."`` (or ``"1.234,50 kr."`` with 2 decimals)."""
    return f"{_danish_number(value, decimals)} kr."


def format_kwh(value: Decimal) -> str:
    return f"{_danish_number(value, 0)} kWh"


def format_kw(value: Decimal, decimals: int = 1) -> str:
    return f"{_danish_number(value, decimals)} kW"


def format_m2(value: Decimal) -> str:
    return f"{_danish_number(value, 0)} m²"


def format_percent(value: Decimal, decimals: int = 0) -> str:
    """Format a percentage; values in 0..1 are treated as fractions."""
    if 0 <= value <= 1:
        value = value * HUNDRED
    return f"{_danish_number(value, decimals)}%"


def format_years(value: Decimal) -> str:
    """One decimal, trailing ``,0`` dropped: ``"7,8 år"``, ``"8 år"``."""
    rounded = quantize_places(value, 1)
    if rounded == rounded.to_integral_value():
        return f"{_danish_number(rounded, 0)} år"
    return f"{_danish_number(rounded, 1)} år"


def parse_number(text: str) -> Decimal:
    """Parse Danish (``1.234,56``) or international (``1,234.56``) notation."""
    cleaned = "".join(text.split())
    # The right-most separator is the decimal one.
    if cleaned.rfind(",") > cleaned.rfind("."):
        cleaned = cleaned.replace(".", "").replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")
    return to_decimal(cleaned)


def format_co2_savings(result: CO2SavingsResult) -> dict[str, str]:
    return {
        "annual": f"{_danish_number(result.annual_co2_savings_tonnes, 1)} ton CO₂/år",
        "lifetime": (
            f"{_danish_number(result.lifetime_co2_savings_tonnes, 0)} ton CO₂ "
            f"over {SYSTEM_LIFETIME_YEARS} år"
        ),
        "car_km": f"{_danish_number(result.equivalent_car_km, 0)} km i bil",
        "trees": f"{_danish_number(result.equivalent_trees_year, 0)} træer",
    }
