"""System setup cost with Danish VAT breakdown."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from .danish_presets import DANISH_VAT_RATE
from .decimal_context import ZERO


@dataclass(frozen=True)
class SetupCostInput:
    """Pre-VAT component costs in DKK.  ``battery_cost`` is optional."""

    panels_cost: Decimal
    inverter_cost: Decimal
    installation_cost: Decimal
    mounting_kit_cost: Decimal
    battery_cost: Decimal = field(default=ZERO)


@dataclass(frozen=True)
class SetupCostResult:
    panels_cost: Decimal
    inverter_cost: Decimal
    installation_cost: Decimal
    mounting_kit_cost: Decimal
    battery_cost: Decimal
    subtotal: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    total_with_vat: Decimal


def calculate_setup_cost(inp: SetupCostInput) -> SetupCostResult:
    """Sum the components and add 25 % VAT.

    No range validation happens here; zero components give a zero total.
    """
    subtotal = (
        inp.panels_cost
        + inp.inverter_cost
        + inp.installation_cost
        + inp.mounting_kit_cost
        + inp.battery_cost
    )
    vat_amount = subtotal * DANISH_VAT_RATE
    total_with_vat = subtotal + vat_amount

    return SetupCostResult(
        panels_cost=inp.panels_cost,
        inverter_cost=inp.inverter_cost,
        installation_cost=inp.installation_cost,
        mounting_kit_cost=inp.mounting_kit_cost,
        battery_cost=inp.battery_cost,
        subtotal=subtotal,
        vat_rate=DANISH_VAT_RATE,
        vat_amount=vat_amount,
        total_with_vat=total_with_vat,
    )
