"""Solar investment calculation endpoints."""

import logging

from fastapi import APIRouter

from app.schemas.calculate import (
    CalculateRequest,
    CalculateResponse,
    ChartPointResponse,
    CO2Request,
    CO2SavingsResponse,
    ProjectionRequest,
    ProjectionResponse,
    TaxScenarioRequest,
    TaxScenarioResponse,
)
from app.services.calculator import (
    annual_production,
    build_projection_input,
    feed_in_rate,
    setup_cost_input,
)

from engine.economics.co2_savings import CO2SavingsInput, calculate_co2_savings
from engine.economics.decimal_context import to_decimal
from engine.economics.formatting import format_co2_savings
from engine.economics.payback import PaybackInput, calculate_payback
from engine.economics.projection import calculate_projection
from engine.economics.serialization import (
    projection_chart_points,
    serialize_co2_savings,
    serialize_decimal_fixed,
    serialize_payback,
    serialize_projection,
    serialize_setup_cost,
    serialize_tax_scenario,
)
from engine.economics.setup_cost import calculate_setup_cost
from engine.economics.tax_scenarios import TaxScenarioInput, compare_tax_scenarios
from engine.solar.production import estimated_yield, system_size_kw

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=CalculateResponse,
    summary="Full investment calculation",
    description=(
        "Setup cost with VAT, production estimate, simple payback, tax scenarios, "
        "25-year projection and CO2 savings in one call."
    ),
)
async def calculate(body: CalculateRequest):
    setup = calculate_setup_cost(setup_cost_input(body))
    system_cost = setup.total_with_vat

    production_kwh, production_source = annual_production(body)

    electricity_rate = to_decimal(body.electricity_rate_dkk)
    self_consumption = to_decimal(body.self_consumption_rate)
    feed_in = feed_in_rate(electricity_rate, body.grid_feed_in_rate)

    payback = calculate_payback(
        PaybackInput(
            system_cost=system_cost,
            annual_production_kwh=production_kwh,
            electricity_rate=electricity_rate,
            self_consumption_rate=self_consumption,
            grid_feed_in_rate=feed_in,
        )
    )

    tax_scenarios = compare_tax_scenarios(
        TaxScenarioInput(
            system_cost=system_cost,
            installation_labor_cost=setup.installation_cost,
            panels_cost=setup.panels_cost,
            inverter_cost=setup.inverter_cost,
            annual_savings=payback.annual_savings,
        )
    )

    projection = calculate_projection(
        build_projection_input(
            body,
            system_cost=system_cost,
            annual_production_kwh=production_kwh,
            electricity_rate=electricity_rate,
            self_consumption_rate=self_consumption,
            grid_feed_in_rate=feed_in,
        )
    )

    co2 = calculate_co2_savings(CO2SavingsInput(annual_production_kwh=production_kwh))

    size_kw = system_size_kw(to_decimal(body.roof_area_m2))

    logger.info(
        "Calculated %s DKK system, break-even year %d",
        serialize_decimal_fixed(system_cost),
        projection.summary.break_even_year_nominal,
        extra={"production_source": production_source},
    )

    return {
        "setup_cost": serialize_setup_cost(setup),
        "annual_production_kwh": serialize_decimal_fixed(production_kwh),
        "production_source": production_source,
        "payback": serialize_payback(payback),
        "tax_scenarios": [serialize_tax_scenario(t) for t in tax_scenarios],
        "projection": serialize_projection(projection),
        "co2_savings": serialize_co2_savings(co2),
        "system_size_kw": serialize_decimal_fixed(size_kw),
        "estimated_yield": serialize_decimal_fixed(estimated_yield(production_kwh, size_kw), 0),
    }


def _projection_for(body: ProjectionRequest):
    electricity_rate = to_decimal(body.electricity_rate_dkk)
    return calculate_projection(
        build_projection_input(
            body,
            system_cost=to_decimal(body.system_cost),
            annual_production_kwh=to_decimal(body.annual_production_kwh),
            electricity_rate=electricity_rate,
            self_consumption_rate=to_decimal(body.self_consumption_rate),
            grid_feed_in_rate=feed_in_rate(electricity_rate, body.grid_feed_in_rate),
        )
    )


@router.post(
    "/projection",
    response_model=ProjectionResponse,
    summary="25-year projection",
    description="Year-by-year nominal and real savings with break-even years and ROI.",
)
async def projection(body: ProjectionRequest):
    return serialize_projection(_projection_for(body))


@router.post(
    "/projection/chart",
    response_model=list[ChartPointResponse],
    summary="25-year projection chart data",
    description="Per-year savings and cumulative values as plain numbers for plotting.",
)
async def projection_chart(body: ProjectionRequest):
    return projection_chart_points(_projection_for(body))


@router.post(
    "/tax-scenarios",
    response_model=list[TaxScenarioResponse],
    summary="Compare tax scenarios",
    description="Effective cost and payback without deduction and with the labour deduction.",
)
async def tax_scenarios(body: TaxScenarioRequest):
    results = compare_tax_scenarios(
        TaxScenarioInput(
            system_cost=to_decimal(body.system_cost),
            installation_labor_cost=to_decimal(body.installation_labor_cost),
            panels_cost=to_decimal(body.panels_cost),
            inverter_cost=to_decimal(body.inverter_cost),
            annual_savings=to_decimal(body.annual_savings),
        )
    )
    return [serialize_tax_scenario(r) for r in results]


@router.post(
    "/co2",
    response_model=CO2SavingsResponse,
    summary="CO2 savings",
    description="Avoided emissions with car-km and tree equivalents, plus Danish display strings.",
)
async def co2_savings(body: CO2Request):
    factor = body.emission_factor_kg_per_kwh
    result = calculate_co2_savings(
        CO2SavingsInput(
            annual_production_kwh=to_decimal(body.annual_production_kwh),
            emission_factor_kg_per_kwh=None if factor is None else to_decimal(factor),
        )
    )
    return {**serialize_co2_savings(result), "display": format_co2_savings(result)}
