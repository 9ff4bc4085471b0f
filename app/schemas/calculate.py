"""Pydantic schemas for the calculation endpoints.

Request bounds mirror the calculator form so that out-of-range input is
rejected (422) before the engine runs.  Decimal results are returned as
fixed-place strings; ``None`` marks a non-finite value.
"""

from typing import Literal

from pydantic import BaseModel, Field

# Denmark bounding box
DENMARK_LAT_MIN = 54.5
DENMARK_LAT_MAX = 57.8
DENMARK_LON_MIN = 8.0
DENMARK_LON_MAX = 15.2


# ======================================================================
# Requests
# ======================================================================

class ProjectionSettings(BaseModel):
    inflation_rate: float | None = Field(default=None, ge=0.0, le=0.1, description="General inflation rate")
    electricity_inflation_rate: float | None = Field(
        default=None, ge=0.0, le=0.15, description="Annual electricity price increase"
    )
    maintenance_cost_year1: float | None = Field(
        default=None, ge=0.0, le=10_000, description="First-year maintenance cost (DKK)"
    )


class CalculateRequest(ProjectionSettings):
    # Location, optional
    latitude: float | None = Field(default=None, ge=DENMARK_LAT_MIN, le=DENMARK_LAT_MAX)
    longitude: float | None = Field(default=None, ge=DENMARK_LON_MIN, le=DENMARK_LON_MAX)
    price_area: Literal["DK1", "DK2"] = "DK2"

    # Roof
    roof_area_m2: float = Field(ge=10, le=500)
    azimuth_degrees: float = Field(default=180, ge=0, le=360)
    tilt_degrees: float = Field(default=35, ge=0, le=90)

    # System costs (DKK, excl. VAT)
    panels_cost: float = Field(ge=0, le=500_000)
    inverter_cost: float = Field(ge=0, le=100_000)
    installation_cost: float = Field(ge=0, le=200_000)
    mounting_kit_cost: float = Field(ge=0, le=50_000)
    battery_cost: float = Field(default=0, ge=0, le=200_000)

    # Energy
    electricity_rate_dkk: float = Field(ge=0.5, le=10, description="Retail price, DKK/kWh")
    self_consumption_rate: float = Field(ge=0.1, le=1.0)
    grid_feed_in_rate: float | None = Field(
        default=None, ge=0, le=10, description="Export price, DKK/kWh. Defaults to 80% of retail."
    )
    annual_production_kwh: float | None = Field(
        default=None, gt=0, le=500_000, description="Irradiance-based estimate, if available"
    )


class ProjectionRequest(ProjectionSettings):
    system_cost: float = Field(gt=0, le=2_000_000)
    annual_production_kwh: float = Field(ge=0, le=500_000)
    electricity_rate_dkk: float = Field(ge=0.5, le=10)
    self_consumption_rate: float = Field(ge=0.1, le=1.0)
    grid_feed_in_rate: float | None = Field(default=None, ge=0, le=10)


class TaxScenarioRequest(BaseModel):
    system_cost: float = Field(gt=0, le=2_000_000)
    installation_labor_cost: float = Field(ge=0, le=200_000)
    panels_cost: float = Field(default=0, ge=0, le=500_000)
    inverter_cost: float = Field(default=0, ge=0, le=100_000)
    annual_savings: float = Field(gt=0, le=1_000_000)


class CO2Request(BaseModel):
    annual_production_kwh: float = Field(ge=0, le=500_000)
    emission_factor_kg_per_kwh: float | None = Field(default=None, ge=0, le=2)


# ======================================================================
# Responses
# ======================================================================

class SetupCostResponse(BaseModel):
    panels_cost: str
    inverter_cost: str
    installation_cost: str
    mounting_kit_cost: str
    battery_cost: str
    subtotal: str
    vat_rate: str
    vat_amount: str
    total_with_vat: str


class PaybackResponse(BaseModel):
    annual_savings: str | None
    self_consumption_savings: str | None
    grid_export_earnings: str | None
    payback_years: str | None
    break_even_year: int


class TaxScenarioResponse(BaseModel):
    scenario: Literal["NO_TAX", "LABOR_DEDUCTION"]
    eligible_amount: str
    deduction_rate: str
    tax_deduction: str
    max_deduction: str
    effective_cost: str
    effective_payback_years: str | None
    assumptions: list[str]


class CO2SavingsResponse(BaseModel):
    annual_co2_savings_kg: str
    annual_co2_savings_tonnes: str
    lifetime_co2_savings_tonnes: str
    emission_factor_kg_per_kwh: str
    equivalent_car_km: str
    equivalent_trees_year: str
    display: dict[str, str] | None = None


class YearResponse(BaseModel):
    year: int
    production_kwh: str | None
    electricity_rate: str | None
    grid_feed_in_rate: str | None
    self_consumption_savings: str | None
    grid_export_earnings: str | None
    savings_nominal: str | None
    savings_real: str | None
    maintenance_cost: str | None
    net_savings_nominal: str | None
    net_savings_real: str | None
    cumulative_nominal: str | None
    cumulative_real: str | None


class ProjectionSummaryResponse(BaseModel):
    total_savings_nominal: str | None
    total_savings_real: str | None
    total_maintenance_cost: str | None
    break_even_year_nominal: int
    break_even_year_real: int
    roi_25_year: str | None


class ProjectionResponse(BaseModel):
    years: list[YearResponse]
    summary: ProjectionSummaryResponse


class ChartPointResponse(BaseModel):
    year: int
    savings_nominal: float | None
    savings_real: float | None
    cumulative_nominal: float | None
    cumulative_real: float | None
    production_kwh: float | None


class CalculateResponse(BaseModel):
    setup_cost: SetupCostResponse
    annual_production_kwh: str
    production_source: Literal["provided", "estimate"]
    payback: PaybackResponse
    tax_scenarios: list[TaxScenarioResponse]
    projection: ProjectionResponse
    co2_savings: CO2SavingsResponse
    system_size_kw: str
    estimated_yield: str | None
