import uuid
from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from engine.economics.danish_presets import (
    DEFAULT_ELECTRICITY_INFLATION_RATE,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MAINTENANCE_COST_YEAR1,
)


class ScenarioInputData(BaseModel):
    """Calculator inputs kept with a scenario.

    Decimal fields accept JSON strings so values round-trip exactly.
    """

    latitude: Decimal | None = Field(default=None, ge=54.5, le=57.8)
    longitude: Decimal | None = Field(default=None, ge=8.0, le=15.2)
    price_area: Literal["DK1", "DK2"] = "DK2"
    roof_area_m2: Decimal = Field(ge=10, le=500)
    azimuth_degrees: Decimal = Field(default=Decimal("180"), ge=0, le=360)
    tilt_degrees: Decimal = Field(default=Decimal("35"), ge=0, le=90)
    system_cost_dkk: Decimal = Field(gt=0)
    panels_cost_dkk: Decimal = Field(default=Decimal("0"), ge=0)
    inverter_cost_dkk: Decimal = Field(default=Decimal("0"), ge=0)
    installation_cost_dkk: Decimal = Field(default=Decimal("0"), ge=0)
    annual_production_kwh: Decimal = Field(ge=0)
    electricity_rate_dkk: Decimal = Field(ge=Decimal("0.5"), le=10)
    grid_feed_in_rate_dkk: Decimal | None = Field(default=None, ge=0, le=10)
    self_consumption_rate: Decimal = Field(ge=Decimal("0.1"), le=1)
    annual_consumption_kwh: Decimal | None = Field(default=None, ge=1000, le=50_000)
    inflation_rate: Decimal = Field(default=DEFAULT_INFLATION_RATE, ge=0, le=Decimal("0.1"))
    electricity_inflation_rate: Decimal = Field(default=DEFAULT_ELECTRICITY_INFLATION_RATE, ge=0, le=Decimal("0.15"))
    maintenance_cost_dkk: Decimal = Field(default=DEFAULT_MAINTENANCE_COST_YEAR1, ge=0, le=10_000)


class ScenarioCreate(BaseModel):
    user_id: str = Field(min_length=1, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    formula_version: str = Field(default="1.0.0", max_length=20)
    input: ScenarioInputData
    with_projection: bool = Field(
        default=False, description="Compute and store the 25 projection years"
    )


class ScenarioRename(BaseModel):
    name: str = Field(min_length=1, max_length=255)


class ScenarioInputResponse(BaseModel):
    latitude: Decimal | None
    longitude: Decimal | None
    price_area: str
    roof_area_m2: Decimal
    azimuth_degrees: Decimal
    tilt_degrees: Decimal
    system_cost_dkk: Decimal
    panels_cost_dkk: Decimal
    inverter_cost_dkk: Decimal
    installation_cost_dkk: Decimal
    annual_production_kwh: Decimal
    electricity_rate_dkk: Decimal
    grid_feed_in_rate_dkk: Decimal
    self_consumption_rate: Decimal
    annual_consumption_kwh: Decimal | None
    inflation_rate: Decimal
    electricity_inflation_rate: Decimal
    maintenance_cost_dkk: Decimal

    model_config = {"from_attributes": True}


class ScenarioProjectionResponse(BaseModel):
    year: int
    production_kwh: Decimal
    electricity_rate: Decimal
    savings_nominal: Decimal
    savings_real: Decimal
    maintenance_cost: Decimal
    net_savings_nominal: Decimal
    net_savings_real: Decimal
    cumulative_nominal: Decimal
    cumulative_real: Decimal

    model_config = {"from_attributes": True}


class ScenarioSummaryResponse(BaseModel):
    id: uuid.UUID
    user_id: str
    name: str
    formula_version: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ScenarioResponse(ScenarioSummaryResponse):
    input: ScenarioInputResponse
    projections: list[ScenarioProjectionResponse]
