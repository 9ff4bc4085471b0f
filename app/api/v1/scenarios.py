"""Saved calculation scenarios: input snapshots plus optional projections."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.config import settings
from app.models.database import get_db
from app.models.scenario import CalculationScenario, ScenarioInput, ScenarioProjection
from app.schemas.scenario import (
    ScenarioCreate,
    ScenarioInputData,
    ScenarioRename,
    ScenarioResponse,
    ScenarioSummaryResponse,
)

from engine.economics.danish_presets import (
    DEGRADATION_RATE_ANNUAL,
    DEGRADATION_RATE_FIRST_YEAR,
    default_grid_feed_in_rate,
)
from engine.economics.decimal_context import to_decimal
from engine.economics.projection import ProjectionInput, ProjectionResult, calculate_projection

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_scenario(scenario_id: uuid.UUID, db: AsyncSession) -> CalculationScenario:
    result = await db.execute(
        select(CalculationScenario)
        .where(CalculationScenario.id == scenario_id)
        .options(
            selectinload(CalculationScenario.input),
            selectinload(CalculationScenario.projections),
        )
        .execution_options(populate_existing=True)
    )
    scenario = result.scalar_one_or_none()
    if not scenario:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scenario not found")
    return scenario


def _projection_rows(data: ScenarioInputData) -> list[ScenarioProjection]:
    result: ProjectionResult = calculate_projection(
        ProjectionInput(
            system_cost=data.system_cost_dkk,
            annual_production_kwh=data.annual_production_kwh,
            electricity_rate_dkk=data.electricity_rate_dkk,
            self_consumption_rate=data.self_consumption_rate,
            grid_feed_in_rate=data.grid_feed_in_rate_dkk,
            inflation_rate=data.inflation_rate,
            electricity_inflation_rate=data.electricity_inflation_rate,
            maintenance_cost_year1=data.maintenance_cost_dkk,
            degradation_rate_first_year=DEGRADATION_RATE_FIRST_YEAR,
            degradation_rate_annual=DEGRADATION_RATE_ANNUAL,
        )
    )
    return [
        ScenarioProjection(
            year=y.year,
            production_kwh=y.production_kwh,
            electricity_rate=y.electricity_rate,
            savings_nominal=y.savings_nominal,
            savings_real=y.savings_real,
            maintenance_cost=y.maintenance_cost,
            net_savings_nominal=y.net_savings_nominal,
            net_savings_real=y.net_savings_real,
            cumulative_nominal=y.cumulative_nominal,
            cumulative_real=y.cumulative_real,
        )
        for y in result.years
    ]


@router.post(
    "/",
    response_model=ScenarioResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Save scenario",
    description="Store a calculator input snapshot, optionally with its 25-year projection.",
)
async def create_scenario(
    body: ScenarioCreate,
    db: AsyncSession = Depends(get_db),
):
    data = body.input
    if data.grid_feed_in_rate_dkk is None:
        feed_in = default_grid_feed_in_rate(
            data.electricity_rate_dkk, to_decimal(settings.grid_feed_in_ratio)
        )
        data = data.model_copy(update={"grid_feed_in_rate_dkk": feed_in})

    scenario = CalculationScenario(
        user_id=body.user_id,
        name=body.name,
        formula_version=body.formula_version,
    )
    scenario.input = ScenarioInput(**data.model_dump())
    rows = _projection_rows(data) if body.with_projection else []
    scenario.projections = rows

    db.add(scenario)
    await db.commit()

    logger.info(
        "Saved scenario %s (%d projection years)",
        scenario.id,
        len(rows),
        extra={"scenario_id": str(scenario.id), "user_id": body.user_id},
    )
    return await _get_scenario(scenario.id, db)


@router.get(
    "/",
    response_model=list[ScenarioSummaryResponse],
    summary="List scenarios",
    description="Return a user's saved scenarios, most recently updated first.",
)
async def list_scenarios(
    user_id: str = Query(min_length=1, max_length=255),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(CalculationScenario)
        .where(CalculationScenario.user_id == user_id)
        .order_by(CalculationScenario.updated_at.desc())
    )
    return result.scalars().all()


@router.get(
    "/{scenario_id}",
    response_model=ScenarioResponse,
    summary="Load scenario",
    description="Retrieve a scenario with its input snapshot and stored projection years.",
)
async def get_scenario(
    scenario_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await _get_scenario(scenario_id, db)


@router.patch(
    "/{scenario_id}",
    response_model=ScenarioSummaryResponse,
    summary="Rename scenario",
)
async def rename_scenario(
    scenario_id: uuid.UUID,
    body: ScenarioRename,
    db: AsyncSession = Depends(get_db),
):
    scenario = await _get_scenario(scenario_id, db)
    scenario.name = body.name
    await db.commit()
    await db.refresh(scenario)
    return scenario


@router.delete(
    "/{scenario_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete scenario",
    description="Permanently delete a scenario, its input snapshot and projections.",
)
async def delete_scenario(
    scenario_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    scenario = await _get_scenario(scenario_id, db)
    await db.delete(scenario)
    await db.commit()
    logger.info("Deleted scenario %s", scenario_id, extra={"scenario_id": str(scenario_id)})
