import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, ForeignKey, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.database import Base

# Wide enough for DKK totals and for per-kWh rates to 6 places
MONEY = Numeric(20, 6)


class CalculationScenario(Base):
    __tablename__ = "calculation_scenarios"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    formula_version: Mapped[str] = mapped_column(String(20), nullable=False, default="1.0.0")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    input: Mapped["ScenarioInput"] = relationship(
        back_populates="scenario", cascade="all, delete-orphan", uselist=False
    )
    projections: Mapped[list["ScenarioProjection"]] = relationship(
        back_populates="scenario",
        cascade="all, delete-orphan",
        order_by="ScenarioProjection.year",
    )


class ScenarioInput(Base):
    """Snapshot of the calculator inputs a scenario was computed from."""

    __tablename__ = "scenario_inputs"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    scenario_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("calculation_scenarios.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    latitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    longitude: Mapped[Decimal | None] = mapped_column(Numeric(9, 6))
    price_area: Mapped[str] = mapped_column(String(3), nullable=False, default="DK2")
    roof_area_m2: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    azimuth_degrees: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    tilt_degrees: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    system_cost_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    panels_cost_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    inverter_cost_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    installation_cost_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    annual_production_kwh: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    electricity_rate_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    grid_feed_in_rate_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    self_consumption_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    annual_consumption_kwh: Mapped[Decimal | None] = mapped_column(MONEY)
    inflation_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    electricity_inflation_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    maintenance_cost_dkk: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    scenario: Mapped["CalculationScenario"] = relationship(back_populates="input")


class ScenarioProjection(Base):
    """One pre-computed projection year, stored as fixed-place decimals."""

    __tablename__ = "scenario_projections"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4
    )
    scenario_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("calculation_scenarios.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    production_kwh: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    electricity_rate: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    savings_nominal: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    savings_real: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    maintenance_cost: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    net_savings_nominal: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    net_savings_real: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    cumulative_nominal: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    cumulative_real: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    scenario: Mapped["CalculationScenario"] = relationship(back_populates="projections")
