"""Initial schema for SolarCalc scenario storage.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "001_initial"
down_revision = None
branch_labels = None
depends_on = None

MONEY = sa.Numeric(20, 6)


def upgrade() -> None:
    op.create_table(
        "calculation_scenarios",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("formula_version", sa.String(20), nullable=False, server_default="1.0.0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index(
        "ix_calculation_scenarios_user_id", "calculation_scenarios", ["user_id"]
    )

    op.create_table(
        "scenario_inputs",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "scenario_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("calculation_scenarios.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("latitude", sa.Numeric(9, 6)),
        sa.Column("longitude", sa.Numeric(9, 6)),
        sa.Column("price_area", sa.String(3), nullable=False, server_default="DK2"),
        sa.Column("roof_area_m2", MONEY, nullable=False),
        sa.Column("azimuth_degrees", MONEY, nullable=False),
        sa.Column("tilt_degrees", MONEY, nullable=False),
        sa.Column("system_cost_dkk", MONEY, nullable=False),
        sa.Column("panels_cost_dkk", MONEY, nullable=False),
        sa.Column("inverter_cost_dkk", MONEY, nullable=False),
        sa.Column("installation_cost_dkk", MONEY, nullable=False),
        sa.Column("annual_production_kwh", MONEY, nullable=False),
        sa.Column("electricity_rate_dkk", MONEY, nullable=False),
        sa.Column("grid_feed_in_rate_dkk", MONEY, nullable=False),
        sa.Column("self_consumption_rate", MONEY, nullable=False),
        sa.Column("annual_consumption_kwh", MONEY),
        sa.Column("inflation_rate", MONEY, nullable=False),
        sa.Column("electricity_inflation_rate", MONEY, nullable=False),
        sa.Column("maintenance_cost_dkk", MONEY, nullable=False),
    )

    op.create_table(
        "scenario_projections",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "scenario_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("calculation_scenarios.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("production_kwh", MONEY, nullable=False),
        sa.Column("electricity_rate", MONEY, nullable=False),
        sa.Column("savings_nominal", MONEY, nullable=False),
        sa.Column("savings_real", MONEY, nullable=False),
        sa.Column("maintenance_cost", MONEY, nullable=False),
        sa.Column("net_savings_nominal", MONEY, nullable=False),
        sa.Column("net_savings_real", MONEY, nullable=False),
        sa.Column("cumulative_nominal", MONEY, nullable=False),
        sa.Column("cumulative_real", MONEY, nullable=False),
    )
    op.create_index(
        "ix_scenario_projections_scenario_id", "scenario_projections", ["scenario_id"]
    )


def downgrade() -> None:
    op.drop_index("ix_scenario_projections_scenario_id", table_name="scenario_projections")
    op.drop_table("scenario_projections")
    op.drop_table("scenario_inputs")
    op.drop_index("ix_calculation_scenarios_user_id", table_name="calculation_scenarios")
    op.drop_table("calculation_scenarios")
