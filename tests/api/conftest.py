"""API test infrastructure — async httpx client with SQLite test database."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from app.models import Base
from app.models.database import get_db

# ---------------------------------------------------------------------------
# SQLite compatibility for PostgreSQL column types
# ---------------------------------------------------------------------------

@compiles(PG_UUID, "sqlite")
def _compile_uuid_sqlite(type_, compiler, **kw):
    return "CHAR(36)"


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)
    async with engine.begin() as conn:
        await conn.exec_driver_sql("PRAGMA foreign_keys = ON")
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


# ---------------------------------------------------------------------------
# FastAPI app with overridden dependencies
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app(db_engine):
    from app.main import create_app

    application = create_app()

    factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )

    async def _override_get_db():
        async with factory() as session:
            yield session

    application.dependency_overrides[get_db] = _override_get_db

    yield application

    application.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def lenient_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Client that returns 500 responses instead of re-raising app errors."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

@pytest.fixture
def calculate_body() -> dict:
    """Reference system with a caller-supplied production figure."""
    return {
        "roof_area_m2": 50,
        "panels_cost": 47400,
        "inverter_cost": 20625,
        "installation_cost": 49335,
        "mounting_kit_cost": 11680,
        "electricity_rate_dkk": 2.5,
        "self_consumption_rate": 0.7,
        "annual_production_kwh": 8800,
    }


@pytest.fixture
def projection_body() -> dict:
    return {
        "system_cost": 161300,
        "annual_production_kwh": 8800,
        "electricity_rate_dkk": 2.5,
        "self_consumption_rate": 0.7,
        "grid_feed_in_rate": 2.0,
    }


TEST_USER_ID = "user-123"


@pytest_asyncio.fixture
async def sample_scenario(client: AsyncClient) -> dict:
    """Create and return a scenario with stored projections."""
    resp = await client.post(
        "/api/v1/scenarios/",
        json={
            "user_id": TEST_USER_ID,
            "name": "Copenhagen villa",
            "with_projection": True,
            "input": {
                "latitude": "55.676100",
                "longitude": "12.568300",
                "price_area": "DK2",
                "roof_area_m2": "50",
                "system_cost_dkk": "161300",
                "panels_cost_dkk": "47400",
                "inverter_cost_dkk": "20625",
                "installation_cost_dkk": "49335",
                "annual_production_kwh": "8800",
                "electricity_rate_dkk": "2.50",
                "self_consumption_rate": "0.70",
                "annual_consumption_kwh": "5000",
            },
        },
    )
    assert resp.status_code == 201
    return resp.json()
