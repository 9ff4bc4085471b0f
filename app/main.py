import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.api.v1 import calculate, scenarios
from app.core.logging import RequestLoggingMiddleware, setup_logging
from app.models.database import get_db, get_engine

from engine.economics.decimal_context import configure_decimal_context

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    yield
    await get_engine().dispose()


async def calculation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Calculation failed: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": "Calculation failed", "message": str(exc)},
    )


def create_app() -> FastAPI:
    setup_logging(json_format=settings.log_json)
    # Decimal context is process-wide: install it before any request runs.
    configure_decimal_context(settings.decimal_precision)

    application = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.cors_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(RequestLoggingMiddleware)

    application.add_exception_handler(Exception, calculation_error_handler)

    application.include_router(calculate.router, prefix="/api/v1/calculate", tags=["calculate"])
    application.include_router(scenarios.router, prefix="/api/v1/scenarios", tags=["scenarios"])

    @application.get("/health")
    async def health_check(db: AsyncSession = Depends(get_db)) -> dict:
        result: dict = {"status": "ok", "services": {}}

        try:
            await db.execute(text("SELECT 1"))
            result["services"]["database"] = "ok"
        except Exception as e:
            result["services"]["database"] = f"error: {e}"
            result["status"] = "degraded"

        return result

    return application


app = create_app()
