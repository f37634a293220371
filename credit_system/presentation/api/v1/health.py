"""Health check endpoint for service monitoring."""

import structlog
from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from credit_system import __version__
from credit_system.infrastructure.database import db_manager

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    version: str
    database: str


async def _database_status() -> str:
    try:
        async with db_manager.session() as session:
            await session.execute(text("SELECT 1"))
    except (RuntimeError, SQLAlchemyError) as exc:
        logger.warning("health_database_unavailable", error=str(exc))
        return "unavailable"
    return "ok"


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports the service version and whether the database answers.",
)
async def health_check() -> HealthResponse:
    database = await _database_status()
    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        version=__version__,
        database=database,
    )
