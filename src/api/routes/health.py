"""Health check endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies.auth import Console
from core.config import settings
from domain.services.view_state import Collection
from infrastructure.database.session import get_async_session

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    database: str | None = None
    session: str | None = None
    snapshot_errors: dict[str, str] | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic health check for load balancers.

    Returns service status without checking dependencies. Fast and lightweight.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    console: Console,
    db: AsyncSession = Depends(get_async_session),
) -> HealthResponse:
    """
    Database connectivity, console session and failed snapshot refreshes.
    """
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    snapshot_errors: dict[str, str] = {}
    for collection in Collection:
        error = console.store.last_error(collection)
        if error:
            snapshot_errors[collection.value] = error
    overall_status = (
        "healthy" if db_status == "healthy" and not snapshot_errors else "degraded"
    )

    return HealthResponse(
        status=overall_status,
        version=VERSION,
        timestamp=datetime.utcnow().isoformat(),
        environment=settings.app_env,
        database=db_status,
        session="active" if console.session.session else "none",
        snapshot_errors=snapshot_errors or None,
    )
