import logging
from typing import Literal

from fastapi import APIRouter
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from leavedesk.config import get_settings
from leavedesk.db import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    service: str
    status: Literal["ok", "degraded"]
    database: Literal["up", "down"]
    version: str
    environment: str


async def _database_up(session: AsyncSession) -> bool:
    try:
        await session.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Health check: database connectivity failed")
        return False
    return True


@router.get("/health", response_model=HealthResponse)
async def health(session: SessionDep) -> HealthResponse:
    """Liveness plus a datastore round trip. Always 200; inspect ``status``."""
    settings = get_settings()
    database_up = await _database_up(session)
    return HealthResponse(
        service=settings.app_name,
        status="ok" if database_up else "degraded",
        database="up" if database_up else "down",
        version=settings.app_version,
        environment=settings.environment,
    )
