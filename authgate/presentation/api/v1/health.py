"""Health check endpoints."""

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from authgate.infrastructure.config.settings import Settings, get_settings
from authgate.infrastructure.persistence.database import ping_database
from authgate.presentation.dependencies import get_database_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Service health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    """Report that the service is up."""
    return {
        "success": True,
        "data": {
            "status": "ok",
            "version": settings.app_version,
            "environment": settings.environment,
        },
    }


@router.get("/database", summary="User store health")
async def database_health(
    engine: AsyncEngine = Depends(get_database_engine),
    settings: Settings = Depends(get_settings),
):
    """Check that the user store answers a trivial query."""
    try:
        await asyncio.wait_for(ping_database(engine), timeout=settings.store_timeout_seconds)
    except (SQLAlchemyError, OSError, asyncio.TimeoutError) as exc:
        logger.error(f"User store health check failed: {exc!r}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "success": False,
                "error": "User store unavailable",
                "error_code": "DATABASE_UNAVAILABLE",
            },
        )

    return {"success": True, "data": {"status": "ok"}}
