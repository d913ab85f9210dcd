"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from shared.config import get_settings
from shared.exceptions import DatabaseError
from ..dependencies import ServiceContainer, get_container

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(
    response: Response,
    container: ServiceContainer = Depends(get_container),
) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Runs a trivial query against storage; answers 503 when it fails.
    """
    try:
        await asyncio.to_thread(container.blog_repository.ping)
    except (DatabaseError, RuntimeError) as e:
        logger.warning(f"Readiness check failed: {type(e).__name__}")
        response.status_code = 503
        return ReadinessResponse(status="not_ready", database="unavailable")

    return ReadinessResponse(status="ready", database="connected")
