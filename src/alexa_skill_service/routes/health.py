"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, Any]:
    """Return service health status and which request checks are active."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "verification": {
            "application_id": not settings.ignore_application_id and bool(settings.application_id),
            "timestamp": not settings.ignore_timestamp,
            "timestamp_tolerance": settings.timestamp_tolerance,
        },
    }
