"""
Health check and monitoring endpoints.
"""
import time
import logging
from fastapi import APIRouter

from tuf_portal import __version__
from tuf_portal.config import firebase_configured
from tuf_portal.core.settings import settings
from tuf_portal.db import check_database_health

logger = logging.getLogger("tuf_portal.health")
router = APIRouter()

_started_at = time.time()


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": __version__,
    }


@router.get("/health/detailed")
async def detailed_health_check():
    """Detailed health check with dependency status."""
    start_time = time.time()

    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "uptime_seconds": round(time.time() - _started_at, 1),
        "services": {},
    }

    db_health = await check_database_health()
    health_status["services"]["database"] = db_health
    if db_health["status"] != "healthy":
        health_status["status"] = "degraded"

    health_status["services"]["identity_provider"] = {
        "status": "configured" if firebase_configured() else "not_configured",
        "provider": "firebase",
    }

    health_status["response_time_ms"] = round((time.time() - start_time) * 1000, 2)
    return health_status


@router.get("/ready")
async def readiness_check():
    """Kubernetes-style readiness probe."""
    db_health = await check_database_health()
    if db_health["status"] != "healthy":
        return {"status": "not_ready", "reason": "database_unavailable"}
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Kubernetes-style liveness probe."""
    return {"status": "alive", "timestamp": time.time()}
