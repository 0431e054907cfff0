from fastapi import APIRouter, Depends
from portfolio_api.core.dependencies import get_storage
from portfolio_api.core.database import get_database_health
from portfolio_api.db.adapter import StorageBackend
from portfolio_api.schemas.common import HealthCheckResponse
from datetime import datetime, timezone
import logging

logger = logging.getLogger("HEALTH_API_LOGGER")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
def health_status(storage: StorageBackend = Depends(get_storage)):
    """
    Aggregate health check.
    Returns status information about critical subsystems so a monitor
    can read a single consolidated response.
    """
    overall_status = "healthy"
    services = {}

    # Database connectivity
    database_health = get_database_health(storage)
    services["database"] = database_health
    if database_health.get("status") != "healthy":
        logger.warning(f"Database health check failed: {database_health.get('error')}")
        overall_status = "degraded"

    return {
        "status": overall_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": services,
    }
