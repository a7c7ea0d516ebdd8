from fastapi import APIRouter
import logging

from core.database import get_database_health
from schemas.common import HealthCheckResponse

logger = logging.getLogger("HEALTH_API_LOGGER")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
def health_status():
    """
    Aggregate health check. Reports "degraded" when the database does not
    answer; the API process itself is up if this responds at all.
    """
    database = get_database_health()
    overall_status = "healthy" if database.get("status") == "healthy" else "degraded"
    if overall_status != "healthy":
        logger.warning(f"Health check degraded: {database.get('error')}")
    return HealthCheckResponse(status=overall_status, database=database)
