"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for:
1. Load balancer health checks
2. Container liveness/readiness probes
3. Quick system status verification
"""
from datetime import datetime

from fastapi import APIRouter

from ai_playground import __version__
from ai_playground.core.config import get_settings
from ai_playground.core.logging_config import get_logger
from ai_playground.models.common import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Perform a basic health check.

    Verifies that the API is running and responsive. Upstream APIs are
    not contacted.
    """
    logger.debug("Health check requested")

    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.utcnow(),
    )


@router.get(
    "/ready",
    response_model=HealthResponse,
    summary="Readiness check endpoint",
)
async def readiness_check() -> HealthResponse:
    """
    Report which integrations have credentials configured.

    Status is "ready" when every integration has credentials and
    "degraded" otherwise. The catalog routes work either way.
    """
    logger.debug("Readiness check requested")

    settings = get_settings()
    integrations = {
        "openai": bool(settings.openai_api_key),
        "google_places": bool(settings.google_places_api_key),
        "n8n": bool(settings.n8n_webhook_url),
        "elevenlabs": bool(settings.elevenlabs_agent_id),
    }

    return HealthResponse(
        status="ready" if all(integrations.values()) else "degraded",
        version=__version__,
        timestamp=datetime.utcnow(),
        integrations=integrations,
    )
