"""
Health check route for the Credit Assist backend.

This endpoint is PUBLIC (no session required) and provides a simple status
check for load balancers, monitoring, and deployment verification.
"""

from fastapi import APIRouter

from credit_assist.config import settings
from credit_assist.schemas.health import HealthResponse
from credit_assist.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint (no session required). "
        "Reports whether the model service is configured."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    logger.debug("Health check endpoint called")

    return HealthResponse(
        status="ok",
        ai_configured=bool(settings.GOOGLE_API_KEY),
        environment=settings.ENVIRONMENT,
    )
