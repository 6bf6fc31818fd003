"""
Health check endpoint schemas.

The health endpoint is public and returns a simple status indicator plus
whether the model service is configured.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for GET /health."""

    status: str = Field(
        default="ok",
        description="Health status of the API (always 'ok' if responding)",
        examples=["ok"],
    )
    ai_configured: bool = Field(
        ...,
        description="Whether a Gemini API key is configured. The AI flows report 503 without one.",
    )
    environment: str = Field(..., examples=["development"])
