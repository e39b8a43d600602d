"""
Shared response models: health checks and the error envelope.
"""
from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the /health endpoints."""
    status: str = Field(default="healthy")
    version: str
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    integrations: Optional[Dict[str, bool]] = Field(
        default=None,
        description="Which third-party integrations have credentials configured",
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""
    error: str
    rawResponse: Optional[str] = Field(
        default=None,
        description="Unparsed AI output, present when JSON parsing failed",
    )
