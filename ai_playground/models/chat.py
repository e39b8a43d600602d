"""
Request and Response models for the Chat API.

Fields are optional and untyped: a missing or non-string message must
produce the route's own 400 message rather than the generic one.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request model for POST /api/chat."""
    message: Optional[Any] = Field(
        default=None,
        description="The user's message",
        examples=["おすすめの読書法を教えてください"],
    )


class ChatResponse(BaseModel):
    """Response model for POST /api/chat."""
    message: str = Field(..., description="The assistant's reply")
