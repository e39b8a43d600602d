"""
Request and Response models for the website analyzer.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class WebsiteAnalysisRequest(BaseModel):
    """Request model for POST /api/analyze-website."""
    url: Optional[Any] = Field(default=None, examples=["https://example.com"])


class WebsiteAnalysisResponse(BaseModel):
    """Response model for POST /api/analyze-website."""
    score: int = Field(..., ge=0, le=100)
    summary: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    fullAnalysis: str = Field(..., description="The complete workflow report")
