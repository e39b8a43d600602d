"""
Request and Response models for place search.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PlaceSearchRequest(BaseModel):
    """Request model for both place search endpoints."""
    query: Optional[Any] = Field(
        default=None,
        description="What to look for, e.g. 'デートにおすすめの場所'",
    )
    location: Optional[str] = Field(
        default=None,
        description="Optional search area, e.g. '渋谷'",
    )


class QueryOptimization(BaseModel):
    """The model's rewrite of a vague search request."""
    model_config = ConfigDict(extra="allow")

    optimizedQuery: str
    explanation: str = ""
    searchTips: str = ""


class PlaceSearchResponse(BaseModel):
    """Response model for POST /api/search-places."""
    places: List[Dict[str, Any]] = Field(default_factory=list)
    status: str


class SmartPlaceSearchResponse(PlaceSearchResponse):
    """Response model for POST /api/smart-search-places."""
    aiAnalysis: QueryOptimization
    originalQuery: str
    optimizedQuery: str
