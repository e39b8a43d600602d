"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input shapes for API endpoints
- Response models: Output formatting for API responses
"""
from ai_playground.models.catalog import Product, ProductListResponse, VoiceChatConfig
from ai_playground.models.chat import ChatRequest, ChatResponse
from ai_playground.models.common import ErrorResponse, HealthResponse
from ai_playground.models.persona import (
    MarketingStrategyRequest,
    MarketingStrategyResponse,
    PersonaRequest,
    PersonaResponse,
)
from ai_playground.models.places import (
    PlaceSearchRequest,
    PlaceSearchResponse,
    QueryOptimization,
    SmartPlaceSearchResponse,
)
from ai_playground.models.website import WebsiteAnalysisRequest, WebsiteAnalysisResponse

__all__ = [
    "Product",
    "ProductListResponse",
    "VoiceChatConfig",
    "ChatRequest",
    "ChatResponse",
    "ErrorResponse",
    "HealthResponse",
    "MarketingStrategyRequest",
    "MarketingStrategyResponse",
    "PersonaRequest",
    "PersonaResponse",
    "PlaceSearchRequest",
    "PlaceSearchResponse",
    "QueryOptimization",
    "SmartPlaceSearchResponse",
    "WebsiteAnalysisRequest",
    "WebsiteAnalysisResponse",
]
