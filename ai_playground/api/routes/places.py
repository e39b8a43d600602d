"""
Place Routes - Place search and AI-assisted smart search.
"""
from typing import Optional

from fastapi import APIRouter, Depends

from ai_playground.core.exceptions import PlaygroundException
from ai_playground.core.logging_config import get_logger
from ai_playground.core.validators import require_text, sanitize_text
from ai_playground.models.common import ErrorResponse
from ai_playground.models.places import (
    PlaceSearchRequest,
    PlaceSearchResponse,
    SmartPlaceSearchResponse,
)
from ai_playground.services.place_service import PlaceService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Places"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing query"},
        500: {"model": ErrorResponse, "description": "API key missing or upstream failure"},
    },
)

QUERY_INPUT_ERROR = "検索条件が提供されていません"
MAX_QUERY_LENGTH = 200

_place_service: PlaceService | None = None


def get_place_service() -> PlaceService:
    """Get or create the place service instance."""
    global _place_service
    if _place_service is None:
        _place_service = PlaceService()
    return _place_service


def _read_search_input(request: PlaceSearchRequest) -> tuple[str, Optional[str]]:
    query = require_text(request.query, QUERY_INPUT_ERROR, field="query", max_length=MAX_QUERY_LENGTH)
    location = sanitize_text(request.location, max_length=MAX_QUERY_LENGTH) or None
    return query, location


@router.post(
    "/search-places",
    response_model=PlaceSearchResponse,
    summary="Search places with Google Places Text Search",
)
def search_places(
    request: PlaceSearchRequest,
    service: PlaceService = Depends(get_place_service),
) -> PlaceSearchResponse:
    """Returns at most 10 places."""
    query, location = _read_search_input(request)

    try:
        result = service.search(query, location)
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Places search API error: {e}")
        raise PlaygroundException("場所検索中にエラーが発生しました") from e

    return PlaceSearchResponse(**result)


@router.post(
    "/smart-search-places",
    response_model=SmartPlaceSearchResponse,
    summary="Rewrite a vague request with AI, then search places",
)
def smart_search_places(
    request: PlaceSearchRequest,
    service: PlaceService = Depends(get_place_service),
) -> SmartPlaceSearchResponse:
    """
    The model turns requests such as "子供と楽しめる場所" into concrete
    keywords; aiAnalysis explains the rewrite.
    """
    query, location = _read_search_input(request)

    try:
        result = service.smart_search(query, location)
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Smart search error: {e}")
        raise PlaygroundException("AIスマート検索中にエラーが発生しました") from e

    return SmartPlaceSearchResponse(**result)
