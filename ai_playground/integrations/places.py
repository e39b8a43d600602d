"""
Google Places client - Text Search API wrapper.

Results are passed through unchanged (the front end renders name,
formatted_address, rating, photos, ...) but capped at MAX_RESULTS.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ai_playground.core.config import get_settings
from ai_playground.core.exceptions import ConfigurationError, UpstreamError
from ai_playground.core.logging_config import get_logger

logger = get_logger(__name__)

TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"

MAX_RESULTS = 10

# Text Search statuses that are not errors
SUCCESS_STATUSES = {"OK", "ZERO_RESULTS"}

MISSING_KEY_MESSAGE = "Google Places APIキーが設定されていません"


@dataclass
class PlacesSearchResult:
    """Outcome of one Text Search call."""
    places: List[Dict[str, Any]] = field(default_factory=list)
    status: str = "ZERO_RESULTS"
    search_query: str = ""

    def to_dict(self) -> dict:
        return {"places": self.places, "status": self.status}


def build_search_query(query: str, location: Optional[str] = None) -> str:
    """
    Combine a query and an optional area into Text Search input.

    >>> build_search_query("ラーメン", "渋谷")
    'ラーメン in 渋谷'
    """
    if location:
        return f"{query} in {location}"
    return query


class PlacesClient:
    """Client for the Google Places Text Search API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.google_places_api_key
        self.language = settings.places_language
        self.region = settings.places_region
        self.timeout = settings.http_timeout_seconds
        self.session = session or requests.Session()

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def ensure_configured(self) -> None:
        """
        Raises:
            ConfigurationError: If no Google Places API key is configured
        """
        if not self.is_configured:
            logger.error("GOOGLE_PLACES_API_KEY is not configured")
            raise ConfigurationError(MISSING_KEY_MESSAGE, setting="GOOGLE_PLACES_API_KEY")

    def text_search(self, query: str, location: Optional[str] = None) -> PlacesSearchResult:
        """
        Search places matching a free-text query.

        Args:
            query: What to look for ("カフェ", "評判の良いレストラン", ...)
            location: Optional area appended as "<query> in <location>"

        Returns:
            PlacesSearchResult with at most MAX_RESULTS places

        Raises:
            ConfigurationError: If no API key is configured
            UpstreamError: On a non-2xx response or an error status in the body
        """
        self.ensure_configured()

        search_query = build_search_query(query, location)
        params = {
            "query": search_query,
            "key": self.api_key,
            "language": self.language,
            "region": self.region,
        }

        logger.info(f"Searching places with query: {search_query}")

        try:
            response = self.session.get(TEXT_SEARCH_URL, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Google Places API request failed: {e}")
            raise UpstreamError(f"Google Places APIエラー: {e.__class__.__name__}") from e

        if not response.ok:
            logger.error(f"Google Places API error: {response.status_code} {response.reason}")
            raise UpstreamError(
                f"Google Places APIエラー: {response.status_code} {response.reason}",
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Google Places API returned a non-JSON body")
            raise UpstreamError("Google Places API response error: INVALID_RESPONSE") from e

        status = data.get("status", "UNKNOWN_ERROR")
        if status not in SUCCESS_STATUSES:
            logger.error(
                f"Google Places API response error: {status} {data.get('error_message', '')}"
            )
            raise UpstreamError(f"Google Places API response error: {status}")

        places = (data.get("results") or [])[:MAX_RESULTS]
        logger.info(f"Found {len(places)} places")

        return PlacesSearchResult(places=places, status=status, search_query=search_query)
