"""
Place Service - Plain and "smart" place search.

Smart search asks the LLM to turn a vague request ("デートにおすすめの場所")
into concrete Places keywords before searching. If the rewrite cannot be
used, the original query is searched unchanged.
"""
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from ai_playground.core.exceptions import ResponseParseError
from ai_playground.core.logging_config import get_logger
from ai_playground.integrations.places import PlacesClient
from ai_playground.llm.client import LLMClient
from ai_playground.llm.prompts import (
    get_query_optimization_system_prompt,
    get_query_optimization_user_prompt,
)
from ai_playground.models.places import QueryOptimization

logger = get_logger(__name__)

OPTIMIZATION_MAX_TOKENS = 500
OPTIMIZATION_TEMPERATURE = 0.7

FALLBACK_EXPLANATION = "元の検索条件をそのまま使用します"
FALLBACK_SEARCH_TIPS = "検索条件をより具体的にすると、より良い結果が得られます"


def fallback_optimization(query: str) -> QueryOptimization:
    """The rewrite used when the model's answer is unusable."""
    return QueryOptimization(
        optimizedQuery=query,
        explanation=FALLBACK_EXPLANATION,
        searchTips=FALLBACK_SEARCH_TIPS,
    )


class PlaceService:
    """Place search backed by Google Places, optionally LLM-assisted."""

    def __init__(
        self,
        places_client: Optional[PlacesClient] = None,
        llm_client: Optional[LLMClient] = None,
    ):
        self.places_client = places_client or PlacesClient()
        self.llm_client = llm_client or LLMClient()

    def search(self, query: str, location: Optional[str] = None) -> dict:
        """
        Search places for a query as typed by the user.

        Returns:
            {"places": [...], "status": "OK" | "ZERO_RESULTS"}

        Raises:
            ConfigurationError: If Google Places is not configured
            UpstreamError: If the Places API fails
        """
        result = self.places_client.text_search(query, location)
        return result.to_dict()

    def smart_search(self, query: str, location: Optional[str] = None) -> dict:
        """
        Rewrite the query with the LLM, then search places.

        Both API keys are checked up front so a missing key never costs
        the other API a call.

        Returns:
            {"places", "aiAnalysis", "originalQuery", "optimizedQuery", "status"}

        Raises:
            ConfigurationError: If Google Places or OpenAI is not configured
            LLMError: If the rewrite completion fails or is empty
            UpstreamError: If the Places API fails
        """
        self.places_client.ensure_configured()
        self.llm_client.ensure_configured()

        logger.info(f"Smart search started: query={query!r} location={location!r}")

        optimization = self.optimize_query(query, location)
        logger.info(f"Optimized query: {optimization.optimizedQuery!r}")

        result = self.places_client.text_search(optimization.optimizedQuery, location)
        logger.info(f"Smart search finished: {len(result.places)} places")

        return {
            "places": result.places,
            "aiAnalysis": optimization.model_dump(),
            "originalQuery": query,
            "optimizedQuery": optimization.optimizedQuery,
            "status": result.status,
        }

    def optimize_query(self, query: str, location: Optional[str] = None) -> QueryOptimization:
        """
        Ask the LLM for a Places-friendly version of the query.

        Falls back to the original query when the answer is not JSON or
        has no usable optimizedQuery.
        """
        try:
            data, _ = self.llm_client.generate_json(
                user_message=get_query_optimization_user_prompt(query, location),
                system_prompt=get_query_optimization_system_prompt(),
                max_tokens=OPTIMIZATION_MAX_TOKENS,
                temperature=OPTIMIZATION_TEMPERATURE,
            )
        except ResponseParseError as e:
            logger.warning(f"Could not parse query optimization, using original query: {e.raw_response!r}")
            return fallback_optimization(query)

        try:
            optimization = QueryOptimization.model_validate(data)
        except PydanticValidationError:
            logger.warning(f"Query optimization has unexpected shape, using original query: {data!r}")
            return fallback_optimization(query)

        if not optimization.optimizedQuery.strip():
            logger.warning("Query optimization returned an empty query, using original query")
            return fallback_optimization(query)

        return optimization
