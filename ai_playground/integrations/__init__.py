"""
Integrations module - Third-party HTTP APIs other than the LLM.

- places.py : Google Places Text Search
- n8n.py    : Website analysis workflow webhook
"""
from ai_playground.integrations.n8n import N8NClient
from ai_playground.integrations.places import MAX_RESULTS, PlacesClient, PlacesSearchResult

__all__ = [
    "N8NClient",
    "MAX_RESULTS",
    "PlacesClient",
    "PlacesSearchResult",
]
