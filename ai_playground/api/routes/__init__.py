"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for one product area:
- chat.py     : Chat demo
- personas.py : Persona and marketing strategy generation
- places.py   : Place search and smart search
- website.py  : Website analyzer
- catalog.py  : Product catalog and voice chat config
- health.py   : Health check endpoints
"""
from ai_playground.api.routes.catalog import router as catalog_router
from ai_playground.api.routes.chat import router as chat_router
from ai_playground.api.routes.health import router as health_router
from ai_playground.api.routes.personas import router as persona_router
from ai_playground.api.routes.places import router as places_router
from ai_playground.api.routes.website import router as website_router

__all__ = [
    "catalog_router",
    "chat_router",
    "health_router",
    "persona_router",
    "places_router",
    "website_router",
]
