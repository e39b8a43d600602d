"""
Services module - Business logic, one service per playground product.

Routes stay thin: they validate input and delegate to these services,
which own prompts, upstream calls and response shaping.
"""
from ai_playground.services.chat_service import ChatService
from ai_playground.services.persona_service import PersonaService
from ai_playground.services.place_service import PlaceService
from ai_playground.services.website_service import WebsiteAnalyzerService

__all__ = [
    "ChatService",
    "PersonaService",
    "PlaceService",
    "WebsiteAnalyzerService",
]
