"""
Persona Routes - Persona generation and per-persona marketing strategies.

The front end calls these in sequence: personas first, then strategies
for the personas it received.
"""
from fastapi import APIRouter, Depends

from ai_playground.core.exceptions import PlaygroundException, ValidationError
from ai_playground.core.logging_config import get_logger
from ai_playground.core.validators import require_prompt_text
from ai_playground.models.common import ErrorResponse
from ai_playground.models.persona import (
    MarketingStrategyRequest,
    MarketingStrategyResponse,
    PersonaRequest,
    PersonaResponse,
)
from ai_playground.services.persona_service import PersonaService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Personas"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing service information"},
        500: {"model": ErrorResponse, "description": "Generation failed; rawResponse holds unparsable output"},
    },
)

PERSONA_INPUT_ERROR = "サービス名とサービス概要が必要です"
MARKETING_INPUT_ERROR = "サービス名、サービス概要、ペルソナデータが必要です"

_persona_service: PersonaService | None = None


def get_persona_service() -> PersonaService:
    """Get or create the persona service instance."""
    global _persona_service
    if _persona_service is None:
        _persona_service = PersonaService()
    return _persona_service


@router.post(
    "/generate-persona",
    response_model=PersonaResponse,
    summary="Generate three personas for a service",
)
def generate_persona(
    request: PersonaRequest,
    service: PersonaService = Depends(get_persona_service),
) -> PersonaResponse:
    service_name = require_prompt_text(request.service_name, PERSONA_INPUT_ERROR, field="serviceName")
    service_description = require_prompt_text(
        request.service_description, PERSONA_INPUT_ERROR, field="serviceDescription"
    )

    try:
        personas = service.generate_personas(service_name, service_description)
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Persona generation error: {e}")
        raise PlaygroundException("ペルソナ生成中にエラーが発生しました") from e

    return PersonaResponse(personas=personas)


@router.post(
    "/generate-marketing-strategy",
    response_model=MarketingStrategyResponse,
    summary="Propose a marketing strategy for each persona",
)
def generate_marketing_strategy(
    request: MarketingStrategyRequest,
    service: PersonaService = Depends(get_persona_service),
) -> MarketingStrategyResponse:
    service_name = require_prompt_text(request.service_name, MARKETING_INPUT_ERROR, field="serviceName")
    service_description = require_prompt_text(
        request.service_description, MARKETING_INPUT_ERROR, field="serviceDescription"
    )
    if not request.personas:
        raise ValidationError(MARKETING_INPUT_ERROR, field="personas")

    try:
        strategies = service.generate_marketing_strategy(
            service_name, service_description, request.personas
        )
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Marketing strategy generation error: {e}")
        raise PlaygroundException("マーケティング施策生成中にエラーが発生しました") from e

    return MarketingStrategyResponse(marketing_strategies=strategies)
