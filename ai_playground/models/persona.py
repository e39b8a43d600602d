"""
Request and Response models for persona and marketing strategy generation.

The front end speaks camelCase (serviceName, serviceDescription); both the
alias and the snake_case field name are accepted.
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PersonaRequest(BaseModel):
    """Request model for POST /api/generate-persona."""
    model_config = ConfigDict(populate_by_name=True)

    service_name: Optional[Any] = Field(
        default=None,
        alias="serviceName",
        examples=["AI家計簿アプリ"],
    )
    service_description: Optional[Any] = Field(
        default=None,
        alias="serviceDescription",
        examples=["レシートを撮影するだけで自動で家計簿をつけられるアプリ"],
    )


class MarketingStrategyRequest(PersonaRequest):
    """Request model for POST /api/generate-marketing-strategy."""
    personas: Optional[Union[Dict[str, Any], List[Any]]] = Field(
        default=None,
        description="Personas as returned by /api/generate-persona",
    )


class PersonaResponse(BaseModel):
    """Response model for POST /api/generate-persona."""
    personas: Any = Field(..., description='Personas keyed "Persona A", "Persona B", "Persona C"')


class MarketingStrategyResponse(BaseModel):
    """Response model for POST /api/generate-marketing-strategy."""
    marketing_strategies: Any = Field(..., description="Strategies keyed per persona")
