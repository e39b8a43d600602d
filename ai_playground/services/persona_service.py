"""
Persona Service - Persona and marketing strategy generation.

Both operations are one prompt-and-parse round trip:
1. Render the prompt template with the service information
2. Request a JSON-mode completion
3. Return the parsed JSON as-is (rawResponse is attached on parse failure)
"""
from typing import Any, Optional

from ai_playground.core.logging_config import get_logger
from ai_playground.llm.client import LLMClient
from ai_playground.llm.prompts import (
    get_marketing_system_prompt,
    get_marketing_user_prompt,
    get_persona_system_prompt,
    get_persona_user_prompt,
)
from ai_playground.llm.prompts.persona_prompts import PERSONA_KEYS

logger = get_logger(__name__)

PERSONA_MAX_TOKENS = 2000
MARKETING_MAX_TOKENS = 3000
GENERATION_TEMPERATURE = 0.7

PERSONA_PARSE_ERROR = "ペルソナデータの解析に失敗しました"
MARKETING_PARSE_ERROR = "マーケティング施策データの解析に失敗しました"


class PersonaService:
    """Generates personas and the marketing strategies built on them."""

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or LLMClient()

    def generate_personas(self, service_name: str, service_description: str) -> Any:
        """
        Generate three Japanese-market personas for a product.

        Args:
            service_name: Product or service name
            service_description: Short product description

        Returns:
            Parsed JSON, normally a dict keyed "Persona A".."Persona C"

        Raises:
            ConfigurationError: If OpenAI is not configured
            LLMError: If the completion fails or is empty
            ResponseParseError: If the output is not valid JSON
        """
        logger.info(f"Generating personas for service: {service_name}")

        personas, _ = self.llm_client.generate_json(
            user_message=get_persona_user_prompt(service_name, service_description),
            system_prompt=get_persona_system_prompt(),
            max_tokens=PERSONA_MAX_TOKENS,
            temperature=GENERATION_TEMPERATURE,
            parse_error_message=PERSONA_PARSE_ERROR,
        )

        if isinstance(personas, dict):
            missing = [key for key in PERSONA_KEYS if key not in personas]
            if missing:
                logger.warning(f"Persona response is missing keys: {missing}")
            logger.info(f"Generated {len(personas)} personas for service: {service_name}")

        return personas

    def generate_marketing_strategy(
        self,
        service_name: str,
        service_description: str,
        personas: Any,
    ) -> Any:
        """
        Propose a marketing strategy for each persona.

        Args:
            service_name: Product or service name
            service_description: Short product description
            personas: Personas previously returned by generate_personas

        Returns:
            Parsed JSON, normally a dict keyed per persona

        Raises:
            ConfigurationError: If OpenAI is not configured
            LLMError: If the completion fails or is empty
            ResponseParseError: If the output is not valid JSON
        """
        logger.info(f"Generating marketing strategies for service: {service_name}")

        strategies, _ = self.llm_client.generate_json(
            user_message=get_marketing_user_prompt(service_name, service_description, personas),
            system_prompt=get_marketing_system_prompt(),
            max_tokens=MARKETING_MAX_TOKENS,
            temperature=GENERATION_TEMPERATURE,
            parse_error_message=MARKETING_PARSE_ERROR,
        )

        logger.info(f"Marketing strategies generated for service: {service_name}")
        return strategies
