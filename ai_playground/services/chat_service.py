"""
Chat Service - Business logic for the chat demo.

Each message is answered on its own: the playground keeps no
conversation history between requests.
"""
from typing import Optional

from ai_playground.core.logging_config import get_logger
from ai_playground.llm.client import LLMClient
from ai_playground.llm.prompts import get_chat_system_prompt

logger = get_logger(__name__)

CHAT_MAX_TOKENS = 1000
CHAT_TEMPERATURE = 0.7


class ChatService:
    """
    Service for single-turn chat with the assistant.

    Example:
        >>> service = ChatService()
        >>> service.reply("自己紹介してください")
        'こんにちは！私はAIアシスタントです。...'
    """

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self.llm_client = llm_client or LLMClient()

    def reply(self, message: str) -> str:
        """
        Answer a user message.

        Args:
            message: Validated user message, layout preserved

        Returns:
            The assistant's reply

        Raises:
            ConfigurationError: If OpenAI is not configured
            LLMError: If the completion fails or is empty
        """
        logger.info(f"Processing chat message: length={len(message)}")

        answer = self.llm_client.generate(
            user_message=message,
            system_prompt=get_chat_system_prompt(),
            max_tokens=CHAT_MAX_TOKENS,
            temperature=CHAT_TEMPERATURE,
        )

        logger.info(f"Chat reply generated: length={len(answer)}")
        return answer
