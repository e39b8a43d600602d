"""
LLM Client for OpenAI chat completions.

This module provides a thin interface over the OpenAI SDK used by every
playground product. It handles:
- API client initialization (lazily, so a missing key only fails the
  request that needs it)
- Plain text and JSON-mode completions
- Mapping SDK failures onto the application's error hierarchy

Requests are not retried: a failed completion is reported to the caller
as a final failure.
"""
import json
from typing import Any, Dict, List, Optional, Tuple

from openai import APIConnectionError, APIError, APIStatusError, APITimeoutError, OpenAI

from ai_playground.core.config import get_settings
from ai_playground.core.exceptions import ConfigurationError, LLMError, ResponseParseError
from ai_playground.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000

MISSING_KEY_MESSAGE = "OpenAI APIキーが設定されていません"
EMPTY_RESPONSE_MESSAGE = "OpenAIからの応答が無効です"
DEFAULT_PARSE_ERROR_MESSAGE = "AIの応答をJSONとして解析できませんでした"


class LLMClient:
    """
    Client for interacting with the OpenAI chat completions API.

    Example:
        >>> client = LLMClient()
        >>> client.generate("こんにちは", system_prompt="日本語で答えてください")
        'こんにちは！今日はどのようなご用件でしょうか？'
    """

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """
        Args:
            api_key: Overrides OPENAI_API_KEY from settings
            model: Overrides OPENAI_MODEL from settings
        """
        self.settings = get_settings()
        self.api_key = api_key if api_key is not None else self.settings.openai_api_key
        self.model = model or self.settings.openai_model
        self.timeout = self.settings.openai_timeout_seconds
        self._client: Optional[OpenAI] = None

    @property
    def is_configured(self) -> bool:
        """True when an API key is available."""
        return bool(self.api_key)

    def ensure_configured(self) -> None:
        """
        Raises:
            ConfigurationError: If no OpenAI API key is configured
        """
        if not self.is_configured:
            logger.error("OPENAI_API_KEY is not configured")
            raise ConfigurationError(MISSING_KEY_MESSAGE, setting="OPENAI_API_KEY")

    @property
    def client(self) -> OpenAI:
        """The underlying SDK client, created on first use."""
        self.ensure_configured()
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
            logger.info(f"OpenAI client initialized (model={self.model})")
        return self._client

    def generate(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> str:
        """
        Generate a plain text completion.

        Args:
            user_message: Content of the user turn
            system_prompt: System instructions (defaults to a generic assistant)
            max_tokens: Maximum response length
            temperature: Sampling temperature

        Returns:
            The assistant's reply text

        Raises:
            ConfigurationError: If no API key is configured
            LLMError: If the API call fails or returns no content
        """
        messages = self._build_messages(user_message, system_prompt)
        return self._complete(messages, max_tokens=max_tokens, temperature=temperature)

    def generate_json(
        self,
        user_message: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
        json_schema: Optional[Dict[str, Any]] = None,
        parse_error_message: str = DEFAULT_PARSE_ERROR_MESSAGE,
    ) -> Tuple[Any, str]:
        """
        Generate a completion constrained to JSON output and parse it.

        With json_schema the request uses strict structured output,
        otherwise plain JSON mode. The prompt itself must mention JSON.

        Args:
            user_message: Content of the user turn
            system_prompt: System instructions
            max_tokens: Maximum response length
            temperature: Sampling temperature
            json_schema: {"name": ..., "schema": {...}} for strict output
            parse_error_message: Message used if the output is not valid JSON

        Returns:
            Tuple of (parsed JSON value, raw response text)

        Raises:
            ConfigurationError: If no API key is configured
            LLMError: If the API call fails or returns no content
            ResponseParseError: If the output is not valid JSON
        """
        if json_schema is not None:
            response_format = {
                "type": "json_schema",
                "json_schema": {
                    "name": json_schema["name"],
                    "schema": json_schema["schema"],
                    "strict": True,
                },
            }
        else:
            response_format = {"type": "json_object"}

        messages = self._build_messages(user_message, system_prompt)
        raw = self._complete(
            messages,
            max_tokens=max_tokens,
            temperature=temperature,
            response_format=response_format,
        )

        try:
            return json.loads(raw), raw
        except json.JSONDecodeError as e:
            logger.error(f"JSON parse error: {e} (response length={len(raw)})")
            raise ResponseParseError(parse_error_message, raw_response=raw) from e

    def _build_messages(
        self,
        user_message: str,
        system_prompt: Optional[str],
    ) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt or DEFAULT_SYSTEM_PROMPT},
            {"role": "user", "content": user_message},
        ]

    def _complete(
        self,
        messages: List[Dict[str, str]],
        max_tokens: int,
        temperature: float,
        response_format: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Execute one chat completion request and return its text."""
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if response_format is not None:
            kwargs["response_format"] = response_format

        client = self.client
        try:
            response = client.chat.completions.create(**kwargs)
        except APITimeoutError as e:
            logger.error(f"OpenAI API timeout after {self.timeout}s")
            raise LLMError("OpenAI API timeout") from e
        except APIConnectionError as e:
            logger.error(f"OpenAI API connection error: {e}")
            raise LLMError("OpenAI API connection error") from e
        except APIStatusError as e:
            logger.error(f"OpenAI API error: {e.status_code} {e}")
            raise LLMError(f"OpenAI API error: {e.status_code}", upstream_status=e.status_code) from e
        except APIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise LLMError(f"OpenAI API error: {e}") from e

        content = None
        if response.choices:
            content = response.choices[0].message.content

        if not content:
            logger.error("OpenAI returned an empty completion")
            raise LLMError(EMPTY_RESPONSE_MESSAGE)

        usage = getattr(response, "usage", None)
        if usage is not None:
            logger.debug(
                f"OpenAI usage: prompt={usage.prompt_tokens}, "
                f"completion={usage.completion_tokens}, total={usage.total_tokens}"
            )

        return content
