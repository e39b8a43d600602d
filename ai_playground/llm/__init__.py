"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction (prompts/)
- API calls to OpenAI
- JSON response parsing
- Error handling for LLM failures
"""
from ai_playground.llm.client import LLMClient

__all__ = [
    "LLMClient",
]
