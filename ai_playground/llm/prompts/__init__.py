"""
Prompts module - LLM prompt templates.

One module per playground product:
- chat_prompts      : general assistant
- persona_prompts   : persona generation
- marketing_prompts : per-persona marketing strategies
- place_prompts     : smart place-search query rewriting
- website_prompts   : structuring website analysis reports
"""
from ai_playground.llm.prompts.chat_prompts import get_chat_system_prompt
from ai_playground.llm.prompts.marketing_prompts import (
    get_marketing_system_prompt,
    get_marketing_user_prompt,
)
from ai_playground.llm.prompts.persona_prompts import (
    get_persona_system_prompt,
    get_persona_user_prompt,
)
from ai_playground.llm.prompts.place_prompts import (
    get_query_optimization_system_prompt,
    get_query_optimization_user_prompt,
)
from ai_playground.llm.prompts.website_prompts import (
    ANALYSIS_SCHEMA,
    get_analysis_system_prompt,
    get_analysis_user_prompt,
)

__all__ = [
    "get_chat_system_prompt",
    "get_marketing_system_prompt",
    "get_marketing_user_prompt",
    "get_persona_system_prompt",
    "get_persona_user_prompt",
    "get_query_optimization_system_prompt",
    "get_query_optimization_user_prompt",
    "ANALYSIS_SCHEMA",
    "get_analysis_system_prompt",
    "get_analysis_user_prompt",
]
