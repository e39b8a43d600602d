"""
Chat Prompts - System prompt for the general-purpose chat demo.
"""

CHAT_SYSTEM_PROMPT = (
    "あなたは親切で知識豊富なAIアシスタントです。"
    "日本語で自然な会話を行い、ユーザーの質問に正確で有用な回答を提供してください。"
)


def get_chat_system_prompt() -> str:
    """Get the system prompt for the chat assistant."""
    return CHAT_SYSTEM_PROMPT
