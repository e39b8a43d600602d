"""
Chat Routes - API endpoint for the chat demo.
"""
from fastapi import APIRouter, Depends

from ai_playground.core.exceptions import PlaygroundException
from ai_playground.core.logging_config import get_logger
from ai_playground.core.validators import require_prompt_text
from ai_playground.models.chat import ChatRequest, ChatResponse
from ai_playground.models.common import ErrorResponse
from ai_playground.services.chat_service import ChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing message"},
        500: {"model": ErrorResponse, "description": "OpenAI not configured or failed"},
    },
)

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


@router.post(
    "/chat",
    response_model=ChatResponse,
    summary="Send a message to the assistant",
)
def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer one message with the Japanese-speaking assistant."""
    message = require_prompt_text(request.message, "メッセージが提供されていません", field="message")

    try:
        answer = service.reply(message)
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Chat API error: {e}")
        raise PlaygroundException("チャット処理中にエラーが発生しました") from e

    return ChatResponse(message=answer)
