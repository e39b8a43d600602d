"""
Website Analyzer Routes - Website analysis via the n8n workflow.

The workflow can run for several minutes; clients should use a long
request timeout.
"""
from fastapi import APIRouter, Depends

from ai_playground.core.exceptions import PlaygroundException
from ai_playground.core.logging_config import get_logger
from ai_playground.core.validators import require_text
from ai_playground.models.common import ErrorResponse
from ai_playground.models.website import WebsiteAnalysisRequest, WebsiteAnalysisResponse
from ai_playground.services.website_service import WebsiteAnalyzerService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Website Analyzer"],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ErrorResponse, "description": "Workflow failed or returned an unusable report"},
    },
)

_website_service: WebsiteAnalyzerService | None = None


def get_website_service() -> WebsiteAnalyzerService:
    """Get or create the website analyzer service instance."""
    global _website_service
    if _website_service is None:
        _website_service = WebsiteAnalyzerService()
    return _website_service


@router.post(
    "/analyze-website",
    response_model=WebsiteAnalysisResponse,
    summary="Analyze a website and suggest improvements",
)
def analyze_website(
    request: WebsiteAnalysisRequest,
    service: WebsiteAnalyzerService = Depends(get_website_service),
) -> WebsiteAnalysisResponse:
    url = require_text(request.url, "URLが提供されていません", field="url")

    try:
        result = service.analyze(url)
    except PlaygroundException:
        raise
    except Exception as e:
        logger.exception(f"Analysis API error: {e}")
        raise PlaygroundException("分析中にエラーが発生しました") from e

    return WebsiteAnalysisResponse(**result)
