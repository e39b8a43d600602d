"""
Website Analyzer Service - n8n report to structured scorecard.

Flow:
1. Validate the URL
2. Run the n8n analysis workflow (free-form Japanese report)
3. Ask the LLM to extract score/strengths/improvements with a strict
   JSON schema
4. Normalize the extraction into what the result page renders
"""
from typing import Any, Iterable, List, Optional

from ai_playground.core.exceptions import AnalysisError
from ai_playground.core.logging_config import get_logger
from ai_playground.core.validators import validate_url
from ai_playground.integrations.n8n import N8NClient
from ai_playground.llm.client import LLMClient
from ai_playground.llm.prompts import (
    ANALYSIS_SCHEMA,
    get_analysis_system_prompt,
    get_analysis_user_prompt,
)

logger = get_logger(__name__)

MIN_SCORE = 40
MAX_SCORE = 95
DEFAULT_SCORE = 70

MAX_STRENGTHS = 5
MIN_STRENGTHS = 3
MAX_IMPROVEMENTS = 8
MAX_IMPROVEMENT_LENGTH = 150

DEFAULT_STRENGTHS = (
    "サイトの基本構造が確認できています",
    "技術的な実装が行われています",
    "ブランディング要素が含まれています",
)

EXTRACTION_MAX_TOKENS = 1500
EXTRACTION_TEMPERATURE = 0.2

NO_IMPROVEMENTS_MESSAGE = (
    "分析結果から改善提案を抽出できませんでした。N8Nワークフローの出力を確認してください。"
)
EXTRACTION_PARSE_ERROR = "分析結果の構造化に失敗しました"


def clamp_score(value: Any) -> int:
    """
    Clamp a model-reported score into the displayed range.

    >>> clamp_score(120)
    95
    >>> clamp_score("55")
    55
    """
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return DEFAULT_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, score))


def _clean_items(items: Any) -> List[str]:
    """Trimmed, non-empty, de-duplicated strings in original order."""
    if not isinstance(items, list):
        return []

    seen = set()
    cleaned = []
    for item in items:
        if not isinstance(item, str):
            continue
        text = item.strip()
        if text and text not in seen:
            seen.add(text)
            cleaned.append(text)
    return cleaned


def normalize_strengths(items: Any, defaults: Iterable[str] = DEFAULT_STRENGTHS) -> List[str]:
    """At most MAX_STRENGTHS strengths, padded with defaults up to MIN_STRENGTHS."""
    strengths = _clean_items(items)
    for default in defaults:
        if len(strengths) >= MIN_STRENGTHS:
            break
        if default not in strengths:
            strengths.append(default)
    return strengths[:MAX_STRENGTHS]


def truncate_improvement(text: str) -> str:
    if len(text) > MAX_IMPROVEMENT_LENGTH:
        return text[:MAX_IMPROVEMENT_LENGTH] + "..."
    return text


def normalize_improvements(items: Any) -> List[str]:
    """At most MAX_IMPROVEMENTS improvements, each at most 150 chars plus an ellipsis."""
    return [truncate_improvement(text) for text in _clean_items(items)][:MAX_IMPROVEMENTS]


def build_summary(url: str) -> str:
    return f"{url}の詳細分析が完了しました。AIによる総合的な評価と具体的な改善提案をご確認ください。"


class WebsiteAnalyzerService:
    """Runs the website analysis workflow and structures its report."""

    def __init__(
        self,
        n8n_client: Optional[N8NClient] = None,
        llm_client: Optional[LLMClient] = None,
    ):
        self.n8n_client = n8n_client or N8NClient()
        self.llm_client = llm_client or LLMClient()

    def analyze(self, url: str) -> dict:
        """
        Analyze a website.

        Args:
            url: Website URL submitted by the user

        Returns:
            {"score", "summary", "strengths", "improvements", "fullAnalysis"}

        Raises:
            ValidationError: If the URL is invalid
            ConfigurationError: If OpenAI is not configured
            UpstreamError: If the webhook fails
            AnalysisError: If the report is unusable or yields no improvements
            LLMError, ResponseParseError: If the extraction step fails
        """
        url = validate_url(url)

        # Fail before the long-running workflow if extraction cannot run
        self.llm_client.ensure_configured()

        report = self.n8n_client.analyze(url)

        extraction, _ = self.llm_client.generate_json(
            user_message=get_analysis_user_prompt(url, report),
            system_prompt=get_analysis_system_prompt(),
            max_tokens=EXTRACTION_MAX_TOKENS,
            temperature=EXTRACTION_TEMPERATURE,
            json_schema=ANALYSIS_SCHEMA,
            parse_error_message=EXTRACTION_PARSE_ERROR,
        )
        if not isinstance(extraction, dict):
            extraction = {}

        improvements = normalize_improvements(extraction.get("improvements"))
        if not improvements:
            logger.error("No improvements extracted from analysis")
            raise AnalysisError(NO_IMPROVEMENTS_MESSAGE)

        strengths = normalize_strengths(extraction.get("strengths"))
        score = clamp_score(extraction.get("score"))

        logger.info(
            f"Website analysis complete: url={url} score={score} "
            f"strengths={len(strengths)} improvements={len(improvements)}"
        )

        return {
            "score": score,
            "summary": build_summary(url),
            "strengths": strengths,
            "improvements": improvements,
            "fullAnalysis": report,
        }
