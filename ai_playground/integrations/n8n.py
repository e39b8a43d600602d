"""
n8n client - Website analysis workflow webhook.

The workflow crawls the submitted site and answers with
{"output": "<free-form report>"}. It can take minutes, and an empty or
truncated body usually means the workflow had not finished yet.
"""
from datetime import datetime, timezone
from typing import Optional

import requests

from ai_playground.core.config import get_settings
from ai_playground.core.exceptions import AnalysisError, UpstreamError
from ai_playground.core.logging_config import get_logger

logger = get_logger(__name__)

# Reports shorter than this are treated as incomplete
MIN_OUTPUT_LENGTH = 100


class N8NClient:
    """Client for the website analysis webhook."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.webhook_url = webhook_url or settings.n8n_webhook_url
        self.timeout = settings.n8n_timeout_seconds
        self.session = session or requests.Session()

    def analyze(self, url: str) -> str:
        """
        Run the analysis workflow for a website.

        Args:
            url: Validated website URL

        Returns:
            The workflow's report text

        Raises:
            UpstreamError: If the webhook answers with a non-2xx status
            AnalysisError: If the body is empty, not JSON, lacks a string
                output, or the output is too short to be complete
        """
        payload = {
            "website_url": url,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        logger.info(f"Sending request to n8n: website_url={url}")

        try:
            response = self.session.post(self.webhook_url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"n8n webhook request failed: {e}")
            raise UpstreamError(f"分析サービスエラー: {e.__class__.__name__}") from e

        logger.info(f"n8n response status: {response.status_code}")

        if not response.ok:
            logger.error(f"n8n webhook error: {response.status_code} {response.reason}")
            raise UpstreamError(
                f"分析サービスエラー: {response.status_code} {response.reason}",
                upstream_status=response.status_code,
            )

        text = response.text
        logger.debug(f"n8n response length={len(text)} preview={text[:200]!r}")

        if not text or not text.strip():
            logger.error("Empty response from n8n")
            raise AnalysisError(
                "N8Nから空のレスポンスが返されました。ワークフローがまだ完了していない可能性があります。"
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(f"n8n returned a non-JSON body: {text[:500]!r}")
            raise AnalysisError(
                "分析結果の解析に失敗しました。N8Nワークフローの出力形式を確認してください。"
            )

        output = data.get("output") if isinstance(data, dict) else None
        if not isinstance(output, str):
            logger.error(f"No valid output from n8n: {str(data)[:500]}")
            raise AnalysisError(
                "N8Nワークフローから有効な分析結果が返されませんでした。"
                "outputフィールドが見つからないか、無効な形式です。"
            )

        if len(output) < MIN_OUTPUT_LENGTH:
            logger.error(f"Analysis output too short ({len(output)} chars): {output!r}")
            raise AnalysisError(
                "分析結果が不完全です。N8Nワークフローがまだ処理中の可能性があります。"
                "少し時間をおいて再度お試しください。"
            )

        logger.info(f"Received analysis output, length={len(output)}")
        return output
