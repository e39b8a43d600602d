"""
test_website_service.py - Tests for website analysis structuring.

Covers:
- Score clamping, strength padding/capping, improvement truncation/capping
- The extraction request uses the strict analysis schema
- No improvements -> AnalysisError
- Invalid URLs and a missing OpenAI key fail before the workflow runs
"""

import json

import pytest

from ai_playground.core.exceptions import AnalysisError, ConfigurationError, ValidationError
from ai_playground.llm.client import LLMClient
from ai_playground.llm.prompts import ANALYSIS_SCHEMA
from ai_playground.services.website_service import (
    DEFAULT_STRENGTHS,
    WebsiteAnalyzerService,
    clamp_score,
    normalize_improvements,
    normalize_strengths,
)

from conftest import LONG_REPORT, make_completion, make_http_response


class TestNormalization:
    @pytest.mark.parametrize("raw, expected", [
        (80, 80),
        (100, 95),
        (10, 40),
        ("62", 62),
        (71.6, 72),
        (None, 70),
        ("高い", 70),
    ])
    def test_clamp_score(self, raw, expected):
        assert clamp_score(raw) == expected

    def test_strengths_are_padded_with_defaults(self):
        assert normalize_strengths(["モダンなダークテーマを採用しています"]) == [
            "モダンなダークテーマを採用しています",
            DEFAULT_STRENGTHS[0],
            DEFAULT_STRENGTHS[1],
        ]

    def test_strengths_are_deduplicated_and_capped(self):
        items = ["a", "a", " b ", "", 3, "c", "d", "e", "f"]
        assert normalize_strengths(items) == ["a", "b", "c", "d", "e"]

    def test_strengths_from_non_list(self):
        assert normalize_strengths(None) == list(DEFAULT_STRENGTHS)

    def test_improvements_are_truncated_and_capped(self):
        items = ["x" * 200] + [f"改善案{i}" for i in range(10)]
        improvements = normalize_improvements(items)

        assert len(improvements) == 8
        assert improvements[0] == "x" * 150 + "..."
        assert improvements[1] == "改善案0"


@pytest.fixture
def service(n8n_client, llm_client):
    return WebsiteAnalyzerService(n8n_client=n8n_client, llm_client=llm_client)


def _extraction(openai_mock, payload):
    openai_mock.chat.completions.create.return_value = make_completion(
        json.dumps(payload, ensure_ascii=False)
    )


def test_analyze_builds_scorecard(service, http_session, openai_mock):
    http_session.post.return_value = make_http_response(body={"output": LONG_REPORT})
    _extraction(openai_mock, {
        "score": 78,
        "strengths": ["モダンなダークテーマを採用しています"],
        "improvements": [
            "ファーストビューに明確なCTAボタンを配置する",
            "画像を圧縮してページ読み込み速度を改善する",
        ],
    })

    result = service.analyze("https://example.com")

    assert result["score"] == 78
    assert result["summary"] == (
        "https://example.comの詳細分析が完了しました。"
        "AIによる総合的な評価と具体的な改善提案をご確認ください。"
    )
    assert len(result["strengths"]) == 3
    assert result["improvements"][0] == "ファーストビューに明確なCTAボタンを配置する"
    assert result["fullAnalysis"] == LONG_REPORT

    kwargs = openai_mock.chat.completions.create.call_args.kwargs
    assert kwargs["response_format"]["json_schema"]["name"] == ANALYSIS_SCHEMA["name"]
    assert LONG_REPORT in kwargs["messages"][1]["content"]


def test_no_improvements_raises_analysis_error(service, http_session, openai_mock):
    http_session.post.return_value = make_http_response(body={"output": LONG_REPORT})
    _extraction(openai_mock, {"score": 90, "strengths": ["良好"], "improvements": []})

    with pytest.raises(AnalysisError) as exc_info:
        service.analyze("https://example.com")

    assert "改善提案を抽出できませんでした" in exc_info.value.message


def test_invalid_url_fails_before_workflow(service, http_session):
    with pytest.raises(ValidationError):
        service.analyze("not a url")

    http_session.post.assert_not_called()


def test_missing_openai_key_fails_before_workflow(n8n_client, http_session):
    service = WebsiteAnalyzerService(n8n_client=n8n_client, llm_client=LLMClient(api_key=""))

    with pytest.raises(ConfigurationError):
        service.analyze("https://example.com")

    http_session.post.assert_not_called()
