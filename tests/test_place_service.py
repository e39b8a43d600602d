"""
test_place_service.py - Tests for plain and smart place search.

Covers:
- Smart search uses the model's optimizedQuery for the Places request
- Fallback to the original query on unparsable or unusable rewrites
- Both API keys are checked before any upstream call
"""

import json

import pytest

from ai_playground.core.exceptions import ConfigurationError
from ai_playground.integrations.places import PlacesClient
from ai_playground.llm.client import LLMClient
from ai_playground.services.place_service import (
    FALLBACK_EXPLANATION,
    FALLBACK_SEARCH_TIPS,
    PlaceService,
)

from conftest import make_completion, make_http_response, sample_places


@pytest.fixture
def service(places_client, llm_client):
    return PlaceService(places_client=places_client, llm_client=llm_client)


def _places_ok(http_session, count=3):
    http_session.get.return_value = make_http_response(
        body={"status": "OK", "results": sample_places(count)}
    )


def test_search_returns_places_and_status(service, http_session):
    _places_ok(http_session, count=12)

    result = service.search("カフェ", "渋谷")

    assert result["status"] == "OK"
    assert len(result["places"]) == 10


def test_smart_search_uses_optimized_query(service, http_session, openai_mock):
    optimization = {
        "optimizedQuery": "レストラン カフェ 公園",
        "explanation": "デート向けの場所に変換しました",
        "searchTips": "時間帯も指定すると便利です",
    }
    openai_mock.chat.completions.create.return_value = make_completion(
        json.dumps(optimization, ensure_ascii=False)
    )
    _places_ok(http_session)

    result = service.smart_search("デートにおすすめの場所", "横浜")

    assert result["originalQuery"] == "デートにおすすめの場所"
    assert result["optimizedQuery"] == "レストラン カフェ 公園"
    assert result["aiAnalysis"] == optimization
    assert result["status"] == "OK"
    assert len(result["places"]) == 3
    params = http_session.get.call_args.kwargs["params"]
    assert params["query"] == "レストラン カフェ 公園 in 横浜"

    user_prompt = openai_mock.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert "デートにおすすめの場所" in user_prompt
    assert "横浜" in user_prompt


@pytest.mark.parametrize("content", [
    "レストランを探しましょう",
    '{"explanation": "no query"}',
    '{"optimizedQuery": "   "}',
])
def test_smart_search_falls_back_to_original_query(service, http_session, openai_mock, content):
    openai_mock.chat.completions.create.return_value = make_completion(content)
    _places_ok(http_session)

    result = service.smart_search("美味しい食事", None)

    assert result["optimizedQuery"] == "美味しい食事"
    assert result["aiAnalysis"] == {
        "optimizedQuery": "美味しい食事",
        "explanation": FALLBACK_EXPLANATION,
        "searchTips": FALLBACK_SEARCH_TIPS,
    }
    assert http_session.get.call_args.kwargs["params"]["query"] == "美味しい食事"


def test_smart_search_prompt_marks_missing_location(service, http_session, openai_mock):
    openai_mock.chat.completions.create.return_value = make_completion('{"optimizedQuery": "カフェ"}')
    _places_ok(http_session)

    service.smart_search("一人で勉強できる場所")

    user_prompt = openai_mock.chat.completions.create.call_args.kwargs["messages"][1]["content"]
    assert '検索エリア: "指定なし"' in user_prompt


def test_smart_search_requires_openai_key(http_session, places_client, openai_mock):
    service = PlaceService(places_client=places_client, llm_client=LLMClient(api_key=""))

    with pytest.raises(ConfigurationError) as exc_info:
        service.smart_search("カフェ")

    assert exc_info.value.message == "OpenAI APIキーが設定されていません"
    http_session.get.assert_not_called()


def test_smart_search_requires_places_key(http_session, llm_client, openai_mock):
    service = PlaceService(
        places_client=PlacesClient(api_key="", session=http_session),
        llm_client=llm_client,
    )

    with pytest.raises(ConfigurationError) as exc_info:
        service.smart_search("カフェ")

    assert exc_info.value.message == "Google Places APIキーが設定されていません"
    openai_mock.chat.completions.create.assert_not_called()
