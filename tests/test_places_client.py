"""
test_places_client.py - Tests for the Google Places Text Search client.

Covers:
- Query composition ("<query> in <location>") and request parameters
- Result cap of MAX_RESULTS
- Upstream HTTP errors and error statuses -> UpstreamError
- Missing key -> ConfigurationError without a request
"""

import pytest
import requests

from ai_playground.core.exceptions import ConfigurationError, UpstreamError
from ai_playground.integrations.places import (
    MAX_RESULTS,
    TEXT_SEARCH_URL,
    PlacesClient,
    build_search_query,
)

from conftest import make_http_response, sample_places


def test_build_search_query():
    assert build_search_query("ラーメン", "渋谷") == "ラーメン in 渋谷"
    assert build_search_query("ラーメン", None) == "ラーメン"
    assert build_search_query("ラーメン", "") == "ラーメン"


def test_text_search_sends_query_and_locale(places_client, http_session):
    http_session.get.return_value = make_http_response(
        body={"status": "OK", "results": sample_places(2)}
    )

    result = places_client.text_search("カフェ", "渋谷")

    http_session.get.assert_called_once()
    args, kwargs = http_session.get.call_args
    assert args[0] == TEXT_SEARCH_URL
    assert kwargs["params"] == {
        "query": "カフェ in 渋谷",
        "key": "test-places-key",
        "language": "ja",
        "region": "jp",
    }
    assert result.status == "OK"
    assert len(result.places) == 2
    assert result.search_query == "カフェ in 渋谷"


def test_text_search_caps_results(places_client, http_session):
    http_session.get.return_value = make_http_response(
        body={"status": "OK", "results": sample_places(20)}
    )

    result = places_client.text_search("カフェ")

    assert len(result.places) == MAX_RESULTS
    assert result.places[0]["name"] == "カフェ 0"


def test_zero_results_is_not_an_error(places_client, http_session):
    http_session.get.return_value = make_http_response(body={"status": "ZERO_RESULTS", "results": []})

    result = places_client.text_search("存在しない場所")

    assert result.to_dict() == {"places": [], "status": "ZERO_RESULTS"}


def test_http_error_raises_upstream_error(places_client, http_session):
    http_session.get.return_value = make_http_response(
        status_code=403, body={}, reason="Forbidden"
    )

    with pytest.raises(UpstreamError) as exc_info:
        places_client.text_search("カフェ")

    assert exc_info.value.message == "Google Places APIエラー: 403 Forbidden"
    assert exc_info.value.upstream_status == 403


def test_error_status_in_body_raises_upstream_error(places_client, http_session):
    http_session.get.return_value = make_http_response(
        body={"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid."}
    )

    with pytest.raises(UpstreamError) as exc_info:
        places_client.text_search("カフェ")

    assert exc_info.value.message == "Google Places API response error: REQUEST_DENIED"


def test_connection_failure_raises_upstream_error(places_client, http_session):
    http_session.get.side_effect = requests.exceptions.ConnectionError("boom")

    with pytest.raises(UpstreamError):
        places_client.text_search("カフェ")


def test_missing_key_raises_before_request(http_session):
    client = PlacesClient(api_key="", session=http_session)

    with pytest.raises(ConfigurationError) as exc_info:
        client.text_search("カフェ")

    assert exc_info.value.message == "Google Places APIキーが設定されていません"
    http_session.get.assert_not_called()
