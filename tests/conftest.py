"""
conftest.py - Shared test fixtures for the AI Playground API.

Provides fake upstream responses (OpenAI completions, requests responses)
and a FastAPI TestClient whose services are wired to mocked clients, so
no test ever reaches OpenAI, Google Places or n8n.
"""

import os

# Must be set before importing application modules (settings are cached)
os.environ["OPENAI_API_KEY"] = "test-openai-key"
os.environ["GOOGLE_PLACES_API_KEY"] = "test-places-key"
os.environ["N8N_WEBHOOK_URL"] = "https://n8n.test/webhook/analyze"
os.environ["ELEVENLABS_AGENT_ID"] = ""
os.environ["LOG_TO_FILE"] = "false"
os.environ["APP_ENV"] = "testing"

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from ai_playground.api.main import app
from ai_playground.api.routes.chat import get_chat_service
from ai_playground.api.routes.personas import get_persona_service
from ai_playground.api.routes.places import get_place_service
from ai_playground.api.routes.website import get_website_service
from ai_playground.integrations.n8n import N8NClient
from ai_playground.integrations.places import PlacesClient
from ai_playground.llm.client import LLMClient
from ai_playground.services import ChatService, PersonaService, PlaceService, WebsiteAnalyzerService


# ── Fake upstream responses ──────────────────────────────────────────


def make_completion(content):
    """Minimal stand-in for an OpenAI ChatCompletion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=20, total_tokens=30),
    )


def make_http_response(status_code=200, body=None, text=None, reason="OK"):
    """A real requests.Response carrying a JSON body or raw text."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.encoding = "utf-8"
    if text is None:
        text = json.dumps(body if body is not None else {}, ensure_ascii=False)
    response._content = text.encode("utf-8")
    return response


def sample_places(count):
    return [
        {"name": f"カフェ {i}", "formatted_address": f"東京都渋谷区{i}-1", "rating": 4.0}
        for i in range(count)
    ]


LONG_REPORT = (
    "ウェブサイト分析レポート\n"
    "デザインはダークモードを採用しておりかっこいい印象です。\n"
    "推奨事項:\n"
    "1) ファーストビューに明確なCTAボタンを配置し、問い合わせへの導線を強化する\n"
    "2) 画像を圧縮してページ読み込み速度を改善し、離脱率を下げる\n"
    "3) メタディスクリプションを各ページに設定して検索結果でのクリック率を高める\n"
)


# ── Client fixtures ──────────────────────────────────────────────────


@pytest.fixture
def openai_mock():
    """The mocked SDK client; set .chat.completions.create.return_value."""
    return MagicMock()


@pytest.fixture
def llm_client(openai_mock):
    client = LLMClient(api_key="test-openai-key", model="gpt-4o-mini")
    client._client = openai_mock
    return client


@pytest.fixture
def http_session():
    """Mocked requests.Session shared by the Places and n8n clients."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def places_client(http_session):
    return PlacesClient(api_key="test-places-key", session=http_session)


@pytest.fixture
def n8n_client(http_session):
    return N8NClient(webhook_url="https://n8n.test/webhook/analyze", session=http_session)


@pytest.fixture
def client(llm_client, places_client, n8n_client):
    """TestClient with every service built on the mocked clients."""
    app.dependency_overrides[get_chat_service] = lambda: ChatService(llm_client=llm_client)
    app.dependency_overrides[get_persona_service] = lambda: PersonaService(llm_client=llm_client)
    app.dependency_overrides[get_place_service] = lambda: PlaceService(
        places_client=places_client, llm_client=llm_client
    )
    app.dependency_overrides[get_website_service] = lambda: WebsiteAnalyzerService(
        n8n_client=n8n_client, llm_client=llm_client
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
