"""
test_config.py - Tests for environment-driven settings.
"""

import pytest

from ai_playground.catalog import get_voice_chat_config
from ai_playground.core.config import (
    DEFAULT_ELEVENLABS_AGENT_ID,
    DEFAULT_N8N_WEBHOOK_URL,
    get_settings,
)


@pytest.fixture
def fresh_settings():
    """Clear the settings cache around a test that edits the environment."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_defaults_point_at_the_hosted_workflow_and_agent(monkeypatch, fresh_settings):
    monkeypatch.delenv("N8N_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("ELEVENLABS_AGENT_ID", raising=False)

    settings = fresh_settings()

    assert settings.n8n_webhook_url == DEFAULT_N8N_WEBHOOK_URL
    assert settings.elevenlabs_agent_id == "AYSyQK5I8g1u6sN9vWja"
    assert DEFAULT_ELEVENLABS_AGENT_ID == "AYSyQK5I8g1u6sN9vWja"


def test_voice_chat_available_out_of_the_box(monkeypatch, fresh_settings):
    monkeypatch.delenv("ELEVENLABS_AGENT_ID", raising=False)

    config = get_voice_chat_config()

    assert config.agentId == "AYSyQK5I8g1u6sN9vWja"
    assert config.available is True


def test_empty_agent_id_disables_voice_chat(monkeypatch, fresh_settings):
    monkeypatch.setenv("ELEVENLABS_AGENT_ID", "  ")

    assert fresh_settings().elevenlabs_agent_id == ""
    assert get_voice_chat_config().available is False


def test_cors_origins_are_split(monkeypatch, fresh_settings):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, ,https://b.example")

    assert fresh_settings().cors_origins == ["https://a.example", "https://b.example"]
