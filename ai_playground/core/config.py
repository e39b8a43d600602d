"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

API keys are optional here: the playground still starts without them and
each product reports the missing key when it is actually used.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


DEFAULT_N8N_WEBHOOK_URL = "https://n8n.srv927568.hstgr.cloud/webhook/n8n-myPortfolio"
DEFAULT_ELEVENLABS_AGENT_ID = "AYSyQK5I8g1u6sN9vWja"


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Also write daily log files under logs/
        openai_api_key: API key for OpenAI chat completions (may be empty)
        openai_model: Chat completion model used by every product
        openai_timeout_seconds: Timeout for a single OpenAI request
        google_places_api_key: API key for Google Places (may be empty)
        places_language: Language code sent to the Places Text Search API
        places_region: Region bias sent to the Places Text Search API
        n8n_webhook_url: Website analysis workflow endpoint
        n8n_timeout_seconds: The workflow runs a full crawl, so this is long
        http_timeout_seconds: Default timeout for other outbound HTTP calls
        elevenlabs_agent_id: Agent id for the voice chat widget (empty disables it)
        enable_audit_logging: Log every request with timing
        cors_origins: Origins allowed to call the API from a browser
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_to_file: bool

    # OpenAI
    openai_api_key: str
    openai_model: str
    openai_timeout_seconds: float

    # Google Places
    google_places_api_key: str
    places_language: str
    places_region: str

    # n8n website analysis workflow
    n8n_webhook_url: str
    n8n_timeout_seconds: float

    http_timeout_seconds: float

    # Voice chat
    elevenlabs_agent_id: str

    # Safety settings
    enable_audit_logging: bool
    cors_origins: List[str] = field(default_factory=list)

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once; tests that change the environment call
    get_settings.cache_clear() afterwards.

    Returns:
        Settings instance with all configuration values
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "AIPlayground"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_to_file=_get_env("LOG_TO_FILE", "true").lower() == "true",

        # OpenAI
        openai_api_key=_get_env("OPENAI_API_KEY", "").strip(),
        openai_model=_get_env("OPENAI_MODEL", "gpt-4o-mini"),
        openai_timeout_seconds=float(_get_env("OPENAI_TIMEOUT_SECONDS", "60")),

        # Google Places
        google_places_api_key=_get_env("GOOGLE_PLACES_API_KEY", "").strip(),
        places_language=_get_env("PLACES_LANGUAGE", "ja"),
        places_region=_get_env("PLACES_REGION", "jp"),

        # n8n
        n8n_webhook_url=_get_env("N8N_WEBHOOK_URL", DEFAULT_N8N_WEBHOOK_URL),
        n8n_timeout_seconds=float(_get_env("N8N_TIMEOUT_SECONDS", "300")),

        http_timeout_seconds=float(_get_env("HTTP_TIMEOUT_SECONDS", "30")),

        # Voice chat
        elevenlabs_agent_id=_get_env("ELEVENLABS_AGENT_ID", DEFAULT_ELEVENLABS_AGENT_ID).strip(),

        # Safety
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
        cors_origins=_split_csv(_get_env("CORS_ORIGINS", "http://localhost:3000")),
    )
