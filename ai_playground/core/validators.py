"""
Input Validators - Sanitization and validation utilities.

Every route validates its body with these helpers before any outbound
call is made, so a bad request never costs an API call.
"""
import re
from typing import Any, Optional
from urllib.parse import urlparse

from ai_playground.core.exceptions import ValidationError
from ai_playground.core.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_LENGTH = 2000
MAX_PROMPT_LENGTH = 10000

PROMPT_TOO_LONG_ERROR = "入力が長すぎます（最大{max_length}文字）"

ALLOWED_URL_SCHEMES = {"http", "https"}


def sanitize_text(text: Optional[str], max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Sanitize short single-line input such as search queries and URLs.

    - Removes null bytes
    - Strips leading/trailing whitespace
    - Normalizes runs of whitespace to a single space
    - Limits length

    Args:
        text: Raw user text
        max_length: Maximum allowed length

    Returns:
        Sanitized text ("" for None)
    """
    if not text:
        return ""

    cleaned = text.replace("\x00", "")
    cleaned = cleaned.strip()
    cleaned = re.sub(r"\s+", " ", cleaned)

    if len(cleaned) > max_length:
        logger.debug(f"Truncating input from {len(cleaned)} to {max_length} characters")
        cleaned = cleaned[:max_length]

    return cleaned


def require_text(
    value: Any,
    message: str,
    field: Optional[str] = None,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """
    Return the sanitized value or raise ValidationError if it is missing.

    Args:
        value: Raw request value (may be None or a non-string)
        message: Error message returned to the caller
        field: Name of the offending request field
        max_length: Maximum allowed length after sanitizing

    Raises:
        ValidationError: If the value is missing, not a string, or blank
    """
    if not isinstance(value, str):
        raise ValidationError(message, field=field)

    sanitized = sanitize_text(value, max_length=max_length)
    if not sanitized:
        raise ValidationError(message, field=field)

    return sanitized


def require_prompt_text(
    value: Any,
    message: str,
    field: Optional[str] = None,
    max_length: int = MAX_PROMPT_LENGTH,
) -> str:
    """
    Return free-form text bound for a prompt, keeping its layout.

    Only null bytes and surrounding whitespace are removed. Newlines,
    indentation and code blocks reach the model as the user wrote them.

    Raises:
        ValidationError: If the value is missing, not a string, blank,
            or longer than max_length
    """
    if not isinstance(value, str):
        raise ValidationError(message, field=field)

    cleaned = value.replace("\x00", "").strip()
    if not cleaned:
        raise ValidationError(message, field=field)

    if len(cleaned) > max_length:
        raise ValidationError(PROMPT_TOO_LONG_ERROR.format(max_length=max_length), field=field)

    return cleaned


def validate_url(url: str) -> str:
    """
    Validate an absolute http(s) URL.

    Args:
        url: URL submitted for analysis

    Returns:
        The stripped URL

    Raises:
        ValidationError: If the URL is not absolute http(s) with a host
    """
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
    except ValueError:
        raise ValidationError("無効なURLです", field="url")

    if parsed.scheme.lower() not in ALLOWED_URL_SCHEMES or not parsed.netloc:
        raise ValidationError("無効なURLです", field="url")

    if any(ch.isspace() for ch in candidate):
        raise ValidationError("無効なURLです", field="url")

    return candidate
