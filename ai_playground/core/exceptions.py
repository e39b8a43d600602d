"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Used by the API layer for consistent error responses
- The response body keeps the front end's contract: {"error": <message>}
  plus optional extra fields such as rawResponse
"""
from typing import Any, Dict, Optional


class PlaygroundException(Exception):
    """
    Base exception for all playground errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def extra_fields(self) -> Dict[str, Any]:
        """Additional keys merged into the error response body."""
        return {}

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        body: Dict[str, Any] = {"error": self.message}
        body.update(self.extra_fields())
        return body


class ValidationError(PlaygroundException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field


class ConfigurationError(PlaygroundException):
    """Raised when a required API key or endpoint is not configured."""
    status_code = 500
    error_code = "configuration_error"

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(message, details=f"setting={setting}" if setting else None)
        self.setting = setting


class UpstreamError(PlaygroundException):
    """Raised when a third-party API returns a non-OK response."""
    status_code = 500
    error_code = "upstream_error"

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(
            message,
            details=f"upstream_status={upstream_status}" if upstream_status else None,
        )
        self.upstream_status = upstream_status


class LLMError(PlaygroundException):
    """Raised when an OpenAI call fails or returns no usable content."""
    status_code = 500
    error_code = "llm_error"

    def __init__(self, message: str = "OpenAIからの応答が無効です", upstream_status: Optional[int] = None):
        super().__init__(
            message,
            details=f"upstream_status={upstream_status}" if upstream_status else None,
        )
        self.upstream_status = upstream_status


class ResponseParseError(PlaygroundException):
    """
    Raised when the AI response cannot be parsed as JSON.

    The raw text is returned to the caller as rawResponse for debugging.
    """
    status_code = 500
    error_code = "response_parse_error"

    def __init__(self, message: str, raw_response: str):
        super().__init__(message)
        self.raw_response = raw_response

    def extra_fields(self) -> Dict[str, Any]:
        return {"rawResponse": self.raw_response}


class AnalysisError(PlaygroundException):
    """Raised when the website analysis workflow output is unusable."""
    status_code = 500
    error_code = "analysis_error"


class ProductNotFoundError(PlaygroundException):
    """Raised when a catalog product id is unknown."""
    status_code = 404
    error_code = "product_not_found"

    def __init__(self, product_id: str):
        super().__init__(
            message=f"プロダクトが見つかりません: {product_id}",
            details=f"product_id={product_id}",
        )
        self.product_id = product_id
