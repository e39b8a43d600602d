"""
Audit Middleware - Request/response logging for monitoring.

Every request is tagged with the playground product it belongs to and the
upstream services it spends money or time on:

- Upstream-bound product routes are logged at INFO with their tag
- Catalog, health and docs routes are logged at DEBUG
- 4xx responses are logged at WARNING, 5xx at ERROR regardless of route

Logs are written through the application logger.
"""
import time
from typing import Callable, Dict, NamedTuple, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ai_playground.core.logging_config import get_logger

logger = get_logger(__name__)


class RouteTag(NamedTuple):
    product: str
    upstream: str


UPSTREAM_ROUTES: Dict[str, RouteTag] = {
    "/api/chat": RouteTag("chat", "openai"),
    "/api/generate-persona": RouteTag("persona-generator", "openai"),
    "/api/generate-marketing-strategy": RouteTag("persona-generator", "openai"),
    "/api/search-places": RouteTag("place-finder", "google-places"),
    "/api/smart-search-places": RouteTag("place-finder", "openai+google-places"),
    "/api/analyze-website": RouteTag("website-analyzer", "n8n+openai"),
}


def tag_for_path(path: str) -> Optional[RouteTag]:
    """Product and upstream for a route, or None for local-only routes."""
    return UPSTREAM_ROUTES.get(path.rstrip("/") or "/")


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Middleware for logging all requests and responses.

    Adds an X-Response-Time header; the OpenAI and n8n calls behind
    the product routes can take tens of seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log audit information."""
        start_time = time.time()

        method = request.method
        path = request.url.path
        tag = tag_for_path(path)
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.time() - start_time
            logger.error(
                f"REQUEST FAILED: {_label(tag)} {method} {path} "
                f"client={client_ip} duration={duration:.3f}s error={str(e)}"
            )
            raise

        duration = time.time() - start_time
        self._log_request(
            method=method,
            path=path,
            tag=tag,
            status_code=response.status_code,
            duration=duration,
            client_ip=client_ip,
        )
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response

    def _log_request(
        self,
        method: str,
        path: str,
        tag: Optional[RouteTag],
        status_code: int,
        duration: float,
        client_ip: str,
    ) -> None:
        """Log request details."""
        if status_code >= 500:
            log_fn = logger.error
        elif status_code >= 400:
            log_fn = logger.warning
        elif tag is None:
            log_fn = logger.debug
        else:
            log_fn = logger.info

        log_fn(
            f"{_label(tag)} {method} {path} "
            f"status={status_code} duration={duration:.3f}s "
            f"client={client_ip}"
        )


def _label(tag: Optional[RouteTag]) -> str:
    if tag is None:
        return "LOCAL"
    return f"PRODUCT[{tag.product}] upstream={tag.upstream}"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Adds nosniff, frame-deny and referrer headers to every response.

    The API only serves JSON to the playground front end, so it is never
    framed.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response
