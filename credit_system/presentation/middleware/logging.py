"""Access logging middleware with timing and HTTP metrics."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from credit_system.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _route_template(request: Request) -> str:
    """
    Use the matched route template so metric labels stay low-cardinality.

    Depending on the FastAPI release, an included router's prefix is either
    part of the route path or carried in ``root_path``; both give the full
    template, e.g. /v1/customers/{customer_id}.
    """
    route = request.scope.get("route")
    template = getattr(route, "path_format", None) or getattr(route, "path", None)
    if not template:
        return "unmatched"

    root_path = request.scope.get("root_path", "")
    if root_path and not template.startswith(root_path):
        template = root_path + template
    return template


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        log = logger.bind(method=method, path=request.url.path)

        log.debug("request_started")

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _route_template(request), 500, duration)
            raise

        duration = time.perf_counter() - start_time
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        record_http_request(method, _route_template(request), response.status_code, duration)

        return response
