"""Request metrics middleware."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from exporter.telemetry.metrics import http_request_duration, http_requests_total

_SKIP_PATHS = {"/metrics", "/health", "/openapi.json", "/docs", "/redoc"}
_UNMATCHED = "unmatched"


def route_label(request: Request) -> str:
    """Route template of the request, so requests to unknown paths share one series."""
    route = request.scope.get("route")
    return getattr(route, "path", _UNMATCHED)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        labels = {
            "method": request.method,
            "endpoint": route_label(request),
            "status_code": str(response.status_code),
        }
        http_request_duration.labels(**labels).observe(elapsed)
        http_requests_total.labels(**labels).inc()

        return response
