"""Request logging and Prometheus metrics for the contact API.

Every request is counted once it completes. Metrics carry the route template
(``/api/contact/{contact_id}``) instead of the concrete path so contact ids
never become label values.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request
from prometheus_client import Counter, Histogram
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger("contactform.api")

contact_requests_total = Counter(
    "contactform_http_requests_total",
    "Contact API requests by route template and response status",
    ["method", "route", "status"],
)

contact_request_latency_seconds = Histogram(
    "contactform_http_request_latency_seconds",
    "Contact API request latency, one database round trip per request",
    ["method", "route"],
)


def route_label(request: Request) -> str:
    """Full route template for the request, mount prefix included.

    The matched route's template covers the tail of the request path; the
    leading segments it does not cover form the prefix it was mounted under.
    Unmatched requests are labelled by their raw path.
    """

    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if not template:
        return request.url.path
    if ":path}" in template:
        return template

    segments = request.url.path.strip("/").split("/")
    template_segments = template.strip("/").split("/")
    prefix = segments[: len(segments) - len(template_segments)]
    if not prefix:
        return template
    return "/" + "/".join(prefix) + template


def observe_request(method: str, route: str, status: int, duration_seconds: float) -> None:
    contact_requests_total.labels(method=method, route=route, status=str(status)).inc()
    contact_request_latency_seconds.labels(method=method, route=route).observe(duration_seconds)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured logging and metrics for inbound HTTP requests."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        observe_request(request.method, route_label(request), response.status_code, duration)
        logger.info(
            "request.completed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status": response.status_code,
                "duration_ms": round(duration * 1000, 2),
                "client": request.client.host if request.client else None,
            },
        )

        return response
