"""Prometheus request metrics for the hotel API.

Series are labelled by route template (``/menu/{item_id}``), never by the raw
URL, so the number of series is bounded by the number of routes. Requests that
match no route share the ``UNMATCHED_ROUTE`` label.
"""

from __future__ import annotations

from typing import Any, Mapping

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

UNMATCHED_ROUTE = "<unmatched>"

# Handlers await a single MongoDB round trip; finer buckets at the low end.
LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)

requests_served = Counter(
    "hotel_http_requests_total",
    "Requests answered, by route template and status",
    ["method", "path", "status"],
)

request_duration = Histogram(
    "hotel_http_request_duration_seconds",
    "Time spent producing a response, by route template",
    ["method", "path"],
    buckets=LATENCY_BUCKETS,
)


def route_label(scope: Mapping[str, Any]) -> str:
    route = scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ROUTE


def record_request(scope: Mapping[str, Any], status: int, elapsed: float) -> None:
    method = scope.get("method", "")
    path = route_label(scope)
    requests_served.labels(method=method, path=path, status=str(status)).inc()
    request_duration.labels(method=method, path=path).observe(elapsed)


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
