"""Prometheus metric definitions for the checkout service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


checkout_requests_total = Counter(
    "checkout_requests_total", "Total donation checkout requests", ["service"]
)
checkout_sessions_total = Counter(
    "checkout_sessions_total",
    "Checkout session attempts by outcome",
    ["service", "outcome"],
)
gateway_errors_total = Counter(
    "gateway_errors_total",
    "Payment gateway errors by Stripe error class",
    ["service", "error_type"],
)
gateway_latency_seconds = Histogram(
    "gateway_latency_seconds", "Checkout session creation latency seconds", ["service"]
)
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
