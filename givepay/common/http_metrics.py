"""Per-request Prometheus accounting for the FastAPI app."""

from time import perf_counter

from fastapi import FastAPI, Request

from givepay.common.metrics import http_request_duration_seconds, http_requests_total


def route_label(request: Request) -> str:
    """Matched route template, or the raw path for unmatched requests."""

    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def install_http_metrics(app: FastAPI, service_name: str) -> None:
    """Count and time every request, labelled by route template."""

    @app.middleware("http")
    async def record_http_metrics(request: Request, call_next):
        started = perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            labels = {"service": service_name, "route": route_label(request), "method": request.method}
            http_request_duration_seconds.labels(**labels).observe(perf_counter() - started)
            http_requests_total.labels(**labels, status_code=str(status_code)).inc()
