"""Public entrypoint for donation checkout.

Accepts a donation, asks Stripe for a hosted checkout session and returns the
redirect URL. Gateway rejections are reported in the body `status` field.
"""

from fastapi import FastAPI, Header, Response

from givepay.common.config import settings
from givepay.common.http_metrics import install_http_metrics
from givepay.common.logging import bind_trace_id, configure_logging
from givepay.common.metrics import checkout_requests_total, metrics_response
from givepay.common.startup import log_startup_config
from givepay.common.tracing import enable_tracing
from givepay.services.checkout.schemas import CheckoutResponse, DonationRequest
from givepay.services.checkout.service import CheckoutSessionBuilder

configure_logging()
log_startup_config(
    settings,
    [
        "stripe_secret_key",
        "checkout_success_url",
        "checkout_cancel_url",
        "checkout_error_status_code",
        "tracing_enabled",
    ],
)
service = CheckoutSessionBuilder(
    api_key=settings.stripe_secret_key,
    success_url=settings.checkout_success_url,
    cancel_url=settings.checkout_cancel_url,
    service_name=settings.service_name,
)

app = FastAPI(title="GivePay Donation Checkout")
enable_tracing(app, settings.service_name)
install_http_metrics(app, settings.service_name)


@app.post(
    "/donation/checkout",
    response_model=CheckoutResponse,
    response_model_exclude_none=True,
)
def create_checkout(
    req: DonationRequest,
    response: Response,
    x_correlation_id: str | None = Header(default=None),
):
    """Create a Stripe Checkout session for a one-time donation.

    Declared sync so the blocking Stripe call runs in the worker threadpool.
    """

    bind_trace_id(x_correlation_id)
    checkout_requests_total.labels(service=settings.service_name).inc()
    result = service.create_checkout_session(req)
    if result.status == "error":
        response.status_code = settings.checkout_error_status_code
    return result


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
