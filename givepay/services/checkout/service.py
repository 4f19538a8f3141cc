"""Stripe Checkout session creation for donations.

Builds one hosted-checkout session per donation and folds any gateway failure
into an error response instead of raising it.
"""

import stripe

from givepay.common.logging import logger, session_id_ctx
from givepay.common.metrics import (
    checkout_sessions_total,
    gateway_errors_total,
    gateway_latency_seconds,
)
from givepay.common.tracing import tracer
from givepay.services.checkout.schemas import CheckoutResponse, DonationRequest


class CheckoutSessionBuilder:
    """Translates donation requests into Stripe Checkout sessions."""

    def __init__(
        self,
        api_key: str,
        success_url: str,
        cancel_url: str,
        service_name: str = "donation-checkout",
    ) -> None:
        self.api_key = api_key
        self.success_url = success_url
        self.cancel_url = cancel_url
        self.service_name = service_name

    def build_session_params(self, req: DonationRequest) -> dict:
        """Session-creation parameters for a single one-time donation.

        Absent request fields stay None; the Stripe client omits None params,
        so Stripe answers with a missing-param error.
        """

        return {
            "mode": "payment",
            "success_url": self.success_url,
            "cancel_url": self.cancel_url,
            "line_items": [
                {
                    "quantity": 1,
                    "price_data": {
                        "currency": req.currency,
                        "unit_amount": req.amount,
                        "product_data": {"name": f"Donation by {req.donor_name}"},
                    },
                }
            ],
        }

    def create_checkout_session(self, req: DonationRequest) -> CheckoutResponse:
        """Create a hosted checkout session and map the outcome.

        Stripe errors (bad key, unsupported currency, amount below minimum,
        connectivity) come back as `status="error"` carrying the gateway text.
        """

        params = self.build_session_params(req)
        try:
            with (
                tracer.start_as_current_span("stripe.checkout.session.create"),
                gateway_latency_seconds.labels(service=self.service_name).time(),
            ):
                # Credential is passed per call; the module-level stripe.api_key stays unset.
                session = stripe.checkout.Session.create(api_key=self.api_key, **params)
        except stripe.StripeError as exc:
            error_type = type(exc).__name__
            gateway_errors_total.labels(service=self.service_name, error_type=error_type).inc()
            checkout_sessions_total.labels(service=self.service_name, outcome="error").inc()
            logger.warning(
                "checkout session rejected error_type=%s amount=%s currency=%s",
                error_type,
                req.amount,
                req.currency,
            )
            return CheckoutResponse.error(exc.user_message or str(exc))

        session_id_ctx.set(session.id)
        checkout_sessions_total.labels(service=self.service_name, outcome="success").inc()
        logger.info(
            "checkout session created amount=%s currency=%s", req.amount, req.currency
        )
        return CheckoutResponse.success(session_id=session.id, session_url=session.url)
