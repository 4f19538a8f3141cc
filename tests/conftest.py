"""Shared fixtures: fake Stripe gateway and test environment."""

import os
from types import SimpleNamespace

import pytest
import stripe

os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_givepay")
os.environ.setdefault("TRACING_ENABLED", "false")


class FakeSessionCreate:
    """Stand-in for `stripe.checkout.Session.create` that records calls."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict] = []

    def __call__(self, **params):
        self.calls.append(params)
        if self.error is not None:
            raise self.error
        n = len(self.calls)
        return SimpleNamespace(
            id=f"cs_test_{n}",
            url=f"https://checkout.stripe.com/c/pay/cs_test_{n}",
        )


@pytest.fixture
def gateway(monkeypatch):
    """Accepting gateway; set `.error` to make it reject."""

    fake = FakeSessionCreate()
    monkeypatch.setattr(stripe.checkout.Session, "create", fake)
    return fake
