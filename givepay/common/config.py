"""Central environment-driven settings for the checkout service.

The process loads this once at startup. Behavior is controlled by environment
variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "donation-checkout"
    log_level: str = "INFO"
    stripe_secret_key: str
    checkout_success_url: str = "http://localhost:5500/success.html"
    checkout_cancel_url: str = "http://localhost:5500/cancel.html"
    # Gateway rejections are reported in the body; 200 keeps existing clients working.
    checkout_error_status_code: int = 200
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
