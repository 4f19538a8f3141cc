"""OpenTelemetry wiring: request spans from FastAPI plus a span per Stripe call."""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

from givepay.common.config import settings

# Proxy tracer: no-op until enable_tracing registers a provider.
tracer = trace.get_tracer("givepay.checkout")


def enable_tracing(app: FastAPI, service_name: str) -> bool:
    """Export spans over OTLP/HTTP and instrument `app`.

    Returns False without touching anything when TRACING_ENABLED is off.
    """

    if not settings.tracing_enabled:
        return False
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint))
    )
    trace.set_tracer_provider(provider)
    FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
    return True
