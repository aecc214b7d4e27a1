"""OpenTelemetry setup helpers."""

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from storepay.common.config import Settings

# Probe and scrape routes produce no spans.
EXCLUDED_URLS = "/health,/metrics"


def setup_tracing(config: Settings) -> bool:
    """Register a tracer provider exporting to the configured OTLP endpoint.

    Returns False and leaves the global provider alone when no endpoint is set.
    """

    if not config.otel_exporter_otlp_endpoint:
        return False
    resource = Resource.create(
        {
            "service.name": config.service_name,
            "payment.provider": config.payment_provider,
        }
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=config.otel_exporter_otlp_endpoint)))
    trace.set_tracer_provider(provider)
    return True


def instrument_app(app: FastAPI) -> None:
    """Attach FastAPI auto-instrumentation for the callable endpoint."""

    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
