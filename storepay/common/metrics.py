"""Prometheus metric definitions for the payment intent service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_intent_requests_total = Counter(
    "payment_intent_requests_total",
    "Payment intent calls by outcome",
    ["service", "outcome"],
)
provider_call_seconds = Histogram(
    "provider_call_seconds",
    "Latency of the outbound payment provider call",
    ["service"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
