"""HTTP surface for the createPaymentIntent callable.

Speaks the callable-function wire format: requests carry `{"data": ...}`,
responses carry `{"result": ...}` or `{"error": {...}}`. Run with
`uvicorn --factory storepay.services.payment_intent.main:build_app`.
"""

import json
from typing import Any
from fastapi import FastAPI, Header, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from storepay.common.config import Settings, settings
from storepay.common.errors import CallableError, InternalError, InvalidArgumentError
from storepay.common.logging import bind_request_context, configure_logging, logger
from storepay.common.metrics import metrics_response, payment_intent_requests_total
from storepay.common.startup import log_startup_config
from storepay.common.tracing import instrument_app, setup_tracing
from storepay.services.payment_intent.auth import FirebaseTokenVerifier, TokenVerifier, resolve_auth
from storepay.services.payment_intent.provider import build_provider
from storepay.services.payment_intent.schemas import CallableRequest, PaymentIntentRequest
from storepay.services.payment_intent.service import PaymentIntentService


def parse_payload(raw: bytes) -> PaymentIntentRequest:
    """Decode a callable request body into a `PaymentIntentRequest`."""

    try:
        body: Any = json.loads(raw or b"null")
        envelope = CallableRequest.model_validate(body)
        return PaymentIntentRequest.model_validate(envelope.data)
    except (ValueError, ValidationError) as exc:
        raise InvalidArgumentError("The function must be called with an integer 'amount'.") from exc


def create_app(service: PaymentIntentService, verifier: TokenVerifier) -> FastAPI:
    """Wire handler and token verifier into a FastAPI app."""

    app = FastAPI(title="Storepay Payment Intent")

    @app.exception_handler(CallableError)
    async def callable_error_handler(_: Request, exc: CallableError) -> JSONResponse:
        return JSONResponse(status_code=exc.http_status, content=exc.to_payload())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error: %s", exc)
        error = InternalError("Internal error.")
        return JSONResponse(status_code=error.http_status, content=error.to_payload())

    @app.post("/createPaymentIntent")
    async def create_payment_intent(
        request: Request,
        authorization: str | None = Header(default=None),
        x_correlation_id: str | None = Header(default=None),
    ):
        """Create a payment intent for the authenticated caller."""

        trace_id = bind_request_context(x_correlation_id)
        auth = await run_in_threadpool(resolve_auth, authorization, verifier)
        bind_request_context(trace_id, auth.uid if auth else "")
        # Anonymous callers are rejected before the payload is looked at.
        service.require_auth(auth)

        try:
            payload = parse_payload(await request.body())
        except InvalidArgumentError:
            logger.warning("invalid createPaymentIntent payload")
            payment_intent_requests_total.labels(service=service.service_name, outcome="invalid_argument").inc()
            raise

        result = await run_in_threadpool(service.create_payment_intent, payload, auth)
        return {"result": result.model_dump(by_alias=True)}

    @app.get("/health")
    def health():
        """Container health probe endpoint."""

        return {"ok": True}

    @app.get("/metrics")
    def metrics():
        """Prometheus scrape endpoint."""

        return metrics_response()

    instrument_app(app)
    return app


def build_app(config: Settings = settings) -> FastAPI:
    """Production entrypoint: load config once and build real collaborators."""

    configure_logging(config)
    setup_tracing(config)
    log_startup_config(config)
    service = PaymentIntentService(
        build_provider(config),
        currency=config.payment_currency,
        service_name=config.service_name,
    )
    verifier = FirebaseTokenVerifier(config.firebase_project_id)
    return create_app(service, verifier)
