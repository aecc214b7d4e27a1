"""createPaymentIntent handler: authenticate, call provider, relay secret."""

from typing import Optional

from storepay.common.errors import InternalError, UnauthenticatedError
from storepay.common.logging import logger
from storepay.common.metrics import payment_intent_requests_total, provider_call_seconds
from storepay.services.payment_intent.provider import PaymentProvider
from storepay.services.payment_intent.schemas import AuthContext, PaymentIntentRequest, PaymentIntentResult


class PaymentIntentService:
    """Stateless handler; provider and currency are fixed at construction."""

    def __init__(self, provider: PaymentProvider, currency: str, service_name: str = "payment-intent") -> None:
        self.provider = provider
        self.currency = currency
        self.service_name = service_name

    def require_auth(self, auth: Optional[AuthContext]) -> AuthContext:
        if auth is None:
            logger.error("User is not authenticated.")
            payment_intent_requests_total.labels(service=self.service_name, outcome="unauthenticated").inc()
            raise UnauthenticatedError("The function must be called while authenticated.")
        return auth

    def create_payment_intent(
        self,
        request: PaymentIntentRequest,
        auth: Optional[AuthContext],
    ) -> PaymentIntentResult:
        """Create one payment intent for `request.amount`.

        Raises `UnauthenticatedError` without touching the provider when `auth`
        is missing, and `InternalError` carrying the upstream message when the
        provider call fails. Nothing is retried.
        """

        self.require_auth(auth)

        logger.info("Creating payment intent for amount: %s", request.amount)
        try:
            with provider_call_seconds.labels(service=self.service_name).time():
                intent = self.provider.create_intent(request.amount, self.currency)
        except Exception as exc:
            logger.error("payment provider error provider=%s error=%s", self.provider.name, exc)
            payment_intent_requests_total.labels(service=self.service_name, outcome="failed").inc()
            raise InternalError("Could not create payment intent.", str(exc)) from exc

        logger.info("payment intent created intent_id=%s", intent.id)
        payment_intent_requests_total.labels(service=self.service_name, outcome="created").inc()
        return PaymentIntentResult(client_secret=intent.client_secret)
