"""Payment provider adapters used by the payment intent service."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Protocol

import stripe

from storepay.common.config import Settings
from storepay.common.errors import ProviderError


@dataclass(frozen=True)
class ProviderIntent:
    id: str
    client_secret: str


class PaymentProvider(Protocol):
    name: str

    def create_intent(self, amount: int, currency: str) -> ProviderIntent: ...


class StripeProvider:
    """Creates Stripe PaymentIntents with a key bound at construction.

    The key is passed on each request instead of being set on the `stripe`
    module, so several providers can coexist in one process.
    """

    name = "stripe"

    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise RuntimeError("STRIPE_SECRET_KEY is not set")
        self._api_key = api_key

    def __repr__(self) -> str:
        return "StripeProvider(api_key=<redacted>)"

    def create_intent(self, amount: int, currency: str) -> ProviderIntent:
        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=currency,
                api_key=self._api_key,
            )
        except stripe.StripeError as exc:
            raise ProviderError(exc.user_message or str(exc)) from exc
        return ProviderIntent(id=intent.id, client_secret=intent.client_secret)


class DummyProvider:
    """Offline provider for local runs: every call yields a fresh intent."""

    name = "dummy"

    def create_intent(self, amount: int, currency: str) -> ProviderIntent:
        if amount <= 0:
            raise ProviderError("amount must be positive")
        intent_id = f"pi_{uuid.uuid4().hex[:24]}"
        return ProviderIntent(id=intent_id, client_secret=f"{intent_id}_secret_{uuid.uuid4().hex[:24]}")


def build_provider(config: Settings) -> PaymentProvider:
    """Instantiate the provider selected by `PAYMENT_PROVIDER`."""

    if config.payment_provider == "stripe":
        return StripeProvider(config.stripe_secret_key.get_secret_value())
    if config.payment_provider == "dummy":
        return DummyProvider()
    raise RuntimeError(f"PAYMENT_PROVIDER='{config.payment_provider}' is not supported")
