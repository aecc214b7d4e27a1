"""Shared fakes for payment intent tests."""

import time
from types import SimpleNamespace

import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from storepay.common.errors import ProviderError
from storepay.services.payment_intent.provider import ProviderIntent
from storepay.services.payment_intent.schemas import AuthContext
from storepay.services.payment_intent.service import PaymentIntentService

PROJECT_ID = "store-app"


class RecordingProvider:
    """Provider double that records calls and replays a scripted outcome."""

    name = "recording"

    def __init__(self, client_secret: str = "pi_123_secret_abc", error: str | None = None) -> None:
        self.client_secret = client_secret
        self.error = error
        self.calls: list[tuple[int, str]] = []

    def create_intent(self, amount: int, currency: str) -> ProviderIntent:
        self.calls.append((amount, currency))
        if self.error is not None:
            raise ProviderError(self.error)
        return ProviderIntent(id="pi_123", client_secret=self.client_secret)


class StaticVerifier:
    """Accepts exactly one token and maps it to a fixed uid."""

    def __init__(self, token: str = "good-token", uid: str = "user-1") -> None:
        self.token = token
        self.uid = uid

    def verify(self, token: str) -> dict:
        if token != self.token:
            raise jwt.InvalidTokenError("bad token")
        return {"sub": self.uid}


class FakeJwksClient:
    """Stands in for `jwt.PyJWKClient`, always returning one public key."""

    def __init__(self, public_key) -> None:
        self.public_key = public_key

    def get_signing_key_from_jwt(self, token):
        return SimpleNamespace(key=self.public_key)


def mint_id_token(private_key, **overrides) -> str:
    """Sign a Firebase-shaped ID token for `PROJECT_ID`."""

    now = int(time.time())
    claims = {
        "iss": f"https://securetoken.google.com/{PROJECT_ID}",
        "aud": PROJECT_ID,
        "sub": "user-1",
        "iat": now,
        "exp": now + 3600,
    }
    claims.update(overrides)
    return jwt.encode(claims, private_key, algorithm="RS256")


@pytest.fixture(scope="session")
def private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def service(provider: RecordingProvider) -> PaymentIntentService:
    return PaymentIntentService(provider, currency="myr", service_name="test")


@pytest.fixture
def auth() -> AuthContext:
    return AuthContext(uid="user-1", claims={"sub": "user-1"})
