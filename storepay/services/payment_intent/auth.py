"""Caller authentication from Firebase ID tokens."""

from typing import Any, Optional, Protocol

import jwt

from storepay.common.logging import logger
from storepay.services.payment_intent.schemas import AuthContext

GOOGLE_JWKS_URL = "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
ID_TOKEN_ALG = "RS256"


class TokenVerifier(Protocol):
    def verify(self, token: str) -> dict[str, Any]: ...


class FirebaseTokenVerifier:
    """Verify Firebase ID tokens against Google's published signing keys."""

    def __init__(self, project_id: str, jwks_client: Optional[Any] = None) -> None:
        if not project_id:
            raise RuntimeError("FIREBASE_PROJECT_ID is empty. Put it into .env")
        self.project_id = project_id
        self.issuer = f"https://securetoken.google.com/{project_id}"
        self._jwks = jwks_client or jwt.PyJWKClient(GOOGLE_JWKS_URL)

    def verify(self, token: str) -> dict[str, Any]:
        signing_key = self._jwks.get_signing_key_from_jwt(token)
        claims = jwt.decode(
            token,
            signing_key.key,
            algorithms=[ID_TOKEN_ALG],
            audience=self.project_id,
            issuer=self.issuer,
            options={"require": ["exp", "iat", "sub"]},
        )
        if not claims.get("sub"):
            raise jwt.InvalidTokenError("empty subject")
        return claims


def resolve_auth(authorization: str | None, verifier: TokenVerifier) -> Optional[AuthContext]:
    """Turn an Authorization header into an auth context, or None if anonymous.

    A present but unverifiable token is treated as anonymous; the handler
    then rejects the call as unauthenticated.
    """

    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    try:
        claims = verifier.verify(token.strip())
    except jwt.PyJWTError as exc:
        logger.warning("id token rejected: %s", exc)
        return None
    return AuthContext(uid=claims["sub"], claims=claims)
