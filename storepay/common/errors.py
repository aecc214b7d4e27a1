"""Structured errors returned to callable clients.

Status names follow the callable-function protocol so mobile SDKs map them to
their own error codes.
"""

from typing import Any


class CallableError(Exception):
    """Error that is rendered to the caller as `{"error": {...}}`."""

    status = "INTERNAL"
    http_status = 500

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        error: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class UnauthenticatedError(CallableError):
    status = "UNAUTHENTICATED"
    http_status = 401


class InvalidArgumentError(CallableError):
    status = "INVALID_ARGUMENT"
    http_status = 400


class InternalError(CallableError):
    status = "INTERNAL"
    http_status = 500


class ProviderError(Exception):
    """Raised by payment providers when the upstream call fails."""
