"""Request/response schemas for the createPaymentIntent callable."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

# Callable clients send 64-bit integers (Kotlin/Java Long) wrapped in this
# envelope, with the digits as a string.
INT64_WRAPPER_TYPES = {
    "type.googleapis.com/google.protobuf.Int64Value",
    "type.googleapis.com/google.protobuf.UInt64Value",
}


def decode_callable_int(value: Any) -> Any:
    """Unwrap a callable `Int64Value`/`UInt64Value` into a plain int."""

    if isinstance(value, dict) and value.get("@type") in INT64_WRAPPER_TYPES:
        digits = value.get("value")
        if not isinstance(digits, str):
            raise ValueError("wrapped integer value must be a string")
        return int(digits)
    return value


class PaymentIntentRequest(BaseModel):
    """Amount in minor currency units. Range checks are left to the provider."""

    amount: StrictInt

    @field_validator("amount", mode="before")
    @classmethod
    def _unwrap_int64(cls, value: Any) -> Any:
        return decode_callable_int(value)


class PaymentIntentResult(BaseModel):
    """Client secret exactly as issued by the provider."""

    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")


class CallableRequest(BaseModel):
    """Callable protocol envelope: `{"data": {...}}`."""

    data: Any = None


class AuthContext(BaseModel):
    """Authenticated caller identity. Absence of a context means anonymous."""

    model_config = ConfigDict(frozen=True)

    uid: str
    claims: dict[str, Any] = Field(default_factory=dict)
