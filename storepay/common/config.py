"""Environment-driven settings for the payment intent service.

The process loads this once at startup (see `.env.example`). The Stripe key
is held as a `SecretStr` so it never renders in logs or reprs.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-intent"
    log_level: str = "INFO"
    payment_provider: str = "stripe"
    stripe_secret_key: SecretStr = SecretStr("")
    payment_currency: str = "myr"
    firebase_project_id: str = ""
    otel_exporter_otlp_endpoint: str = ""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
