"""Startup-time helpers for safe config logging."""

from typing import Any

from pydantic import SecretStr

from storepay.common.config import Settings
from storepay.common.logging import REDACTED, logger


SECRET_MARKERS = ("key", "secret", "password", "token")
UNSET = "<unset>"


def _safe_value(name: str, value: Any) -> Any:
    """Return a loggable form of one setting; secret-like values are redacted."""

    if isinstance(value, SecretStr):
        value = value.get_secret_value()
    if value in ("", None):
        return UNSET
    if any(marker in name for marker in SECRET_MARKERS):
        return REDACTED
    return value


def describe_settings(config: Settings) -> dict[str, Any]:
    """Loggable snapshot of every setting, keyed by its env var name."""

    return {name.upper(): _safe_value(name, getattr(config, name)) for name in type(config).model_fields}


def log_startup_config(config: Settings) -> dict[str, Any]:
    """Log the effective configuration for quick troubleshooting."""

    snapshot = describe_settings(config)
    logger.info("startup_config=%s", snapshot)
    return snapshot
