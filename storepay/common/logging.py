"""Structured JSON logging with request context fields."""

import logging
import sys
from contextvars import ContextVar
from typing import Iterable, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from storepay.common.config import Settings, settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
uid_ctx: ContextVar[str] = ContextVar("uid", default="")

REDACTED = "<redacted>"


class ContextFilter(logging.Filter):
    """Inject service name, trace id and caller uid into every log record.

    Any configured secret that shows up in a rendered message is replaced
    with `<redacted>`.
    """

    def __init__(self, service_name: str, secrets: Iterable[str] = ()) -> None:
        super().__init__()
        self.service_name = service_name
        self.secrets = [secret for secret in secrets if secret]

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = self.service_name
        record.trace_id = trace_id_ctx.get()
        record.uid = uid_ctx.get()
        if self.secrets:
            message = record.getMessage()
            scrubbed = message
            for secret in self.secrets:
                scrubbed = scrubbed.replace(secret, REDACTED)
            if scrubbed != message:
                record.msg = scrubbed
                record.args = None
        return True


def bind_request_context(trace_id: Optional[str], uid: str = "") -> str:
    """Set the per-request log fields; a trace id is generated when absent."""

    trace_id = trace_id or str(uuid4())
    trace_id_ctx.set(trace_id)
    uid_ctx.set(uid)
    return trace_id


def configure_logging(config: Settings = settings) -> None:
    """Configure root logger once per process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter(config.service_name, [config.stripe_secret_key.get_secret_value()])
    handler.addFilter(context_filter)
    formatter = JsonFormatter("%(asctime)s %(levelname)s %(service_name)s %(trace_id)s %(uid)s %(message)s")
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(config.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("storepay")
