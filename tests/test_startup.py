"""Startup config logging and log scrubbing must never leak secrets."""

import logging

from pydantic import SecretStr

from storepay.common.config import Settings
from storepay.common.logging import ContextFilter, bind_request_context
from storepay.common.startup import describe_settings, log_startup_config


def test_settings_snapshot_redacts_secrets_and_marks_unset():
    """The Stripe key is redacted; empty settings show as unset."""

    config = Settings(
        _env_file=None,
        stripe_secret_key=SecretStr("sk_live_do_not_log"),
        payment_currency="myr",
        firebase_project_id="",
    )

    snapshot = describe_settings(config)

    assert snapshot["STRIPE_SECRET_KEY"] == "<redacted>"
    assert snapshot["PAYMENT_CURRENCY"] == "myr"
    assert snapshot["FIREBASE_PROJECT_ID"] == "<unset>"
    assert set(snapshot) == {name.upper() for name in Settings.model_fields}


def test_startup_log_line_has_no_secret(caplog):
    """The logged startup line carries the snapshot, never the raw key."""

    caplog.set_level(logging.INFO, logger="storepay")
    config = Settings(_env_file=None, stripe_secret_key=SecretStr("sk_live_do_not_log"))

    log_startup_config(config)

    messages = [r.getMessage() for r in caplog.records]
    assert any(m.startswith("startup_config=") for m in messages)
    assert not any("sk_live_do_not_log" in m for m in messages)


def test_context_filter_scrubs_configured_secret():
    """A secret interpolated into a message is replaced before emission."""

    record = logging.LogRecord("storepay", logging.ERROR, __file__, 1, "bad key %s", ("sk_live_x",), None)

    ContextFilter("test", ["sk_live_x"]).filter(record)

    assert record.getMessage() == "bad key <redacted>"
    assert record.service_name == "test"


def test_bind_request_context_generates_trace_id():
    """Requests without x-correlation-id still get a trace id."""

    generated = bind_request_context(None, "user-1")
    given = bind_request_context("abc")

    assert generated
    assert given == "abc"
