"""JWT verification, request id sanitizing and log record request ids."""

import logging
from datetime import timedelta

import pytest

from app.infrastructure.security.jwt import (
    create_access_token,
    user_id_from_token,
    verify_token,
)
from app.middleware.request_id import sanitize_request_id
from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.telemetry.logging import RequestIdFilter


def test_token_round_trip_user_id() -> None:
    token = create_access_token({"sub": "42"})
    assert verify_token(token)["sub"] == "42"
    assert user_id_from_token(token) == 42


def test_expired_token_rejected() -> None:
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_non_integer_sub_rejected() -> None:
    token = create_access_token({"sub": "someone"})
    with pytest.raises(ValueError, match="not a user id"):
        user_id_from_token(token)


def test_garbage_token_rejected() -> None:
    with pytest.raises(ValueError):
        verify_token("not.a.jwt")


@pytest.mark.parametrize("raw", ["abc-123", "A_b", "x" * 64])
def test_sanitize_request_id_keeps_safe_values(raw: str) -> None:
    assert sanitize_request_id(raw) == raw


@pytest.mark.parametrize("raw", [None, "", "x" * 65, "bad id", "line\nbreak", "<script>"])
def test_sanitize_request_id_replaces_unsafe_values(raw) -> None:
    value = sanitize_request_id(raw)
    assert value != raw
    assert len(value) == 36


def test_request_id_filter_uses_context() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = set_request_id("req-1")
    try:
        RequestIdFilter().filter(record)
        assert record.request_id == "req-1"
    finally:
        reset_request_id(token)
    assert get_request_id() is None
    RequestIdFilter().filter(record)
    assert record.request_id == "-"
