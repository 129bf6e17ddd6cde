# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging
import socket
import ssl

import httpx
import pytest

from typedhttp import config, log
from typedhttp.errors import (
    BadRequest,
    BadURL,
    ErrorCategory,
    ErrorKind,
    InvalidJSON,
    ServerError,
    UnknownError,
    categorize_exception,
)
from typedhttp.result import Result


def test_http_settings_defaults_wait_indefinitely(monkeypatch):
    for name in ("TYPEDHTTP_HTTP_TIMEOUT", "TYPEDHTTP_HTTP_VERIFY_SSL", "TYPEDHTTP_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_http_settings()
    assert settings.timeout is None
    assert settings.verify_ssl is True
    assert settings.max_workers == 4


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("TYPEDHTTP_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("TYPEDHTTP_HTTP_VERIFY_SSL", "off")
    monkeypatch.setenv("TYPEDHTTP_MAX_WORKERS", "8")
    settings = config.load_http_settings()
    assert settings.timeout == 2.5
    assert settings.verify_ssl is False
    assert settings.max_workers == 8


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("TYPEDHTTP_HTTP_TIMEOUT", "soon")
    monkeypatch.setenv("TYPEDHTTP_MAX_WORKERS", "0")
    settings = config.load_http_settings()
    assert settings.timeout is None
    assert settings.max_workers == config.HttpSettings.max_workers

    monkeypatch.setenv("TYPEDHTTP_HTTP_TIMEOUT", "0")
    assert config.load_http_settings().timeout is None


def test_json_headers_are_read_only():
    assert dict(config.JSON_HEADERS) == {"Content-Type": "application/json", "Accept": "application/json"}
    with pytest.raises(TypeError):
        config.JSON_HEADERS["X-Extra"] = "1"  # type: ignore[index]


def test_setup_logging_uses_requested_level(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))
    log.setup_logging("debug")
    assert captured["level"] == logging.DEBUG
    log.setup_logging("nonsense")
    assert captured["level"] == logging.WARNING


@pytest.mark.parametrize(
    ("error_cls", "kind"),
    [
        (BadURL, ErrorKind.BAD_URL),
        (BadRequest, ErrorKind.BAD_REQUEST),
        (ServerError, ErrorKind.SERVER_ERROR),
        (InvalidJSON, ErrorKind.INVALID_JSON),
        (UnknownError, ErrorKind.UNKNOWN),
    ],
)
def test_error_kinds_and_defaults(error_cls, kind):
    err = error_cls("boom")
    assert err.kind is kind
    assert err.code == 0
    assert err.message == "boom"
    assert err == error_cls("boom")
    assert err != error_cls("boom", code=500)


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (httpx.ConnectTimeout("t"), ErrorCategory.TIMEOUT),
        (httpx.ConnectError("c"), ErrorCategory.CONNECTION_ERROR),
        (socket.gaierror("dns"), ErrorCategory.DNS_ERROR),
        (ssl.SSLError("tls"), ErrorCategory.SSL_ERROR),
        (ConnectionResetError("reset"), ErrorCategory.CONNECTION_ERROR),
        (ValueError("other"), ErrorCategory.UNKNOWN_ERROR),
    ],
)
def test_categorize_exception(exc, category):
    assert categorize_exception(exc) is category


def test_result_unwrap():
    assert Result.success(3).unwrap() == 3
    assert Result.success(3).ok is True
    failure = Result.failure(ServerError("down"))
    assert failure.ok is False
    with pytest.raises(ServerError):
        failure.unwrap()
    with pytest.raises(ValueError):
        Result(value=1, error=BadRequest("x"))
