# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    BAD_URL = "BAD_URL"
    BAD_REQUEST = "BAD_REQUEST"
    SERVER_ERROR = "SERVER_ERROR"
    INVALID_JSON = "INVALID_JSON"
    UNKNOWN = "UNKNOWN"


class DecodeErrorKind(str, Enum):
    """Structural reasons a JSON document failed to decode into a type."""

    TYPE_MISMATCH = "type_mismatch"
    VALUE_NOT_FOUND = "value_not_found"
    KEY_NOT_FOUND = "key_not_found"
    DATA_CORRUPTED = "data_corrupted"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class NetworkError(Exception):
    """
    Base class for every failure surfaced by a WebService call.

    ``code`` is an HTTP status when one is known and ``0`` otherwise.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str = "", *, code: int = 0, decode_error: DecodeErrorKind | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.decode_error = decode_error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return (self.kind, self.code, self.message) == (other.kind, other.code, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.code, self.message))


class BadURL(NetworkError):
    kind = ErrorKind.BAD_URL


class BadRequest(NetworkError):
    kind = ErrorKind.BAD_REQUEST


class ServerError(NetworkError):
    kind = ErrorKind.SERVER_ERROR


class InvalidJSON(NetworkError):
    kind = ErrorKind.INVALID_JSON


class UnknownError(NetworkError):
    kind = ErrorKind.UNKNOWN


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "BadRequest",
    "BadURL",
    "DecodeErrorKind",
    "ErrorCategory",
    "ErrorKind",
    "InvalidJSON",
    "NetworkError",
    "ServerError",
    "UnknownError",
    "categorize_exception",
]
