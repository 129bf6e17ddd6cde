# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
typedhttp package entrypoint.

A small typed HTTP helper: describe a resource (URL, verb and payload, and the
type the JSON response should decode into), hand it to a WebService, and get
back a decoded value or a typed NetworkError. Requests can be issued with a
completion callback, awaited, run blocking, or consumed as a single-value
Publisher.
"""

from .codec import decode, encode
from .config import JSON_HEADERS, HttpSettings, load_http_settings
from .errors import (
    BadRequest,
    BadURL,
    DecodeErrorKind,
    ErrorKind,
    InvalidJSON,
    NetworkError,
    ServerError,
    UnknownError,
)
from .http import (
    AsyncHttpxClient,
    Delete,
    Get,
    HttpClient,
    HttpMethod,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    Patch,
    Post,
    Put,
    Resource,
    build_url,
)
from .log import setup_logging
from .publisher import Publisher
from .result import Result
from .version import __version__
from .webservice import WebService, default_web_service

__all__ = [
    "AsyncHttpxClient",
    "BadRequest",
    "BadURL",
    "DecodeErrorKind",
    "Delete",
    "ErrorKind",
    "Get",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "InvalidJSON",
    "JSON_HEADERS",
    "NetworkError",
    "Patch",
    "Post",
    "Publisher",
    "Put",
    "Resource",
    "Result",
    "ServerError",
    "UnknownError",
    "WebService",
    "__version__",
    "build_url",
    "decode",
    "default_web_service",
    "encode",
    "load_http_settings",
    "setup_logging",
]
