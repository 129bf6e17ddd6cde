# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP descriptors, transport clients and URL helpers."""

from .adapters import AsyncStubHttpClient, StubHttpClient
from .client import AsyncHttpClient, HttpClient, create_default_async_http_client, create_default_http_client
from .httpx_client import AsyncHttpxClient, HttpxClient
from .method import Delete, Get, HttpMethod, Patch, Post, Put, QueryItem, verb_name
from .models import Headers, HttpRequest, HttpResponse
from .resource import Resource
from .url import append_path_component, build_url, parse_url, with_query

__all__ = [
    "AsyncHttpClient",
    "AsyncHttpxClient",
    "AsyncStubHttpClient",
    "Delete",
    "Get",
    "Headers",
    "HttpClient",
    "HttpMethod",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "Patch",
    "Post",
    "Put",
    "QueryItem",
    "Resource",
    "StubHttpClient",
    "append_path_component",
    "build_url",
    "create_default_async_http_client",
    "create_default_http_client",
    "parse_url",
    "verb_name",
    "with_query",
]
