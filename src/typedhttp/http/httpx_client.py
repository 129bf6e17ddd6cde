# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementations."""

from __future__ import annotations

import httpx

from ..config import JSON_HEADERS, HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import AsyncHttpClient, HttpClient
from .models import HttpRequest, HttpResponse


# Added by httpx.Client on every request unless removed; only JSON_HEADERS are sent.
_HTTPX_DEFAULT_HEADERS = ("User-Agent", "Accept-Encoding", "Connection", "Accept")


def _request_headers(request: HttpRequest) -> dict[str, str]:
    headers = dict(JSON_HEADERS)
    headers.update(request.headers or {})
    return headers


def _strip_default_headers(headers: httpx.Headers) -> None:
    for name in _HTTPX_DEFAULT_HEADERS:
        headers.pop(name, None)


def _to_response(resp: httpx.Response) -> HttpResponse:
    return HttpResponse(
        ok=True,
        status_code=resp.status_code,
        headers={key.lower(): value for key, value in resp.headers.items()},
        content=resp.content,
        url=str(resp.url),
    )


def _to_failure(exc: Exception) -> HttpResponse:
    return HttpResponse(
        ok=False,
        error_message=str(exc) or type(exc).__name__,
        error_type=categorize_exception(exc).value,
    )


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        _strip_default_headers(self._client.headers)

    def request(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=_request_headers(request),
                content=request.body,
            )
        except Exception as exc:  # noqa: BLE001
            return _to_failure(exc)
        return _to_response(resp)

    def close(self) -> None:
        self._client.close()


class AsyncHttpxClient(AsyncHttpClient):
    """Asynchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=False,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )
        _strip_default_headers(self._client.headers)

    async def request(self, request: HttpRequest) -> HttpResponse:
        try:
            resp = await self._client.request(
                request.method,
                request.url,
                headers=_request_headers(request),
                content=request.body,
            )
        except Exception as exc:  # noqa: BLE001
            return _to_failure(exc)
        return _to_response(resp)

    async def aclose(self) -> None:
        await self._client.aclose()
