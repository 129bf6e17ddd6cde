# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable in-memory clients."""

from __future__ import annotations

from collections.abc import Mapping

from .client import AsyncHttpClient, HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests.

    Responses are keyed by ``(method, url)``; a key of just the URL matches any method.
    """

    def __init__(self, responses: Mapping[str | tuple[str, str], HttpResponse] | None = None):
        self._responses: dict[str | tuple[str, str], HttpResponse] = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | Mapping[str, object], *, method: str | None = None) -> None:
        if not isinstance(response, HttpResponse):
            response = HttpResponse.from_mapping(response)
        key: str | tuple[str, str] = (method.upper(), url) if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in ((request.method, request.url), request.url):
            if key in self._responses:
                return self._responses[key]
        return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")

    def close(self) -> None:
        self.closed = True


class AsyncStubHttpClient(AsyncHttpClient):
    """Coroutine front for a StubHttpClient, sharing its responses and request log."""

    def __init__(self, stub: StubHttpClient | None = None):
        self.stub = stub or StubHttpClient()

    @property
    def requests(self) -> list[HttpRequest]:
        return self.stub.requests

    async def request(self, request: HttpRequest) -> HttpResponse:
        return self.stub.request(request)

    async def aclose(self) -> None:
        self.stub.close()


__all__ = ["AsyncStubHttpClient", "StubHttpClient"]
