# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Typed request/response engine.

One request builder and one decode step are shared by three entry points:

- ``fetch`` runs on a worker thread and reports through a completion callback,
- ``fetch_async`` (and its thread-blocking twin ``fetch_blocking``) returns the
  decoded value or raises,
- ``fetch_stream`` returns a cold single-value Publisher.

Only an exact HTTP 200 counts as success for ``fetch`` and ``fetch_async``.
The entry points disagree on how a bad status or transport
failure is reported: ``fetch`` uses BadRequest, ``fetch_async`` uses
ServerError, and ``fetch_stream`` only rejects responses that carry no HTTP
status at all.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from contextlib import suppress
from functools import lru_cache
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, ValidationError

from . import codec
from .config import JSON_HEADERS, HttpSettings, load_http_settings
from .errors import BadRequest, InvalidJSON, NetworkError, ServerError, UnknownError
from .http.client import AsyncHttpClient, HttpClient, create_default_async_http_client, create_default_http_client
from .http.method import Delete, Get, Patch, Post, Put, QueryItem
from .http.models import HttpRequest, HttpResponse
from .http.resource import Resource
from .http.url import append_path_component, build_url, parse_url, with_query
from .publisher import Publisher
from .result import Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

OnComplete = Callable[[Result[Any]], None]


def build_request(resource: Resource[Any], headers: Mapping[str, str] = JSON_HEADERS) -> HttpRequest:
    """
    Derive the transport request for a resource.

    Raises BadURL when the resource URL cannot be parsed or rebuilt.
    """
    method = resource.method
    url = str(resource.url)
    parse_url(url)
    body: bytes | None = None

    if isinstance(method, Get):
        url = with_query(url, method.query_items)
    elif isinstance(method, Post):
        body = method.body
    elif isinstance(method, (Patch, Put)):
        url = append_path_component(url, method.id)
        body = method.body
    elif isinstance(method, Delete):
        url = append_path_component(url, method.id)
    else:
        raise BadRequest(f"Unsupported method descriptor: {method!r}")

    return HttpRequest(url=url, method=method.name, headers=dict(headers), body=body)


def _check_response(response: HttpResponse, error_cls: type[NetworkError]) -> None:
    if not response.ok:
        raise error_cls(f"Bad response: {response.error_message or 'no data'}")
    if response.status_code != 200:
        raise error_cls(f"Server error: HTTP {response.status_code}", code=response.status_code or 0)


def _decode_body(response_type: Any, content: bytes) -> Any:
    try:
        return codec.parse_json(response_type, content)
    except ValidationError as exc:
        kind, detail = codec.describe_validation_error(exc)
        raise InvalidJSON(f"Invalid JSON: {detail}", decode_error=kind) from exc
    except (PydanticUserError, PydanticUndefinedAnnotation) as exc:
        raise InvalidJSON(f"Invalid JSON: cannot decode into {response_type!r}") from exc


def _deliver(on_complete: OnComplete, outcome: Result[Any], url: str) -> None:
    try:
        on_complete(outcome)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Completion callback for %s raised: %s", url, exc)


class WebService:
    """
    Stateless typed HTTP client.

    The header configuration and settings are fixed at construction. Closing
    the service shuts down its worker pool and the blocking transport.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        *,
        http_client: HttpClient | None = None,
        async_http_client: AsyncHttpClient | None = None,
        executor: ThreadPoolExecutor | None = None,
    ):
        self.settings = settings or load_http_settings()
        self.headers: Mapping[str, str] = MappingProxyType(dict(JSON_HEADERS))
        self.http_client = http_client or create_default_http_client(self.settings)
        self.async_http_client = async_http_client
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=self.settings.max_workers,
            thread_name_prefix="typedhttp",
        )

    def build_request(self, resource: Resource[Any]) -> HttpRequest:
        return build_request(resource, self.headers)

    # Transport

    def _send(self, request: HttpRequest) -> HttpResponse:
        logger.debug("%s %s", request.method, request.url)
        try:
            return self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(ok=False, error_message=str(exc), error_type=type(exc).__name__)

    async def _send_async(self, request: HttpRequest) -> HttpResponse:
        logger.debug("%s %s", request.method, request.url)
        client = self.async_http_client
        owned = client is None
        if client is None:
            client = create_default_async_http_client(self.settings)
        try:
            return await client.request(request)
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(ok=False, error_message=str(exc), error_type=type(exc).__name__)
        finally:
            if owned:
                await client.aclose()

    # Callback style

    def fetch(self, resource: Resource[T], on_complete: OnComplete) -> None:
        """
        Issue the request on a worker thread and call ``on_complete`` exactly once.

        A request that cannot be built is reported synchronously, before this returns.
        """
        try:
            request = self.build_request(resource)
        except NetworkError as exc:
            logger.debug("Request build failed for %s: %s", resource.url, exc.message)
            _deliver(on_complete, Result.failure(BadRequest(f"Bad request: {exc.message}")), str(resource.url))
            return
        self._executor.submit(self._complete, resource.response_type, request, on_complete)

    def _complete(self, response_type: Any, request: HttpRequest, on_complete: OnComplete) -> None:
        response = self._send(request)
        try:
            _check_response(response, BadRequest)
            outcome: Result[Any] = Result.success(_decode_body(response_type, response.content))
        except NetworkError as exc:
            logger.debug("%s %s failed: %s", request.method, request.url, exc.message)
            outcome = Result.failure(exc)
        except Exception as exc:  # noqa: BLE001
            logger.exception("%s %s failed unexpectedly: %s", request.method, request.url, exc)
            outcome = Result.failure(UnknownError(f"Unexpected error: {exc}"))
        _deliver(on_complete, outcome, request.url)

    # Suspending / blocking style

    async def fetch_async(self, resource: Resource[T]) -> T:
        """Await the exchange and return the decoded body."""
        try:
            request = self.build_request(resource)
        except NetworkError as exc:
            raise BadRequest("Bad request") from exc
        response = await self._send_async(request)
        _check_response(response, ServerError)
        return _decode_body(resource.response_type, response.content)

    def fetch_blocking(self, resource: Resource[T]) -> T:
        """Same contract as fetch_async, run to completion in the calling thread."""
        try:
            request = self.build_request(resource)
        except NetworkError as exc:
            raise BadRequest("Bad request") from exc
        response = self._send(request)
        _check_response(response, ServerError)
        return _decode_body(resource.response_type, response.content)

    # Stream style

    def fetch_stream(self, resource: Resource[T]) -> Publisher[T]:
        """
        Return a publisher for the decoded body.

        The exchange runs on the worker pool; decoding happens back on the
        consuming event loop. The status code is not inspected.
        """
        try:
            request = self.build_request(resource)
        except NetworkError as exc:
            return Publisher.fail(BadRequest(f"Request error: {exc.message}"))
        response_type = resource.response_type

        async def _exchange() -> T:
            loop = asyncio.get_running_loop()
            response = await loop.run_in_executor(self._executor, self._send, request)
            if not response.is_http:
                raise ServerError(f"Server error: {response.error_message or 'not an HTTP response'}")
            return _decode_body(response_type, response.content)

        return Publisher(_exchange)

    # Codec and URL helpers

    def encode(self, value: Any) -> bytes:
        return codec.encode(value)

    def decode(self, response_type: type[T] | Any, data: bytes | str) -> T:
        return codec.decode(response_type, data)

    def build_url(
        self,
        scheme: str = "https",
        *,
        host: str,
        path: str = "",
        query_items: tuple[QueryItem, ...] | list[QueryItem] = (),
    ) -> str | None:
        return build_url(scheme, host=host, path=path, query_items=query_items)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    async def aclose(self) -> None:
        self.close()
        if self.async_http_client is not None and hasattr(self.async_http_client, "aclose"):
            await self.async_http_client.aclose()

    def __enter__(self) -> WebService:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


@lru_cache(maxsize=1)
def default_web_service() -> WebService:
    """Process-wide WebService built from environment settings; never reconfigured."""
    return WebService()


__all__ = ["OnComplete", "WebService", "build_request", "default_web_service"]
