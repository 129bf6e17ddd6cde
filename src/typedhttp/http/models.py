# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models exchanged with transport clients."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Transport-level request built from a Resource for a single call."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: bytes | None = None


@dataclass
class HttpResponse:
    """Normalized transport outcome.

    ``ok`` is False when the exchange itself failed; such responses carry no
    status code. A response with ``ok`` set but no status code did not come
    from an HTTP server.
    """

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None

    @property
    def is_http(self) -> bool:
        return self.ok and self.status_code is not None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> HttpResponse:
        """Build a response from a plain mapping, lowercasing header names."""
        raw_headers = data.get("headers") or {}
        headers: Headers = {}
        if isinstance(raw_headers, Mapping):
            for key, value in raw_headers.items():
                if key is None:
                    continue
                headers[str(key).lower()] = "" if value is None else str(value)

        raw_body = data.get("body")
        if isinstance(raw_body, (bytes, bytearray, memoryview)):
            content = bytes(raw_body)
        elif isinstance(raw_body, str):
            content = raw_body.encode("utf-8")
        else:
            content = b""

        status = data.get("status_code")
        return cls(
            ok=bool(data.get("ok", True)),
            status_code=int(status) if isinstance(status, int) else None,
            headers=headers,
            content=content,
            url=str(data["url"]) if data.get("url") else None,
            error_message=str(data["error_message"]) if data.get("error_message") else None,
            error_type=str(data["error_type"]) if data.get("error_type") else None,
        )


__all__ = ["Headers", "HttpRequest", "HttpResponse"]
