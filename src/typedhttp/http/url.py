# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared by request building and callers composing endpoints."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from ..errors import BadURL
from .method import QueryItem

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_HOST_LABEL_RE = re.compile(r"^[A-Za-z0-9_](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?$")
_PATH_SAFE = "/:@!$&'()*+,;=-._~%"
# "+" is left out so it round-trips through form-style query parsers.
_QUERY_SAFE = "/?:@!$'()*,;-._~"


def parse_url(url: str) -> SplitResult:
    """Split an absolute URL, raising BadURL when it has no scheme or host."""
    raw = str(url or "").strip()
    try:
        parts = urlsplit(raw)
        # Accessing .port validates the netloc (bad brackets, non-numeric ports).
        parts.port
    except ValueError as exc:
        raise BadURL(f"Invalid url: {raw} ({exc})") from exc
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise BadURL(f"Invalid url: {raw}")
    return parts


def encode_query(query_items: Iterable[QueryItem]) -> str:
    """Percent-encode query items; a ``None`` value renders the bare key."""
    pieces = []
    for key, value in query_items:
        encoded_key = quote(str(key), safe=_QUERY_SAFE)
        if value is None:
            pieces.append(encoded_key)
        else:
            pieces.append(f"{encoded_key}={quote(str(value), safe=_QUERY_SAFE)}")
    return "&".join(pieces)


def with_query(url: str, query_items: Iterable[QueryItem]) -> str:
    """Return ``url`` with its query replaced by exactly ``query_items``."""
    parts = parse_url(url)
    return urlunsplit(parts._replace(query=encode_query(query_items)))


def append_path_component(url: str, component: str | int) -> str:
    """Append one path segment, keeping query and fragment untouched."""
    parts = parse_url(url)
    segment = quote(str(component), safe="-._~")
    path = parts.path.rstrip("/") + "/" + segment
    return urlunsplit(parts._replace(path=path))


def is_valid_host(host: str) -> bool:
    if not host:
        return False
    if host.startswith("[") and host.endswith("]"):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ValueError:
            return False
        return True
    if len(host) > 253:
        return False
    return all(_HOST_LABEL_RE.match(label) for label in host.rstrip(".").split("."))


def build_url(
    scheme: str = "https",
    *,
    host: str,
    path: str = "",
    query_items: Iterable[QueryItem] = (),
) -> str | None:
    """
    Compose a URL from its parts.

    Returns None when the parts cannot form a URL: an invalid scheme or host,
    or a non-empty path that does not start with ``/``.
    """
    if not scheme or not _SCHEME_RE.match(scheme):
        return None
    if not is_valid_host(host):
        return None
    if path and not path.startswith("/"):
        return None
    query = encode_query(query_items)
    return urlunsplit((scheme, host, quote(path, safe=_PATH_SAFE), query, ""))


__all__ = [
    "append_path_component",
    "build_url",
    "encode_query",
    "is_valid_host",
    "parse_url",
    "with_query",
]
