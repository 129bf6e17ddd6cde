# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP method descriptors.

Each verb is its own frozen dataclass carrying only the payload that verb
uses; ``HttpMethod`` is the union of all of them.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar, Union

QueryItem = tuple[str, Union[str, None]]


@dataclass(frozen=True)
class Get:
    query_items: Sequence[QueryItem] = field(default_factory=tuple)

    name: ClassVar[str] = "GET"

    def __post_init__(self) -> None:
        # Normalize so equal descriptors compare and hash equal regardless of input container.
        object.__setattr__(self, "query_items", tuple((str(k), v) for k, v in self.query_items))


@dataclass(frozen=True)
class Post:
    body: bytes | None = None

    name: ClassVar[str] = "POST"


@dataclass(frozen=True)
class Patch:
    id: int
    body: bytes | None = None

    name: ClassVar[str] = "PATCH"


@dataclass(frozen=True)
class Put:
    id: int
    body: bytes | None = None

    name: ClassVar[str] = "PUT"


@dataclass(frozen=True)
class Delete:
    id: int

    name: ClassVar[str] = "DELETE"


HttpMethod = Union[Get, Post, Patch, Put, Delete]


def verb_name(method: HttpMethod) -> str:
    """Return the canonical verb string for a method descriptor."""
    return method.name


__all__ = ["Delete", "Get", "HttpMethod", "Patch", "Post", "Put", "QueryItem", "verb_name"]
