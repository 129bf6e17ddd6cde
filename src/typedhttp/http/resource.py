# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource descriptor: what to fetch and what to decode it into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from .method import Get, HttpMethod

T = TypeVar("T")


@dataclass(frozen=True)
class Resource(Generic[T]):
    """A target URL, the method used to reach it, and the expected response type."""

    url: str
    response_type: type[T] | Any
    method: HttpMethod = field(default_factory=Get)


__all__ = ["Resource"]
