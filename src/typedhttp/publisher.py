# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Single-value asynchronous stream.

A Publisher is cold: nothing runs until it is awaited, iterated or
subscribed, and every consumer triggers its own run of the source. Each run
emits exactly one value or fails exactly once.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

from .errors import NetworkError

T = TypeVar("T")


class Publisher(Generic[T]):
    def __init__(self, source: Callable[[], Awaitable[T]]):
        self._source = source

    @classmethod
    def just(cls, value: T) -> Publisher[T]:
        async def _emit() -> T:
            return value

        return cls(_emit)

    @classmethod
    def fail(cls, error: NetworkError) -> Publisher[Any]:
        async def _raise() -> Any:
            raise error

        return cls(_raise)

    async def first(self) -> T:
        """Run the source and return its only value."""
        return await self._source()

    def __await__(self) -> Generator[Any, None, T]:
        return self.first().__await__()

    def __aiter__(self) -> AsyncIterator[T]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        yield await self._source()

    async def subscribe(
        self,
        on_value: Callable[[T], None],
        on_error: Callable[[NetworkError], None] | None = None,
    ) -> None:
        """Deliver the outcome to callbacks; without ``on_error`` the failure is raised."""
        try:
            value = await self._source()
        except NetworkError as exc:
            if on_error is None:
                raise
            on_error(exc)
            return
        on_value(value)


__all__ = ["Publisher"]
