# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for typedhttp."""

import os
from dataclasses import dataclass
from types import MappingProxyType

# Every request carries exactly these headers; the mapping is read-only.
JSON_HEADERS = MappingProxyType(
    {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
)


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None:
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HttpSettings:
    """Transport defaults shared by every entry point of a WebService.

    ``timeout`` of ``None`` waits on the network indefinitely.
    """

    timeout: float | None = None
    verify_ssl: bool = True
    max_workers: int = 4

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_workers = _int_env("TYPEDHTTP_MAX_WORKERS", cls.max_workers)
        if max_workers <= 0:
            max_workers = cls.max_workers
        return cls(
            timeout=_optional_float_env("TYPEDHTTP_HTTP_TIMEOUT", cls.timeout),
            verify_ssl=_bool_env("TYPEDHTTP_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_workers=max_workers,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
