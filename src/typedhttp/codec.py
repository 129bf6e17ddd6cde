# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
JSON encoding and typed decoding.

Decoding is strict: JSON values are not coerced across types. ``"1"`` never
becomes ``1``, and an integral float such as ``1.0`` is rejected for an
``int`` field. Validation failures are classified into DecodeErrorKind so
callers can tell a missing key from a null value or a malformed document.

A type pydantic cannot build a validator for (for example one with an
unresolved forward reference) is reported as an unknown decoding error.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import PydanticUndefinedAnnotation, PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import ErrorDetails, PydanticSerializationError

from .errors import DecodeErrorKind, UnknownError

T = TypeVar("T")

_CORRUPTED_ERROR_TYPES = frozenset({"json_invalid", "json_type"})


@lru_cache(maxsize=256)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def type_adapter(tp: Any) -> TypeAdapter[Any]:
    """Return a (cached where possible) TypeAdapter for ``tp``."""
    try:
        return _adapter(tp)
    except TypeError:
        # Unhashable annotations cannot be cached.
        return TypeAdapter(tp)


def _location(error: ErrorDetails) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "<root>"


def classify_error(error: ErrorDetails) -> DecodeErrorKind:
    """Map one pydantic error entry onto a DecodeErrorKind."""
    error_type = error.get("type", "")
    if error_type in _CORRUPTED_ERROR_TYPES:
        return DecodeErrorKind.DATA_CORRUPTED
    if error_type == "missing":
        return DecodeErrorKind.KEY_NOT_FOUND
    if "input" in error and error["input"] is None:
        return DecodeErrorKind.VALUE_NOT_FOUND
    return DecodeErrorKind.TYPE_MISMATCH


def describe_validation_error(exc: ValidationError) -> tuple[DecodeErrorKind, str]:
    """Return the kind of the first error and a one-line description of it."""
    errors = exc.errors(include_url=False)
    if not errors:
        return DecodeErrorKind.DATA_CORRUPTED, str(exc)
    first = errors[0]
    kind = classify_error(first)
    detail = f"{kind.value} at {_location(first)}: {first.get('msg', '')}"
    if len(errors) > 1:
        detail += f" (+{len(errors) - 1} more)"
    return kind, detail


def parse_json(tp: type[T] | Any, data: bytes | str) -> T:
    """Validate JSON ``data`` into ``tp``; pydantic errors propagate unchanged."""
    return type_adapter(tp).validate_json(data, strict=True)


def encode(value: Any) -> bytes:
    """Serialize ``value`` to JSON bytes."""
    try:
        return type_adapter(type(value)).dump_json(value)
    except (PydanticSerializationError, PydanticUserError, TypeError, ValueError) as exc:
        raise UnknownError("Error: Trying to convert model to JSON data") from exc


def decode(tp: type[T] | Any, data: bytes | str) -> T:
    """Deserialize JSON ``data`` into ``tp``, raising UnknownError naming the failure kind."""
    try:
        return parse_json(tp, data)
    except ValidationError as exc:
        kind, detail = describe_validation_error(exc)
        raise UnknownError(f"Error: {detail}", decode_error=kind) from exc
    except (PydanticUserError, PydanticUndefinedAnnotation) as exc:
        raise UnknownError(f"Unknown decoding error: {exc}") from exc


__all__ = [
    "classify_error",
    "decode",
    "describe_validation_error",
    "encode",
    "parse_json",
    "type_adapter",
]
