"""
Parsing utilities for Horizon responses.

This module handles parsing of response headers and JSON resources.
"""

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from stellar_horizon._errors import ResourceDecodeError
from stellar_horizon._types import (
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
)

T = TypeVar("T")


class RateLimit:
    """
    Rate limit state reported by Horizon.

    Attributes:
        limit: Requests allowed in the current window
        remaining: Requests left in the current window
        reset: Seconds until the window resets
    """

    __slots__ = ("limit", "remaining", "reset")

    def __init__(
        self,
        limit: int | None = None,
        remaining: int | None = None,
        reset: int | None = None,
    ) -> None:
        self.limit = limit
        self.remaining = remaining
        self.reset = reset

    def __repr__(self) -> str:
        return (
            f"RateLimit(limit={self.limit!r}, "
            f"remaining={self.remaining!r}, reset={self.reset!r})"
        )


def parse_httpx_headers(headers: Any) -> dict[str, str]:
    """
    Convert httpx Headers object to a plain dict.

    Args:
        headers: httpx Headers object

    Returns:
        Plain dict of headers
    """
    return dict(headers.items())


def _header_int(lower_headers: dict[str, str], name: str) -> int | None:
    value = lower_headers.get(name.lower())
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_rate_limit(headers: dict[str, str]) -> RateLimit:
    """
    Parse rate limit headers.

    Missing or non-numeric values are returned as None.

    Args:
        headers: Response headers dict (case-insensitive keys)

    Returns:
        Parsed RateLimit
    """
    # Headers may have different casing, so normalize to lowercase for lookup
    lower_headers = {k.lower(): v for k, v in headers.items()}

    return RateLimit(
        limit=_header_int(lower_headers, RATE_LIMIT_LIMIT_HEADER),
        remaining=_header_int(lower_headers, RATE_LIMIT_REMAINING_HEADER),
        reset=_header_int(lower_headers, RATE_LIMIT_RESET_HEADER),
    )


def type_name(resource_type: Any) -> str:
    """Readable name of a resource type, for error messages."""
    name = getattr(resource_type, "__name__", None)
    if name is None:
        # Annotated unions have no __name__
        args = getattr(resource_type, "__args__", ())
        name = getattr(args[0], "__name__", None) if args else None
    return name or repr(resource_type)


def decode_resource(
    adapter: TypeAdapter[T], data: str | bytes, *, name: str = "resource"
) -> T:
    """
    Parse one JSON document into a resource.

    Args:
        adapter: TypeAdapter of the model class or annotated union
        data: JSON document as bytes or string
        name: Resource name used in the error message

    Returns:
        The validated resource

    Raises:
        ResourceDecodeError: If the document is not valid JSON or does not
            match the resource schema
    """
    try:
        return adapter.validate_json(data)
    except ValidationError as e:
        first = e.errors()[0]["msg"] if e.error_count() else "invalid document"
        raise ResourceDecodeError(
            f"Failed to decode {name}: {first}",
            payload=data,
        ) from e
