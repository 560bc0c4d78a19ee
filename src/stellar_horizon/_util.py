"""
Shared utility functions for the Horizon client.

This module provides URL building and header resolution used by both the
sync and async implementations.
"""

from collections.abc import Iterable
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from stellar_horizon._errors import InvalidHostError
from stellar_horizon._types import HeadersLike


def parse_host(host: str) -> str:
    """
    Validate a Horizon base URL.

    Args:
        host: The base URL, optionally with a path prefix

    Returns:
        The host URL without query string or fragment

    Raises:
        InvalidHostError: If the URL has no http(s) scheme or no network location
    """
    try:
        parsed = urlsplit(host)
        # Accessing the port validates it
        parsed.port  # noqa: B018
    except (TypeError, ValueError) as e:
        raise InvalidHostError(str(host), reason=str(e)) from e

    if parsed.scheme not in ("http", "https"):
        raise InvalidHostError(host, reason="scheme must be http or https")
    if not parsed.netloc:
        raise InvalidHostError(host, reason="missing network location")

    return urlunsplit((parsed.scheme, parsed.netloc, parsed.path, "", ""))


def join_url(host: str, *segments: str) -> str:
    """
    Append path segments to the host URL.

    Unlike relative URL resolution, this never drops a path prefix already
    present on the host: "https://h/api" + "ledgers" is "https://h/api/ledgers".

    Args:
        host: The base URL
        *segments: Path segments, percent-encoded individually

    Returns:
        The joined URL
    """
    parsed = urlsplit(host)
    prefix = parsed.path.rstrip("/")
    encoded = "/".join(quote(str(segment), safe="") for segment in segments)
    path = f"{prefix}/{encoded}" if encoded else prefix or "/"
    return urlunsplit((parsed.scheme, parsed.netloc, path, parsed.query, ""))


def append_query_params(url: str, params: Iterable[tuple[str, str]]) -> str:
    """
    Build a URL with query parameters appended in the given order.

    Args:
        url: The URL, possibly with an existing query string
        params: Ordered (key, value) pairs to add

    Returns:
        URL with query parameters
    """
    parsed = urlsplit(url)
    pairs = parse_qsl(parsed.query, keep_blank_values=True)
    pairs.extend(params)
    return urlunsplit(parsed._replace(query=urlencode(pairs)))


def resolve_headers_sync(headers: HeadersLike | None) -> dict[str, str]:
    """
    Resolve headers from HeadersLike to a plain dict.

    Supports static string values or callable functions that return strings.

    Args:
        headers: Headers dict with static or callable values

    Returns:
        Resolved headers dict with all string values
    """
    if headers is None:
        return {}

    resolved: dict[str, str] = {}
    for key, value in headers.items():
        if callable(value):
            resolved[key] = value()
        else:
            resolved[key] = value
    return resolved


async def resolve_headers_async(headers: HeadersLike | None) -> dict[str, str]:
    """
    Async version of resolve_headers_sync.

    Supports static string values, sync callables, or async callables.
    """
    if headers is None:
        return {}

    resolved: dict[str, str] = {}
    for key, value in headers.items():
        if callable(value):
            result = value()
            # Check if result is awaitable
            if hasattr(result, "__await__"):
                resolved[key] = await result  # type: ignore[misc]
            else:
                resolved[key] = result
        else:
            resolved[key] = value
    return resolved
