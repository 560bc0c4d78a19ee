"""
Exception hierarchy for the Horizon client.

This module defines all exceptions that can be raised by the library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stellar_horizon.resources.problem import HorizonProblem


class HorizonError(Exception):
    """
    Base exception for all Horizon client errors.

    Attributes:
        message: Human-readable error message
        status: HTTP status code (if applicable)
        code: Error code for programmatic handling
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: str | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.status is not None:
            parts.append(f"(status={self.status})")
        if self.code is not None:
            parts.append(f"[{self.code}]")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status={self.status!r}, "
            f"code={self.code!r})"
        )


class InvalidHostError(HorizonError):
    """
    Exception raised when the Horizon base URL cannot be used.

    Raised once, when a client is constructed.
    """

    def __init__(self, host: str, reason: str | None = None) -> None:
        message = f"Invalid Horizon host: {host!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="INVALID_HOST")
        self.host = host


class StreamConnectionError(HorizonError):
    """
    Exception raised when a stream connection cannot be used.

    This covers transport failures (DNS, TLS, connect, read) and a non-success
    status on the initial stream response. The response body is not parsed.

    Attributes:
        url: The stream URL that was requested
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, status=status, code="CONNECTION_ERROR")
        self.url = url


class FrameDecodeError(HorizonError):
    """
    Exception raised when bytes on an open stream violate SSE framing.

    Also raised for invalid UTF-8 in the event stream.
    """

    def __init__(self, message: str, line: str | None = None) -> None:
        super().__init__(message, code="FRAME_DECODE_ERROR", details=line)
        self.line = line


class ResourceDecodeError(HorizonError):
    """
    Exception raised when a JSON payload does not match the resource schema.

    Attributes:
        payload: Preview of the offending payload
    """

    def __init__(self, message: str, payload: str | bytes | None = None) -> None:
        preview = payload
        if isinstance(preview, bytes):
            preview = preview.decode("utf-8", errors="replace")
        if preview is not None and len(preview) > 100:
            preview = preview[:100] + "..."
        super().__init__(message, code="RESOURCE_DECODE_ERROR", details=preview)
        self.payload = preview


class HorizonRequestError(HorizonError):
    """
    Exception raised when Horizon rejects a request with a problem document.

    Corresponds to HTTP 4xx responses with a parseable JSON error body.

    Attributes:
        problem: The parsed problem document
    """

    def __init__(self, problem: HorizonProblem) -> None:
        message = problem.title
        if problem.detail:
            message = f"{problem.title}: {problem.detail}"
        super().__init__(
            message,
            status=problem.status,
            code="REQUEST_ERROR",
            details=problem.extras,
        )
        self.problem = problem


class HorizonServerError(HorizonError):
    """
    Exception raised when a one-shot request fails without a usable error body.

    This happens for transport failures, 5xx responses and client errors
    whose body is not a problem document.
    """

    def __init__(
        self,
        message: str = "Horizon server error",
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, status=status, code="SERVER_ERROR")
        self.url = url


def stream_error_from_status(status: int, url: str) -> StreamConnectionError:
    """
    Create the error for a non-success status on a stream connect.

    Args:
        status: The HTTP status code
        url: The URL that was requested

    Returns:
        A StreamConnectionError carrying the status
    """
    if status == 404:
        return StreamConnectionError(f"Stream not found: {url}", status=404, url=url)

    if status == 429:
        return StreamConnectionError(f"Rate limited: {url}", status=429, url=url)

    if status == 503:
        return StreamConnectionError(
            f"Service unavailable: {url}", status=503, url=url
        )

    return StreamConnectionError(f"HTTP error {status} at {url}", status=status, url=url)


def request_error_from_status(
    status: int, url: str, body: bytes | None = None
) -> HorizonError:
    """
    Create the error for a non-success one-shot response.

    Client errors carrying a problem document become HorizonRequestError;
    everything else is a HorizonServerError.

    Args:
        status: The HTTP status code
        url: The URL that was requested
        body: Response body, if read

    Returns:
        The error to raise
    """
    from pydantic import ValidationError

    from stellar_horizon.resources.problem import HorizonProblem

    if 400 <= status < 500 and body:
        try:
            problem = HorizonProblem.model_validate_json(body)
        except ValidationError:
            pass
        else:
            return HorizonRequestError(problem)

    return HorizonServerError(f"HTTP error {status} at {url}", status=status, url=url)
