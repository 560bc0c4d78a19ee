"""
HorizonClient class for synchronous Horizon access.

This is the primary API for querying a Horizon server.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from stellar_horizon._errors import HorizonServerError, request_error_from_status
from stellar_horizon._parse import decode_resource, parse_httpx_headers, type_name
from stellar_horizon._stream import ResourceStream
from stellar_horizon._types import (
    CLIENT_NAME,
    CLIENT_NAME_HEADER,
    CLIENT_VERSION,
    CLIENT_VERSION_HEADER,
    DEFAULT_TIMEOUT,
    EventId,
    HeadersLike,
)
from stellar_horizon._util import parse_host, resolve_headers_sync
from stellar_horizon.request import Request, StreamRequest

logger = logging.getLogger(__name__)


def client_headers(headers: HeadersLike | None) -> HeadersLike:
    """Client identification headers merged with user headers."""
    return {
        CLIENT_NAME_HEADER: CLIENT_NAME,
        CLIENT_VERSION_HEADER: CLIENT_VERSION,
        **(headers or {}),
    }


def stream_timeout_for(
    timeout: float | httpx.Timeout, stream_timeout: float | httpx.Timeout | None
) -> float | httpx.Timeout:
    """Stream timeout: connect bounded by `timeout`, reads unbounded by default."""
    if stream_timeout is not None:
        return stream_timeout
    if isinstance(timeout, httpx.Timeout):
        return httpx.Timeout(
            connect=timeout.connect,
            read=None,
            write=timeout.write,
            pool=timeout.pool,
        )
    return httpx.Timeout(timeout, read=None)


class HorizonClient:
    """
    Synchronous client for a Horizon server.

    The host is validated once, here. No network IO is performed by the
    constructor.

    Example:
        >>> from stellar_horizon.api import ledgers, transactions
        >>>
        >>> with HorizonClient("https://horizon-testnet.stellar.org") as client:
        ...     headers, ledger = client.request(ledgers.single(888))
        ...     with client.stream(transactions.all().with_cursor("now")) as events:
        ...         for tx in events:
        ...             print(tx.hash)
    """

    def __init__(
        self,
        host: str,
        *,
        headers: HeadersLike | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout | None = None,
        stream_timeout: float | httpx.Timeout | None = None,
    ) -> None:
        """
        Create a client for a Horizon server.

        Args:
            host: Horizon base URL, optionally with a path prefix
            headers: Extra HTTP headers (static strings or callables)
            client: Optional httpx.Client to use (will not be closed)
            timeout: Timeout for one-shot requests and stream connects
            stream_timeout: Timeout for streams (default: no read timeout)

        Raises:
            InvalidHostError: If the host is not an http(s) URL
        """
        self._host = parse_host(host)
        self._headers = client_headers(headers)
        self._timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._stream_timeout = stream_timeout_for(self._timeout, stream_timeout)

        # Client management
        self._own_client = client is None
        self._client = client or httpx.Client(timeout=self._timeout)

    @property
    def host(self) -> str:
        """The validated Horizon base URL."""
        return self._host

    def close(self) -> None:
        """Close the client and release resources."""
        if self._own_client:
            self._client.close()

    def __enter__(self) -> HorizonClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def request(self, req: Request) -> tuple[dict[str, str], Any]:
        """
        Send a one-shot request and decode the response.

        Args:
            req: The request to send

        Returns:
            Tuple of (response headers, decoded resource)

        Raises:
            HorizonRequestError: Horizon rejected the request with a problem
            HorizonServerError: Transport failure or an unusable error response
            ResourceDecodeError: The response does not match the resource type
        """
        url = req.uri(self._host)
        headers = resolve_headers_sync(self._headers)

        try:
            request = self._client.build_request(
                "GET", url, headers=headers, timeout=self._timeout
            )
            response = self._client.send(request)
        except httpx.TransportError as e:
            raise HorizonServerError(f"Request to {url} failed: {e}", url=url) from e

        try:
            body = response.read()
        finally:
            response.close()

        if not response.is_success:
            error = request_error_from_status(response.status_code, url, body)
            logger.debug("Request %s failed: %s", url, error)
            raise error

        resource = decode_resource(
            TypeAdapter(req.response_type),
            body,
            name=type_name(req.response_type),
        )
        return parse_httpx_headers(response.headers), resource

    def stream(
        self, req: StreamRequest, *, last_event_id: EventId | None = None
    ) -> ResourceStream[Any]:
        """
        Subscribe to a streamable collection.

        The connection is opened on the first pull.

        Args:
            req: The collection to stream
            last_event_id: Event id to resume after

        Returns:
            ResourceStream yielding decoded resources
        """
        if not isinstance(req, StreamRequest):
            raise TypeError(f"{type(req).__name__} cannot be streamed")

        return ResourceStream(
            client=self._client,
            url=req.uri(self._host),
            resource_type=req.resource_type,
            headers=self._headers,
            last_event_id=last_event_id,
            timeout=self._stream_timeout,
        )
