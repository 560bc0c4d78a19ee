"""
AsyncHorizonClient class for asynchronous Horizon access.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter

from stellar_horizon._errors import HorizonServerError, request_error_from_status
from stellar_horizon._parse import decode_resource, parse_httpx_headers, type_name
from stellar_horizon._stream import AsyncResourceStream
from stellar_horizon._types import DEFAULT_TIMEOUT, EventId, HeadersLike
from stellar_horizon._util import parse_host, resolve_headers_async
from stellar_horizon.client import client_headers, stream_timeout_for
from stellar_horizon.request import Request, StreamRequest

logger = logging.getLogger(__name__)


class AsyncHorizonClient:
    """
    Asynchronous client for a Horizon server.

    Example:
        >>> async with AsyncHorizonClient("https://horizon.stellar.org") as client:
        ...     async with client.stream(ledgers.all()) as events:
        ...         async for ledger in events:
        ...             print(ledger.sequence)
    """

    def __init__(
        self,
        host: str,
        *,
        headers: HeadersLike | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout | None = None,
        stream_timeout: float | httpx.Timeout | None = None,
    ) -> None:
        """
        Create an async client for a Horizon server.

        Args:
            host: Horizon base URL, optionally with a path prefix
            headers: Extra HTTP headers (static strings, sync or async callables)
            client: Optional httpx.AsyncClient to use (will not be closed)
            timeout: Timeout for one-shot requests and stream connects
            stream_timeout: Timeout for streams (default: no read timeout)

        Raises:
            InvalidHostError: If the host is not an http(s) URL
        """
        self._host = parse_host(host)
        self._headers = client_headers(headers)
        self._timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._stream_timeout = stream_timeout_for(self._timeout, stream_timeout)

        self._own_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._timeout)

    @property
    def host(self) -> str:
        """The validated Horizon base URL."""
        return self._host

    async def aclose(self) -> None:
        """Close the client and release resources."""
        if self._own_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncHorizonClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def request(self, req: Request) -> tuple[dict[str, str], Any]:
        """
        Send a one-shot request and decode the response.

        Returns:
            Tuple of (response headers, decoded resource)

        Raises:
            HorizonRequestError: Horizon rejected the request with a problem
            HorizonServerError: Transport failure or an unusable error response
            ResourceDecodeError: The response does not match the resource type
        """
        url = req.uri(self._host)
        headers = await resolve_headers_async(self._headers)

        try:
            request = self._client.build_request(
                "GET", url, headers=headers, timeout=self._timeout
            )
            response = await self._client.send(request)
        except httpx.TransportError as e:
            raise HorizonServerError(f"Request to {url} failed: {e}", url=url) from e

        try:
            body = await response.aread()
        finally:
            await response.aclose()

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
    ) -> AsyncResourceStream[Any]:
        """
        Subscribe to a streamable collection.

        The connection is opened on the first pull.

        Args:
            req: The collection to stream
            last_event_id: Event id to resume after

        Returns:
            AsyncResourceStream yielding decoded resources
        """
        if not isinstance(req, StreamRequest):
            raise TypeError(f"{type(req).__name__} cannot be streamed")

        return AsyncResourceStream(
            client=self._client,
            url=req.uri(self._host),
            resource_type=req.resource_type,
            headers=self._headers,
            last_event_id=last_event_id,
            timeout=self._stream_timeout,
        )
