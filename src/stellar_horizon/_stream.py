"""
ResourceStream and AsyncResourceStream implementations.

A resource stream is one subscription to a Horizon collection served as
server-sent events. Each pull returns the next decoded resource:

    with client.stream(ledgers.all().with_cursor("now")) as events:
        for ledger in events:
            print(ledger.sequence)

The connection is opened lazily on the first pull. Any failure (connect,
framing, or a payload that does not decode) ends the subscription; it is
raised once and later pulls end the iteration. Resuming is explicit through
`resume()`, which starts a new subscription from the last seen event id.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter

from stellar_horizon._errors import (
    FrameDecodeError,
    HorizonError,
    ResourceDecodeError,
    StreamConnectionError,
    stream_error_from_status,
)
from stellar_horizon._parse import decode_resource, parse_httpx_headers, type_name
from stellar_horizon._sse import SSEFrame, decode_frames_async, decode_frames_sync
from stellar_horizon._types import (
    ACCEPT_HEADER,
    EVENT_STREAM_CONTENT_TYPE,
    LAST_EVENT_ID_HEADER,
    MESSAGE_EVENT,
    EventId,
    HeadersLike,
    StreamState,
)
from stellar_horizon._util import resolve_headers_async, resolve_headers_sync

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _StreamBase(Generic[T]):
    """State and cursor bookkeeping shared by the sync and async streams."""

    def __init__(
        self,
        *,
        url: str,
        resource_type: Any,
        headers: HeadersLike | None = None,
        last_event_id: EventId | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self._url = url
        self._resource_type = resource_type
        self._adapter: TypeAdapter[T] = TypeAdapter(resource_type)
        self._resource_name = type_name(resource_type)
        self._headers = headers
        self._timeout = timeout

        self._state = StreamState.DISCONNECTED
        self._last_id = last_event_id or None
        self._retry_hint: int | None = None
        self._response_headers: dict[str, str] = {}

    @property
    def url(self) -> str:
        """The stream URL."""
        return self._url

    @property
    def state(self) -> StreamState:
        """Current lifecycle state."""
        return self._state

    @property
    def last_id(self) -> EventId | None:
        """Id of the most recent event that carried one."""
        return self._last_id

    @property
    def retry_hint(self) -> int | None:
        """Last reconnection delay advertised by the server, in milliseconds."""
        return self._retry_hint

    @property
    def headers(self) -> dict[str, str]:
        """HTTP response headers of the stream connection."""
        return self._response_headers

    @property
    def closed(self) -> bool:
        """Whether the stream has reached a terminal state."""
        return self._state.is_terminal

    def _build_headers(self, resolved: dict[str, str]) -> dict[str, str]:
        resolved[ACCEPT_HEADER] = EVENT_STREAM_CONTENT_TYPE
        if self._last_id:
            resolved[LAST_EVENT_ID_HEADER] = self._last_id
        return resolved

    def _observe(self, frame: SSEFrame) -> bool:
        """
        Update the cursor and retry hint from a frame.

        Returns:
            True if the frame carries a resource payload
        """
        if frame.id:
            self._last_id = frame.id
        if frame.retry is not None:
            self._retry_hint = frame.retry
            logger.debug("Server retry hint for %s: %dms", self._url, frame.retry)
        return frame.name == MESSAGE_EVENT and frame.data != ""

    def _decode(self, frame: SSEFrame) -> T:
        return decode_resource(self._adapter, frame.data, name=self._resource_name)

    def _connect_failed(self, error: Exception) -> StreamConnectionError:
        return StreamConnectionError(
            f"Failed to connect to {self._url}: {error}", url=self._url
        )

    def _read_failed(self, error: Exception) -> StreamConnectionError:
        return StreamConnectionError(
            f"Connection to {self._url} lost: {error}", url=self._url
        )

    def _log_failure(self, error: HorizonError) -> None:
        logger.warning(
            "Stream %s failed (last_id=%s): %s", self._url, self._last_id, error
        )


class ResourceStream(_StreamBase[T]):
    """
    Synchronous stream of Horizon resources.

    Iterate to receive resources in server order. Use as a context manager,
    or call `close()`, to release the connection.
    """

    def __init__(
        self,
        *,
        client: httpx.Client,
        url: str,
        resource_type: Any,
        headers: HeadersLike | None = None,
        last_event_id: EventId | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        super().__init__(
            url=url,
            resource_type=resource_type,
            headers=headers,
            last_event_id=last_event_id,
            timeout=timeout,
        )
        self._client = client
        self._response: httpx.Response | None = None
        self._frames: Iterator[SSEFrame] | None = None

    def _connect(self) -> Iterator[SSEFrame]:
        self._state = StreamState.CONNECTING
        headers = self._build_headers(resolve_headers_sync(self._headers))
        logger.debug("Connecting to %s (last_id=%s)", self._url, self._last_id)

        try:
            request = self._client.build_request(
                "GET", self._url, headers=headers, timeout=self._timeout
            )
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise self._fail(self._connect_failed(e)) from e

        if not response.is_success:
            # The error body is not part of the event stream
            response.close()
            raise self._fail(stream_error_from_status(response.status_code, self._url))

        self._response = response
        self._response_headers = parse_httpx_headers(response.headers)
        self._frames = decode_frames_sync(response.iter_bytes())
        self._state = StreamState.STREAMING
        return self._frames

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._state.is_terminal:
            raise StopIteration

        frames = self._frames
        if frames is None:
            frames = self._connect()

        try:
            for frame in frames:
                if self._observe(frame):
                    return self._decode(frame)
        except (FrameDecodeError, ResourceDecodeError) as e:
            self._fail(e)
            raise
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise self._fail(self._read_failed(e)) from e

        logger.debug("Stream %s closed by server", self._url)
        self._state = StreamState.CLOSED
        self._release()
        raise StopIteration

    def _fail(self, error: HorizonError) -> HorizonError:
        self._state = StreamState.FAILED
        self._release()
        self._log_failure(error)
        return error

    def _release(self) -> None:
        frames, self._frames = self._frames, None
        response, self._response = self._response, None
        if frames is not None and hasattr(frames, "close"):
            frames.close()
        if response is not None:
            response.close()

    def close(self) -> None:
        """Close the stream and release the connection."""
        if self._state is not StreamState.FAILED:
            self._state = StreamState.CLOSED
        self._release()

    def resume(self) -> ResourceStream[T]:
        """
        Start a new subscription from the last seen event id.

        This stream is closed first.

        Returns:
            A new, not yet connected stream for the same URL
        """
        self.close()
        return ResourceStream(
            client=self._client,
            url=self._url,
            resource_type=self._resource_type,
            headers=self._headers,
            last_event_id=self._last_id,
            timeout=self._timeout,
        )

    def __enter__(self) -> ResourceStream[T]:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class AsyncResourceStream(_StreamBase[T]):
    """
    Asynchronous stream of Horizon resources.

    Iterate with `async for` to receive resources in server order. Use as an
    async context manager, or call `aclose()`, to release the connection.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        url: str,
        resource_type: Any,
        headers: HeadersLike | None = None,
        last_event_id: EventId | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        super().__init__(
            url=url,
            resource_type=resource_type,
            headers=headers,
            last_event_id=last_event_id,
            timeout=timeout,
        )
        self._client = client
        self._response: httpx.Response | None = None
        self._frames: AsyncIterator[SSEFrame] | None = None

    async def _connect(self) -> AsyncIterator[SSEFrame]:
        self._state = StreamState.CONNECTING
        headers = self._build_headers(await resolve_headers_async(self._headers))
        logger.debug("Connecting to %s (last_id=%s)", self._url, self._last_id)

        try:
            request = self._client.build_request(
                "GET", self._url, headers=headers, timeout=self._timeout
            )
            response = await self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise (await self._fail(self._connect_failed(e))) from e

        if not response.is_success:
            await response.aclose()
            raise await self._fail(
                stream_error_from_status(response.status_code, self._url)
            )

        self._response = response
        self._response_headers = parse_httpx_headers(response.headers)
        self._frames = decode_frames_async(response.aiter_bytes())
        self._state = StreamState.STREAMING
        return self._frames

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._state.is_terminal:
            raise StopAsyncIteration

        frames = self._frames
        if frames is None:
            frames = await self._connect()

        try:
            async for frame in frames:
                if self._observe(frame):
                    return self._decode(frame)
        except (FrameDecodeError, ResourceDecodeError) as e:
            await self._fail(e)
            raise
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise (await self._fail(self._read_failed(e))) from e

        logger.debug("Stream %s closed by server", self._url)
        self._state = StreamState.CLOSED
        await self._release()
        raise StopAsyncIteration

    async def _fail(self, error: HorizonError) -> HorizonError:
        self._state = StreamState.FAILED
        await self._release()
        self._log_failure(error)
        return error

    async def _release(self) -> None:
        frames, self._frames = self._frames, None
        response, self._response = self._response, None
        if frames is not None and hasattr(frames, "aclose"):
            await frames.aclose()
        if response is not None:
            await response.aclose()

    async def aclose(self) -> None:
        """Close the stream and release the connection."""
        if self._state is not StreamState.FAILED:
            self._state = StreamState.CLOSED
        await self._release()

    async def resume(self) -> AsyncResourceStream[T]:
        """
        Start a new subscription from the last seen event id.

        This stream is closed first.

        Returns:
            A new, not yet connected stream for the same URL
        """
        await self.aclose()
        return AsyncResourceStream(
            client=self._client,
            url=self._url,
            resource_type=self._resource_type,
            headers=self._headers,
            last_event_id=self._last_id,
            timeout=self._timeout,
        )

    async def __aenter__(self) -> AsyncResourceStream[T]:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
