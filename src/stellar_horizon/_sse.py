"""
Server-Sent Events (SSE) framing for Horizon streams.

This module turns a raw byte stream into SSE frames:
- `field: value` lines set `id`, `event`, `data` or `retry` on the frame
  being accumulated; `data` lines are joined with newlines
- a blank line dispatches the frame
- lines starting with `:` are comments

A line that is neither blank, a comment nor `field:value`, and invalid UTF-8,
end the stream with a FrameDecodeError.
"""

import codecs
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass

from stellar_horizon._errors import FrameDecodeError
from stellar_horizon._types import MESSAGE_EVENT


@dataclass(frozen=True, slots=True)
class SSEFrame:
    """
    One dispatched SSE event.

    Attributes:
        data: The data lines joined with newlines
        event: The event name, None when the frame has no `event` field
        id: The event id, None when the frame has no `id` field
        retry: Reconnection time hint in milliseconds
    """

    data: str = ""
    event: str | None = None
    id: str | None = None
    retry: int | None = None

    @property
    def name(self) -> str:
        """The event name, defaulting to "message"."""
        return self.event or MESSAGE_EVENT


class SSEDecoder:
    """
    Incremental SSE decoder.

    Maintains the partial line and the frame being accumulated between
    chunks. One decoder is bound to one connection.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._reset()

    def _reset(self) -> None:
        """Reset frame state for the next event."""
        self._id: str | None = None
        self._event: str | None = None
        self._retry: int | None = None
        self._data: list[str] = []
        self._pending = False

    def feed(self, chunk: str) -> Iterator[SSEFrame]:
        """
        Feed a chunk of text and yield any frames it completes.

        Args:
            chunk: String chunk to parse

        Yields:
            Complete SSE frames, in order

        Raises:
            FrameDecodeError: If a line cannot be parsed as `field:value`
        """
        self._buffer += chunk
        if "\n" not in self._buffer:
            return

        lines = self._buffer.split("\n")
        # Last element is the incomplete line (possibly empty)
        self._buffer = lines.pop()

        for line in lines:
            if line.endswith("\r"):
                line = line[:-1]

            if line == "":
                frame = self._dispatch()
                if frame is not None:
                    yield frame
                continue

            self._process_line(line)

    def _process_line(self, line: str) -> None:
        if line.startswith(":"):
            return

        field, sep, value = line.partition(":")
        if not sep:
            raise FrameDecodeError(f"Malformed SSE line: {line[:100]!r}", line=line)

        # Only one leading space is part of the separator
        if value.startswith(" "):
            value = value[1:]

        if field == "data":
            self._data.append(value)
        elif field == "event":
            self._event = value
        elif field == "id":
            self._id = value
        elif field == "retry":
            if not (value.isascii() and value.isdigit()):
                return
            self._retry = int(value)
        else:
            # Unknown fields are ignored
            return

        self._pending = True

    def _dispatch(self) -> SSEFrame | None:
        """Emit the current frame if any field was set."""
        if not self._pending:
            return None

        frame = SSEFrame(
            data="\n".join(self._data),
            event=self._event,
            id=self._id,
            retry=self._retry,
        )
        self._reset()
        return frame

    def finish(self) -> bool:
        """
        Finish decoding when the connection ends.

        A frame without its terminating blank line is never dispatched.

        Returns:
            True if an incomplete frame or line was discarded
        """
        discarded = self._pending or bool(self._buffer.strip("\r"))
        self._buffer = ""
        self._reset()
        return discarded


def _utf8_decoder() -> codecs.IncrementalDecoder:
    return codecs.getincrementaldecoder("utf-8")("strict")


def _decode_chunk(
    decoder: codecs.IncrementalDecoder, chunk: bytes, final: bool = False
) -> str:
    try:
        return decoder.decode(chunk, final=final)
    except UnicodeDecodeError as e:
        raise FrameDecodeError(f"Invalid UTF-8 in event stream: {e.reason}") from e


def decode_frames_sync(byte_iterator: Iterator[bytes]) -> Iterator[SSEFrame]:
    """
    Decode SSE frames from a synchronous byte iterator.

    Uses incremental UTF-8 decoding to handle multi-byte characters
    that may be split across chunk boundaries.

    Args:
        byte_iterator: Iterator yielding bytes

    Yields:
        Decoded SSE frames
    """
    parser = SSEDecoder()
    decoder = _utf8_decoder()

    for chunk in byte_iterator:
        text = _decode_chunk(decoder, chunk)
        if text:
            yield from parser.feed(text)

    # Flush any remaining bytes in the decoder
    final_text = _decode_chunk(decoder, b"", final=True)
    if final_text:
        yield from parser.feed(final_text)

    parser.finish()


async def decode_frames_async(
    byte_iterator: AsyncIterator[bytes],
) -> AsyncIterator[SSEFrame]:
    """
    Decode SSE frames from an asynchronous byte iterator.

    Args:
        byte_iterator: Async iterator yielding bytes

    Yields:
        Decoded SSE frames
    """
    parser = SSEDecoder()
    decoder = _utf8_decoder()

    async for chunk in byte_iterator:
        text = _decode_chunk(decoder, chunk)
        if text:
            for frame in parser.feed(text):
                yield frame

    final_text = _decode_chunk(decoder, b"", final=True)
    if final_text:
        for frame in parser.feed(final_text):
            yield frame

    parser.finish()


def encode_frame(frame: SSEFrame) -> str:
    """
    Render a frame as SSE text, terminated by a blank line.

    Multi-line data is written as one `data:` line per line.

    Raises:
        ValueError: If a value contains a carriage return, or the id or event
            name contains a newline
    """
    for value in (frame.data, frame.event, frame.id):
        if value is not None and "\r" in value:
            raise ValueError("SSE values cannot contain carriage returns")
    if (frame.event and "\n" in frame.event) or (frame.id and "\n" in frame.id):
        raise ValueError("SSE event names and ids cannot contain newlines")

    lines: list[str] = []
    if frame.id is not None:
        lines.append(f"id: {frame.id}")
    if frame.event is not None:
        lines.append(f"event: {frame.event}")
    if frame.retry is not None:
        lines.append(f"retry: {frame.retry}")
    for line in frame.data.split("\n"):
        lines.append(f"data: {line}")
    return "\n".join(lines) + "\n\n"
