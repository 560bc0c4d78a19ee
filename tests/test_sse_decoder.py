"""Tests for SSE framing."""

import pytest

from stellar_horizon import FrameDecodeError
from stellar_horizon._sse import (
    SSEDecoder,
    SSEFrame,
    decode_frames_sync,
    encode_frame,
)


class TestSSEDecoder:
    """Tests for SSEDecoder."""

    def test_parses_data_frame(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("data: hello\n\n"))
        assert frames == [SSEFrame(data="hello")]
        assert frames[0].name == "message"

    def test_parses_all_fields(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("id: 42\nevent: update\nretry: 1500\ndata: x\n\n"))
        assert frames == [SSEFrame(data="x", event="update", id="42", retry=1500)]

    def test_joins_multiline_data(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("data: line1\ndata: line2\n\n"))
        assert frames[0].data == "line1\nline2"

    def test_parses_multiple_frames_in_order(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("data: first\n\ndata: second\n\n"))
        assert [f.data for f in frames] == ["first", "second"]

    def test_handles_chunked_input(self) -> None:
        decoder = SSEDecoder()
        assert list(decoder.feed("da")) == []
        assert list(decoder.feed("ta: hel")) == []
        assert list(decoder.feed("lo\n")) == []
        frames = list(decoder.feed("\n"))
        assert frames == [SSEFrame(data="hello")]

    def test_handles_crlf_line_endings(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("id: 7\r\ndata: hi\r\n\r\n"))
        assert frames == [SSEFrame(data="hi", id="7")]

    def test_value_without_space_after_colon(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("data:compact\n\n"))
        assert frames[0].data == "compact"

    def test_only_one_leading_space_is_stripped(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("data:  padded\n\n"))
        assert frames[0].data == " padded"

    def test_ignores_comments(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed(": keep-alive\n\n: another\ndata: x\n\n"))
        assert frames == [SSEFrame(data="x")]

    def test_ignores_unknown_fields(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("foo: bar\ndata: x\n\n"))
        assert frames == [SSEFrame(data="x")]

    def test_blank_lines_without_fields_dispatch_nothing(self) -> None:
        decoder = SSEDecoder()
        assert list(decoder.feed("\n\n\n")) == []

    def test_id_only_frame_is_dispatched(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("id: 9\n\n"))
        assert frames == [SSEFrame(id="9")]

    def test_non_integer_retry_is_ignored(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("retry: soon\ndata: x\n\n"))
        assert frames == [SSEFrame(data="x")]

    def test_unicode_digit_retry_is_ignored(self) -> None:
        decoder = SSEDecoder()
        frames = list(decoder.feed("retry: \u00b2\ndata: x\n\n"))
        assert frames == [SSEFrame(data="x")]

    def test_raises_on_line_without_colon(self) -> None:
        decoder = SSEDecoder()
        with pytest.raises(FrameDecodeError) as exc_info:
            list(decoder.feed("this is not sse\n"))
        assert exc_info.value.line == "this is not sse"
        assert exc_info.value.code == "FRAME_DECODE_ERROR"

    def test_finish_discards_incomplete_frame(self) -> None:
        decoder = SSEDecoder()
        assert list(decoder.feed("data: partial\n")) == []
        assert decoder.finish() is True
        assert list(decoder.feed("\n")) == []

    def test_finish_on_clean_boundary(self) -> None:
        decoder = SSEDecoder()
        list(decoder.feed("data: x\n\n"))
        assert decoder.finish() is False


class TestDecodeFramesSync:
    """Tests for decode_frames_sync."""

    def test_decodes_from_byte_chunks(self) -> None:
        chunks = [b"data: one\n", b"\ndata: two\n\n"]
        frames = list(decode_frames_sync(iter(chunks)))
        assert [f.data for f in frames] == ["one", "two"]

    def test_multibyte_character_split_across_chunks(self) -> None:
        encoded = "data: café\n\n".encode()
        split = encoded.index(b"\xa9")
        chunks = [encoded[:split], encoded[split:]]
        frames = list(decode_frames_sync(iter(chunks)))
        assert frames[0].data == "café"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(FrameDecodeError):
            list(decode_frames_sync(iter([b"data: \xff\xfe\n\n"])))

    def test_trailing_frame_without_blank_line_is_dropped(self) -> None:
        frames = list(decode_frames_sync(iter([b"data: a\n\ndata: b\n"])))
        assert [f.data for f in frames] == ["a"]


class TestEncodeFrame:
    """Tests for encode_frame."""

    def test_encodes_all_fields(self) -> None:
        frame = SSEFrame(data="x", event="update", id="1", retry=10)
        assert encode_frame(frame) == "id: 1\nevent: update\nretry: 10\ndata: x\n\n"

    def test_encodes_multiline_data(self) -> None:
        assert encode_frame(SSEFrame(data="a\nb")) == "data: a\ndata: b\n\n"

    def test_encoded_frames_decode_to_same_frames(self) -> None:
        frames = [
            SSEFrame(data='{"a": 1}', id="100"),
            SSEFrame(data="line1\nline2", event="note"),
            SSEFrame(data="", id="101", retry=3000),
        ]
        decoder = SSEDecoder()
        text = "".join(encode_frame(f) for f in frames)
        assert list(decoder.feed(text)) == frames

    @pytest.mark.parametrize(
        "frame",
        [
            SSEFrame(data="x", event=""),
            SSEFrame(data=" lead", id=" x"),
            SSEFrame(data=" a\n  b", event=" spaced", id="", retry=0),
            SSEFrame(data="", event="tick"),
        ],
    )
    def test_edge_values_decode_to_same_frame(self, frame: SSEFrame) -> None:
        decoder = SSEDecoder()
        assert list(decoder.feed(encode_frame(frame))) == [frame]

    def test_rejects_carriage_return(self) -> None:
        with pytest.raises(ValueError):
            encode_frame(SSEFrame(data="a\rb"))

    def test_rejects_newline_in_id(self) -> None:
        with pytest.raises(ValueError):
            encode_frame(SSEFrame(data="x", id="1\n2"))
