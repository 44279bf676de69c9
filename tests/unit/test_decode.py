"""Tests for frame decoding."""

import json

import pytest
from pydantic import BaseModel

from openai_responses.errors import DecodeError, DecodeErrorKind
from openai_responses.pipeline import FrameDecoder, FrameKind, extract_payload
from openai_responses.types import ResponseTextDeltaEvent
from openai_responses.types.events import ResponseCompletedEvent, ResponseErrorEvent


class TestExtractPayload:
    """Tests for extract_payload."""

    def test_single_line(self) -> None:
        """Test a single data line."""
        assert extract_payload('data: {"a":1}\n\n') == '{"a":1}'

    def test_multi_line_reassembly(self) -> None:
        """Test data lines are concatenated without a separator."""
        assert extract_payload('data: {"a":1,\ndata: "b":2}\n\n') == '{"a":1,"b":2}'

    def test_non_data_lines_ignored(self) -> None:
        """Test comments and other fields are ignored."""
        frame = 'event: delta\n: comment\nid: 7\ndata: {"a":1}\nretry: 10\n\n'
        assert extract_payload(frame) == '{"a":1}'

    def test_segments_trimmed(self) -> None:
        """Test surrounding whitespace is trimmed from each segment."""
        assert extract_payload("data:   [DONE]  \r\n\n") == "[DONE]"

    def test_prefix_requires_space(self) -> None:
        """Test lines without the exact prefix are ignored."""
        assert extract_payload('data:{"a":1}\n\n') == ""

    def test_no_data(self) -> None:
        """Test frames without data yield an empty payload."""
        assert extract_payload(": keep-alive\n\n") == ""


class TestFrameDecoder:
    """Tests for FrameDecoder."""

    def test_done_signal(self) -> None:
        """Test the sentinel frame."""
        result = FrameDecoder().decode(b"data: [DONE]\n\n")
        assert result.kind is FrameKind.DONE
        assert result.event is None

    def test_skip_empty(self) -> None:
        """Test frames without payload are skipped."""
        assert FrameDecoder().decode(b": ping\n\n").kind is FrameKind.SKIP
        assert FrameDecoder().decode(b"\n\n").kind is FrameKind.SKIP

    def test_decode_text_delta(self, make_frame, make_delta) -> None:
        """Test decoding a text delta event."""
        result = FrameDecoder().decode(make_frame(make_delta("Hi", 3)))

        assert result.kind is FrameKind.EVENT
        assert isinstance(result.event, ResponseTextDeltaEvent)
        assert result.event.delta == "Hi"
        assert result.event.sequence_number == 3

    def test_decode_completed(self, make_frame, make_response) -> None:
        """Test decoding a lifecycle event with a response snapshot."""
        payload = {
            "type": "response.completed",
            "sequence_number": 9,
            "response": make_response(text="Done"),
        }
        result = FrameDecoder().decode(make_frame(payload))

        assert isinstance(result.event, ResponseCompletedEvent)
        assert result.event.response.text_content == "Done"

    def test_decode_error_event(self, make_frame) -> None:
        """Test in-band error events decode as events."""
        payload = {"type": "error", "sequence_number": 1, "code": "server_error", "message": "boom"}
        result = FrameDecoder().decode(make_frame(payload))

        assert isinstance(result.event, ResponseErrorEvent)
        assert result.event.message == "boom"

    def test_multi_line_event(self, make_delta) -> None:
        """Test an event split over several data lines."""
        text = json.dumps(make_delta("split"))
        middle = len(text) // 2
        frame = f"data: {text[:middle]}\ndata: {text[middle:]}\n\n".encode()

        result = FrameDecoder().decode(frame)

        assert result.event.delta == "split"

    def test_unknown_type(self) -> None:
        """Test an unknown discriminator fails at path 'type'."""
        frame = b'data: {"type":"response.unknown","sequence_number":1}\n\n'

        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(frame)

        assert exc_info.value.path == "type"
        assert exc_info.value.kind is DecodeErrorKind.UNKNOWN_VARIANT
        assert exc_info.value.raw == '{"type":"response.unknown","sequence_number":1}'

    def test_missing_type(self) -> None:
        """Test a payload without a discriminator."""
        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(b'data: {"sequence_number":1}\n\n')

        assert exc_info.value.path == "type"
        assert exc_info.value.kind is DecodeErrorKind.MISSING_FIELD

    def test_missing_field(self, make_frame, make_delta) -> None:
        """Test a missing required field is reported by name."""
        payload = make_delta("x")
        del payload["delta"]

        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(make_frame(payload))

        assert exc_info.value.path == "delta"
        assert exc_info.value.kind is DecodeErrorKind.MISSING_FIELD

    def test_nested_path(self, make_frame, make_response) -> None:
        """Test failures inside a response snapshot report the full path."""
        body = make_response()
        del body["output"][0]["id"]
        payload = {"type": "response.completed", "sequence_number": 2, "response": body}

        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(make_frame(payload))

        assert exc_info.value.path == "response.output[0].id"

    def test_type_mismatch(self, make_frame, make_delta) -> None:
        """Test wrong value types."""
        payload = make_delta("x")
        payload["output_index"] = "first"

        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(make_frame(payload))

        assert exc_info.value.path == "output_index"
        assert exc_info.value.kind is DecodeErrorKind.TYPE_MISMATCH

    def test_invalid_json(self) -> None:
        """Test malformed JSON is a syntax error at the root."""
        with pytest.raises(DecodeError) as exc_info:
            FrameDecoder().decode(b'data: {"type": \n\n')

        assert exc_info.value.path == ""
        assert exc_info.value.kind is DecodeErrorKind.SYNTAX

    def test_invalid_utf8_replaced(self, make_delta) -> None:
        """Test invalid UTF-8 is replaced instead of failing."""
        text = json.dumps(make_delta("PLACEHOLDER")).encode()
        frame = b"data: " + text.replace(b"PLACEHOLDER", b"ok\xff") + b"\n\n"

        result = FrameDecoder().decode(frame)

        assert result.event.delta == "ok\ufffd"

    def test_custom_target_and_signal(self) -> None:
        """Test a decoder for another payload type."""

        class Tick(BaseModel):
            n: int

        decoder = FrameDecoder(Tick, done_signal="END", target_name="Tick")

        assert decoder.decode(b'data: {"n": 4}\n\n').event == Tick(n=4)
        assert decoder.decode(b"data: END\n\n").kind is FrameKind.DONE
        with pytest.raises(DecodeError):
            decoder.decode(b"data: [DONE]\n\n")
