"""Tests for telemetry module."""

import io
import json

import pytest

from openai_responses.telemetry import (
    LogContext,
    LogLevel,
    ResponsesLogger,
    SensitiveDataMasker,
    clear_log_context,
    get_log_context,
    get_logger,
    log_context,
    set_log_context,
)


class TestLogContext:
    """Tests for LogContext."""

    def test_empty_context(self) -> None:
        """Test empty context."""
        assert LogContext().to_dict() == {}

    def test_context_with_fields(self) -> None:
        """Test context with fields."""
        ctx = LogContext(request_id="req-123", method="POST", endpoint="/responses")
        result = ctx.to_dict()
        assert result == {"request_id": "req-123", "method": "POST", "endpoint": "/responses"}

    def test_roundtrip_through_contextvar(self) -> None:
        """Test setting and reading the current context."""
        set_log_context(LogContext(request_id="req-1", extra={"attempt": 2}))
        try:
            ctx = get_log_context()
            assert ctx.request_id == "req-1"
            assert ctx.extra == {"attempt": 2}
        finally:
            clear_log_context()

        assert get_log_context().to_dict() == {}

    def test_scope_restored_on_error(self) -> None:
        """Test log_context restores the outer context when the block raises."""
        with log_context(LogContext(request_id="outer")):
            with pytest.raises(RuntimeError), log_context(LogContext(request_id="inner")):
                assert get_log_context().request_id == "inner"
                raise RuntimeError("boom")

            assert get_log_context().request_id == "outer"

        assert get_log_context().request_id is None

    def test_with_extra(self) -> None:
        """Test extra fields are merged into a copy."""
        ctx = LogContext(request_id="req-1", extra={"a": 1})

        assert ctx.with_extra(b=2).to_dict() == {"request_id": "req-1", "a": 1, "b": 2}
        assert ctx.extra == {"a": 1}


class TestSensitiveDataMasker:
    """Tests for SensitiveDataMasker."""

    def test_mask_api_key(self) -> None:
        """Test masking API keys."""
        masked = SensitiveDataMasker().mask("Using API key sk-1234567890abcdefghijklmnop")
        assert "sk-1234567890" not in masked
        assert "REDACTED" in masked

    def test_mask_bearer_token(self) -> None:
        """Test masking bearer tokens."""
        masked = SensitiveDataMasker().mask("Authorization: Bearer secret-token-123")
        assert "secret-token-123" not in masked

    def test_mask_dict(self) -> None:
        """Test masking dictionary."""
        masked = SensitiveDataMasker().mask_dict(
            {"api_key": "secret-key", "message": "Hello", "nested": {"token": "t"}}
        )
        assert masked["api_key"] == "***REDACTED***"
        assert masked["message"] == "Hello"
        assert masked["nested"]["token"] == "***REDACTED***"


class TestResponsesLogger:
    """Tests for ResponsesLogger."""

    def test_get_logger(self) -> None:
        """Test getting a logger."""
        assert get_logger("test") is not None

    def test_json_output_with_context(self) -> None:
        """Test structured fields and context in JSON output."""
        stream = io.StringIO()
        ResponsesLogger.configure(level=LogLevel.DEBUG, format="json", stream=stream)
        try:
            set_log_context(LogContext(request_id="req-9"))
            get_logger("test.json").info("Request sent", endpoint="/responses")
        finally:
            clear_log_context()
            ResponsesLogger.configure(level=LogLevel.WARNING, format="text")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "Request sent"
        assert record["context"]["request_id"] == "req-9"
        assert record["endpoint"] == "/responses"

    def test_text_output_masks_and_appends_context(self) -> None:
        """Test text lines carry fields and context with credentials masked."""
        stream = io.StringIO()
        ResponsesLogger.configure(level="DEBUG", format="text", stream=stream)
        try:
            with log_context(LogContext(request_id="req-3", endpoint="/responses")):
                get_logger("test.text").warning(
                    "Key sk-abcdefghijklmnopqrstuvwxyz rejected", api_key="sk-x"
                )
        finally:
            ResponsesLogger.configure(level=LogLevel.WARNING, format="text")

        line = stream.getvalue().strip().splitlines()[-1]
        assert "| WARNING  | test.text |" in line
        assert "abcdefghij" not in line
        assert "api_key=***REDACTED***" in line
        assert "request_id=req-3 endpoint=/responses" in line
