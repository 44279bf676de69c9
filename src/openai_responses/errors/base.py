"""Base error classes for openai-responses.

Provides a layered error hierarchy:
- ResponsesError: Base class for all library errors
- TransportError: HTTP/network errors
- IncompleteStreamError: Byte stream ended inside a frame
- DecodeError: Payload did not fit the expected schema
- ApiError: Structured error reported by the API
- UnexpectedResponseError: Failure response that is not a structured error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from openai_responses.errors.classification import (
    ErrorCategory,
    classify_http_status,
)

if TYPE_CHECKING:
    from openai_responses.types.response import ResponseErrorCode


# Raw text kept in error messages is cut to this many characters
_PREVIEW_CHARS = 200


def _preview(text: str) -> str:
    if len(text) <= _PREVIEW_CHARS:
        return text
    return text[:_PREVIEW_CHARS] + "..."


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    field_path: str | None = None
    """Path to the problematic field (e.g., 'response.output[0].id')"""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'transport', 'pipeline', 'decode', 'remote')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.field_path:
            parts.append(f"at '{self.field_path}'")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class ResponsesError(Exception):
    """Base class for all openai-responses errors.

    Attributes:
        message: Human-readable error message
        context: Structured error context
        category: Stage at which the error was detected
    """

    category: ClassVar[ErrorCategory | None] = None

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> ResponsesError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class TransportError(ResponsesError):
    """Error during HTTP transport.

    Raised when:
    - Network connection failure
    - Timeout
    - The connection drops while a body is being read
    """

    category = ErrorCategory.TRANSPORT

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class IncompleteStreamError(ResponsesError):
    """The byte source closed while an unterminated frame was buffered."""

    category = ErrorCategory.MALFORMED_ENVELOPE

    def __init__(self, buffered: bytes) -> None:
        ctx = ErrorContext(source="pipeline")
        ctx.details["buffered_bytes"] = len(buffered)
        super().__init__(
            f"Stream ended with incomplete data ({len(buffered)} bytes buffered)",
            ctx,
        )
        self.buffered = bytes(buffered)

    @property
    def partial_text(self) -> str:
        """Buffered bytes decoded leniently, for diagnostics."""
        return self.buffered.decode("utf-8", errors="replace")


class DecodeErrorKind(str, Enum):
    """Structural cause of a decode failure."""

    SYNTAX = "syntax"
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    UNKNOWN_VARIANT = "unknown_variant"
    INVALID_VALUE = "invalid_value"


class DecodeError(ResponsesError):
    """A JSON document could not be decoded into its target type.

    Attributes:
        path: Dotted/bracketed path of the first failure ('' is the root)
        kind: Structural cause of the failure
        raw: The raw JSON text that was being decoded
        detail: Decoder-provided description of the failure
        target: Name of the type being decoded
    """

    category = ErrorCategory.SCHEMA_MISMATCH

    def __init__(
        self,
        *,
        path: str,
        kind: DecodeErrorKind,
        raw: str,
        detail: str,
        target: str | None = None,
    ) -> None:
        ctx = ErrorContext(source="decode", field_path=path or None)
        ctx.details["kind"] = kind.value
        if target:
            ctx.details["target"] = target
        location = f"'{path}'" if path else "document root"
        super().__init__(f"Failed to decode {target or 'payload'} at {location}: {detail}", ctx)
        self.path = path
        self.kind = kind
        self.raw = raw
        self.detail = detail
        self.target = target

    def _format_message(self) -> str:
        # The path is already part of the message
        if self.context.hint:
            return f"{self.message} [decode] (hint: {self.context.hint})"
        return f"{self.message} [decode]"


class ApiError(ResponsesError):
    """Structured error returned by the API with a non-2xx status.

    Attributes:
        status_code: HTTP status code
        code: Machine-readable error code
        error_message: Human-readable message from the API
    """

    category = ErrorCategory.API_ERROR

    def __init__(
        self,
        *,
        status_code: int,
        code: ResponseErrorCode,
        error_message: str,
    ) -> None:
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        ctx.details["error_class"] = classify_http_status(status_code).value
        super().__init__(
            f"API error (status {status_code}): [{code.value}] {error_message}",
            ctx,
        )
        self.status_code = status_code
        self.code = code
        self.error_message = error_message

    @property
    def error_class(self) -> str:
        return self.context.details["error_class"]


class UnexpectedResponseError(ResponsesError):
    """Response that could not be interpreted.

    Raised for non-2xx responses whose body is not a structured error, and
    for 2xx responses whose body is not valid JSON.

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
    """

    category = ErrorCategory.UNEXPECTED_RESPONSE

    def __init__(self, *, status_code: int, body: str) -> None:
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        super().__init__(
            f"Unexpected API response: Status: {status_code}, Body: {_preview(body)}",
            ctx,
        )
        self.status_code = status_code
        self.body = body
