"""Error hierarchy for openai-responses.

Provides structured error types for every stage of a request: transport,
stream framing, payload decoding and API-reported failures.
"""

from openai_responses.errors.base import (
    ApiError,
    DecodeError,
    DecodeErrorKind,
    ErrorContext,
    IncompleteStreamError,
    ResponsesError,
    TransportError,
    UnexpectedResponseError,
)
from openai_responses.errors.classification import (
    ErrorCategory,
    HttpErrorClass,
    classify_http_status,
)

__all__ = [
    "ApiError",
    "DecodeError",
    "DecodeErrorKind",
    "ErrorCategory",
    "ErrorContext",
    "HttpErrorClass",
    "IncompleteStreamError",
    "ResponsesError",
    "TransportError",
    "UnexpectedResponseError",
    "classify_http_status",
]
