"""
Error classification for openai-responses.

Two orthogonal classifications are provided:
- ErrorCategory: which stage of the client produced the failure
- HttpErrorClass: coarse meaning of a non-2xx HTTP status
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    """Stage of request handling at which an error was detected."""

    TRANSPORT = "transport"
    """Network/connection failure reported by the HTTP transport."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    """Byte stream closed while a frame was still incomplete."""

    SCHEMA_MISMATCH = "schema_mismatch"
    """JSON payload did not fit the expected target type."""

    API_ERROR = "api_error"
    """Non-2xx status with a structured error body."""

    UNEXPECTED_RESPONSE = "unexpected_response"
    """Response that neither decodes nor matches the error envelope."""


class HttpErrorClass(str, Enum):
    """Coarse classification of non-2xx HTTP statuses."""

    INVALID_REQUEST = "invalid_request"
    AUTHENTICATION = "authentication"
    PERMISSION_DENIED = "permission_denied"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    REQUEST_TOO_LARGE = "request_too_large"
    RATE_LIMITED = "rate_limited"
    TIMEOUT = "timeout"
    SERVER_ERROR = "server_error"
    OVERLOADED = "overloaded"
    OTHER = "other"


_DEFAULT_STATUS_MAPPING: dict[int, HttpErrorClass] = {
    400: HttpErrorClass.INVALID_REQUEST,
    401: HttpErrorClass.AUTHENTICATION,
    403: HttpErrorClass.PERMISSION_DENIED,
    404: HttpErrorClass.NOT_FOUND,
    408: HttpErrorClass.TIMEOUT,
    409: HttpErrorClass.CONFLICT,
    413: HttpErrorClass.REQUEST_TOO_LARGE,
    422: HttpErrorClass.INVALID_REQUEST,
    429: HttpErrorClass.RATE_LIMITED,
    500: HttpErrorClass.SERVER_ERROR,
    502: HttpErrorClass.SERVER_ERROR,
    503: HttpErrorClass.OVERLOADED,
    504: HttpErrorClass.TIMEOUT,
}


def classify_http_status(status_code: int) -> HttpErrorClass:
    """Classify an HTTP status code.

    Args:
        status_code: HTTP status code

    Returns:
        HttpErrorClass for the status
    """
    if status_code in _DEFAULT_STATUS_MAPPING:
        return _DEFAULT_STATUS_MAPPING[status_code]

    if 400 <= status_code < 500:
        return HttpErrorClass.INVALID_REQUEST
    if 500 <= status_code < 600:
        return HttpErrorClass.SERVER_ERROR

    return HttpErrorClass.OTHER
