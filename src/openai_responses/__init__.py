"""
openai-responses: typed async client for the Responses API.

Streaming responses are decoded frame by frame into typed events, and
malformed payloads surface as errors that carry the failing field path.
"""
from __future__ import annotations

from openai_responses.client import ResponseDispatcher, ResponsesClient
from openai_responses.config import ClientConfig
from openai_responses.errors import (
    ApiError,
    DecodeError,
    DecodeErrorKind,
    IncompleteStreamError,
    ResponsesError,
    TransportError,
    UnexpectedResponseError,
)
from openai_responses.pipeline import EventStream, StreamState
from openai_responses.types import (
    ChatCompletion,
    ChatCompletionCreateParams,
    ChatMessage,
    Response,
    ResponseCreateParams,
    ResponseErrorCode,
    ResponseRetrieveParams,
    ResponseStreamEvent,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ClientConfig",
    "ResponseDispatcher",
    "ResponsesClient",
    # Errors
    "ApiError",
    "DecodeError",
    "DecodeErrorKind",
    "IncompleteStreamError",
    "ResponsesError",
    "TransportError",
    "UnexpectedResponseError",
    # Streaming
    "EventStream",
    "StreamState",
    # Types
    "ChatCompletion",
    "ChatCompletionCreateParams",
    "ChatMessage",
    "Response",
    "ResponseCreateParams",
    "ResponseErrorCode",
    "ResponseRetrieveParams",
    "ResponseStreamEvent",
    # Version
    "__version__",
]
