"""
Type definitions for openai-responses.

Pydantic models for requests, responses and stream events.
"""

from openai_responses.types.chat import (
    ChatChoice,
    ChatCompletion,
    ChatCompletionCreateParams,
    ChatMessage,
    ChatUsage,
)
from openai_responses.types.events import (
    STREAM_EVENT_TYPES,
    ResponseCompletedEvent,
    ResponseCreatedEvent,
    ResponseErrorEvent,
    ResponseStreamEvent,
    ResponseTextDeltaEvent,
    ResponseTextDoneEvent,
    StreamEventBase,
)
from openai_responses.types.params import (
    EasyInputMessage,
    FunctionCallOutputItem,
    ItemReference,
    ResponseCreateParams,
    ResponseRetrieveParams,
)
from openai_responses.types.response import (
    FunctionTool,
    ItemStatus,
    MessageRole,
    Response,
    ResponseError,
    ResponseErrorCode,
    ResponseIncludable,
    ResponseInputText,
    ResponseOutputItem,
    ResponseOutputMessage,
    ResponseOutputText,
    ResponseUsage,
    Tool,
    ToolChoice,
    ToolChoiceOptions,
)

__all__ = [
    # Chat
    "ChatChoice",
    "ChatCompletion",
    "ChatCompletionCreateParams",
    "ChatMessage",
    "ChatUsage",
    # Params
    "EasyInputMessage",
    "FunctionCallOutputItem",
    "FunctionTool",
    "ItemReference",
    "ItemStatus",
    "MessageRole",
    # Response
    "Response",
    "ResponseCompletedEvent",
    "ResponseCreateParams",
    "ResponseCreatedEvent",
    "ResponseError",
    "ResponseErrorCode",
    "ResponseErrorEvent",
    "ResponseIncludable",
    "ResponseInputText",
    "ResponseOutputItem",
    "ResponseOutputMessage",
    "ResponseOutputText",
    "ResponseRetrieveParams",
    # Events
    "ResponseStreamEvent",
    "ResponseTextDeltaEvent",
    "ResponseTextDoneEvent",
    "ResponseUsage",
    "STREAM_EVENT_TYPES",
    "StreamEventBase",
    "Tool",
    "ToolChoice",
    "ToolChoiceOptions",
]
