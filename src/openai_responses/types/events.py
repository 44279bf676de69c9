"""
Streaming events emitted by the Responses API.

Every event carries a ``type`` discriminator naming its kind. The closed set
of kinds is the ``ResponseStreamEvent`` union; a payload whose ``type`` is
not in the set fails to decode.

Example:
    >>> async for event in stream:
    ...     if isinstance(event, ResponseTextDeltaEvent):
    ...         print(event.delta, end="")
    ...     elif isinstance(event, ResponseCompletedEvent):
    ...         print(event.response.id)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from openai_responses.types.response import (
    Response,
    ResponseOutputContent,
    ResponseOutputItem,
)


class StreamEventBase(BaseModel):
    """Fields shared by every stream event."""

    model_config = ConfigDict(extra="allow")

    sequence_number: int = Field(description="Position of the event in the stream")


class OutputItemEventBase(StreamEventBase):
    """Event scoped to a single output item."""

    item_id: str
    output_index: int


class ResponseSnapshotEventBase(StreamEventBase):
    """Lifecycle event carrying a full response snapshot."""

    response: Response


# ---------------------------------------------------------------------------
# Response lifecycle
# ---------------------------------------------------------------------------


class ResponseCreatedEvent(ResponseSnapshotEventBase):
    type: Literal["response.created"]
    nonce: str | None = None


class ResponseQueuedEvent(ResponseSnapshotEventBase):
    type: Literal["response.queued"]


class ResponseInProgressEvent(ResponseSnapshotEventBase):
    type: Literal["response.in_progress"]


class ResponseCompletedEvent(ResponseSnapshotEventBase):
    type: Literal["response.completed"]


class ResponseFailedEvent(ResponseSnapshotEventBase):
    type: Literal["response.failed"]


class ResponseIncompleteEvent(ResponseSnapshotEventBase):
    type: Literal["response.incomplete"]


class ResponseErrorEvent(StreamEventBase):
    """Error reported in-band by the stream."""

    type: Literal["error"]
    code: str | None = None
    message: str
    param: str | None = None


# ---------------------------------------------------------------------------
# Output items and content parts
# ---------------------------------------------------------------------------


class ResponseOutputItemAddedEvent(StreamEventBase):
    type: Literal["response.output_item.added"]
    item: ResponseOutputItem
    output_index: int


class ResponseOutputItemDoneEvent(StreamEventBase):
    type: Literal["response.output_item.done"]
    item: ResponseOutputItem
    output_index: int


class ResponseContentPartAddedEvent(OutputItemEventBase):
    type: Literal["response.content_part.added"]
    content_index: int
    part: ResponseOutputContent


class ResponseContentPartDoneEvent(OutputItemEventBase):
    type: Literal["response.content_part.done"]
    content_index: int
    part: ResponseOutputContent


# ---------------------------------------------------------------------------
# Text, refusal and annotations
# ---------------------------------------------------------------------------


class ResponseTextDeltaEvent(OutputItemEventBase):
    """Additional output text."""

    type: Literal["response.output_text.delta"]
    content_index: int
    delta: str


class ResponseTextDoneEvent(OutputItemEventBase):
    type: Literal["response.output_text.done"]
    content_index: int
    text: str


class ResponseOutputTextAnnotationAddedEvent(OutputItemEventBase):
    type: Literal["response.output_text.annotation.added"]
    annotation: Any
    annotation_index: int
    content_index: int


class ResponseRefusalDeltaEvent(OutputItemEventBase):
    type: Literal["response.refusal.delta"]
    content_index: int
    delta: str


class ResponseRefusalDoneEvent(OutputItemEventBase):
    type: Literal["response.refusal.done"]
    content_index: int
    refusal: str


# ---------------------------------------------------------------------------
# Audio
# ---------------------------------------------------------------------------


class ResponseAudioDeltaEvent(StreamEventBase):
    type: Literal["response.audio.delta"]
    delta: str


class ResponseAudioDoneEvent(StreamEventBase):
    type: Literal["response.audio.done"]


class ResponseAudioTranscriptDeltaEvent(StreamEventBase):
    type: Literal["response.audio_transcript.delta"]
    delta: str


class ResponseAudioTranscriptDoneEvent(StreamEventBase):
    type: Literal["response.audio_transcript.done"]


# ---------------------------------------------------------------------------
# Function calls
# ---------------------------------------------------------------------------


class ResponseFunctionCallArgumentsDeltaEvent(OutputItemEventBase):
    type: Literal["response.function_call_arguments.delta"]
    delta: str


class ResponseFunctionCallArgumentsDoneEvent(OutputItemEventBase):
    type: Literal["response.function_call_arguments.done"]
    arguments: str


# ---------------------------------------------------------------------------
# Built-in tools
# ---------------------------------------------------------------------------


class ResponseCodeInterpreterCallCodeDeltaEvent(OutputItemEventBase):
    type: Literal["response.code_interpreter.code.delta"]
    delta: str


class ResponseCodeInterpreterCallCodeDoneEvent(OutputItemEventBase):
    type: Literal["response.code_interpreter.code.done"]
    code: str


class ResponseCodeInterpreterCallCompletedEvent(OutputItemEventBase):
    type: Literal["response.code_interpreter.completed"]


class ResponseCodeInterpreterCallInProgressEvent(OutputItemEventBase):
    type: Literal["response.code_interpreter.in_progress"]


class ResponseCodeInterpreterCallInterpretingEvent(OutputItemEventBase):
    type: Literal["response.code_interpreter.interpreting"]


class ResponseFileSearchCallCompletedEvent(OutputItemEventBase):
    type: Literal["response.file_search.completed"]


class ResponseFileSearchCallInProgressEvent(OutputItemEventBase):
    type: Literal["response.file_search.in_progress"]


class ResponseFileSearchCallSearchingEvent(OutputItemEventBase):
    type: Literal["response.file_search.searching"]


class ResponseWebSearchCallCompletedEvent(OutputItemEventBase):
    type: Literal["response.web_search.completed"]


class ResponseWebSearchCallInProgressEvent(OutputItemEventBase):
    type: Literal["response.web_search.in_progress"]


class ResponseWebSearchCallSearchingEvent(OutputItemEventBase):
    type: Literal["response.web_search.searching"]


class ResponseImageGenCallCompletedEvent(OutputItemEventBase):
    type: Literal["response.image_generation.completed"]


class ResponseImageGenCallGeneratingEvent(OutputItemEventBase):
    type: Literal["response.image_generation.generating"]


class ResponseImageGenCallInProgressEvent(OutputItemEventBase):
    type: Literal["response.image_generation.in_progress"]


class ResponseImageGenCallPartialImageEvent(OutputItemEventBase):
    type: Literal["response.image_generation.partial_image"]
    partial_image_b64: str
    partial_image_index: int


class ResponseMcpCallArgumentsDeltaEvent(OutputItemEventBase):
    type: Literal["response.mcp.arguments.delta"]
    delta: Any


class ResponseMcpCallArgumentsDoneEvent(OutputItemEventBase):
    type: Literal["response.mcp.arguments.done"]
    arguments: Any


class ResponseMcpCallCompletedEvent(StreamEventBase):
    type: Literal["response.mcp.completed"]


class ResponseMcpCallFailedEvent(StreamEventBase):
    type: Literal["response.mcp.failed"]


class ResponseMcpCallInProgressEvent(OutputItemEventBase):
    type: Literal["response.mcp.in_progress"]


class ResponseMcpListToolsCompletedEvent(StreamEventBase):
    type: Literal["response.mcp.list_tools.completed"]


class ResponseMcpListToolsFailedEvent(StreamEventBase):
    type: Literal["response.mcp.list_tools.failed"]


class ResponseMcpListToolsInProgressEvent(StreamEventBase):
    type: Literal["response.mcp.list_tools.in_progress"]


# ---------------------------------------------------------------------------
# Reasoning
# ---------------------------------------------------------------------------


class ReasoningSummaryPart(BaseModel):
    text: str


class ResponseReasoningDeltaEvent(OutputItemEventBase):
    type: Literal["response.reasoning_delta"]
    content_index: int
    delta: Any


class ResponseReasoningDoneEvent(OutputItemEventBase):
    type: Literal["response.reasoning_done"]
    content_index: int
    text: str


class ResponseReasoningSummaryDeltaEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_delta"]
    delta: Any
    summary_index: int


class ResponseReasoningSummaryDoneEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_done"]
    summary_index: int
    text: str


class ResponseReasoningSummaryPartAddedEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_part.added"]
    part: ReasoningSummaryPart
    summary_index: int


class ResponseReasoningSummaryPartDoneEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_part.done"]
    part: ReasoningSummaryPart
    summary_index: int


class ResponseReasoningSummaryTextDeltaEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_text.delta"]
    delta: str
    summary_index: int


class ResponseReasoningSummaryTextDoneEvent(OutputItemEventBase):
    type: Literal["response.reasoning_summary_text.done"]
    summary_index: int
    text: str


ResponseStreamEvent = Annotated[
    Union[
        ResponseAudioDeltaEvent,
        ResponseAudioDoneEvent,
        ResponseAudioTranscriptDeltaEvent,
        ResponseAudioTranscriptDoneEvent,
        ResponseCodeInterpreterCallCodeDeltaEvent,
        ResponseCodeInterpreterCallCodeDoneEvent,
        ResponseCodeInterpreterCallCompletedEvent,
        ResponseCodeInterpreterCallInProgressEvent,
        ResponseCodeInterpreterCallInterpretingEvent,
        ResponseCompletedEvent,
        ResponseContentPartAddedEvent,
        ResponseContentPartDoneEvent,
        ResponseCreatedEvent,
        ResponseErrorEvent,
        ResponseFileSearchCallCompletedEvent,
        ResponseFileSearchCallInProgressEvent,
        ResponseFileSearchCallSearchingEvent,
        ResponseFunctionCallArgumentsDeltaEvent,
        ResponseFunctionCallArgumentsDoneEvent,
        ResponseInProgressEvent,
        ResponseFailedEvent,
        ResponseIncompleteEvent,
        ResponseOutputItemAddedEvent,
        ResponseOutputItemDoneEvent,
        ResponseReasoningSummaryPartAddedEvent,
        ResponseReasoningSummaryPartDoneEvent,
        ResponseReasoningSummaryTextDeltaEvent,
        ResponseReasoningSummaryTextDoneEvent,
        ResponseRefusalDeltaEvent,
        ResponseRefusalDoneEvent,
        ResponseReasoningDeltaEvent,
        ResponseReasoningDoneEvent,
        ResponseReasoningSummaryDeltaEvent,
        ResponseReasoningSummaryDoneEvent,
        ResponseTextDeltaEvent,
        ResponseTextDoneEvent,
        ResponseWebSearchCallCompletedEvent,
        ResponseWebSearchCallInProgressEvent,
        ResponseWebSearchCallSearchingEvent,
        ResponseImageGenCallCompletedEvent,
        ResponseImageGenCallGeneratingEvent,
        ResponseImageGenCallInProgressEvent,
        ResponseImageGenCallPartialImageEvent,
        ResponseMcpCallArgumentsDeltaEvent,
        ResponseMcpCallArgumentsDoneEvent,
        ResponseMcpCallCompletedEvent,
        ResponseMcpCallFailedEvent,
        ResponseMcpCallInProgressEvent,
        ResponseMcpListToolsCompletedEvent,
        ResponseMcpListToolsFailedEvent,
        ResponseMcpListToolsInProgressEvent,
        ResponseOutputTextAnnotationAddedEvent,
        ResponseQueuedEvent,
    ],
    Field(discriminator="type"),
]


def _build_registry() -> dict[str, type[StreamEventBase]]:
    union = get_args(ResponseStreamEvent)[0]
    registry: dict[str, type[StreamEventBase]] = {}
    for model in get_args(union):
        (tag,) = get_args(model.model_fields["type"].annotation)
        registry[tag] = model
    return registry


STREAM_EVENT_TYPES: dict[str, type[StreamEventBase]] = _build_registry()
"""Discriminator value to event model, for every known event kind."""
