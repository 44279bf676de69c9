"""
Request parameter models for the Responses API.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from openai_responses.types.response import (
    MessageRole,
    ResponseIncludable,
    ResponseInputContent,
    ResponsePrompt,
    ResponseTextConfig,
    ServiceTier,
    Tool,
    ToolChoice,
    TruncationStrategy,
)


class EasyInputMessage(BaseModel):
    """A message input with a role and plain text or content parts.

    Example:
        >>> EasyInputMessage(role=MessageRole.USER, content="Hello, what is Rust?")
    """

    type: Literal["message"] = "message"
    role: MessageRole
    content: str | list[ResponseInputContent]


class FunctionCallOutputItem(BaseModel):
    """Output of a function call, sent back to the model."""

    type: Literal["function_call_output"] = "function_call_output"
    call_id: str
    output: str
    id: str | None = None


class ItemReference(BaseModel):
    """Reference to an existing item by ID."""

    type: Literal["item_reference"] = "item_reference"
    id: str


# Input items the client does not model are passed through as plain dicts
ResponseInputItem = Union[EasyInputMessage, FunctionCallOutputItem, ItemReference, dict[str, Any]]


class RequestParams(BaseModel):
    """Base for request parameter models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class ResponseCreateParams(RequestParams):
    """Parameters for creating a model response."""

    model: str | None = None
    input: str | list[ResponseInputItem] | None = None
    instructions: str | None = None
    background: bool | None = None
    include: list[ResponseIncludable] | None = None
    max_output_tokens: int | None = None
    metadata: dict[str, str] | None = None
    parallel_tool_calls: bool | None = None
    previous_response_id: str | None = None
    prompt: ResponsePrompt | None = None
    reasoning: dict[str, Any] | None = None
    service_tier: ServiceTier | None = None
    store: bool | None = None
    stream: bool | None = Field(default=None, description="Set by the client per operation")
    temperature: float | None = None
    text: ResponseTextConfig | None = None
    tool_choice: ToolChoice | None = None
    tools: list[Tool] | None = None
    top_p: float | None = None
    truncation: TruncationStrategy | None = None
    user: str | None = None


class ResponseRetrieveParams(RequestParams):
    """Query parameters for retrieving a response."""

    include: list[ResponseIncludable] | None = None
    starting_after: int | None = None
    stream: bool | None = None

    def to_query(self) -> dict[str, Any]:
        """Serialize to httpx query params.

        Booleans are rendered as lowercase strings and lists as repeated keys.
        """
        query: dict[str, Any] = {}
        for key, value in self.to_payload().items():
            if isinstance(value, bool):
                query[key] = "true" if value else "false"
            else:
                query[key] = value
        return query
