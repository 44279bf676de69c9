"""
Chat Completions API models.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from openai_responses.types.params import RequestParams


class ChatMessage(BaseModel):
    """A message in a chat completion request or response."""

    model_config = ConfigDict(extra="allow")

    role: str
    content: str | None = None

    @classmethod
    def system(cls, content: str) -> ChatMessage:
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> ChatMessage:
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> ChatMessage:
        return cls(role="assistant", content=content)


class ChatResponseFormatJsonObject(BaseModel):
    type: Literal["json_object"] = "json_object"


class ChatJsonSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    schema_: dict[str, Any] = Field(alias="schema")
    strict: bool | None = None


class ChatResponseFormatJsonSchema(BaseModel):
    type: Literal["json_schema"] = "json_schema"
    json_schema: ChatJsonSchema


ChatResponseFormat = Annotated[
    Union[ChatResponseFormatJsonObject, ChatResponseFormatJsonSchema],
    Field(discriminator="type"),
]


class ChatCompletionCreateParams(RequestParams):
    """Parameters for creating a chat completion."""

    model: str
    messages: list[ChatMessage]
    temperature: float | None = None
    top_p: float | None = None
    max_tokens: int | None = None
    stream: bool | None = None
    response_format: ChatResponseFormat | None = None


class ChatChoice(BaseModel):
    model_config = ConfigDict(extra="allow")

    index: int
    message: ChatMessage
    finish_reason: str | None = None


class ChatUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletion(BaseModel):
    """A chat completion response."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = Field(description="Always 'chat.completion'")
    created: int
    model: str
    choices: list[ChatChoice]
    usage: ChatUsage | None = None

    @property
    def content(self) -> str:
        """Content of the first choice, or an empty string."""
        if not self.choices:
            return ""
        return self.choices[0].message.content or ""
