"""
Response resource models.

Models for the ``Response`` object returned by the Responses API and the
records nested in it (output items, content parts, tools, usage).
Tagged unions are discriminated by their ``type`` field.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class MessageRole(str, Enum):
    """Role of a message author."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    DEVELOPER = "developer"


class ItemStatus(str, Enum):
    """Status of an output item or of a response."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    INTERPRETING = "interpreting"
    FAILED = "failed"
    SEARCHING = "searching"
    GENERATING = "generating"
    QUEUED = "queued"
    CANCELLED = "cancelled"


ResponseStatus = ItemStatus


class ImageDetail(str, Enum):
    LOW = "low"
    HIGH = "high"
    AUTO = "auto"


class IncompleteDetailsReason(str, Enum):
    MAX_OUTPUT_TOKENS = "max_output_tokens"
    CONTENT_FILTER = "content_filter"


class ServiceTier(str, Enum):
    AUTO = "auto"
    DEFAULT = "default"
    FLEX = "flex"
    SCALE = "scale"
    PRIORITY = "priority"


class TruncationStrategy(str, Enum):
    AUTO = "auto"
    DISABLED = "disabled"


class ComputerToolEnvironment(str, Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"
    UBUNTU = "ubuntu"
    BROWSER = "browser"


class ResponseIncludable(str, Enum):
    """Additional output data to include in a response."""

    FILE_SEARCH_CALL_RESULTS = "file_search_call.results"
    MESSAGE_INPUT_IMAGE_IMAGE_URL = "message.input_image.image_url"
    COMPUTER_CALL_OUTPUT_OUTPUT_IMAGE_URL = "computer_call_output.output.image_url"
    REASONING_ENCRYPTED_CONTENT = "reasoning.encrypted_content"
    CODE_INTERPRETER_CALL_OUTPUTS = "code_interpreter_call.outputs"


class ToolChoiceOptions(str, Enum):
    NONE = "none"
    AUTO = "auto"
    REQUIRED = "required"


class ResponseErrorCode(str, Enum):
    """Error codes reported by the API."""

    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    INVALID_PROMPT = "invalid_prompt"
    VECTOR_STORE_TIMEOUT = "vector_store_timeout"
    INVALID_IMAGE = "invalid_image"
    INVALID_IMAGE_FORMAT = "invalid_image_format"
    INVALID_BASE64_IMAGE = "invalid_base64_image"
    INVALID_IMAGE_URL = "invalid_image_url"
    IMAGE_TOO_LARGE = "image_too_large"
    IMAGE_TOO_SMALL = "image_too_small"
    IMAGE_PARSE_ERROR = "image_parse_error"
    IMAGE_CONTENT_POLICY_VIOLATION = "image_content_policy_violation"
    INVALID_IMAGE_MODE = "invalid_image_mode"
    IMAGE_FILE_TOO_LARGE = "image_file_too_large"
    UNSUPPORTED_IMAGE_MEDIA_TYPE = "unsupported_image_media_type"
    EMPTY_IMAGE_FILE = "empty_image_file"
    FAILED_TO_DOWNLOAD_IMAGE = "failed_to_download_image"
    IMAGE_FILE_NOT_FOUND = "image_file_not_found"


# ---------------------------------------------------------------------------
# Errors and usage
# ---------------------------------------------------------------------------


class ResponseError(BaseModel):
    """Error object returned when the model fails to generate a response.

    Also the shape of non-2xx response bodies.
    """

    code: ResponseErrorCode = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable description")


class ResponseIncompleteDetails(BaseModel):
    reason: IncompleteDetailsReason | None = None


class ResponseUsageInputTokensDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    cached_tokens: int


class ResponseUsageOutputTokensDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    reasoning_tokens: int


class ResponseUsage(BaseModel):
    """Token usage details."""

    model_config = ConfigDict(extra="allow")

    input_tokens: int
    input_tokens_details: ResponseUsageInputTokensDetails
    output_tokens: int
    output_tokens_details: ResponseUsageOutputTokensDetails
    total_tokens: int


# ---------------------------------------------------------------------------
# Input content parts
# ---------------------------------------------------------------------------


class ResponseInputText(BaseModel):
    type: Literal["input_text"] = "input_text"
    text: str


class ResponseInputImage(BaseModel):
    type: Literal["input_image"] = "input_image"
    detail: ImageDetail = ImageDetail.AUTO
    file_id: str | None = None
    image_url: str | None = None


class ResponseInputFile(BaseModel):
    type: Literal["input_file"] = "input_file"
    file_data: str | None = None
    file_id: str | None = None
    file_url: str | None = None
    filename: str | None = None


ResponseInputContent = Annotated[
    Union[ResponseInputText, ResponseInputImage, ResponseInputFile],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Output text and annotations
# ---------------------------------------------------------------------------


class FileCitation(BaseModel):
    type: Literal["file_citation"]
    file_id: str
    filename: str
    index: int


class UrlCitation(BaseModel):
    type: Literal["url_citation"]
    end_index: int
    start_index: int
    title: str
    url: str


class ContainerFileCitation(BaseModel):
    type: Literal["container_file_citation"]
    container_id: str
    end_index: int
    file_id: str
    filename: str
    start_index: int


class FilePath(BaseModel):
    type: Literal["file_path"]
    file_id: str
    index: int


ResponseOutputTextAnnotation = Annotated[
    Union[FileCitation, UrlCitation, ContainerFileCitation, FilePath],
    Field(discriminator="type"),
]


class TopLogprob(BaseModel):
    token: str
    bytes: list[int]
    logprob: float


class Logprob(BaseModel):
    token: str
    bytes: list[int]
    logprob: float
    top_logprobs: list[TopLogprob]


class ResponseOutputText(BaseModel):
    """Text generated by the model."""

    model_config = ConfigDict(extra="allow")

    type: Literal["output_text"]
    text: str
    annotations: list[ResponseOutputTextAnnotation] = Field(default_factory=list)
    logprobs: list[Logprob] | None = None


class ResponseOutputRefusal(BaseModel):
    """A refusal from the model."""

    type: Literal["refusal"]
    refusal: str


ResponseOutputContent = Annotated[
    Union[ResponseOutputText, ResponseOutputRefusal],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Output items
# ---------------------------------------------------------------------------


class ResponseOutputMessage(BaseModel):
    """An output message from the model."""

    model_config = ConfigDict(extra="allow")

    type: Literal["message"]
    id: str
    role: str
    status: ItemStatus
    content: list[ResponseOutputContent]


class FileSearchResult(BaseModel):
    attributes: dict[str, Any] | None = None
    file_id: str | None = None
    filename: str | None = None
    score: float | None = None
    text: str | None = None


class ResponseFileSearchToolCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["file_search_call"]
    id: str
    queries: list[str]
    status: ItemStatus
    results: list[FileSearchResult] | None = None


class ResponseFunctionToolCall(BaseModel):
    """A call to a user-defined function."""

    model_config = ConfigDict(extra="allow")

    type: Literal["function_call"]
    arguments: str
    call_id: str
    name: str
    id: str | None = None
    status: ItemStatus | None = None


class ResponseFunctionWebSearch(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["web_search_call"]
    id: str
    status: ItemStatus


class ClickAction(BaseModel):
    type: Literal["click"]
    button: str
    x: float
    y: float


class DoubleClickAction(BaseModel):
    type: Literal["double_click"]
    x: float
    y: float


class DragPoint(BaseModel):
    x: float
    y: float


class DragAction(BaseModel):
    type: Literal["drag"]
    path: list[DragPoint]


class KeypressAction(BaseModel):
    type: Literal["keypress"]
    keys: list[str]


class MoveAction(BaseModel):
    type: Literal["move"]
    x: float
    y: float


class ScreenshotAction(BaseModel):
    type: Literal["screenshot"]


class ScrollAction(BaseModel):
    type: Literal["scroll"]
    scroll_x: float
    scroll_y: float
    x: float
    y: float


class TypeAction(BaseModel):
    type: Literal["type"]
    text: str


class WaitAction(BaseModel):
    type: Literal["wait"]


ComputerAction = Annotated[
    Union[
        ClickAction,
        DoubleClickAction,
        DragAction,
        KeypressAction,
        MoveAction,
        ScreenshotAction,
        ScrollAction,
        TypeAction,
        WaitAction,
    ],
    Field(discriminator="type"),
]


class PendingSafetyCheck(BaseModel):
    id: str
    code: str
    message: str


class ResponseComputerToolCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["computer_call"]
    id: str
    action: ComputerAction
    call_id: str
    pending_safety_checks: list[PendingSafetyCheck]
    status: ItemStatus


class ReasoningSummary(BaseModel):
    type: Literal["summary_text"] = "summary_text"
    text: str


class ResponseReasoningItem(BaseModel):
    """Chain-of-thought summary produced by a reasoning model."""

    model_config = ConfigDict(extra="allow")

    type: Literal["reasoning"]
    id: str
    summary: list[ReasoningSummary]
    encrypted_content: str | None = None
    status: ItemStatus | None = None


class ImageGenerationCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["image_generation_call"]
    id: str
    result: str | None = None
    status: ItemStatus


class CodeInterpreterLogs(BaseModel):
    type: Literal["logs"]
    logs: str


class CodeInterpreterImage(BaseModel):
    type: Literal["image"]
    url: str


CodeInterpreterOutput = Annotated[
    Union[CodeInterpreterLogs, CodeInterpreterImage],
    Field(discriminator="type"),
]


class ResponseCodeInterpreterToolCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["code_interpreter_call"]
    id: str
    code: str | None = None
    container_id: str
    outputs: list[CodeInterpreterOutput] | None = None
    status: ItemStatus


class LocalShellCallAction(BaseModel):
    type: Literal["exec"] = "exec"
    command: list[str]
    env: dict[str, str]
    timeout_ms: float | None = None
    user: str | None = None
    working_directory: str | None = None


class LocalShellCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["local_shell_call"]
    id: str
    action: LocalShellCallAction
    call_id: str
    status: ItemStatus


class McpCall(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["mcp_call"]
    id: str
    arguments: str
    name: str
    server_label: str
    error: str | None = None
    output: str | None = None


class McpListToolsTool(BaseModel):
    input_schema: Any
    name: str
    annotations: Any | None = None
    description: str | None = None


class McpListTools(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["mcp_list_tools"]
    id: str
    server_label: str
    tools: list[McpListToolsTool]
    error: str | None = None


class McpApprovalRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["mcp_approval_request"]
    id: str
    arguments: str
    name: str
    server_label: str


ResponseOutputItem = Annotated[
    Union[
        ResponseOutputMessage,
        ResponseFileSearchToolCall,
        ResponseFunctionToolCall,
        ResponseFunctionWebSearch,
        ResponseComputerToolCall,
        ResponseReasoningItem,
        ImageGenerationCall,
        ResponseCodeInterpreterToolCall,
        LocalShellCall,
        McpCall,
        McpListTools,
        McpApprovalRequest,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class FunctionTool(BaseModel):
    """A function the model may call."""

    type: Literal["function"] = "function"
    name: str
    parameters: dict[str, Any] | None = None
    strict: bool | None = None
    description: str | None = None


class FileSearchRankingOptions(BaseModel):
    ranker: str | None = None
    score_threshold: float | None = None


class FileSearchTool(BaseModel):
    type: Literal["file_search"] = "file_search"
    vector_store_ids: list[str]
    filters: dict[str, Any] | None = None
    max_num_results: int | None = None
    ranking_options: FileSearchRankingOptions | None = None


class WebSearchUserLocation(BaseModel):
    type: Literal["approximate"] = "approximate"
    city: str | None = None
    country: str | None = None
    region: str | None = None
    timezone: str | None = None


class WebSearchTool(BaseModel):
    type: Literal["web_search_preview", "web_search_preview_2025_03_11"] = "web_search_preview"
    search_context_size: str | None = None
    user_location: WebSearchUserLocation | None = None


class ComputerTool(BaseModel):
    type: Literal["computer_use_preview"] = "computer_use_preview"
    display_height: float
    display_width: float
    environment: ComputerToolEnvironment


class McpTool(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["mcp"] = "mcp"
    server_label: str
    server_url: str
    allowed_tools: list[str] | dict[str, Any] | None = None
    headers: dict[str, str] | None = None
    require_approval: str | dict[str, Any] | None = None
    server_description: str | None = None


class CodeInterpreterTool(BaseModel):
    type: Literal["code_interpreter"] = "code_interpreter"
    container: str | dict[str, Any]


class ImageGenerationTool(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["image_generation"] = "image_generation"
    background: str | None = None
    model: str | None = None
    moderation: str | None = None
    output_compression: float | None = None
    output_format: str | None = None
    partial_images: float | None = None
    quality: str | None = None
    size: str | None = None


class LocalShellTool(BaseModel):
    type: Literal["local_shell"] = "local_shell"


Tool = Annotated[
    Union[
        FunctionTool,
        FileSearchTool,
        WebSearchTool,
        ComputerTool,
        McpTool,
        CodeInterpreterTool,
        ImageGenerationTool,
        LocalShellTool,
    ],
    Field(discriminator="type"),
]


class ToolChoiceFunction(BaseModel):
    """Force the model to call a specific function."""

    type: Literal["function"] = "function"
    name: str


class ToolChoiceTypes(BaseModel):
    """Force the model to use a built-in tool."""

    type: str


ToolChoice = Union[ToolChoiceOptions, ToolChoiceFunction, ToolChoiceTypes]


# ---------------------------------------------------------------------------
# Text configuration and prompt reference
# ---------------------------------------------------------------------------


class ResponseFormatText(BaseModel):
    type: Literal["text"] = "text"


class ResponseFormatJsonObject(BaseModel):
    type: Literal["json_object"] = "json_object"


class ResponseFormatJsonSchema(BaseModel):
    type: Literal["json_schema"] = "json_schema"
    name: str
    schema_: dict[str, Any] = Field(alias="schema")
    description: str | None = None
    strict: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


ResponseFormatTextConfig = Annotated[
    Union[ResponseFormatText, ResponseFormatJsonObject, ResponseFormatJsonSchema],
    Field(discriminator="type"),
]


class ResponseTextConfig(BaseModel):
    format: ResponseFormatTextConfig | None = None


class ResponsePrompt(BaseModel):
    """Reference to a prompt template and its variables."""

    id: str
    variables: dict[str, Any] | None = None
    version: str | None = None


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class Response(BaseModel):
    """A model response.

    Example:
        >>> response = await client.create_response(params)
        >>> print(response.text_content)
    """

    model_config = ConfigDict(extra="allow")

    id: str = Field(description="Unique identifier for this response")
    object: str = Field(default="response", description="Always 'response'")
    created_at: int = Field(description="Unix timestamp (seconds) of creation")
    model: str
    output: list[ResponseOutputItem]
    parallel_tool_calls: bool
    tool_choice: ToolChoice
    tools: list[Tool]
    output_text: str | None = None
    error: ResponseError | None = None
    incomplete_details: ResponseIncompleteDetails | None = None
    instructions: str | list[Any] | None = None
    metadata: dict[str, str] | None = None
    temperature: float | None = None
    top_p: float | None = None
    background: bool | None = None
    max_output_tokens: int | None = None
    previous_response_id: str | None = None
    prompt: ResponsePrompt | None = None
    reasoning: Any | None = None
    service_tier: ServiceTier | None = None
    status: ResponseStatus | None = None
    text: ResponseTextConfig | None = None
    truncation: TruncationStrategy | None = None
    usage: ResponseUsage | None = None
    user: str | None = None

    @property
    def text_content(self) -> str:
        """Concatenated text of all output messages."""
        if self.output_text is not None:
            return self.output_text
        parts = []
        for item in self.output:
            if isinstance(item, ResponseOutputMessage):
                parts.extend(
                    c.text for c in item.content if isinstance(c, ResponseOutputText)
                )
        return "".join(parts)
