"""Tests for types module."""

from openai_responses.types import (
    STREAM_EVENT_TYPES,
    ChatCompletion,
    ChatCompletionCreateParams,
    ChatMessage,
    EasyInputMessage,
    FunctionTool,
    MessageRole,
    Response,
    ResponseCompletedEvent,
    ResponseCreateParams,
    ResponseIncludable,
    ResponseOutputMessage,
    ResponseRetrieveParams,
    ResponseTextDeltaEvent,
    ToolChoiceOptions,
)
from openai_responses.types.response import (
    ResponseFormatJsonSchema,
    ResponseTextConfig,
    ToolChoiceFunction,
)


class TestResponse:
    """Tests for the Response model."""

    def test_parse(self, make_response) -> None:
        """Test parsing a complete response body."""
        response = Response.model_validate(make_response(text="Hi"))

        assert response.id == "resp_123"
        assert isinstance(response.output[0], ResponseOutputMessage)
        assert response.tool_choice is ToolChoiceOptions.AUTO
        assert response.usage.total_tokens == 123
        assert response.text_content == "Hi"

    def test_tool_choice_function(self, make_response) -> None:
        """Test a forced function tool choice."""
        body = make_response()
        body["tool_choice"] = {"type": "function", "name": "get_weather"}

        response = Response.model_validate(body)

        assert isinstance(response.tool_choice, ToolChoiceFunction)
        assert response.tool_choice.name == "get_weather"

    def test_unknown_fields_kept(self, make_response) -> None:
        """Test fields added by the API are preserved."""
        body = make_response()
        body["brand_new_field"] = 1

        assert Response.model_validate(body).model_extra["brand_new_field"] == 1


class TestStreamEventRegistry:
    """Tests for the event registry."""

    def test_known_kinds(self) -> None:
        """Test lookups by discriminator."""
        assert STREAM_EVENT_TYPES["response.output_text.delta"] is ResponseTextDeltaEvent
        assert STREAM_EVENT_TYPES["response.completed"] is ResponseCompletedEvent
        assert "error" in STREAM_EVENT_TYPES

    def test_unique_discriminators(self) -> None:
        """Test every event class has its own discriminator."""
        assert len(set(STREAM_EVENT_TYPES.values())) == len(STREAM_EVENT_TYPES)


class TestRequestParams:
    """Tests for request parameter serialization."""

    def test_payload_omits_unset(self) -> None:
        """Test unset optional fields are not sent."""
        params = ResponseCreateParams(model="gpt-4o", input="Hello")

        assert params.to_payload() == {"model": "gpt-4o", "input": "Hello"}

    def test_payload_structured_input(self) -> None:
        """Test input messages, tools and aliases are serialized."""
        params = ResponseCreateParams(
            model="gpt-4o",
            input=[EasyInputMessage(role=MessageRole.USER, content="What is the weather?")],
            tools=[FunctionTool(name="get_weather", parameters={"type": "object"})],
            text=ResponseTextConfig(
                format=ResponseFormatJsonSchema(name="weather", schema={"type": "object"})
            ),
        )

        payload = params.to_payload()

        assert payload["input"] == [
            {"type": "message", "role": "user", "content": "What is the weather?"}
        ]
        assert payload["tools"][0]["type"] == "function"
        assert payload["text"]["format"]["schema"] == {"type": "object"}

    def test_extra_params_passed_through(self) -> None:
        """Test parameters without a dedicated field are sent as given."""
        params = ResponseCreateParams(model="gpt-4o", seed=7)

        assert params.to_payload()["seed"] == 7

    def test_retrieve_query(self) -> None:
        """Test query rendering for retrieval."""
        params = ResponseRetrieveParams(
            include=[ResponseIncludable.FILE_SEARCH_CALL_RESULTS],
            starting_after=4,
            stream=True,
        )

        assert params.to_query() == {
            "include": ["file_search_call.results"],
            "starting_after": 4,
            "stream": "true",
        }


class TestChat:
    """Tests for chat completion models."""

    def test_message_helpers(self) -> None:
        """Test role helpers."""
        assert ChatMessage.system("s").role == "system"
        assert ChatMessage.user("u").role == "user"
        assert ChatMessage.assistant("a").content == "a"

    def test_params(self) -> None:
        """Test chat params serialization."""
        params = ChatCompletionCreateParams(
            model="gpt-4o",
            messages=[ChatMessage.user("Hi")],
            temperature=0.2,
        )

        assert params.to_payload() == {
            "model": "gpt-4o",
            "messages": [{"role": "user", "content": "Hi"}],
            "temperature": 0.2,
        }

    def test_completion_content(self) -> None:
        """Test content of the first choice."""
        completion = ChatCompletion.model_validate(
            {
                "id": "chatcmpl-123",
                "object": "chat.completion",
                "created": 1699012345,
                "model": "gpt-4o",
                "choices": [
                    {
                        "index": 0,
                        "message": {"role": "assistant", "content": "Hello!"},
                        "finish_reason": "stop",
                    }
                ],
            }
        )

        assert completion.content == "Hello!"
