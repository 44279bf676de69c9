"""
Core ResponsesClient implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from openai_responses.client.dispatch import ResponseDispatcher
from openai_responses.config import ClientConfig
from openai_responses.transport import HttpTransport
from openai_responses.types.chat import ChatCompletion, ChatCompletionCreateParams
from openai_responses.types.params import ResponseCreateParams, ResponseRetrieveParams
from openai_responses.types.response import Response

if TYPE_CHECKING:
    from openai_responses.pipeline import EventStream


class ResponsesClient:
    """Async client for the Responses and Chat Completions endpoints.

    Example:
        >>> async with ResponsesClient() as client:
        ...     response = await client.create_response(
        ...         ResponseCreateParams(model="gpt-4o", input="Hello!")
        ...     )
        ...     print(response.text_content)

        >>> # Streaming
        >>> async with await client.create_response_stream(params) as stream:
        ...     async for event in stream:
        ...         if event.type == "response.output_text.delta":
        ...             print(event.delta, end="")
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: HttpTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Connection settings (default: resolved from environment)
            api_key: Explicit API key, overrides config and environment
            base_url: Explicit base URL, overrides config and environment
            timeout: Explicit timeout in seconds
            transport: Pre-built transport; config arguments are then ignored
        """
        if transport is None:
            if config is None:
                config = ClientConfig.from_env(api_key=api_key, base_url=base_url, timeout=timeout)
            else:
                config = config.with_overrides(api_key=api_key, base_url=base_url, timeout=timeout)
            transport = HttpTransport(config)

        self._transport = transport
        self._dispatcher = ResponseDispatcher(transport)

    @property
    def config(self) -> ClientConfig:
        return self._transport.config

    # Responses

    async def create_response(self, params: ResponseCreateParams) -> Response:
        """Create a model response.

        Args:
            params: Request parameters; ``stream`` is forced off

        Returns:
            The created Response
        """
        body = _with_stream(params, False).to_payload()
        return await self._dispatcher.execute("POST", "/responses", Response, body=body)

    async def create_response_stream(self, params: ResponseCreateParams) -> EventStream:
        """Create a model response and stream its events.

        Args:
            params: Request parameters; ``stream`` is forced on

        Returns:
            EventStream of ResponseStreamEvent, returned once headers arrive
        """
        body = _with_stream(params, True).to_payload()
        return await self._dispatcher.execute_stream("POST", "/responses", body=body)

    async def retrieve_response(
        self,
        response_id: str,
        params: ResponseRetrieveParams | None = None,
    ) -> Response:
        """Retrieve a stored response.

        Args:
            response_id: ID of the response
            params: Optional query (``include``, ``starting_after``)
        """
        query = _with_stream(params or ResponseRetrieveParams(), None).to_query()
        return await self._dispatcher.execute(
            "GET", f"/responses/{response_id}", Response, params=query or None
        )

    async def retrieve_response_stream(
        self,
        response_id: str,
        params: ResponseRetrieveParams | None = None,
    ) -> EventStream:
        """Replay a stored response as an event stream.

        ``stream=true`` is always sent in the query.
        """
        query = _with_stream(params or ResponseRetrieveParams(), True).to_query()
        return await self._dispatcher.execute_stream(
            "GET", f"/responses/{response_id}", params=query
        )

    async def delete_response(self, response_id: str) -> None:
        """Delete a stored response."""
        await self._dispatcher.execute_empty("DELETE", f"/responses/{response_id}")

    async def cancel_response(self, response_id: str) -> Response:
        """Cancel a background response.

        Returns:
            The response in its cancelled state
        """
        return await self._dispatcher.execute(
            "POST", f"/responses/{response_id}/cancel", Response
        )

    # Chat completions

    async def create_chat_completion(self, params: ChatCompletionCreateParams) -> ChatCompletion:
        """Create a (non-streaming) chat completion."""
        body = _with_stream(params, False).to_payload()
        return await self._dispatcher.execute(
            "POST", "/chat/completions", ChatCompletion, body=body
        )

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> ResponsesClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


def _with_stream(params: Any, stream: bool | None) -> Any:
    return params.model_copy(update={"stream": stream})
