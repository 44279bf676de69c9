"""
Request dispatch: runs one API call and maps its outcome.

Non-2xx responses become ApiError when the body is a structured error
envelope, UnexpectedResponseError otherwise. 2xx bodies are decoded with
path recording; streaming responses are handed to an EventStream.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from openai_responses.errors import (
    ApiError,
    DecodeError,
    TransportError,
    UnexpectedResponseError,
)
from openai_responses.errors.reporting import parse_json, validate_document
from openai_responses.pipeline import EventStream, FrameDecoder
from openai_responses.telemetry.logger import (
    LogContext,
    get_log_context,
    get_logger,
    log_context,
)
from openai_responses.types.response import ResponseError

if TYPE_CHECKING:
    from openai_responses.transport.http import HttpTransport

logger = get_logger("openai_responses.client")

_STREAM_HEADERS = {"Accept": "text/event-stream"}


def _type_name(result_type: Any) -> str:
    return getattr(result_type, "__name__", None) or repr(result_type)


def error_for_status(status_code: int, text: str) -> ApiError | UnexpectedResponseError:
    """Build the error for a non-2xx response body.

    Args:
        status_code: HTTP status code
        text: Full response body

    Returns:
        ApiError when the body is a known error envelope, otherwise
        UnexpectedResponseError carrying the raw text
    """
    try:
        envelope = ResponseError.model_validate_json(text)
    except ValidationError:
        return UnexpectedResponseError(status_code=status_code, body=text)
    return ApiError(
        status_code=status_code,
        code=envelope.code,
        error_message=envelope.message,
    )


class ResponseDispatcher:
    """Executes requests over an HttpTransport.

    Example:
        >>> dispatcher = ResponseDispatcher(transport)
        >>> response = await dispatcher.execute("GET", "/responses/resp_1", Response)
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    def _request_context(self, method: str, path: str) -> LogContext:
        return LogContext(
            request_id=uuid.uuid4().hex[:16],
            method=method,
            endpoint=path,
            extra=get_log_context().extra,
        )

    def _raise_for_status(self, status_code: int, text: str) -> None:
        error = error_for_status(status_code, text)
        if isinstance(error, ApiError):
            logger.warning(
                "API returned an error",
                status_code=status_code,
                code=error.code.value,
                error_class=error.error_class,
            )
        else:
            logger.warning(
                "API returned an unrecognized error body",
                status_code=status_code,
                body_length=len(text),
            )
        raise error

    async def execute(
        self,
        method: str,
        path: str,
        result_type: Any,
        *,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and decode its body into ``result_type``.

        Raises:
            TransportError: The request could not be sent or read
            ApiError: Non-2xx with a structured error body
            UnexpectedResponseError: Non-2xx with any other body, or a 2xx
                body that is not JSON
            DecodeError: A 2xx JSON body that does not match ``result_type``
        """
        with log_context(self._request_context(method, path)):
            logger.debug("Sending request", has_body=body is not None)
            response = await self._transport.send(method, path, json=body, params=params)
            text = response.text

            if not response.is_success:
                self._raise_for_status(response.status_code, text)

            name = _type_name(result_type)
            try:
                document = parse_json(text, target_name=name)
            except DecodeError as e:
                logger.warning(
                    "Response body is not JSON",
                    status_code=response.status_code,
                    detail=e.detail,
                )
                raise UnexpectedResponseError(
                    status_code=response.status_code, body=text
                ) from e

            return validate_document(document, result_type, raw=text, target_name=name)

    async def execute_empty(self, method: str, path: str) -> None:
        """Send a request whose success response carries no payload."""
        with log_context(self._request_context(method, path)):
            logger.debug("Sending request", has_body=False)
            response = await self._transport.send(method, path)
            if not response.is_success:
                self._raise_for_status(response.status_code, response.text)

    async def execute_stream(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        decoder: FrameDecoder | None = None,
    ) -> EventStream:
        """Open a streaming response.

        Returns as soon as response headers arrive; no event is read. The
        returned stream logs under the same request context.

        Raises:
            TransportError: The request could not be sent
            ApiError: Non-2xx with a structured error body
            UnexpectedResponseError: Non-2xx with any other body
        """
        with log_context(self._request_context(method, path)) as context:
            logger.debug("Opening stream", has_body=body is not None)
            response = await self._transport.send(
                method,
                path,
                json=body,
                params=params,
                headers=_STREAM_HEADERS,
                stream=True,
            )

            if not response.is_success:
                try:
                    await response.aread()
                except httpx.HTTPError as e:
                    raise TransportError(
                        f"Failed to read error body: {e}",
                        url=str(response.request.url),
                        cause=e,
                    ) from e
                finally:
                    await response.aclose()
                self._raise_for_status(response.status_code, response.text)

            return EventStream(
                self._transport.iter_bytes(response),
                decoder=decoder,
                on_close=response.aclose,
                context=context,
            )
