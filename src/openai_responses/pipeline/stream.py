"""
Event sequencing for streaming responses.

EventStream is the consumer-facing side of the streaming pipeline:

    byte source -> FrameSplitter -> FrameDecoder -> EventStream -> caller

Events are produced lazily, one per pull, in frame-completion order. The
stream is single-use: once a terminal state is reached (sentinel, error,
truncation or close) iteration ends for good and the transport is released.
"""

from __future__ import annotations

import asyncio
import inspect
from enum import Enum
from typing import TYPE_CHECKING, Any

from openai_responses.errors import IncompleteStreamError, ResponsesError
from openai_responses.pipeline.decode import FrameDecoder, FrameKind
from openai_responses.pipeline.frames import FrameSplitter
from openai_responses.telemetry.logger import LogContext, get_log_context, get_logger, log_context

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Callable

logger = get_logger("openai_responses.pipeline")


class StreamState(str, Enum):
    """Lifecycle of a streaming response."""

    STREAMING = "streaming"
    COMPLETED = "completed"
    ERRORED = "errored"
    TRUNCATED = "truncated"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not StreamState.STREAMING


class EventStream:
    """Lazy, single-consumer async iterator of decoded stream events.

    Errors are raised from the pull that encounters them; the stream is
    finished afterwards and never resynchronizes.

    Example:
        >>> async with await client.create_response_stream(params) as stream:
        ...     async for event in stream:
        ...         if event.type == "response.output_text.delta":
        ...             print(event.delta, end="")
    """

    def __init__(
        self,
        source: AsyncIterable[bytes],
        *,
        decoder: FrameDecoder | None = None,
        on_close: Callable[[], Any] | None = None,
        context: LogContext | None = None,
    ) -> None:
        """Initialize the stream.

        Args:
            source: Async iterable of raw byte chunks
            decoder: Frame decoder (default: ResponseStreamEvent decoder)
            on_close: Callback releasing the transport; may be async
            context: Log context for records about this stream (default:
                the context current at construction)
        """
        self._splitter = FrameSplitter(source)
        self._decoder = decoder or FrameDecoder()
        self._on_close = on_close
        self._state = StreamState.STREAMING
        self._released = False
        self._events_yielded = 0
        self._context = context or get_log_context()

    @property
    def state(self) -> StreamState:
        """Current lifecycle state."""
        return self._state

    @property
    def events_yielded(self) -> int:
        """Number of events handed to the consumer so far."""
        return self._events_yielded

    def __aiter__(self) -> EventStream:
        return self

    async def __anext__(self) -> Any:
        if self._state.is_terminal:
            raise StopAsyncIteration
        with log_context(self._context):
            return await self._pull()

    async def _pull(self) -> Any:
        try:
            event = await self._next_event()
        except asyncio.CancelledError:
            await self._finish(StreamState.CANCELLED)
            raise
        except Exception as e:
            if self._state is StreamState.CANCELLED:
                # Closed by another task while this pull was waiting
                raise StopAsyncIteration from None
            await self._fail(e)
            raise

        if self._state.is_terminal:
            raise StopAsyncIteration
        if event is None:
            await self._finish(StreamState.COMPLETED)
            raise StopAsyncIteration

        self._events_yielded += 1
        return event

    async def _fail(self, error: Exception) -> None:
        if isinstance(error, IncompleteStreamError):
            logger.error("Stream truncated", buffered_bytes=len(error.buffered))
            await self._finish(StreamState.TRUNCATED)
            return
        if isinstance(error, ResponsesError):
            logger.error(
                "Stream failed",
                category=error.category.value if error.category else None,
                events_yielded=self._events_yielded,
            )
        await self._finish(StreamState.ERRORED)

    async def _next_event(self) -> Any:
        """Pull frames until one yields an event; None at end of stream."""
        while True:
            frame = await self._splitter.next_frame()
            if frame is None:
                logger.debug("Stream ended without done signal")
                return None

            result = self._decoder.decode(frame)
            if result.kind is FrameKind.EVENT:
                return result.event
            if result.kind is FrameKind.DONE:
                return None

    async def collect(self) -> list[Any]:
        """Consume the remaining events into a list."""
        return [event async for event in self]

    async def _finish(self, state: StreamState) -> None:
        if not self._state.is_terminal:
            self._state = state
        logger.debug("Stream finished", state=self._state.value, events=self._events_yielded)
        await self._release()

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True
        try:
            await self._splitter.aclose()
        finally:
            if self._on_close is not None:
                result = self._on_close()
                if inspect.isawaitable(result):
                    await result

    async def aclose(self) -> None:
        """Stop consuming and release the transport.

        Events not yet pulled are discarded; nothing is drained.
        """
        with log_context(self._context):
            if not self._state.is_terminal:
                self._state = StreamState.CANCELLED
                logger.debug("Stream closed by consumer", events=self._events_yielded)
            await self._release()

    async def __aenter__(self) -> EventStream:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()
