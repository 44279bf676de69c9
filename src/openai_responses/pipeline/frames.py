"""
Frame splitting for Server-Sent Events byte streams.

A frame is every byte up to and including the first blank-line marker
(``\\n\\n``). Chunk boundaries from the network are arbitrary, so bytes are
accumulated in a buffer owned by the splitter until a marker is found.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from openai_responses.errors import IncompleteStreamError
from openai_responses.telemetry.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator

logger = get_logger("openai_responses.pipeline")


FRAME_DELIMITER = b"\n\n"


class FrameSplitter:
    """Pull complete frames out of an async byte-chunk source.

    Single consumer: the buffer is private and mutated in place by
    ``next_frame``.

    Example:
        >>> splitter = FrameSplitter(response.aiter_bytes())
        >>> while (frame := await splitter.next_frame()) is not None:
        ...     handle(frame)
    """

    def __init__(
        self,
        source: AsyncIterable[bytes],
        delimiter: bytes = FRAME_DELIMITER,
    ) -> None:
        """Initialize the splitter.

        Args:
            source: Async iterable of raw byte chunks
            delimiter: Frame terminator
        """
        self._source: AsyncIterator[bytes] = source.__aiter__()
        self._delimiter = delimiter
        self._buffer = bytearray()
        # Offset below which the buffer is known not to contain the delimiter
        self._scan_from = 0
        self._exhausted = False

    @property
    def buffered(self) -> int:
        """Number of bytes waiting for a frame terminator."""
        return len(self._buffer)

    @property
    def exhausted(self) -> bool:
        """Whether the source has reported end of data."""
        return self._exhausted

    def _take_frame(self) -> bytes | None:
        end = self._buffer.find(self._delimiter, self._scan_from)
        if end == -1:
            self._scan_from = max(0, len(self._buffer) - len(self._delimiter) + 1)
            return None

        cut = end + len(self._delimiter)
        frame = bytes(self._buffer[:cut])
        del self._buffer[:cut]
        self._scan_from = 0
        return frame

    async def next_frame(self) -> bytes | None:
        """Return the next complete frame, delimiter included.

        Returns:
            Frame bytes, or None once the source ended on a frame boundary

        Raises:
            IncompleteStreamError: The source ended with unterminated bytes
        """
        while True:
            frame = self._take_frame()
            if frame is not None:
                return frame

            if self._exhausted:
                return None

            try:
                chunk = await self._source.__anext__()
            except StopAsyncIteration:
                self._exhausted = True
                if self._buffer:
                    remainder = bytes(self._buffer)
                    self._buffer.clear()
                    self._scan_from = 0
                    raise IncompleteStreamError(remainder) from None
                return None

            if self._exhausted:
                # Closed while this pull was waiting on the source
                return None
            if chunk:
                self._buffer.extend(chunk)

    async def aclose(self) -> None:
        """Close the underlying source if it supports closing.

        A source suspended in another task's pull cannot be closed from
        here; it is left to the owner of the connection to release.
        """
        self._exhausted = True
        self._buffer.clear()
        self._scan_from = 0
        if getattr(self._source, "ag_running", False):
            logger.debug("Source busy in a pending pull, not closed")
            return
        close = getattr(self._source, "aclose", None)
        if close is not None:
            result = close()
            if inspect.isawaitable(result):
                await result
