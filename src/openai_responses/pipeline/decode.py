"""
Frame decoding.

Turns a single SSE frame into one of three outcomes:
- an event decoded from the frame's ``data:`` payload
- a skip, for frames without payload (keep-alives, comments)
- done, for the ``[DONE]`` sentinel

Wire format:
```
data: {"type": "response.output_text.delta", ...}

: keep-alive

data: [DONE]

```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from openai_responses.errors.reporting import decode_json
from openai_responses.telemetry.logger import get_logger
from openai_responses.types.events import ResponseStreamEvent

logger = get_logger("openai_responses.pipeline")

DATA_PREFIX = "data: "
DONE_SIGNAL = "[DONE]"


class FrameKind(str, Enum):
    """Outcome of decoding a frame."""

    EVENT = "event"
    SKIP = "skip"
    DONE = "done"


@dataclass(frozen=True)
class FrameResult:
    """Decoded frame outcome. ``event`` is set only for EVENT."""

    kind: FrameKind
    event: Any = None

    @classmethod
    def skip(cls) -> FrameResult:
        return cls(FrameKind.SKIP)

    @classmethod
    def done(cls) -> FrameResult:
        return cls(FrameKind.DONE)

    @classmethod
    def of(cls, event: Any) -> FrameResult:
        return cls(FrameKind.EVENT, event)


def extract_payload(frame_text: str, prefix: str = DATA_PREFIX) -> str:
    """Concatenate the data lines of a frame.

    Each line starting with ``prefix`` contributes its remainder, trimmed of
    surrounding whitespace. Segments are joined without a separator; all
    other lines are ignored.

    Example:
        >>> extract_payload('data: {"a":1,\\ndata: "b":2}\\n\\n')
        '{"a":1,"b":2}'
    """
    segments = []
    for line in frame_text.split("\n"):
        if line.startswith(prefix):
            segments.append(line[len(prefix):].strip())
    return "".join(segments)


class FrameDecoder:
    """Decode SSE frames into typed events.

    Attributes:
        prefix: Data line prefix (default: "data: ")
        done_signal: End of stream payload (default: "[DONE]")
        target: Type each payload is decoded into
    """

    def __init__(
        self,
        target: Any = ResponseStreamEvent,
        *,
        prefix: str = DATA_PREFIX,
        done_signal: str = DONE_SIGNAL,
        target_name: str = "ResponseStreamEvent",
    ) -> None:
        self.target = target
        self.prefix = prefix
        self.done_signal = done_signal
        self._target_name = target_name

    def decode(self, frame: bytes) -> FrameResult:
        """Decode one frame.

        Args:
            frame: Raw frame bytes, delimiter included

        Returns:
            FrameResult describing the outcome

        Raises:
            DecodeError: The payload is not valid JSON or does not match
                the target type
        """
        # Invalid UTF-8 is replaced rather than failing the stream
        text = frame.decode("utf-8", errors="replace")
        payload = extract_payload(text, self.prefix)

        if payload == self.done_signal:
            return FrameResult.done()
        if not payload:
            return FrameResult.skip()

        logger.debug("Raw payload received from stream", payload=payload)
        return FrameResult.of(
            decode_json(payload, self.target, target_name=self._target_name)
        )
