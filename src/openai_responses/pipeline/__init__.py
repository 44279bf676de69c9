"""
Pipeline layer - streaming response decoding.

Stages:
- FrameSplitter: Accumulates byte chunks and cuts blank-line delimited frames
- FrameDecoder: Extracts the data payload of a frame and decodes it
- EventStream: Lazy, cancellable async iterator over decoded events
"""

from openai_responses.pipeline.decode import (
    DATA_PREFIX,
    DONE_SIGNAL,
    FrameDecoder,
    FrameKind,
    FrameResult,
    extract_payload,
)
from openai_responses.pipeline.frames import FRAME_DELIMITER, FrameSplitter
from openai_responses.pipeline.stream import EventStream, StreamState

__all__ = [
    "DATA_PREFIX",
    "DONE_SIGNAL",
    "EventStream",
    "FRAME_DELIMITER",
    "FrameDecoder",
    "FrameKind",
    "FrameResult",
    "FrameSplitter",
    "StreamState",
    "extract_payload",
]
