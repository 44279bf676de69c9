"""
Structured logging for openai-responses.

Every record may carry keyword fields and the request-scoped LogContext of
the call that produced it. Streams keep the context of the request that
opened them, so events logged while iterating are tagged with the same
request_id as the request itself.
"""

from __future__ import annotations

import json
import logging
import re
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from collections.abc import Iterator

_log_context: ContextVar[LogContext | None] = ContextVar("log_context", default=None)

_REDACTED = "***REDACTED***"


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    def to_logging_level(self) -> int:
        return logging.getLevelName(self.value)


@dataclass(frozen=True)
class LogContext:
    """Request-scoped logging context.

    Attributes:
        request_id: Client-generated request identifier
        method: HTTP method of the in-flight request
        endpoint: Request path relative to the base URL
        response_id: Response resource ID, when known
        extra: Additional context fields
    """

    request_id: str | None = None
    method: str | None = None
    endpoint: str | None = None
    response_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        known = {
            "request_id": self.request_id,
            "method": self.method,
            "endpoint": self.endpoint,
            "response_id": self.response_id,
        }
        result = {k: v for k, v in known.items() if v}
        result.update(self.extra)
        return result

    def with_extra(self, **fields: Any) -> LogContext:
        return replace(self, extra={**self.extra, **fields})


def get_log_context() -> LogContext:
    """Get current logging context."""
    return _log_context.get() or LogContext()


def set_log_context(context: LogContext) -> None:
    """Set logging context for current async context."""
    _log_context.set(context)


def clear_log_context() -> None:
    _log_context.set(None)


@contextmanager
def log_context(context: LogContext) -> Iterator[LogContext]:
    """Use ``context`` for records logged inside the block.

    The previous context is restored on exit, including when the block
    raises.
    """
    token = _log_context.set(context)
    try:
        yield context
    finally:
        _log_context.reset(token)


class SensitiveDataMasker:
    """Redacts credentials from log messages and fields."""

    DEFAULT_PATTERNS: ClassVar[list[tuple[str, str]]] = [
        (r"sk-[a-zA-Z0-9_-]{20,}", f"sk-{_REDACTED}"),
        (r"(Bearer\s+)\S+", rf"\1{_REDACTED}"),
        (r"(OPENAI_API_KEY=)\S+", rf"\1{_REDACTED}"),
    ]
    SENSITIVE_KEYS: ClassVar[frozenset[str]] = frozenset(
        {"api_key", "authorization", "token", "secret"}
    )

    def __init__(self, patterns: list[tuple[str, str]] | None = None) -> None:
        self._patterns = [
            (re.compile(p, re.IGNORECASE), r)
            for p, r in (patterns or self.DEFAULT_PATTERNS)
        ]

    def mask(self, text: str) -> str:
        for pattern, replacement in self._patterns:
            text = pattern.sub(replacement, text)
        return text

    def _is_sensitive(self, key: str) -> bool:
        key = key.lower()
        return any(name in key for name in self.SENSITIVE_KEYS)

    def mask_dict(self, data: dict[str, Any]) -> dict[str, Any]:
        """Mask values under credential-like keys and inside strings."""
        result: dict[str, Any] = {}
        for key, value in data.items():
            if self._is_sensitive(key):
                result[key] = _REDACTED
            elif isinstance(value, str):
                result[key] = self.mask(value)
            elif isinstance(value, dict):
                result[key] = self.mask_dict(value)
            else:
                result[key] = value
        return result


class JsonFormatter(logging.Formatter):
    """One JSON object per record; context nested under ``context``."""

    def __init__(self, masker: SensitiveDataMasker | None = None) -> None:
        super().__init__()
        self._masker = masker or SensitiveDataMasker()

    def format(self, record: logging.LogRecord) -> str:
        created = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        log_data: dict[str, Any] = {
            "timestamp": f"{created}.{int(record.msecs):03d}Z",
            "level": record.levelname,
            "logger": record.name,
            "message": self._masker.mask(record.getMessage()),
        }
        if context := get_log_context().to_dict():
            log_data["context"] = context
        log_data.update(self._masker.mask_dict(getattr(record, "extra_fields", {})))
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """``time | LEVEL | logger | message | key=value ...``"""

    def __init__(self, masker: SensitiveDataMasker | None = None) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self._masker = masker or SensitiveDataMasker()

    def format(self, record: logging.LogRecord) -> str:
        line = self._masker.mask(super().format(record))
        fields = {
            **self._masker.mask_dict(getattr(record, "extra_fields", {})),
            **get_log_context().to_dict(),
        }
        if fields:
            line += " | " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


class ResponsesLogger:
    """Logger for openai-responses with structured keyword fields.

    Example:
        >>> logger = get_logger("openai_responses.client")
        >>> logger.debug("Sending request", has_body=True)
    """

    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _level: ClassVar[LogLevel] = LogLevel.WARNING
    _handler: ClassVar[logging.Handler | None] = None

    @classmethod
    def configure(
        cls,
        level: LogLevel | str = LogLevel.INFO,
        format: str = "json",
        stream: Any = None,
        masker: SensitiveDataMasker | None = None,
    ) -> None:
        """Configure every openai-responses logger.

        Args:
            level: Log level
            format: Output format ('json' or 'text')
            stream: Output stream (default: stderr)
            masker: Sensitive data masker
        """
        cls._level = LogLevel(level)
        formatter = JsonFormatter(masker) if format == "json" else TextFormatter(masker)
        cls._handler = logging.StreamHandler(stream or sys.stderr)
        cls._handler.setFormatter(formatter)

        for logger in cls._loggers.values():
            cls._attach(logger)

    @classmethod
    def _attach(cls, logger: logging.Logger) -> None:
        logger.setLevel(cls._level.to_logging_level())
        if cls._handler is not None:
            logger.handlers.clear()
            logger.addHandler(cls._handler)
        elif not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(TextFormatter())
            logger.addHandler(handler)
        logger.propagate = False

    @classmethod
    def get_logger(cls, name: str) -> ResponsesLogger:
        if name not in cls._loggers:
            logger = logging.getLogger(name)
            cls._attach(logger)
            cls._loggers[name] = logger
        return cls(cls._loggers[name])

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        extra = {"extra_fields": kwargs} if kwargs else None
        self._logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, exc_info=exc_info, **kwargs)


def get_logger(name: str) -> ResponsesLogger:
    """Get a logger instance."""
    return ResponsesLogger.get_logger(name)
