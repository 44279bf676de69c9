"""
Telemetry module for openai-responses.

Provides structured logging with request-scoped context and masking.
"""

from openai_responses.telemetry.logger import (
    LogContext,
    LogLevel,
    ResponsesLogger,
    SensitiveDataMasker,
    clear_log_context,
    get_log_context,
    get_logger,
    log_context,
    set_log_context,
)

__all__ = [
    "LogContext",
    "LogLevel",
    "ResponsesLogger",
    "SensitiveDataMasker",
    "clear_log_context",
    "get_log_context",
    "get_logger",
    "log_context",
    "set_log_context",
]
