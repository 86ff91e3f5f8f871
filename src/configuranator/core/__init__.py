"""Core configuranator module: error types and structured logging."""

from configuranator.core.exceptions import (
    ConfigIOError,
    ConfiguratorError,
    DecodeError,
    EncodeError,
    ErrorCode,
    InputExhaustedError,
    ParseError,
    PromptAttemptsExceededError,
    ValidationError,
)
from configuranator.core.structured_logger import TraceContext, configure_logging, get_logger

__all__ = [
    "ConfigIOError",
    "ConfiguratorError",
    "configure_logging",
    "DecodeError",
    "EncodeError",
    "ErrorCode",
    "get_logger",
    "InputExhaustedError",
    "ParseError",
    "PromptAttemptsExceededError",
    "TraceContext",
    "ValidationError",
]
