"""
Custom Exceptions for Configuranator
=====================================

Structured error handling lets the terminal front end decide what to do with a
failure based on its type rather than parsing strings.

Error Codes:
- 1xxx: Input errors (operator text, recovered by re-prompting)
- 3xxx: Resource errors (file unreadable / unwritable)
- 4xxx: Codec errors (document does not match the schema)
- 5xxx: System errors (internal, unexpected)
"""

from enum import IntEnum
from pathlib import Path
from typing import Any


class ErrorCode(IntEnum):
    """Structured error codes for operator-facing messages"""

    # 1xxx: Input Errors
    PARSE_ERROR = 1001
    VALIDATION_ERROR = 1002
    INPUT_EXHAUSTED = 1003
    ATTEMPTS_EXCEEDED = 1004

    # 3xxx: Resource Errors
    RESOURCE_UNREADABLE = 3001
    RESOURCE_UNWRITABLE = 3002

    # 4xxx: Codec Errors
    DECODE_FAILED = 4001
    ENCODE_FAILED = 4002

    # 5xxx: System Errors
    INTERNAL_ERROR = 5001


class ConfiguratorError(Exception):
    """Base exception for all configuranator errors"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging"""
        return {
            'error_type': self.__class__.__name__,
            'error_code': int(self.error_code),
            'message': self.message,
            'details': self.details
        }

    def user_message(self) -> str:
        """Get an operator-facing message: code, summary and the specific cause"""
        code_messages = {
            ErrorCode.PARSE_ERROR: "Invalid input",
            ErrorCode.VALIDATION_ERROR: "Value not accepted",
            ErrorCode.INPUT_EXHAUSTED: "Input ended before the configuration was complete",
            ErrorCode.ATTEMPTS_EXCEEDED: "Too many invalid answers",
            ErrorCode.RESOURCE_UNREADABLE: "Could not read configuration file",
            ErrorCode.RESOURCE_UNWRITABLE: "Could not write configuration file",
            ErrorCode.DECODE_FAILED: "Configuration file does not match the schema",
            ErrorCode.ENCODE_FAILED: "Configuration could not be serialized",
            ErrorCode.INTERNAL_ERROR: "Internal error",
        }
        summary = code_messages.get(self.error_code, "Error")
        return f"Error {int(self.error_code)}: {summary}: {self.message}"


class ParseError(ConfiguratorError):
    """Raised when text does not match the expected scalar or tuple shape"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.PARSE_ERROR, details)


class ValidationError(ConfiguratorError):
    """Raised when a parsed value is outside what the field accepts"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)


class InputExhaustedError(ConfiguratorError):
    """Raised when an input source has no more lines to give"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.INPUT_EXHAUSTED, details)


class PromptAttemptsExceededError(ConfiguratorError):
    """Raised when a bounded prompt rejects more answers than it allows"""

    def __init__(self, label: str, attempts: int, details: dict[str, Any] | None = None):
        super().__init__(
            f"No valid answer to {label.strip()!r} after {attempts} attempts",
            ErrorCode.ATTEMPTS_EXCEEDED,
            details,
        )
        self.label = label
        self.attempts = attempts


class ConfigIOError(ConfiguratorError):
    """Raised when a configuration file cannot be read or written"""

    def __init__(
        self,
        path: str | Path,
        message: str,
        error_code: ErrorCode = ErrorCode.RESOURCE_UNREADABLE,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"{path}: {message}", error_code, details)
        self.path = Path(path)


class DecodeError(ConfiguratorError):
    """Raised when a document is not valid TOML or does not fit the schema"""

    def __init__(self, path: str | Path | None, message: str, details: dict[str, Any] | None = None):
        prefix = f"{path}: " if path is not None else ""
        super().__init__(f"{prefix}{message}", ErrorCode.DECODE_FAILED, details)
        self.path = Path(path) if path is not None else None


class EncodeError(ConfiguratorError):
    """Raised when a configuration cannot be turned into a document"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.ENCODE_FAILED, details)
