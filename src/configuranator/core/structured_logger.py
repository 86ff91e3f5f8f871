"""
Structured Logging with Trace IDs
=================================

Provides JSON-structured logging with per-run tracing. Every record emitted
while a `TraceContext` is active carries the same trace id, so the log lines
from one builder session can be pulled out of a shared log.

Logs go to stderr; prompts and results go to stdout. The operator's
terminal only shows log lines at the configured level (WARNING by default).
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import UTC, datetime

# Context variable to store trace_id for the current run
_trace_id_var: ContextVar[str | None] = ContextVar('trace_id', default=None)

ROOT_LOGGER_NAME = "configuranator"


class StructuredLogger:
    """
    Structured logger that outputs JSON logs with trace IDs

    Example output:
    {
        "timestamp": "2026-10-19T10:30:45.123Z",
        "level": "INFO",
        "trace_id": "abc123",
        "component": "Codec",
        "message": "Configuration written",
        "path": "flight.toml"
    }
    """

    def __init__(self, component: str, logger: logging.Logger | None = None) -> None:
        """
        Initialize structured logger

        Args:
            component: Component name (e.g., 'Codec', 'Prompter', 'Builder')
            logger: Optional existing logger (creates a child of the package logger if not provided)
        """
        self.component = component
        self.logger = logger or logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")

    def _log(self, level: str, message: str, **kwargs) -> None:
        trace_id = _trace_id_var.get()

        log_entry = {
            'timestamp': datetime.now(tz=UTC).isoformat(),
            'level': level,
            'component': self.component,
            'message': message,
        }

        if trace_id:
            log_entry['trace_id'] = trace_id

        for k, v in kwargs.items():
            log_entry[k] = v

        # Paths, IP objects and the like are logged through str()
        json_log = json.dumps(log_entry, default=str)

        log_method = getattr(self.logger, level.lower())
        log_method(json_log)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message"""
        self._log('DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message"""
        self._log('INFO', message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message"""
        self._log('WARNING', message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message"""
        self._log('ERROR', message, **kwargs)


class TraceContext:
    """
    Context manager for setting trace_id for one run

    Usage:
        with TraceContext() as trace_id:
            # All logs within this context will include this trace_id
            logger.info("Building configuration")
    """

    def __init__(self, trace_id: str | None = None) -> None:
        self.trace_id = trace_id or self._generate_trace_id()
        self.token = None

    def __enter__(self) -> str:
        self.token = _trace_id_var.set(self.trace_id)
        return self.trace_id

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _trace_id_var.reset(self.token)

    @staticmethod
    def _generate_trace_id() -> str:
        """Generate a unique trace ID"""
        return str(uuid.uuid4())[:8]  # Short UUID


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def get_logger(component: str) -> StructuredLogger:
    """
    Get a structured logger for a component

    Args:
        component: Component name

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(component)


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when a record is emitted"""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling it again only changes the level.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)
    if not any(isinstance(h, StderrHandler) for h in root.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)
    root.propagate = False
    return root
