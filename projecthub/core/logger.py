"""
Structured logger

Lines look like ``[2026-01-01T12:00:00.000Z] [INFO] message {"key": "value"}``.
debug output is only emitted in development mode.
"""
import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from projecthub.core.exceptions import safe_str

LogContext = Dict[str, Any]

_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}


class StructuredFormatter(logging.Formatter):
    """Render records as ``[timestamp] [LEVEL] message {context}``"""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts = timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        level = _LEVEL_NAMES.get(record.levelno, record.levelname)
        line = f"[{ts}] [{level}] {record.getMessage()}"

        context = getattr(record, "context", None)
        if context:
            try:
                line += " " + json.dumps(context, default=str, ensure_ascii=False)
            except (TypeError, ValueError):
                line += " " + repr(context)
        return line


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def describe_error(error: Any) -> Any:
    """Extract message, stack and name from an exception; pass anything else through."""
    if isinstance(error, BaseException):
        return {
            "message": safe_str(error),
            "stack": "".join(traceback.format_exception(type(error), error, error.__traceback__)),
            "name": type(error).__name__,
        }
    return error


class StructuredLogger:
    """Level-filtered logger with contextual metadata"""

    def __init__(
        self,
        name: str = "projecthub",
        development: bool = True,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.development = development
        # Unregistered logger: instances never share handlers
        self._logger = logging.Logger(name, level=logging.DEBUG if development else logging.INFO)

        formatter = StructuredFormatter()

        out_handler = logging.StreamHandler(stdout or sys.stdout)
        out_handler.setFormatter(formatter)
        out_handler.addFilter(_MaxLevelFilter(logging.WARNING))

        err_handler = logging.StreamHandler(stderr or sys.stderr)
        err_handler.setFormatter(formatter)
        err_handler.setLevel(logging.WARNING)

        self._logger.addHandler(out_handler)
        self._logger.addHandler(err_handler)

    @classmethod
    def from_settings(cls, settings, name: str = "projecthub") -> "StructuredLogger":
        """Build a logger whose debug output follows ``settings.node_env``"""
        return cls(name=name, development=settings.is_development)

    def _log(self, level: int, message: str, context: Optional[LogContext]) -> None:
        self._logger.log(level, message, extra={"context": context or None})

    def debug(self, message: str, context: Optional[LogContext] = None) -> None:
        if self.development:
            self._log(logging.DEBUG, message, context)

    def info(self, message: str, context: Optional[LogContext] = None) -> None:
        self._log(logging.INFO, message, context)

    def warn(self, message: str, context: Optional[LogContext] = None) -> None:
        self._log(logging.WARNING, message, context)

    def error(self, message: str, error: Any = None, context: Optional[LogContext] = None) -> None:
        error_context = dict(context or {})
        if error is not None:
            error_context["error"] = describe_error(error)
        self._log(logging.ERROR, message, error_context)
