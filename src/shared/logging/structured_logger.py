"""
Structured logger implementation.

This module provides a structured logging implementation that
formats log messages as one JSON object per line.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from .log_formatter import LogFormatter
from .logger_interface import LoggerInterface, LogLevel

ROOT_LOGGER_NAME = "archive_search"


class StructuredLogger(LoggerInterface):
    """
    Structured logger implementation.

    Wraps a stdlib logger; records are serialized to JSON here and
    emitted through whatever handlers ``configure_logging`` installed
    on the root application logger.
    """

    def __init__(self, name: str = ROOT_LOGGER_NAME):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
        """
        self.name = name
        self._context: Dict[str, Any] = {}
        self._logger = logging.getLogger(name)

    def _log(
        self,
        level: LogLevel,
        message: str,
        exc_info: Optional[BaseException] = None,
        **kwargs: Any
    ) -> None:
        """
        Internal logging method.

        Args:
            level: Log level
            message: Message to log
            exc_info: Optional exception
            **kwargs: Additional context
        """
        if not self._logger.isEnabledFor(level.numeric):
            return

        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level.value,
            "logger": self.name,
            "message": message,
            "context": {**self._context, **kwargs}
        }

        if exc_info is not None:
            log_entry["exception"] = LogFormatter.format_error(exc_info)

        self._logger.log(level.numeric, json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, **kwargs)

    def exception(self, message: str, exc_info: Optional[BaseException] = None, **kwargs: Any) -> None:
        """Log an exception."""
        if exc_info is None:
            exc_info = sys.exc_info()[1]
        self._log(LogLevel.ERROR, message, exc_info=exc_info, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        self._logger.setLevel(level.numeric)

    def add_context(self, **kwargs: Any) -> None:
        """Add context data."""
        self._context.update(kwargs)

    def get_context(self) -> Dict[str, Any]:
        """Get the current context data."""
        return self._context.copy()


def get_logger(name: str) -> StructuredLogger:
    """
    Return a structured logger under the application logger namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        StructuredLogger: Logger named ``archive_search.<name>``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return StructuredLogger(name)
    return StructuredLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: LogLevel = LogLevel.INFO,
    output: Optional[TextIO] = None,
    log_file: Optional[str] = None
) -> StructuredLogger:
    """
    Configure the application logger and return it.

    Replaces any handlers previously installed by this function, so it
    is safe to call more than once.

    Args:
        level: Logging level
        output: Output stream for logs, stdout by default
        log_file: Optional file that also receives every record

    Returns:
        StructuredLogger: Configured root application logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(output or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(logging.Formatter('%(message)s'))
        root.addHandler(handler)

    root.setLevel(level.numeric)
    root.propagate = False
    return StructuredLogger(ROOT_LOGGER_NAME)
