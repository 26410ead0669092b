"""
Logger interface for standardized logging across the application.

This module defines the interface for logging implementations,
ensuring consistent logging behavior across the application.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from enum import Enum


class LogLevel(Enum):
    """Standard log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        """The matching stdlib ``logging`` level number."""
        return getattr(logging, self.value)

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Parse a level name case-insensitively."""
        return cls(name.upper())


class LoggerInterface(ABC):
    """
    Interface for logging implementations.

    Context passed as keyword arguments is attached to the single
    record being logged; context added with ``add_context`` is attached
    to every subsequent record.
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        pass

    @abstractmethod
    def exception(self, message: str, exc_info: Optional[BaseException] = None, **kwargs: Any) -> None:
        """
        Log an exception.

        Args:
            message: The message to log
            exc_info: Optional exception to log
            **kwargs: Additional context data
        """
        pass

    @abstractmethod
    def set_level(self, level: LogLevel) -> None:
        """Set the logging level."""
        pass

    @abstractmethod
    def add_context(self, **kwargs: Any) -> None:
        """Add context data to all subsequent log messages."""
        pass

    @abstractmethod
    def get_context(self) -> Dict[str, Any]:
        """Get the current context data."""
        pass
