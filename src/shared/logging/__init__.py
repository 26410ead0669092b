"""
Structured logging for archive search.
"""

from .logger_interface import LoggerInterface, LogLevel
from .log_formatter import LogFormatter
from .structured_logger import StructuredLogger, configure_logging, get_logger

__all__ = [
    'LoggerInterface',
    'LogLevel',
    'LogFormatter',
    'StructuredLogger',
    'configure_logging',
    'get_logger'
]
