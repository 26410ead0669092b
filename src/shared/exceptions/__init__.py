"""
Shared exceptions, error context and recovery strategies.
"""

from .errors import (
    ArchiveSearchError,
    ConfigurationError,
    ValidationError,
    MalformedResponseError,
    SearchExecutionError,
    StatisticsError,
    UserLookupError
)
from .error_context import ErrorContext, ErrorContextManager
from .recovery_strategies import RecoveryStrategy, FallbackStrategy

__all__ = [
    'ArchiveSearchError',
    'ConfigurationError',
    'ValidationError',
    'MalformedResponseError',
    'SearchExecutionError',
    'StatisticsError',
    'UserLookupError',
    'ErrorContext',
    'ErrorContextManager',
    'RecoveryStrategy',
    'FallbackStrategy'
]
