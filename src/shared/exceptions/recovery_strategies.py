"""
Error recovery strategies.

Only user lookups are recoverable; searches and statistics fail fast.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Tuple, Type, TypeVar

from .error_context import ErrorContext

T = TypeVar('T')


class RecoveryStrategy(ABC, Generic[T]):
    """
    Base class for error recovery strategies.

    This abstract class defines the interface for error recovery
    strategies and provides common functionality.
    """

    @abstractmethod
    def can_handle(self, error: Exception) -> bool:
        """
        Check if strategy can handle the error.

        Args:
            error: The error to check

        Returns:
            bool: Whether strategy can handle the error
        """
        pass

    @abstractmethod
    def recover(self, error: Exception, context: ErrorContext) -> T:
        """
        Attempt to recover from error.

        Args:
            error: The error to recover from
            context: Error context

        Returns:
            T: Recovery result

        Raises:
            Exception: If recovery fails
        """
        pass


class FallbackStrategy(RecoveryStrategy[T]):
    """
    Fallback strategy.

    Replaces a failed operation with a deterministic value computed
    from the error. Never retries.
    """

    def __init__(
        self,
        fallback: Callable[[Exception], T],
        error_types: Tuple[Type[Exception], ...]
    ):
        """
        Initialize fallback strategy.

        Args:
            fallback: Builds the replacement value from the error
            error_types: Types of errors to recover from
        """
        self.fallback = fallback
        self.error_types = error_types

    def can_handle(self, error: Exception) -> bool:
        """Check if error is recoverable by fallback."""
        return isinstance(error, self.error_types)

    def recover(self, error: Exception, context: ErrorContext) -> T:
        """Return the fallback value and record the recovery on the context."""
        if not self.can_handle(error):
            context.set_recovery_status(
                attempted=False,
                successful=False,
                strategy="fallback"
            )
            raise error

        value = self.fallback(error)
        context.set_recovery_status(
            attempted=True,
            successful=True,
            strategy="fallback"
        )
        return value
