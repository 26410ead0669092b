"""
Error context management system.

This module provides utilities for capturing structured error information
that is attached to log records and error responses.
"""

import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field


@dataclass
class ErrorContext:
    """
    Structured error context information.

    Captures the error type, message, the chained cause and any
    request data needed to diagnose a failure from the logs alone.
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error_type: str = ""
    error_message: str = ""
    cause: Optional[str] = None
    stack_trace: Optional[List[str]] = None
    context_data: Dict[str, Any] = field(default_factory=dict)
    recovery_attempted: bool = False
    recovery_successful: bool = False
    recovery_strategy: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error context to dictionary.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.error_type,
            "error_message": self.error_message,
            "cause": self.cause,
            "stack_trace": self.stack_trace,
            "context_data": self.context_data,
            "recovery_attempted": self.recovery_attempted,
            "recovery_successful": self.recovery_successful,
            "recovery_strategy": self.recovery_strategy
        }

    def set_recovery_status(
        self,
        attempted: bool,
        successful: bool,
        strategy: Optional[str] = None
    ) -> None:
        """
        Set recovery status.

        Args:
            attempted: Whether recovery was attempted
            successful: Whether recovery was successful
            strategy: Optional recovery strategy name
        """
        self.recovery_attempted = attempted
        self.recovery_successful = successful
        self.recovery_strategy = strategy


class ErrorContextManager:
    """Factory helpers for ``ErrorContext``."""

    @staticmethod
    def create_context(
        error: BaseException,
        include_stack_trace: bool = False,
        **context_data: Any
    ) -> ErrorContext:
        """
        Create error context from exception.

        Args:
            error: The exception to create context from
            include_stack_trace: Whether to include stack trace
            **context_data: Additional context data

        Returns:
            ErrorContext: Created error context
        """
        cause = getattr(error, "cause", None) or error.__cause__
        context = ErrorContext(
            error_type=error.__class__.__name__,
            error_message=str(error),
            cause=str(cause) if cause is not None else None,
            context_data=dict(context_data)
        )

        if include_stack_trace:
            context.stack_trace = traceback.format_exception(
                type(error),
                error,
                error.__traceback__
            )

        return context

