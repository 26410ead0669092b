"""
Log formatter helpers.

This module provides utilities for formatting values that end up
in structured log records.
"""

import traceback
from typing import Any, Dict


class LogFormatter:
    """Static helpers for log record values."""

    @staticmethod
    def format_error(
        error: BaseException,
        include_traceback: bool = True
    ) -> Dict[str, Any]:
        """
        Format an error for logging.

        Args:
            error: The error to format
            include_traceback: Whether to include traceback

        Returns:
            Dict[str, Any]: Formatted error
        """
        formatted = {
            "type": error.__class__.__name__,
            "message": str(error)
        }

        cause = getattr(error, "cause", None) or error.__cause__
        if cause is not None:
            formatted["cause"] = f"{cause.__class__.__name__}: {cause}"

        if include_traceback:
            formatted["traceback"] = traceback.format_exception(
                type(error),
                error,
                error.__traceback__
            )

        return formatted

    @staticmethod
    def format_duration(seconds: float) -> str:
        """
        Format a duration in seconds.

        Args:
            seconds: Duration in seconds

        Returns:
            str: Formatted duration
        """
        if seconds < 1:
            return f"{seconds * 1000:.1f}ms"
        elif seconds < 60:
            return f"{seconds:.2f}s"
        minutes = seconds / 60
        return f"{minutes:.2f}m"
