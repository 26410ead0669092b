"""
Exception hierarchy for archive search.

Every error raised by the application derives from ``ArchiveSearchError``
so the HTTP and CLI layers can map failures to responses in one place.
"""

from typing import Any, Optional


class ArchiveSearchError(Exception):
    """Base class for all archive search errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(ArchiveSearchError):
    """Configuration is missing or invalid; fatal at startup."""


class ValidationError(ArchiveSearchError):
    """
    Filter input failed validation.

    Attributes:
        field: Name of the offending input field
        value: The rejected value
    """

    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class MalformedResponseError(ArchiveSearchError):
    """The search backend answered with an unrecognized payload."""


class SearchExecutionError(ArchiveSearchError):
    """A search could not be executed or its response could not be parsed."""


class StatisticsError(ArchiveSearchError):
    """At least one statistics sub-aggregation failed."""


class UserLookupError(ArchiveSearchError):
    """
    A directory lookup for a single user failed.

    Always recovered into a fallback identity by the enrichment service.
    """

    def __init__(
        self,
        message: str,
        user_id: str,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None
    ):
        super().__init__(message, cause)
        self.user_id = user_id
        self.status_code = status_code
