"""
Validation result types.

This module defines the result structures shared by validation rules
and the validation engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ValidationSeverity(Enum):
    """Validation severity levels."""
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass
class ValidationIssue:
    """
    Validation issue information.

    This class represents a single validation issue,
    including its severity, message, and the offending field.
    """

    severity: ValidationSeverity
    message: str
    field: Optional[str] = None
    value: Any = None


@dataclass
class ValidationResult:
    """
    Validation result.

    ``is_valid`` is False as soon as one ERROR issue is present.
    """

    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether no ERROR issue was recorded."""
        return not self.errors

    @property
    def errors(self) -> List[ValidationIssue]:
        """Issues with ERROR severity, in rule order."""
        return [
            issue for issue in self.issues
            if issue.severity == ValidationSeverity.ERROR
        ]

