"""
Validation rules for standardized validation.

This module provides reusable validation rules that can be
composed to create field-level validation logic. Rules treat ``None``
as "absent" and accept it unless they are a ``RequiredRule``.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Type, Union

from .validator_interface import ValidationSeverity


class ValidationRule(ABC):
    """
    Base class for validation rules.

    This abstract class defines the interface for validation
    rules and provides common functionality.
    """

    def __init__(
        self,
        message: str,
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize validation rule.

        Args:
            message: Error message
            severity: Rule severity
        """
        self.message = message
        self.severity = severity

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """
        Validate value.

        Args:
            value: Value to validate

        Returns:
            bool: Whether value is valid
        """
        pass


class RequiredRule(ValidationRule):
    """Rule that requires a value to be present."""

    def validate(self, value: Any) -> bool:
        """Check if value is present."""
        return value is not None and value != ""


class TypeRule(ValidationRule):
    """Rule that validates value type."""

    def __init__(
        self,
        message: str,
        expected_type: Union[Type, tuple],
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize type rule.

        Args:
            message: Error message
            expected_type: Expected value type
            severity: Rule severity
        """
        super().__init__(message, severity)
        self.expected_type = expected_type

    def validate(self, value: Any) -> bool:
        """Check if value is of expected type."""
        return value is None or isinstance(value, self.expected_type)


class ChoiceRule(ValidationRule):
    """Rule that restricts a value to a fixed set of choices."""

    def __init__(
        self,
        message: str,
        choices: Iterable[Any],
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        super().__init__(message, severity)
        self.choices = tuple(choices)

    def validate(self, value: Any) -> bool:
        """Check if value is one of the allowed choices."""
        return value is None or value in self.choices


class IntegerRule(ValidationRule):
    """Rule that requires an integer; booleans are rejected."""

    def validate(self, value: Any) -> bool:
        """Check if value is an integer."""
        if value is None:
            return True
        return isinstance(value, int) and not isinstance(value, bool)


class RangeRule(ValidationRule):
    """Rule that validates a numeric range; non-numbers are left to other rules."""

    def __init__(
        self,
        message: str,
        min_value: Optional[Union[int, float]] = None,
        max_value: Optional[Union[int, float]] = None,
        severity: ValidationSeverity = ValidationSeverity.ERROR
    ):
        """
        Initialize range rule.

        Args:
            message: Error message
            min_value: Minimum allowed value
            max_value: Maximum allowed value
            severity: Rule severity
        """
        super().__init__(message, severity)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        """Check if value is within range."""
        if value is None or isinstance(value, bool) or not isinstance(value, (int, float)):
            return True

        if self.min_value is not None and value < self.min_value:
            return False

        if self.max_value is not None and value > self.max_value:
            return False

        return True
