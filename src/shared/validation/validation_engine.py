"""
Validation engine for orchestrating validation rules.

This module provides a validation engine that manages and executes
validation rules against flat data mappings.
"""

from typing import Any, Dict, List, Mapping

from .validator_interface import ValidationIssue, ValidationResult
from .validation_rules import ValidationRule


class ValidationEngine:
    """
    Engine for orchestrating validation rules.

    Fields are validated in registration order and rules within a field
    in the order they were added, so the first reported error is stable.
    """

    def __init__(self):
        """Initialize validation engine."""
        self._rules: Dict[str, List[ValidationRule]] = {}

    def add_rule(self, field: str, rule: ValidationRule) -> 'ValidationEngine':
        """
        Add validation rule for a field.

        Args:
            field: Field name
            rule: Validation rule to add

        Returns:
            ValidationEngine: Self for method chaining
        """
        self._rules.setdefault(field, []).append(rule)
        return self

    def add_rules(self, field: str, rules: List[ValidationRule]) -> 'ValidationEngine':
        """
        Add multiple validation rules for a field.

        Args:
            field: Field name
            rules: List of validation rules to add

        Returns:
            ValidationEngine: Self for method chaining
        """
        self._rules.setdefault(field, []).extend(rules)
        return self

    def fields(self) -> List[str]:
        """Names of the fields that have rules."""
        return list(self._rules)

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """
        Validate data against all rules.

        Args:
            data: Data to validate

        Returns:
            ValidationResult: Validation result
        """
        result = ValidationResult()

        for field, rules in self._rules.items():
            value = data.get(field)
            result.issues.extend(self._validate_field(field, value, rules))

        return result

    def _validate_field(
        self,
        field: str,
        value: Any,
        rules: List[ValidationRule]
    ) -> List[ValidationIssue]:
        """
        Validate one field; stops at the first failing rule.

        Args:
            field: Field name
            value: Value to validate
            rules: Rules to validate against

        Returns:
            List[ValidationIssue]: Validation issues
        """
        for rule in rules:
            if not rule.validate(value):
                return [
                    ValidationIssue(
                        severity=rule.severity,
                        message=rule.message,
                        field=field,
                        value=value
                    )
                ]
        return []
