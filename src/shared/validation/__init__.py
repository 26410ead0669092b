"""
Rule-based validation.
"""

from .validator_interface import ValidationIssue, ValidationResult, ValidationSeverity
from .validation_rules import (
    ValidationRule,
    RequiredRule,
    TypeRule,
    ChoiceRule,
    IntegerRule,
    RangeRule
)
from .validation_engine import ValidationEngine

__all__ = [
    'ValidationIssue',
    'ValidationResult',
    'ValidationSeverity',
    'ValidationRule',
    'RequiredRule',
    'TypeRule',
    'ChoiceRule',
    'IntegerRule',
    'RangeRule',
    'ValidationEngine'
]
