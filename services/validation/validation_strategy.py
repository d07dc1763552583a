# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

A strategy maps a record to a ValidationResult: a dict of field name to
error message. An empty dict means the record is valid.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

ValidationResult = Dict[str, str]
FieldRule = Callable[[Any], Optional[str]]


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.

    Each strategy implements the rules for one record type.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> ValidationResult:
        """
        Validate a record.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            Mapping of field name to error message (empty if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record passes all validations."""
        return len(self.validate(record)) == 0


class FieldRulesValidator(ValidationStrategy):
    """
    Validator that runs one rule per field.

    Every field is checked independently and all errors are collected.
    """

    def __init__(self, rules: Dict[str, FieldRule]):
        """
        Args:
            rules: Mapping of field name to rule function
        """
        self.rules = dict(rules)

    def validate(self, record: Dict[str, Any]) -> ValidationResult:
        errors: ValidationResult = {}

        for field, rule in self.rules.items():
            message = rule(record.get(field))
            if message:
                errors[field] = message

        return errors
