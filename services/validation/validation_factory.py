# -*- coding: utf-8 -*-
"""
Validation Factory - Creates appropriate validators for different record types.
"""

from typing import Any, Dict, List, Optional

from .rules import ADDRESS_RULES, CUSTOMER_RULES
from .validation_strategy import FieldRulesValidator, ValidationResult, ValidationStrategy


class ValidationFactory:
    """
    Registry of validation strategies keyed by record type.

    Usage:
        factory = ValidationFactory()
        errors = factory.validate(draft.to_dict(), "customer")
    """

    CUSTOMER = "customer"
    ADDRESS = "address"

    def __init__(self):
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators."""
        self.register_validator(self.CUSTOMER, FieldRulesValidator(CUSTOMER_RULES))
        self.register_validator(self.ADDRESS, FieldRulesValidator(ADDRESS_RULES))

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'customer', 'address')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        """Get a registered validator by record type."""
        return self._validators.get(record_type.lower())

    def validate(self, record: Dict[str, Any], record_type: str) -> ValidationResult:
        """
        Validate a record using the validator of its type.

        Raises:
            KeyError: no validator is registered for record_type
        """
        validator = self.get_validator(record_type)
        if not validator:
            raise KeyError(f"No validator registered for record type: {record_type}")

        return validator.validate(record)

    def is_valid(self, record: Dict[str, Any], record_type: str) -> bool:
        return len(self.validate(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())


_factory: Optional[ValidationFactory] = None


def get_validation_factory() -> ValidationFactory:
    """Shared factory instance."""
    global _factory
    if _factory is None:
        _factory = ValidationFactory()
    return _factory
