# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import FieldRulesValidator, ValidationResult, ValidationStrategy
from .validation_factory import ValidationFactory, get_validation_factory

__all__ = [
    'FieldRulesValidator',
    'ValidationResult',
    'ValidationStrategy',
    'ValidationFactory',
    'get_validation_factory',
]
