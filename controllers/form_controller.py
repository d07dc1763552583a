# -*- coding: utf-8 -*-
"""
Form Controller
===============
Holds the draft and the per-field errors of one entity form.

Mutation and validation are two separate steps: set_field() only clears
a stale error on the edited field; rules run only on validate().
"""

from dataclasses import fields, replace
from typing import Any, Callable, Dict, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from models.address import AddressDraft
from models.customer import CustomerDraft
from services.validation import ValidationFactory, ValidationResult, get_validation_factory
from utils.logger import get_logger

logger = get_logger(__name__)

D = TypeVar('D')


class FormController(QObject):
    """
    Draft plus error mapping for a single customer or address form.

    Usage:
        form = FormController.for_customer()
        form.set_field("first_name", "Jo")
        if form.validate():
            api.create_customer(form.draft.to_dict())
    """

    field_changed = pyqtSignal(str, object)  # field name, value
    errors_changed = pyqtSignal(dict)  # field -> message
    draft_reset = pyqtSignal(object)  # new draft

    def __init__(
        self,
        record_type: str,
        default_factory: Callable[[], D],
        factory: Optional[ValidationFactory] = None,
        parent=None
    ):
        super().__init__(parent)
        self.record_type = record_type
        self._default_factory = default_factory
        self._factory = factory or get_validation_factory()
        self._draft: D = default_factory()
        self._errors: ValidationResult = {}
        self._field_names = {f.name for f in fields(self._draft)}

    @classmethod
    def for_customer(cls, parent=None) -> "FormController":
        return cls(ValidationFactory.CUSTOMER, CustomerDraft, parent=parent)

    @classmethod
    def for_address(cls, is_primary: bool = True, parent=None) -> "FormController":
        return cls(
            ValidationFactory.ADDRESS,
            lambda: AddressDraft(is_primary=is_primary),
            parent=parent
        )

    # ==================== Properties ====================

    @property
    def draft(self) -> D:
        return self._draft

    @property
    def errors(self) -> ValidationResult:
        """Copy of the current error mapping."""
        return dict(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def error_for(self, name: str) -> str:
        return self._errors.get(name, "")

    def value(self, name: str) -> Any:
        return getattr(self._draft, name)

    # ==================== Operations ====================

    def set_field(self, name: str, value: Any):
        """
        Update one draft field.

        A previous error on that field is dropped; nothing is re-validated.

        Raises:
            ValueError: name is not a field of the draft
        """
        if name not in self._field_names:
            raise ValueError(f"Unknown {self.record_type} field: {name}")

        setattr(self._draft, name, value)
        self.field_changed.emit(name, value)

        if name in self._errors:
            del self._errors[name]
            self.errors_changed.emit(self.errors)

    def validate(self) -> bool:
        """
        Run all rules over the draft and replace the error mapping.

        Returns:
            True if the draft is valid
        """
        self._errors = self._factory.validate(self._draft.to_dict(), self.record_type)
        if self._errors:
            logger.debug(f"{self.record_type} form invalid: {self._errors}")
        self.errors_changed.emit(self.errors)
        return not self._errors

    def reset(self, draft: Optional[D] = None):
        """Replace the draft with a copy of `draft`, or with defaults."""
        self._draft = replace(draft) if draft is not None else self._default_factory()
        self._errors = {}
        self.draft_reset.emit(self._draft)
        self.errors_changed.emit({})

    def snapshot(self) -> Dict[str, Any]:
        """Current draft as a request body."""
        return self._draft.to_dict()
