# -*- coding: utf-8 -*-
"""
Form fields bound to a FormController.

Each widget writes user edits through `FormController.set_field` and
follows the controller's draft and error mapping back, so the controller
stays the single owner of form state.
"""

from typing import Dict, List, Tuple

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QCheckBox

from controllers.form_controller import FormController
from ui.components.input_field import InputField


class FormField(QWidget):
    """Label, input and inline error message for one text field."""

    def __init__(self, form: FormController, name: str, label: str,
                 placeholder: str = "", parent=None):
        super().__init__(parent)
        self.form = form
        self.name = name
        self._syncing = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.label = QLabel(label)
        self.label.setObjectName("field-label")
        layout.addWidget(self.label)

        self.input = InputField(placeholder=placeholder or label)
        self.input.setObjectName(f"field-{name}")
        layout.addWidget(self.input)

        self.error_label = QLabel("")
        self.error_label.setObjectName("field-error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.input.textEdited.connect(self._on_edited)
        form.draft_reset.connect(lambda _draft: self.sync_from_form())
        form.errors_changed.connect(self._on_errors_changed)
        self.sync_from_form()

    def _on_edited(self, text: str):
        if not self._syncing:
            self.form.set_field(self.name, text)

    def sync_from_form(self):
        value = self.form.value(self.name)
        self._syncing = True
        self.input.setText("" if value is None else str(value))
        self._syncing = False
        self._on_errors_changed(self.form.errors)

    def _on_errors_changed(self, errors: Dict[str, str]):
        message = self.form.error_for(self.name)
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))
        if message:
            self.input.set_error()
        else:
            self.input.set_default()

    @property
    def error_text(self) -> str:
        return self.error_label.text()


class FormCheckBox(QCheckBox):
    """Boolean field bound to a FormController."""

    def __init__(self, form: FormController, name: str, label: str, parent=None):
        super().__init__(label, parent)
        self.form = form
        self.name = name
        self.setChecked(bool(form.value(name)))
        self.toggled.connect(lambda checked: self.form.set_field(self.name, checked))
        form.draft_reset.connect(lambda _draft: self._sync())

    def _sync(self):
        self.blockSignals(True)
        self.setChecked(bool(self.form.value(self.name)))
        self.blockSignals(False)


CUSTOMER_FIELDS: List[Tuple[str, str]] = [
    ("first_name", "First Name *"),
    ("last_name", "Last Name *"),
    ("phone_number", "Phone Number *"),
    ("email", "Email"),
]

ADDRESS_FIELDS: List[Tuple[str, str]] = [
    ("address_details", "Address Details *"),
    ("city", "City *"),
    ("state", "State *"),
    ("pin_code", "PIN Code *"),
]


def build_form(form: FormController, fields, layout, with_primary: bool = False) -> Dict[str, QWidget]:
    """
    Add bound widgets for `fields` to `layout`.

    Returns:
        Mapping of field name to widget
    """
    widgets = {}
    for name, label in fields:
        widget = FormField(form, name, label)
        layout.addWidget(widget)
        widgets[name] = widget
    if with_primary:
        checkbox = FormCheckBox(form, "is_primary", "Primary address")
        layout.addWidget(checkbox)
        widgets["is_primary"] = checkbox
    return widgets
