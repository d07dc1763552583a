# -*- coding: utf-8 -*-
"""
Input Field Component
Line edit with default and error states.
"""

from PyQt5.QtWidgets import QLineEdit


class InputField(QLineEdit):
    """
    Input field with an error state.

    The state is exposed as the dynamic property `variant` so the global
    stylesheet can color the border (QLineEdit[variant="error"]).

    Usage:
        field = InputField(placeholder="First name")
        field.set_error()
        field.set_default()
    """

    def __init__(self, placeholder: str = "", variant: str = "default", parent=None):
        super().__init__(parent)
        self.variant = variant
        if placeholder:
            self.setPlaceholderText(placeholder)
        self._apply_variant()

    def _apply_variant(self):
        self.setProperty("variant", self.variant)
        self.style().unpolish(self)
        self.style().polish(self)

    def set_variant(self, variant: str):
        """
        Change input variant dynamically.

        Args:
            variant: "default" or "error"
        """
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        self.set_variant("error")

    def set_default(self):
        self.set_variant("default")
