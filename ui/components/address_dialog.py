# -*- coding: utf-8 -*-
"""
Address dialog bound to a CustomerDetailController's address form.
"""

from PyQt5.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QPushButton, QLabel

from controllers.customer_detail_controller import CustomerDetailController
from ui.components.form_field import ADDRESS_FIELDS, build_form
from ui.workers import run_in_background


class AddressDialog(QDialog):
    """
    Add or edit one address.

    The dialog stays open while the form is invalid or the save fails;
    it is accepted once the controller reports success.
    """

    def __init__(self, controller: CustomerDetailController, parent=None):
        super().__init__(parent)
        self.controller = controller
        editing = controller.editing_address is not None
        self.setWindowTitle("Edit Address" if editing else "Add Address")
        self.setMinimumWidth(420)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setSpacing(12)

        self.fields = build_form(
            self.controller.address_form, ADDRESS_FIELDS, layout, with_primary=True
        )

        self.error_label = QLabel("")
        self.error_label.setObjectName("field-error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        buttons.addWidget(self.cancel_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.setObjectName("primary-button")
        self.save_btn.clicked.connect(self._on_save)
        buttons.addWidget(self.save_btn)
        layout.addLayout(buttons)

    def _on_save(self):
        self.save_btn.setEnabled(False)
        self.error_label.hide()
        run_in_background(self, self.controller.save_address, self._on_saved)

    def _on_saved(self, result):
        self.save_btn.setEnabled(True)
        if result.success:
            self.accept()
            return
        if not result.errors:
            self.error_label.setText(result.message)
            self.error_label.show()
