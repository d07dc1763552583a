# -*- coding: utf-8 -*-
"""
Review Step - Step 3 of the Customer Wizard.

Read-only summary of both drafts before submission.
"""

from PyQt5.QtWidgets import QFrame, QGridLayout, QLabel

from controllers.customer_wizard_controller import WizardStage
from ui.components.form_field import ADDRESS_FIELDS, CUSTOMER_FIELDS
from ui.wizards.framework import BaseStep


def _plain(label: str) -> str:
    return label.rstrip(" *")


class ReviewStep(BaseStep):
    """Step 3: Review & Save."""

    def setup_ui(self):
        self.customer_card, self.customer_values = self._create_card(
            "Customer Information", CUSTOMER_FIELDS
        )
        self.main_layout.addWidget(self.customer_card)

        address_fields = ADDRESS_FIELDS + [("is_primary", "Primary address")]
        self.address_card, self.address_values = self._create_card(
            "Address Information", address_fields
        )
        self.main_layout.addWidget(self.address_card)
        self.main_layout.addStretch()

    def _create_card(self, title: str, fields):
        card = QFrame()
        card.setObjectName("card")
        grid = QGridLayout(card)
        grid.setContentsMargins(16, 16, 16, 16)
        grid.setHorizontalSpacing(24)

        heading = QLabel(title)
        heading.setObjectName("card-title")
        grid.addWidget(heading, 0, 0, 1, 2)

        values = {}
        for row, (name, label) in enumerate(fields, start=1):
            grid.addWidget(QLabel(_plain(label)), row, 0)
            value_label = QLabel("")
            value_label.setObjectName(f"review-{name}")
            grid.addWidget(value_label, row, 1)
            values[name] = value_label
        return card, values

    def populate_data(self):
        customer = self.controller.customer_form.draft
        for name, label in self.customer_values.items():
            label.setText(getattr(customer, name) or "-")

        self.address_card.setVisible(not self.controller.is_editing)
        address = self.controller.address_form.draft
        for name, label in self.address_values.items():
            value = getattr(address, name)
            if name == "is_primary":
                value = "Yes" if value else "No"
            label.setText(value or "-")

    def get_step_title(self) -> str:
        return WizardStage.REVIEW.title
