# -*- coding: utf-8 -*-
"""
Address Info Step - Step 2 of the Customer Wizard.

When editing an existing customer the address is not saved by the wizard;
addresses are managed from the customer's page.
"""

from PyQt5.QtWidgets import QLabel

from controllers.customer_wizard_controller import WizardStage
from ui.components.form_field import ADDRESS_FIELDS, build_form
from ui.wizards.framework import BaseStep


class AddressInfoStep(BaseStep):
    """Step 2: the customer's first address."""

    def setup_ui(self):
        self.edit_notice = QLabel(
            "Editing a customer only updates the customer details. "
            "Manage addresses from the customer's page."
        )
        self.edit_notice.setObjectName("hint-label")
        self.edit_notice.setWordWrap(True)
        self.main_layout.addWidget(self.edit_notice)

        self.fields = build_form(
            self.controller.address_form, ADDRESS_FIELDS, self.main_layout, with_primary=True
        )
        self.main_layout.addStretch()

    def populate_data(self):
        self.edit_notice.setVisible(self.controller.is_editing)

    def get_step_title(self) -> str:
        return WizardStage.ADDRESS_INFO.title
