# -*- coding: utf-8 -*-
"""
Customer Info Step - Step 1 of the Customer Wizard.
"""

from PyQt5.QtWidgets import QLabel

from controllers.customer_wizard_controller import WizardStage
from ui.components.form_field import CUSTOMER_FIELDS, build_form
from ui.wizards.framework import BaseStep


class CustomerInfoStep(BaseStep):
    """Step 1: name, phone and email."""

    def setup_ui(self):
        hint = QLabel("Fields marked * are required.")
        hint.setObjectName("hint-label")
        self.main_layout.addWidget(hint)

        self.fields = build_form(self.controller.customer_form, CUSTOMER_FIELDS, self.main_layout)
        self.main_layout.addStretch()

    def get_step_title(self) -> str:
        return WizardStage.CUSTOMER_INFO.title
