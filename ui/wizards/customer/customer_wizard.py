# -*- coding: utf-8 -*-
"""
Customer Wizard - add or edit a customer.

Thin view over CustomerWizardController: the controller owns the drafts,
the stage and the submission; this widget runs the network calls in the
background and shows their outcome.
"""

from typing import List

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import OperationResult
from controllers.customer_wizard_controller import CustomerWizardController
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseWizard, BaseStep
from ui.wizards.customer.steps import AddressInfoStep, CustomerInfoStep, ReviewStep
from ui.workers import run_in_background
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerWizard(BaseWizard):
    """Three-step customer wizard."""

    customer_saved = pyqtSignal(object)  # customer id

    def __init__(self, controller: CustomerWizardController = None, parent=None):
        controller = controller or CustomerWizardController()
        super().__init__(controller, parent)
        self.controller.outcome_changed.connect(lambda outcome: ErrorHandler.notify(self, outcome))

    def create_steps(self) -> List[BaseStep]:
        return [
            CustomerInfoStep(self.controller, self),
            AddressInfoStep(self.controller, self),
            ReviewStep(self.controller, self),
        ]

    def get_wizard_title(self) -> str:
        return "Add New Customer"

    def get_submit_button_text(self) -> str:
        return "Update Customer" if self.controller.is_editing else "Create Customer"

    # ==================== Sessions ====================

    def start_new(self):
        self.controller.start_new()
        self.title_label.setText("Add New Customer")
        self.step_container.setEnabled(True)
        self.set_busy(False)

    def edit_customer(self, customer_id):
        """Load an existing customer in the background, then edit it."""
        self.title_label.setText("Edit Customer")
        self.step_container.setEnabled(False)
        self.set_busy(True)
        run_in_background(self, self.controller.load_customer, self._on_loaded, customer_id)

    def _on_loaded(self, result: OperationResult):
        if not result.success:
            # Nothing to edit; only Cancel stays available
            logger.warning(f"Could not open customer for editing: {result.message}")
            self.title_label.setText("Customer could not be loaded")
            self.btn_cancel.setEnabled(True)
            return
        self.step_container.setEnabled(True)
        self.set_busy(False)

    # ==================== Submission ====================

    def on_submit(self):
        self.set_busy(True)
        self.btn_next.setText("Saving...")
        run_in_background(self, self.controller.submit, self._on_submitted)

    def _on_submitted(self, result: OperationResult):
        self.set_busy(False)
        if result.success:
            self.customer_saved.emit(result.data)
        elif result.is_partial and result.data is not None:
            # The customer exists; let the caller open it to add the address.
            self.customer_saved.emit(result.data)
