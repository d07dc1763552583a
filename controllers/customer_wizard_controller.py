# -*- coding: utf-8 -*-
"""
Customer Wizard Controller
==========================
Drives the three-stage customer wizard:

    CustomerInfo -> AddressInfo -> Review -> submit

Forward moves are gated on a clean validation of the active stage's draft;
back moves are unconditional. Submitting a new customer is a two-call
sequence (create customer, then add its first address) with no rollback
unless compensation is enabled in Config.
"""

from enum import Enum
from typing import Any, Optional

from PyQt5.QtCore import pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController, ErrorKind, OperationResult
from controllers.form_controller import FormController
from models.customer import Customer, CustomerDraft
from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)


class WizardStage(Enum):
    CUSTOMER_INFO = 0
    ADDRESS_INFO = 1
    REVIEW = 2

    @property
    def title(self) -> str:
        return {
            WizardStage.CUSTOMER_INFO: "Customer Information",
            WizardStage.ADDRESS_INFO: "Address Information",
            WizardStage.REVIEW: "Review & Save",
        }[self]


class CustomerWizardController(BaseController):
    """
    Controller for the add/edit customer wizard.

    Usage:
        wizard = CustomerWizardController(api)
        wizard.set_field("first_name", "Jo")
        ...
        if wizard.advance() and wizard.advance():
            result = wizard.submit()
    """

    stage_changed = pyqtSignal(object, object)  # old stage, new stage
    validation_failed = pyqtSignal(object, dict)  # stage, errors
    customer_loaded = pyqtSignal(object)  # Customer
    wizard_completed = pyqtSignal(object)  # customer id

    def __init__(self, api=None, parent=None):
        super().__init__(parent)
        if api is None:
            from services.api_client import get_api_client
            api = get_api_client()
        self.api = api

        self.customer_form = FormController.for_customer(parent=self)
        self.address_form = FormController.for_address(is_primary=True, parent=self)

        self._stage = WizardStage.CUSTOMER_INFO
        self._customer_id: Optional[Any] = None
        self._submitting = False
        self._completed = False

    # ==================== Properties ====================

    @property
    def stage(self) -> WizardStage:
        return self._stage

    @property
    def customer_id(self):
        """Id of the customer being edited, None when creating."""
        return self._customer_id

    @property
    def is_editing(self) -> bool:
        return self._customer_id is not None

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def is_completed(self) -> bool:
        return self._completed

    def active_form(self) -> Optional[FormController]:
        """Form of the active stage; None in Review."""
        if self._stage == WizardStage.CUSTOMER_INFO:
            return self.customer_form
        if self._stage == WizardStage.ADDRESS_INFO:
            return self.address_form
        return None

    # ==================== Session ====================

    def start_new(self):
        """Begin a fresh create session."""
        self._customer_id = None
        self._completed = False
        self.clear_outcome()
        self.customer_form.reset()
        self.address_form.reset()
        self._goto(WizardStage.CUSTOMER_INFO)

    def load_customer(self, customer_id) -> OperationResult[Customer]:
        """
        Begin an edit session for an existing customer.

        Any previous session is discarded first, so a failed load leaves
        the wizard empty rather than on the last customer. The customer
        form is filled from the server record; the address form starts
        empty because addresses are edited elsewhere.
        """
        self._customer_id = None
        self._completed = False
        self.clear_outcome()
        self.customer_form.reset()
        self.address_form.reset()
        self._goto(WizardStage.CUSTOMER_INFO)

        self._log_operation("load_customer", customer_id=customer_id)
        result = self.execute_with_error_handling(
            "load_customer", self.api.get_customer, customer_id,
            fallback="Failed to load customer"
        )
        if not result.success:
            return self.publish(result)

        customer = Customer.from_dict(result.data)
        self._customer_id = customer_id
        self.customer_form.reset(CustomerDraft.from_customer(customer))
        self.customer_loaded.emit(customer)
        return OperationResult.ok(data=customer)

    # ==================== Editing ====================

    def set_field(self, name: str, value: Any):
        """
        Route a field change to the active stage's form.

        Raises:
            RuntimeError: the wizard is in Review, where nothing is editable
        """
        form = self.active_form()
        if form is None:
            raise RuntimeError(f"No editable form in stage {self._stage.name}")
        form.set_field(name, value)

    # ==================== Navigation ====================

    def advance(self) -> bool:
        """
        Move to the next stage if the active draft validates.

        Returns:
            True if the stage changed
        """
        form = self.active_form()
        if form is None:
            logger.debug("advance() ignored: already at Review")
            return False

        if not form.validate():
            logger.info(f"Wizard blocked at {self._stage.name}: {form.errors}")
            self.validation_failed.emit(self._stage, form.errors)
            return False

        self._goto(WizardStage(self._stage.value + 1))
        return True

    def back(self) -> bool:
        """Move to the previous stage without validation."""
        if self._stage == WizardStage.CUSTOMER_INFO:
            return False
        self._goto(WizardStage(self._stage.value - 1))
        return True

    def _goto(self, stage: WizardStage):
        old = self._stage
        self._stage = stage
        if old != stage:
            logger.info(f"Wizard stage: {old.name} -> {stage.name}")
        self.stage_changed.emit(old, stage)

    # ==================== Submission ====================

    def submit(self) -> OperationResult:
        """
        Submit the wizard from the Review stage.

        Both drafts are validated again; any failure sends the wizard back
        to CustomerInfo. Editing issues one update call. Creating issues
        create-customer, then add-address with the returned id.
        """
        if self._stage != WizardStage.REVIEW:
            return OperationResult.fail(
                message="The wizard can only be submitted from the review step",
                kind=ErrorKind.VALIDATION
            )
        if self._submitting:
            return OperationResult.fail(
                message="A submission is already in progress",
                kind=ErrorKind.VALIDATION
            )

        customer_ok = self.customer_form.validate()
        address_ok = self.address_form.validate()
        if not (customer_ok and address_ok):
            errors = {**self.customer_form.errors, **self.address_form.errors}
            self._goto(WizardStage.CUSTOMER_INFO)
            self.validation_failed.emit(WizardStage.REVIEW, errors)
            return self.publish(OperationResult.fail(
                message="Please correct the highlighted fields",
                kind=ErrorKind.VALIDATION,
                errors=errors
            ))

        self._submitting = True
        self._emit_started("submit")
        try:
            if self.is_editing:
                result = self._submit_update()
            else:
                result = self._submit_create()
        finally:
            self._submitting = False

        if result.success:
            self._completed = True
            self._emit_completed("submit", True)
            self.wizard_completed.emit(result.data)
        else:
            self._emit_error("submit", result.message)

        return self.publish(result)

    def _submit_update(self) -> OperationResult:
        self._log_operation("update_customer", customer_id=self._customer_id)
        try:
            self.api.update_customer(self._customer_id, self.customer_form.snapshot())
        except (ApiException, NetworkException) as e:
            return OperationResult.fail(
                message=map_exception(e, "Failed to save customer"),
                kind=ErrorKind.REMOTE
            )
        return OperationResult.ok(
            data=self._customer_id,
            message="Customer updated successfully"
        )

    def _submit_create(self) -> OperationResult:
        self._log_operation("create_customer")
        try:
            customer_id = self.api.create_customer(self.customer_form.snapshot())
        except (ApiException, NetworkException) as e:
            return OperationResult.fail(
                message=map_exception(e, "Failed to save customer"),
                kind=ErrorKind.REMOTE
            )

        try:
            self.api.add_address(customer_id, self.address_form.snapshot())
        except (ApiException, NetworkException) as e:
            reason = map_exception(e, "Failed to save address")
            logger.warning(f"Customer {customer_id} created but address failed: {reason}")
            return self._address_failed(customer_id, reason)

        return OperationResult.ok(
            data=customer_id,
            message="Customer and address created successfully"
        )

    def _address_failed(self, customer_id, reason: str) -> OperationResult:
        """Customer exists, its first address does not."""
        if Config.COMPENSATE_FAILED_ADDRESS:
            try:
                self.api.delete_customer(customer_id)
            except (ApiException, NetworkException) as e:
                logger.error(f"Rollback of customer {customer_id} failed: {e}")
                message = (
                    f"The address could not be saved ({reason}) and the new customer "
                    f"could not be removed. Add the address from the customer's page."
                )
                return OperationResult.fail(message, kind=ErrorKind.PARTIAL, data=customer_id)

            logger.info(f"Rolled back customer {customer_id}")
            message = f"The address could not be saved ({reason}). The customer was not created."
            return OperationResult.fail(message, kind=ErrorKind.PARTIAL)

        message = (
            f"Customer was created, but the address could not be saved ({reason}). "
            f"Add the address from the customer's page."
        )
        return OperationResult.fail(message, kind=ErrorKind.PARTIAL, data=customer_id)
