# -*- coding: utf-8 -*-
"""
Customer Detail Controller
==========================
Controller for one customer's detail screen.

Handles:
- Loading the customer and its addresses
- Adding, editing and deleting addresses through an address form
- Deleting the customer
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, ErrorKind, OperationResult
from controllers.form_controller import FormController
from models.address import Address, AddressDraft
from models.customer import Customer
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerDetailController(BaseController):
    """
    Controller for a customer and its addresses.

    The address form is independent from the customer wizard: it defaults
    to a non-primary address.
    """

    customer_loaded = pyqtSignal(object)  # Customer
    addresses_loaded = pyqtSignal(list)  # addresses
    customer_deleted = pyqtSignal(object)  # customer id

    def __init__(self, api=None, parent=None):
        super().__init__(parent)
        if api is None:
            from services.api_client import get_api_client
            api = get_api_client()
        self.api = api

        self.address_form = FormController.for_address(is_primary=False, parent=self)

        self._customer_id = None
        self._customer: Optional[Customer] = None
        self._addresses: List[Address] = []
        self._editing_address: Optional[Address] = None

    # ==================== Properties ====================

    @property
    def customer(self) -> Optional[Customer]:
        return self._customer

    @property
    def addresses(self) -> List[Address]:
        return list(self._addresses)

    @property
    def editing_address(self) -> Optional[Address]:
        """Address open in the form, None when adding."""
        return self._editing_address

    # ==================== Loading ====================

    def load(self, customer_id=None) -> OperationResult[Customer]:
        """
        Load the customer and its addresses.

        Args:
            customer_id: Customer to show; defaults to the current one
        """
        if customer_id is not None:
            self._customer_id = customer_id
        if self._customer_id is None:
            raise ValueError("No customer selected")

        self._log_operation("load", customer_id=self._customer_id)

        result = self.execute_with_error_handling(
            "load_customer", self.api.get_customer, self._customer_id,
            fallback="Failed to load customer data"
        )
        if not result.success:
            return result
        customer = Customer.from_dict(result.data)

        addresses_result = self.execute_with_error_handling(
            "load_addresses", self.api.get_addresses, self._customer_id,
            fallback="Failed to load customer data"
        )
        if not addresses_result.success:
            return addresses_result

        self._customer = customer
        self._addresses = [Address.from_dict(row) for row in addresses_result.data]
        self.customer_loaded.emit(customer)
        self.addresses_loaded.emit(self.addresses)
        return OperationResult.ok(data=customer)

    # ==================== Address form ====================

    def begin_add_address(self):
        """Open the address form for a new address."""
        self._editing_address = None
        self.address_form.reset()

    def begin_edit_address(self, address: Address):
        """Open the address form on an existing address."""
        self._editing_address = address
        self.address_form.reset(AddressDraft.from_address(address))

    def save_address(self) -> OperationResult:
        """Validate the address form, then add or update the address."""
        if not self.address_form.validate():
            return OperationResult.fail(
                message="Please correct the highlighted fields",
                kind=ErrorKind.VALIDATION,
                errors=self.address_form.errors
            )

        body = self.address_form.snapshot()
        if self._editing_address is not None:
            result = self.execute_with_error_handling(
                "update_address", self.api.update_address, self._editing_address.id, body,
                fallback="Failed to save address"
            )
            success_message = "Address updated successfully"
        else:
            result = self.execute_with_error_handling(
                "add_address", self.api.add_address, self._customer_id, body,
                fallback="Failed to save address"
            )
            success_message = "Address added successfully"

        if result.success:
            result.message = success_message
            self._editing_address = None
            self.publish(result)
            self.load()
            return result

        return self.publish(result)

    def delete_address(self, address_id) -> OperationResult[bool]:
        self._log_operation("delete_address", address_id=address_id)
        result = self.execute_with_error_handling(
            "delete_address", self.api.delete_address, address_id,
            fallback="Failed to delete address"
        )
        if result.success:
            result.message = "Address deleted successfully"
            self.publish(result)
            self.load()
            return result
        return self.publish(result)

    def delete_customer(self) -> OperationResult[bool]:
        self._log_operation("delete_customer", customer_id=self._customer_id)
        result = self.execute_with_error_handling(
            "delete_customer", self.api.delete_customer, self._customer_id,
            fallback="Failed to delete customer"
        )
        if result.success:
            result.message = "Customer deleted successfully"
            self.customer_deleted.emit(self._customer_id)
        return self.publish(result)
