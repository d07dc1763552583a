# -*- coding: utf-8 -*-
"""
Customer detail page: one customer's information and addresses.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGridLayout,
    QTableView, QAbstractItemView, QFrame, QDialog
)
from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import OperationResult
from controllers.customer_detail_controller import CustomerDetailController
from ui.components.address_dialog import AddressDialog
from ui.components.base_table_model import BaseTableModel, ADDRESS_COLUMNS
from ui.components.page_header import PageHeader
from ui.error_handler import ErrorHandler
from ui.workers import run_in_background
from utils.logger import get_logger

logger = get_logger(__name__)

INFO_ROWS = [
    ("full_name", "Name"),
    ("phone_number", "Phone"),
    ("email", "Email"),
    ("address_count", "Addresses"),
    ("created_display", "Created"),
]


class CustomerDetailPage(QWidget):
    """Customer details with address management."""

    back_requested = pyqtSignal()
    edit_customer = pyqtSignal(object)  # customer id
    customer_deleted = pyqtSignal(object)  # customer id

    def __init__(self, controller: CustomerDetailController = None, parent=None):
        super().__init__(parent)
        self.controller = controller or CustomerDetailController(parent=self)
        self._setup_ui()

        self.controller.outcome_changed.connect(lambda outcome: ErrorHandler.notify(self, outcome))
        self.controller.customer_loaded.connect(self._show_customer)
        self.controller.addresses_loaded.connect(self.address_model.set_items)
        self.controller.customer_deleted.connect(self.customer_deleted.emit)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(20)

        self.header = PageHeader(title="Customer Details", button_text="Edit Customer")
        self.header.action_clicked.connect(self._on_edit_customer)
        layout.addWidget(self.header)

        top = QHBoxLayout()
        back_btn = QPushButton("< Back to Customers")
        back_btn.clicked.connect(self.back_requested.emit)
        top.addWidget(back_btn)
        top.addStretch()
        self.delete_customer_btn = QPushButton("Delete Customer")
        self.delete_customer_btn.setObjectName("danger-button")
        self.delete_customer_btn.clicked.connect(self._on_delete_customer)
        top.addWidget(self.delete_customer_btn)
        layout.addLayout(top)

        info = QFrame()
        info.setObjectName("card")
        grid = QGridLayout(info)
        grid.setContentsMargins(16, 16, 16, 16)
        self.info_values = {}
        for row, (key, label) in enumerate(INFO_ROWS):
            grid.addWidget(QLabel(label), row, 0)
            value = QLabel("-")
            value.setObjectName(f"info-{key}")
            grid.addWidget(value, row, 1)
            self.info_values[key] = value
        layout.addWidget(info)

        addresses_header = QHBoxLayout()
        title = QLabel("Addresses")
        title.setObjectName("card-title")
        addresses_header.addWidget(title)
        addresses_header.addStretch()

        self.add_address_btn = QPushButton("+ Add Address")
        self.add_address_btn.setObjectName("primary-button")
        self.add_address_btn.clicked.connect(self._on_add_address)
        addresses_header.addWidget(self.add_address_btn)

        self.edit_address_btn = QPushButton("Edit")
        self.edit_address_btn.clicked.connect(self._on_edit_address)
        addresses_header.addWidget(self.edit_address_btn)

        self.delete_address_btn = QPushButton("Delete")
        self.delete_address_btn.setObjectName("danger-button")
        self.delete_address_btn.clicked.connect(self._on_delete_address)
        addresses_header.addWidget(self.delete_address_btn)
        layout.addLayout(addresses_header)

        self.address_table = QTableView()
        self.address_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.address_table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.address_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.address_table.verticalHeader().setVisible(False)
        self.address_table.horizontalHeader().setStretchLastSection(True)
        self.address_table.doubleClicked.connect(lambda index: self._on_edit_address())
        self.address_model = BaseTableModel(columns=ADDRESS_COLUMNS)
        self.address_table.setModel(self.address_model)
        layout.addWidget(self.address_table, 1)

    # ==================== Loading ====================

    def load_customer(self, customer_id):
        """Show a customer, fetching it in the background."""
        self.setEnabled(False)
        run_in_background(self, self.controller.load, self._on_loaded, customer_id)

    def refresh(self, data=None):
        if self.controller.customer is not None:
            self.load_customer(self.controller.customer.id)

    def _on_loaded(self, result: OperationResult):
        self.setEnabled(True)
        if not result.success:
            ErrorHandler.notify(self, result)

    def _show_customer(self, customer):
        self.header.set_title(customer.full_name)
        for key, label in self.info_values.items():
            value = getattr(customer, key)
            label.setText(str(value) if value not in (None, "") else "-")

    # ==================== Actions ====================

    def _selected_address(self):
        indexes = self.address_table.selectionModel().selectedRows()
        if not indexes:
            return None
        return self.address_model.get_item(indexes[0].row())

    def _on_edit_customer(self):
        if self.controller.customer is not None:
            self.edit_customer.emit(self.controller.customer.id)

    def _on_add_address(self):
        self.controller.begin_add_address()
        self._open_address_dialog()

    def _on_edit_address(self):
        address = self._selected_address()
        if address is None:
            ErrorHandler.show_warning(self, "Please select an address first.")
            return
        self.controller.begin_edit_address(address)
        self._open_address_dialog()

    def _open_address_dialog(self):
        dialog = AddressDialog(self.controller, parent=self)
        if dialog.exec_() == QDialog.Accepted:
            logger.debug("Address dialog accepted")

    def _on_delete_address(self):
        address = self._selected_address()
        if address is None:
            ErrorHandler.show_warning(self, "Please select an address first.")
            return
        if ErrorHandler.confirm(self, f"Delete the address '{address.one_line}'?", "Delete Address"):
            run_in_background(self, self.controller.delete_address, lambda result: None, address.id)

    def _on_delete_customer(self):
        customer = self.controller.customer
        if customer is None:
            return
        if ErrorHandler.confirm(
            self,
            f"Delete {customer.full_name}? This also removes all of their addresses.",
            "Delete Customer"
        ):
            run_in_background(self, self.controller.delete_customer, lambda result: None)
