# -*- coding: utf-8 -*-
"""
Address-count reports: customers with multiple addresses, or with exactly one.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QTableView, QAbstractItemView
from PyQt5.QtCore import pyqtSignal

from controllers.customer_list_controller import CustomerListController
from ui.components.base_table_model import BaseTableModel, CUSTOMER_COLUMNS
from ui.components.page_header import PageHeader
from ui.error_handler import ErrorHandler
from ui.workers import run_in_background


class AddressReportPage(QWidget):
    """One page class for both reports, selected by `mode`."""

    MULTIPLE = "multiple"
    SINGLE = "single"

    TITLES = {
        MULTIPLE: "Customers with Multiple Addresses",
        SINGLE: "Customers with a Single Address",
    }

    view_customer = pyqtSignal(object)  # customer id

    def __init__(self, mode: str, controller: CustomerListController = None, parent=None):
        super().__init__(parent)
        if mode not in self.TITLES:
            raise ValueError(f"Unknown report: {mode}")
        self.mode = mode
        self.controller = controller or CustomerListController(parent=self)
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(20)

        header = PageHeader(title=self.TITLES[self.mode], button_text="Refresh")
        header.action_clicked.connect(self.refresh)
        layout.addWidget(header)

        self.count_label = QLabel("")
        self.count_label.setObjectName("hint-label")
        layout.addWidget(self.count_label)

        self.table = QTableView()
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.doubleClicked.connect(self._on_row_double_click)
        self.model = BaseTableModel(columns=CUSTOMER_COLUMNS)
        self.table.setModel(self.model)
        layout.addWidget(self.table, 1)

    def refresh(self, data=None):
        if self.mode == self.MULTIPLE:
            operation = self.controller.load_customers_with_multiple_addresses
        else:
            operation = self.controller.load_customers_with_single_address
        self.count_label.setText("Loading...")
        run_in_background(self, operation, self._on_loaded)

    def _on_loaded(self, result):
        if not result.success:
            self.count_label.setText(result.message)
            ErrorHandler.notify(self, result)
            return
        self.model.set_items(result.data)
        self.count_label.setText(f"{len(result.data)} customers")

    def _on_row_double_click(self, index):
        customer = self.model.get_item(index.row())
        if customer:
            self.view_customer.emit(customer.id)
