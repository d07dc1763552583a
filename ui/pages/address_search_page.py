# -*- coding: utf-8 -*-
"""
Address search page: find addresses by city, state and PIN code.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QTableView, QAbstractItemView, QFrame
)
from PyQt5.QtCore import pyqtSignal

from controllers.address_search_controller import AddressSearchController
from ui.components.base_table_model import BaseTableModel, ADDRESS_SEARCH_COLUMNS
from ui.components.page_header import PageHeader
from ui.error_handler import ErrorHandler
from ui.workers import run_in_background


class AddressSearchPage(QWidget):
    """Address search page."""

    view_customer = pyqtSignal(object)  # customer id

    def __init__(self, controller: AddressSearchController = None, parent=None):
        super().__init__(parent)
        self.controller = controller or AddressSearchController(parent=self)
        self._setup_ui()

        self.controller.results_changed.connect(self._on_results)
        self.controller.error_changed.connect(self._on_error)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(20)

        layout.addWidget(PageHeader(title="Search Addresses"))

        frame = QFrame()
        frame.setObjectName("card")
        criteria = QHBoxLayout(frame)
        criteria.setContentsMargins(16, 12, 16, 12)
        criteria.setSpacing(12)

        self.inputs = {}
        for name, placeholder in (("city", "City"), ("state", "State"), ("pin_code", "PIN Code")):
            field = QLineEdit()
            field.setPlaceholderText(placeholder)
            field.textEdited.connect(lambda text, n=name: self.controller.set_criterion(n, text))
            field.returnPressed.connect(self._on_search)
            criteria.addWidget(field)
            self.inputs[name] = field

        self.search_btn = QPushButton("Search")
        self.search_btn.setObjectName("primary-button")
        self.search_btn.clicked.connect(self._on_search)
        criteria.addWidget(self.search_btn)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self._on_clear)
        criteria.addWidget(clear_btn)
        layout.addWidget(frame)

        self.error_label = QLabel("")
        self.error_label.setObjectName("field-error")
        self.error_label.hide()
        layout.addWidget(self.error_label)

        self.count_label = QLabel("")
        self.count_label.setObjectName("hint-label")
        layout.addWidget(self.count_label)

        self.table = QTableView()
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.doubleClicked.connect(self._on_row_double_click)
        self.model = BaseTableModel(columns=ADDRESS_SEARCH_COLUMNS)
        self.table.setModel(self.model)
        layout.addWidget(self.table, 1)

    def refresh(self, data=None):
        pass

    def _on_search(self):
        if self.controller.criteria.is_empty():
            # Rejected locally, no request is made
            self.controller.search()
            return
        self.search_btn.setEnabled(False)
        run_in_background(self, self.controller.search, self._on_searched)

    def _on_searched(self, result):
        self.search_btn.setEnabled(True)
        if not result.success:
            ErrorHandler.notify(self, result)

    def _on_clear(self):
        for field in self.inputs.values():
            field.clear()
        self.controller.clear()
        self.count_label.setText("")

    def _on_results(self, addresses):
        self.model.set_items(addresses)
        if self.controller.has_searched:
            self.count_label.setText(f"{len(addresses)} addresses found")

    def _on_error(self, message: str):
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))

    def _on_row_double_click(self, index):
        address = self.model.get_item(index.row())
        if address:
            self.view_customer.emit(address.customer_id)
