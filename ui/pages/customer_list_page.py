# -*- coding: utf-8 -*-
"""
Customer list page: search, filter, sort and page through customers.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QComboBox, QTableView, QAbstractItemView, QFrame, QStackedWidget
)
from PyQt5.QtCore import QTimer, pyqtSignal

from controllers.base_controller import OperationResult
from controllers.customer_list_controller import CustomerListController
from ui.components.base_table_model import BaseTableModel, CUSTOMER_COLUMNS
from ui.components.empty_state import EmptyState
from ui.components.page_header import PageHeader
from ui.error_handler import ErrorHandler
from ui.workers import run_in_background
from utils.logger import get_logger

logger = get_logger(__name__)

SORT_CHOICES = [
    ("created_at", "Created Date"),
    ("first_name", "First Name"),
    ("last_name", "Last Name"),
    ("phone_number", "Phone Number"),
]

ORDER_CHOICES = [
    ("DESC", "Descending"),
    ("ASC", "Ascending"),
]

PAGE_SIZE_CHOICES = [5, 10, 25, 50]


class CustomerListPage(QWidget):
    """Customers management page."""

    view_customer = pyqtSignal(object)  # customer id
    edit_customer = pyqtSignal(object)  # customer id
    add_customer = pyqtSignal()

    FILTER_DELAY_MS = 400

    def __init__(self, controller: CustomerListController = None, parent=None):
        super().__init__(parent)
        self.controller = controller or CustomerListController(parent=self)

        self._reload_timer = QTimer(self)
        self._reload_timer.setSingleShot(True)
        self._reload_timer.setInterval(self.FILTER_DELAY_MS)
        self._reload_timer.timeout.connect(self.refresh)
        self._load_generation = 0

        self._setup_ui()
        self.controller.outcome_changed.connect(lambda outcome: ErrorHandler.notify(self, outcome))

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(20)

        header = PageHeader(title="Customers", button_text="+ Add Customer")
        header.action_clicked.connect(self.add_customer.emit)
        layout.addWidget(header)

        layout.addWidget(self._create_filters())

        self.count_label = QLabel("")
        self.count_label.setObjectName("hint-label")
        layout.addWidget(self.count_label)

        self.table = QTableView()
        self.table.setAlternatingRowColors(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setShowGrid(False)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.doubleClicked.connect(self._on_row_double_click)

        self.table_model = BaseTableModel(columns=CUSTOMER_COLUMNS)
        self.table.setModel(self.table_model)

        self.empty_state = EmptyState(
            title="No customers found",
            description="Try changing the filters or add a new customer."
        )

        self.content = QStackedWidget()
        self.content.addWidget(self.table)
        self.content.addWidget(self.empty_state)
        layout.addWidget(self.content, 1)

        layout.addLayout(self._create_footer())

    def _create_filters(self) -> QFrame:
        frame = QFrame()
        frame.setObjectName("card")

        filters = QHBoxLayout(frame)
        filters.setContentsMargins(16, 12, 16, 12)
        filters.setSpacing(12)

        self.search_input = self._filter_input("Search name, phone or email...", "search", 240)
        filters.addWidget(self.search_input)
        self.city_input = self._filter_input("City", "city")
        filters.addWidget(self.city_input)
        self.state_input = self._filter_input("State", "state")
        filters.addWidget(self.state_input)
        self.pin_input = self._filter_input("PIN Code", "pin_code")
        filters.addWidget(self.pin_input)

        self.sort_combo = QComboBox()
        for value, label in SORT_CHOICES:
            self.sort_combo.addItem(label, value)
        self.sort_combo.currentIndexChanged.connect(
            lambda: self._set_filter("sort_by", self.sort_combo.currentData(), delay=False)
        )
        filters.addWidget(QLabel("Sort by"))
        filters.addWidget(self.sort_combo)

        self.order_combo = QComboBox()
        for value, label in ORDER_CHOICES:
            self.order_combo.addItem(label, value)
        self.order_combo.currentIndexChanged.connect(
            lambda: self._set_filter("sort_order", self.order_combo.currentData(), delay=False)
        )
        filters.addWidget(self.order_combo)

        clear_btn = QPushButton("Clear")
        clear_btn.clicked.connect(self._on_clear)
        filters.addWidget(clear_btn)
        return frame

    def _filter_input(self, placeholder: str, name: str, min_width: int = 120) -> QLineEdit:
        field = QLineEdit()
        field.setPlaceholderText(placeholder)
        field.setMinimumWidth(min_width)
        field.textEdited.connect(lambda text: self._set_filter(name, text))
        return field

    def _create_footer(self) -> QHBoxLayout:
        footer = QHBoxLayout()

        self.view_btn = QPushButton("View")
        self.view_btn.clicked.connect(lambda: self._with_selected(self.view_customer.emit))
        footer.addWidget(self.view_btn)

        self.edit_btn = QPushButton("Edit")
        self.edit_btn.clicked.connect(lambda: self._with_selected(self.edit_customer.emit))
        footer.addWidget(self.edit_btn)

        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setObjectName("danger-button")
        self.delete_btn.clicked.connect(self._on_delete)
        footer.addWidget(self.delete_btn)

        footer.addStretch()

        footer.addWidget(QLabel("Rows per page"))
        self.page_size_combo = QComboBox()
        for size in PAGE_SIZE_CHOICES:
            self.page_size_combo.addItem(str(size), size)
        index = self.page_size_combo.findData(self.controller.query.page_size)
        if index < 0:
            self.page_size_combo.addItem(str(self.controller.query.page_size),
                                         self.controller.query.page_size)
            index = self.page_size_combo.count() - 1
        self.page_size_combo.setCurrentIndex(index)
        self.page_size_combo.currentIndexChanged.connect(self._on_page_size_changed)
        footer.addWidget(self.page_size_combo)

        self.prev_btn = QPushButton("< Previous")
        self.prev_btn.clicked.connect(lambda: self._go_to_page(self.controller.query.page - 1))
        footer.addWidget(self.prev_btn)

        self.page_label = QLabel("")
        footer.addWidget(self.page_label)

        self.next_btn = QPushButton("Next >")
        self.next_btn.clicked.connect(lambda: self._go_to_page(self.controller.query.page + 1))
        footer.addWidget(self.next_btn)

        self._update_pagination()
        return footer

    # ==================== Loading ====================

    def refresh(self, data=None):
        """Reload the current page from the server."""
        self._reload_timer.stop()
        self.content.setEnabled(False)
        self._load_generation += 1
        generation = self._load_generation
        run_in_background(
            self, self.controller.load_customers,
            lambda result: self._on_loaded(result, generation)
        )

    def _on_loaded(self, result: OperationResult, generation: int):
        if generation != self._load_generation:
            logger.debug(f"Dropping customers load {generation}, newer load pending")
            return
        self.content.setEnabled(True)
        if not result.success:
            self.count_label.setText(result.message)
            ErrorHandler.notify(self, result)
            return

        page = result.data
        self.table_model.set_items(page.items)
        self.content.setCurrentWidget(self.table if page.items else self.empty_state)
        if not page.items:
            self._update_empty_state()
        self.count_label.setText(f"{page.total_items} customers found")
        self._update_pagination()

    def _update_empty_state(self):
        query = self.controller.query
        if any((query.search, query.city, query.state, query.pin_code)):
            self.empty_state.set_texts(
                "No customers found",
                "Try changing the filters or add a new customer."
            )
        else:
            self.empty_state.set_texts("No customers yet", "Add your first customer to get started.")

    def _update_pagination(self):
        page = self.controller.page_result
        query = self.controller.query
        total_pages = page.total_pages if page else 1
        self.page_label.setText(f"Page {query.page} of {max(total_pages, 1)}")
        self.prev_btn.setEnabled(bool(page and page.has_previous))
        self.next_btn.setEnabled(bool(page and page.has_next))

    # ==================== Filters & paging ====================

    def _set_filter(self, name: str, value, delay: bool = True):
        self.controller.set_filter(name, value)
        if delay:
            self._reload_timer.start()
        else:
            self.refresh()

    def _on_clear(self):
        for field in (self.search_input, self.city_input, self.state_input, self.pin_input):
            field.clear()
        for combo in (self.sort_combo, self.order_combo):
            combo.blockSignals(True)
            combo.setCurrentIndex(0)
            combo.blockSignals(False)
        self.controller.clear()
        self.refresh()

    def _go_to_page(self, page: int):
        if page < 1:
            return
        self.controller.set_page(page)
        self.refresh()

    def _on_page_size_changed(self):
        self.controller.set_page_size(self.page_size_combo.currentData())
        self.refresh()

    # ==================== Row actions ====================

    def selected_customer(self):
        indexes = self.table.selectionModel().selectedRows()
        if not indexes:
            return None
        return self.table_model.get_item(indexes[0].row())

    def _with_selected(self, action):
        customer = self.selected_customer()
        if customer is None:
            ErrorHandler.show_warning(self, "Please select a customer first.")
            return
        action(customer.id)

    def _on_row_double_click(self, index):
        customer = self.table_model.get_item(index.row())
        if customer:
            self.view_customer.emit(customer.id)

    def _on_delete(self):
        customer = self.selected_customer()
        if customer is None:
            ErrorHandler.show_warning(self, "Please select a customer first.")
            return
        if not ErrorHandler.confirm(
            self,
            f"Delete {customer.full_name}? This also removes all of their addresses.",
            "Delete Customer"
        ):
            return
        run_in_background(self, self.controller.delete_customer, self._on_deleted, customer.id)

    def _on_deleted(self, result: OperationResult):
        if result.success:
            self.refresh()
