# -*- coding: utf-8 -*-
"""
Main application window with sidebar navigation and QStackedWidget routing.
"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QStackedWidget, QShortcut
from PyQt5.QtGui import QKeySequence

from .config import Config, Pages
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """Main application window with navigation shell."""

    def __init__(self, api=None, parent=None):
        super().__init__(parent)
        if api is None:
            from services.api_client import get_api_client
            api = get_api_client()
        self.api = api

        self._setup_window()
        self._create_widgets()
        self._setup_layout()
        self._setup_shortcuts()
        self._connect_signals()

        self.navigate_to(Pages.CUSTOMERS)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_NAME} - {Config.APP_TITLE}")
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _setup_shortcuts(self):
        # Refresh current page: F5
        self.refresh_shortcut = QShortcut(QKeySequence("F5"), self)
        self.refresh_shortcut.activated.connect(self.refresh_current_page)

    def _create_widgets(self):
        """Create main UI components."""
        # Import here to avoid circular imports
        from controllers import (
            AddressSearchController, CustomerDetailController,
            CustomerListController, CustomerWizardController,
        )
        from ui.components.sidebar import Sidebar
        from ui.pages import (
            AddressReportPage, AddressSearchPage, CustomerDetailPage, CustomerListPage,
        )
        from ui.wizards.customer import CustomerWizard

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)

        self.sidebar = Sidebar(self)
        self.stack = QStackedWidget()

        self.pages = {}

        self.pages[Pages.CUSTOMERS] = CustomerListPage(CustomerListController(self.api, self), self)
        self.pages[Pages.CUSTOMER_DETAILS] = CustomerDetailPage(
            CustomerDetailController(self.api, self), self
        )
        self.pages[Pages.CUSTOMER_WIZARD] = CustomerWizard(CustomerWizardController(self.api, self), self)
        self.pages[Pages.ADDRESS_SEARCH] = AddressSearchPage(AddressSearchController(self.api, self), self)

        # Both reports share one list controller
        report_controller = CustomerListController(self.api, self)
        self.pages[Pages.MULTIPLE_ADDRESSES] = AddressReportPage(
            AddressReportPage.MULTIPLE, report_controller, self
        )
        self.pages[Pages.SINGLE_ADDRESS] = AddressReportPage(
            AddressReportPage.SINGLE, report_controller, self
        )

        for page in self.pages.values():
            self.stack.addWidget(page)

    def _setup_layout(self):
        main_layout = QHBoxLayout(self.central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self.sidebar, 0)
        main_layout.addWidget(self.stack, 1)

    def _connect_signals(self):
        self.sidebar.navigate.connect(self.navigate_to)

        customers = self.pages[Pages.CUSTOMERS]
        customers.view_customer.connect(self._on_view_customer)
        customers.edit_customer.connect(self._on_edit_customer)
        customers.add_customer.connect(lambda: self.navigate_to(Pages.CUSTOMER_WIZARD))

        details = self.pages[Pages.CUSTOMER_DETAILS]
        details.back_requested.connect(lambda: self.navigate_to(Pages.CUSTOMERS))
        details.edit_customer.connect(self._on_edit_customer)
        details.customer_deleted.connect(lambda _id: self.navigate_to(Pages.CUSTOMERS))

        wizard = self.pages[Pages.CUSTOMER_WIZARD]
        wizard.customer_saved.connect(self._on_customer_saved)
        wizard.wizard_cancelled.connect(lambda: self.navigate_to(Pages.CUSTOMERS))

        for page_id in (Pages.ADDRESS_SEARCH, Pages.MULTIPLE_ADDRESSES, Pages.SINGLE_ADDRESS):
            self.pages[page_id].view_customer.connect(self._on_view_customer)

    # ==================== Navigation ====================

    def navigate_to(self, page_id: str, data=None):
        """Navigate to a specific page."""
        if page_id not in self.pages:
            logger.error(f"Page not found: {page_id}")
            return

        page = self.pages[page_id]

        if page_id == Pages.CUSTOMER_WIZARD:
            if data is None:
                page.start_new()
            else:
                page.edit_customer(data)
        elif page_id == Pages.CUSTOMER_DETAILS:
            page.load_customer(data)
        else:
            page.refresh(data)

        self.sidebar.set_selected(page_id)
        self.stack.setCurrentWidget(page)
        logger.debug(f"Navigated to: {page_id}")

    def refresh_current_page(self):
        page = self.stack.currentWidget()
        if hasattr(page, "refresh"):
            page.refresh()

    def _on_view_customer(self, customer_id):
        logger.debug(f"Viewing customer: {customer_id}")
        self.navigate_to(Pages.CUSTOMER_DETAILS, customer_id)

    def _on_edit_customer(self, customer_id):
        self.navigate_to(Pages.CUSTOMER_WIZARD, customer_id)

    def _on_customer_saved(self, customer_id):
        self.navigate_to(Pages.CUSTOMER_DETAILS, customer_id)

    def check_backend(self):
        """Ping the API in the background; the sidebar shows the answer."""
        from ui.workers import run_in_background
        run_in_background(self, self.api.health_check, self._on_backend_checked)

    def _on_backend_checked(self, online):
        # An unexpected error comes back as a failed OperationResult
        online = online is True
        if online:
            logger.info(">> API is reachable")
        else:
            logger.warning(f">> API at {Config.API_BASE_URL} did not answer the health check")
        self.set_backend_status(online)

    def set_backend_status(self, online: bool):
        self.sidebar.set_backend_status(online)
