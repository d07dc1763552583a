# -*- coding: utf-8 -*-
"""
Side navigation bar.
"""

from PyQt5.QtWidgets import (
    QVBoxLayout, QLabel, QPushButton, QSpacerItem, QSizePolicy, QFrame
)
from PyQt5.QtCore import Qt, pyqtSignal

from app.config import Config, Pages


class Sidebar(QFrame):
    """Side navigation bar."""

    navigate = pyqtSignal(str)

    NAV_ITEMS = [
        (Pages.CUSTOMERS, "Customers"),
        (Pages.CUSTOMER_WIZARD, "Add Customer"),
        (Pages.ADDRESS_SEARCH, "Search Addresses"),
        (Pages.MULTIPLE_ADDRESSES, "Multiple Addresses"),
        (Pages.SINGLE_ADDRESS, "Single Address"),
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self._buttons = {}
        self._selected_page = None

        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("sidebar")
        self.setFixedWidth(Config.SIDEBAR_WIDTH)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        title = QLabel(Config.APP_NAME)
        title.setObjectName("sidebar-title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)
        layout.addSpacing(16)

        for page_id, label in self.NAV_ITEMS:
            btn = self._create_nav_button(page_id, label)
            layout.addWidget(btn)
            self._buttons[page_id] = btn

        layout.addSpacerItem(QSpacerItem(20, 40, QSizePolicy.Minimum, QSizePolicy.Expanding))

        self.status_label = QLabel("API: checking...")
        self.status_label.setObjectName("sidebar-status")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        version = QLabel(f"v{Config.VERSION}")
        version.setObjectName("sidebar-version")
        version.setAlignment(Qt.AlignCenter)
        layout.addWidget(version)

    def _create_nav_button(self, page_id: str, label: str) -> QPushButton:
        btn = QPushButton(label)
        btn.setObjectName("nav-button")
        btn.setCheckable(True)
        btn.setCursor(Qt.PointingHandCursor)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.clicked.connect(lambda checked, pid=page_id: self._on_nav_click(pid))
        return btn

    def _on_nav_click(self, page_id: str):
        self.set_selected(page_id)
        self.navigate.emit(page_id)

    def set_selected(self, page_id: str):
        """Highlight the active item; pages without a button clear the highlight."""
        self._selected_page = page_id

        for pid, btn in self._buttons.items():
            btn.setChecked(pid == page_id)

    @property
    def selected_page(self):
        return self._selected_page

    def set_backend_status(self, online: bool):
        """Show whether the API answered the health check."""
        if online:
            self.status_label.setText("API: online")
            self.status_label.setStyleSheet(f"color: {Config.SUCCESS_COLOR};")
        else:
            self.status_label.setText("API: unreachable")
            self.status_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
