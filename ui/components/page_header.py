# -*- coding: utf-8 -*-
"""
Page Header Component
Reusable page header with title and optional action button.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton, QSpacerItem, QSizePolicy
from PyQt5.QtCore import pyqtSignal


class PageHeader(QWidget):
    """
    Page header component with title and optional action button.

    Signals:
        action_clicked(): Emitted when the action button is clicked

    Usage:
        header = PageHeader(title="Customers", button_text="Add Customer")
        header.action_clicked.connect(self.on_add_customer)
    """

    action_clicked = pyqtSignal()

    def __init__(self, title: str = "", button_text: str = "", parent=None):
        super().__init__(parent)
        self.title_text = title
        self.button_text = button_text
        self.action_button = None
        self._setup_ui()

    def _setup_ui(self):
        self.setFixedHeight(48)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        self.title_label = QLabel(self.title_text)
        self.title_label.setObjectName("page-title")
        layout.addWidget(self.title_label)

        layout.addSpacerItem(QSpacerItem(40, 20, QSizePolicy.Expanding, QSizePolicy.Minimum))

        if self.button_text:
            self.action_button = QPushButton(self.button_text)
            self.action_button.setObjectName("primary-button")
            self.action_button.clicked.connect(self.action_clicked.emit)
            layout.addWidget(self.action_button)

    def set_title(self, title: str):
        self.title_text = title
        self.title_label.setText(title)
