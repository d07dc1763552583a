# -*- coding: utf-8 -*-
"""
Empty State Component
Shown in place of a table when there is no data to display.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt


class EmptyState(QWidget):
    """Empty state with a title and a description."""

    def __init__(self,
                 title: str = "No data yet",
                 description: str = "",
                 parent=None):
        super().__init__(parent)
        self._setup_ui(title, description)

    def _setup_ui(self, title: str, description: str):
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(8)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("empty-title")
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.description_label = QLabel(description)
        self.description_label.setObjectName("empty-description")
        self.description_label.setAlignment(Qt.AlignCenter)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

    def set_texts(self, title: str, description: str = ""):
        self.title_label.setText(title)
        self.description_label.setText(description)
