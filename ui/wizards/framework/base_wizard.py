# -*- coding: utf-8 -*-
"""
Base Wizard - Abstract base class for all wizards.

Provides unified wizard UI with:
- Header with title and progress
- Step container
- Navigation buttons (Cancel, Previous, Next/Submit)

Navigation is owned by a wizard controller exposing `stage`, `advance()`,
`back()`, `submit()` and the `stage_changed` signal; this widget only
mirrors it.
"""

from typing import List, Optional
from abc import abstractmethod

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QFrame, QStackedWidget, QProgressBar
)
from PyQt5.QtCore import pyqtSignal

from .base_step import ABCQWidgetMeta, BaseStep


class BaseWizard(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizards.

    Subclasses must implement:
    - create_steps(): Create and return list of wizard steps
    - on_submit(): Handle final submission
    """

    wizard_cancelled = pyqtSignal()

    def __init__(self, controller, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.steps = self.create_steps()

        self.controller.stage_changed.connect(self._on_stage_changed)

        self._setup_ui()
        self._show_step(self.controller.stage.value)

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_steps(self) -> List[BaseStep]:
        """Create and return the wizard steps, one per controller stage."""
        pass

    @abstractmethod
    def on_submit(self):
        """Handle the submit button on the last step."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def get_wizard_title(self) -> str:
        return "Wizard"

    def get_submit_button_text(self) -> str:
        return "Submit"

    def on_cancel(self) -> bool:
        """Return False to prevent cancellation."""
        return True

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        main_layout.addWidget(self._create_header())

        separator = QFrame()
        separator.setFrameShape(QFrame.HLine)
        separator.setObjectName("separator")
        separator.setFixedHeight(1)
        main_layout.addWidget(separator)

        self.step_container = QStackedWidget()
        for step in self.steps:
            self.step_container.addWidget(step)
        main_layout.addWidget(self.step_container, 1)

        main_layout.addWidget(self._create_footer())

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setObjectName("wizard-header")

        layout = QVBoxLayout(header)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.title_label = QLabel(self.get_wizard_title())
        self.title_label.setObjectName("page-title")
        layout.addWidget(self.title_label)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel("")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(len(self.steps))
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        progress_layout.addWidget(self.progress_bar, 1)

        layout.addLayout(progress_layout)
        return header

    def _create_footer(self) -> QWidget:
        footer = QWidget()
        footer.setObjectName("wizard-footer")

        layout = QHBoxLayout(footer)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.clicked.connect(self._handle_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_previous = QPushButton("Previous")
        self.btn_previous.clicked.connect(self._handle_previous)
        layout.addWidget(self.btn_previous)

        self.btn_next = QPushButton("Next")
        self.btn_next.setObjectName("primary-button")
        self.btn_next.clicked.connect(self._handle_next)
        layout.addWidget(self.btn_next)

        return footer

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _is_last_step(self) -> bool:
        return self.controller.stage.value == len(self.steps) - 1

    def _handle_previous(self):
        self.controller.back()

    def _handle_next(self):
        if self._is_last_step():
            self.on_submit()
        else:
            self.controller.advance()

    def _handle_cancel(self):
        if self.on_cancel():
            self.wizard_cancelled.emit()

    def set_busy(self, busy: bool):
        """Disable navigation while a request is in flight."""
        for button in (self.btn_cancel, self.btn_previous, self.btn_next):
            button.setEnabled(not busy)
        if not busy:
            self._update_navigation_buttons()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_stage_changed(self, old_stage, new_stage):
        self._show_step(new_stage.value)

    def _show_step(self, index: int):
        self.step_container.setCurrentIndex(index)
        self.steps[index].on_show()
        self._update_progress()
        self._update_navigation_buttons()

    def _update_progress(self):
        current = self.controller.stage.value + 1
        total = len(self.steps)
        title = self.steps[current - 1].get_step_title()

        self.progress_label.setText(f"Step {current} of {total}: {title}")
        self.progress_bar.setValue(current)

    def _update_navigation_buttons(self):
        self.btn_previous.setEnabled(self.controller.stage.value > 0)

        if self._is_last_step():
            self.btn_next.setText(self.get_submit_button_text())
        else:
            self.btn_next.setText("Next")
