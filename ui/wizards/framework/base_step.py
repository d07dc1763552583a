# -*- coding: utf-8 -*-
"""
Base Step - Abstract base class for wizard steps.

All wizard steps should inherit from this class and implement:
- setup_ui(): Create the step's UI

Steps hold no data of their own: every value lives in the wizard
controller's forms, which the step's widgets are bound to.
"""

from typing import Optional
from abc import ABCMeta, abstractmethod

from PyQt5.QtWidgets import QWidget, QVBoxLayout


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard steps.

    Provides common functionality for:
    - UI setup and lifecycle
    - Access to the wizard controller
    """

    def __init__(self, controller, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            controller: The CustomerWizardController driving the wizard
            parent: Parent widget
        """
        super().__init__(parent)
        self.controller = controller
        self._is_initialized = False

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(20, 20, 20, 20)
        self.main_layout.setSpacing(16)

    def initialize(self):
        """Initialize the step (called once)."""
        if not self._is_initialized:
            self.setup_ui()
            self._is_initialized = True

    def on_show(self):
        """
        Called when the step is shown.

        Override this method to update UI based on controller state.
        """
        if not self._is_initialized:
            self.initialize()
        self.populate_data()

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """
        Setup the step's UI.

        This method is called once during initialization.
        """
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self):
        """Refresh the step's UI from the controller."""
        pass

    def get_step_title(self) -> str:
        return self.__class__.__name__
