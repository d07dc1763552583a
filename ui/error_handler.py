# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from controllers.base_controller import Notification, OperationResult
from ui.components.toast import Toast
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Maps operation outcomes to user-facing feedback."""

    @staticmethod
    def notify(parent: QWidget, outcome) -> None:
        """Show an OperationResult or Notification as a toast."""
        if isinstance(outcome, OperationResult):
            outcome = outcome.to_notification()
        if parent is None or not isinstance(outcome, Notification) or not outcome.message:
            return
        Toast.notify(parent.window(), outcome)

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Error"):
        QMessageBox.critical(parent, title, message)

    @staticmethod
    def show_warning(parent: QWidget, message: str, title: str = "Warning"):
        QMessageBox.warning(parent, title, message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = "Confirm") -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent, title, message,
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        return reply == QMessageBox.Yes
