# -*- coding: utf-8 -*-
"""
Toast notification component.
"""

from PyQt5.QtWidgets import QLabel, QWidget, QGraphicsOpacityEffect
from PyQt5.QtCore import Qt, QTimer, QPropertyAnimation

from app.config import Config
from controllers.base_controller import Notification, Severity


class Toast(QLabel):
    """Toast popup showing the outcome of the last operation."""

    COLORS = {
        Severity.SUCCESS: Config.SUCCESS_COLOR,
        Severity.ERROR: Config.ERROR_COLOR,
        Severity.WARNING: Config.WARNING_COLOR,
        Severity.INFO: Config.INFO_COLOR,
    }

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("toast")
        self._setup_ui()

    def _setup_ui(self):
        self.setAlignment(Qt.AlignCenter)
        self.setWordWrap(True)
        self.setMinimumWidth(300)
        self.setMaximumWidth(560)

        # Opacity effect for fade animation
        self.opacity_effect = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self.opacity_effect)
        self.opacity_effect.setOpacity(0)

        self.hide()

    def show_notification(self, notification: Notification, duration: int = None):
        """
        Show a notification.

        Args:
            notification: Message and severity
            duration: Display duration in milliseconds
        """
        duration = duration or Config.TOAST_DURATION_MS
        self.setText(notification.message)
        self.setProperty("severity", notification.severity)

        color = self.COLORS.get(notification.severity, "#333")
        self.setStyleSheet(f"""
            QLabel#toast {{
                background-color: {color};
                color: white;
                padding: 12px 24px;
                border-radius: 6px;
                font-size: 10pt;
            }}
        """)

        # Position at bottom center of parent
        if self.parent():
            parent_rect = self.parent().rect()
            self.adjustSize()
            x = (parent_rect.width() - self.width()) // 2
            y = parent_rect.height() - self.height() - 40
            self.move(x, y)

        super().show()
        self.raise_()

        self.fade_in = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_in.setDuration(200)
        self.fade_in.setStartValue(0)
        self.fade_in.setEndValue(1)
        self.fade_in.start()

        QTimer.singleShot(duration, self._fade_out)

    def _fade_out(self):
        self.fade_out = QPropertyAnimation(self.opacity_effect, b"opacity")
        self.fade_out.setDuration(300)
        self.fade_out.setStartValue(1)
        self.fade_out.setEndValue(0)
        self.fade_out.finished.connect(self.hide)
        self.fade_out.start()

    @classmethod
    def notify(cls, parent: QWidget, notification: Notification) -> "Toast":
        """Show a notification on a widget, reusing its toast."""
        toast = parent.findChild(Toast, "toast-notification")
        if not toast:
            toast = Toast(parent)
            toast.setObjectName("toast-notification")

        toast.show_notification(notification)
        return toast
