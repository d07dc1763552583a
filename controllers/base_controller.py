# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for all controllers.

Provides the OperationResult type, the Notification handed to the
presentation layer, and common signal patterns.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


class ErrorKind:
    """Why an operation failed."""
    VALIDATION = "validation"  # local, field-level, never reached the network
    REMOTE = "remote"          # the service call failed; retry by resubmitting
    PARTIAL = "partial"        # an earlier call succeeded, a later one failed


class Severity:
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """Outcome of the last operation, shown once by the view (toast)."""
    message: str
    severity: str = Severity.INFO


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: Dict[str, str] = field(default_factory=dict)
    kind: Optional[str] = None

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(
        cls,
        message: str,
        kind: str = ErrorKind.REMOTE,
        errors: Dict[str, str] = None,
        data: T = None
    ) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, kind=kind, errors=errors or {}, data=data)

    @property
    def is_partial(self) -> bool:
        return not self.success and self.kind == ErrorKind.PARTIAL

    def to_notification(self) -> Notification:
        if self.success:
            return Notification(self.message, Severity.SUCCESS)
        if self.kind == ErrorKind.PARTIAL:
            return Notification(self.message, Severity.WARNING)
        return Notification(self.message, Severity.ERROR)


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Error handling for API calls
    - Logging
    - The last operation outcome for the view
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    data_changed = pyqtSignal()
    loading_changed = pyqtSignal(bool)
    outcome_changed = pyqtSignal(object)  # Notification

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""
        self._last_outcome: Optional[Notification] = None

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    @property
    def last_outcome(self) -> Optional[Notification]:
        """Get the outcome of the last notifying operation."""
        return self._last_outcome

    def _set_loading(self, loading: bool):
        """Set loading state and emit signal."""
        self._is_loading = loading
        self.loading_changed.emit(loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        """Emit operation started signal."""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _emit_completed(self, operation: str, success: bool):
        """Emit operation completed signal."""
        self.operation_completed.emit(operation, success)
        self._set_loading(False)
        if success:
            self._last_error = ""
            self.data_changed.emit()

    def _emit_error(self, operation: str, error: str):
        """Emit operation error signal."""
        self._set_error(error)
        self.operation_error.emit(operation, error)
        self._set_loading(False)

    def publish(self, result: OperationResult) -> OperationResult:
        """Record a result as the last outcome and hand it to the view."""
        self._last_outcome = result.to_notification()
        self.outcome_changed.emit(self._last_outcome)
        return result

    def clear_outcome(self):
        self._last_outcome = None

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable,
        *args,
        fallback: str = "",
        **kwargs
    ) -> OperationResult:
        """
        Run an API call with standard error handling.

        ApiException and NetworkException become a failed OperationResult
        carrying the mapped user-facing message; anything else propagates.
        """
        try:
            self._emit_started(operation)
            result = func(*args, **kwargs)
            self._emit_completed(operation, True)
            return OperationResult.ok(data=result)
        except (ApiException, NetworkException) as e:
            error_msg = map_exception(e, fallback or f"{operation} failed")
            self._emit_error(operation, error_msg)
            return OperationResult.fail(message=error_msg, kind=ErrorKind.REMOTE)
