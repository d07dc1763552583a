# -*- coding: utf-8 -*-
"""
Background workers for controller operations.

Controllers call the API synchronously; pages run those calls in a worker
so the window stays responsive while a request is in flight.
"""

from PyQt5.QtCore import QThread, pyqtSignal

from controllers.base_controller import OperationResult
from utils.logger import get_logger

logger = get_logger(__name__)


class ApiWorker(QThread):
    """Run one controller operation in the background."""

    result_ready = pyqtSignal(object)  # OperationResult

    def __init__(self, func, *args, parent=None, **kwargs):
        super().__init__(parent)
        self._func = func
        self._args = args
        self._kwargs = kwargs

    def run(self):
        """Run the operation and emit its result."""
        try:
            result = self._func(*self._args, **self._kwargs)
        except Exception as e:
            logger.exception(f"Unexpected error in {getattr(self._func, '__name__', 'operation')}")
            result = OperationResult.fail(f"Unexpected error: {e}")
        self.result_ready.emit(result)


def run_in_background(owner, func, on_done, *args, **kwargs) -> ApiWorker:
    """
    Start `func` in an ApiWorker parented to `owner`.

    `on_done` receives the OperationResult on the GUI thread. The worker is
    kept on the owner until it finishes.
    """
    worker = ApiWorker(func, *args, parent=owner, **kwargs)
    if not hasattr(owner, "_workers"):
        owner._workers = []
    workers = owner._workers
    workers.append(worker)

    def _finish(result):
        if worker in workers:
            workers.remove(worker)
        on_done(result)

    worker.result_ready.connect(_finish)
    worker.finished.connect(worker.deleteLater)
    worker.start()
    return worker
