# -*- coding: utf-8 -*-
"""
Error Boundary for side effects of a wizard run.

Draft autosave and similar side effects must never interrupt navigation:
- Catches exceptions raised by the protected call
- Logs errors with context and traceback
- Emits error_occurred so the UI can show a non-blocking notice
"""

from functools import wraps
from typing import Callable, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorBoundary(QObject):
    """
    Error boundary for wizard side effects.

    Wraps callables so that an exception is logged and reported instead of
    propagating into the navigation code that triggered it.
    """

    error_occurred = pyqtSignal(str, str)  # operation, error message

    def __init__(self, name: str, parent: Optional[QObject] = None):
        """
        Initialize error boundary.

        Args:
            name: Name of what is being protected (used in log messages)
            parent: Qt parent object
        """
        super().__init__(parent)
        self.name = name
        self.error_count = 0
        self.last_error: Optional[Exception] = None

    def protect(self, func: Callable, operation_name: str = "operation") -> Callable:
        """
        Wrap a function with error boundary.

        Args:
            func: Function to protect
            operation_name: Name of operation for logging

        Returns:
            Wrapped function returning None when func raised
        """
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                self._handle_error(e, operation_name)
                return None

        return wrapper

    def run(self, func: Callable, *args, operation_name: str = "operation", **kwargs):
        """Call func once inside the boundary."""
        return self.protect(func, operation_name)(*args, **kwargs)

    def _handle_error(self, error: Exception, operation: str):
        self.error_count += 1
        self.last_error = error

        logger.error(f"Error in {self.name} during {operation}: {error}", exc_info=True)
        self.error_occurred.emit(operation, str(error))

    def get_error_summary(self) -> str:
        """Get summary of errors that occurred."""
        if self.error_count == 0:
            return "No errors"

        return (
            f"{self.name}: {self.error_count} error(s), "
            f"last: {type(self.last_error).__name__} - {self.last_error}"
        )
