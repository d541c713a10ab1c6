# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.exceptions import DraftStorageError, WizardConfigurationError
from utils.logger import get_logger

logger = get_logger(__name__)


def describe_error(error: Exception) -> str:
    """Map an exception to a message fit for a dialog."""
    if isinstance(error, DraftStorageError):
        return "The saved draft could not be read or written. Your entries are kept in this window."
    if isinstance(error, WizardConfigurationError):
        return f"This form is misconfigured: {error.message}"
    return "Something went wrong. Please try again."


class ErrorHandler:
    """Centralized error handler that maps exceptions to dialogs."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show dialog.

        Args:
            error: The exception to handle
            parent: Parent widget for dialog
            context: Where the error happened, for the log
            show_dialog: Whether to show dialog to user

        Returns:
            User-facing error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = describe_error(error)
        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)
        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = "Error"):
        QMessageBox.critical(parent, title, message)

    @staticmethod
    def show_success(parent: QWidget, message: str, title: str = "Saved"):
        QMessageBox.information(parent, title, message)

    @staticmethod
    def confirm(parent: QWidget, message: str, title: str = "Confirm") -> bool:
        """Show confirmation dialog, return True if confirmed."""
        reply = QMessageBox.question(
            parent, title, message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No
        )
        return reply == QMessageBox.Yes
