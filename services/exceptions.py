# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class WizardConfigurationError(Exception):
    """Raised when a wizard is built from an inconsistent configuration."""

    def __init__(self, message: str, step_id: str = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id
        self.context = context

    def __str__(self):
        if self.step_id:
            return f"[{self.step_id}] {self.message}"
        return self.message


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class DraftStorageError(Exception):
    """Exception raised when a wizard draft cannot be read or written."""

    def __init__(self, message: str, persist_key: str = None,
                 original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.persist_key = persist_key
        self.original_error = original_error
