# -*- coding: utf-8 -*-
"""
Vehicle Maintenance Log Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ValidationService",
    "StepValidator",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ValidationService":
        from .validation_service import ValidationService
        return ValidationService
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
