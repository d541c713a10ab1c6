# -*- coding: utf-8 -*-
"""
Schema Validator - Evaluates a record against a schema of field rules.

A schema is an ordered mapping of field name -> FieldRule. Evaluation is
collect-all: every field is checked even when an earlier one fails, so
the user sees every problem at once.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from .field_rules import FieldRule
from utils.logger import get_logger

logger = get_logger(__name__)

Schema = Mapping[str, FieldRule]

GENERAL_FIELD = "general"


@dataclass
class ValidationResult:
    """Result of a validation check."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = field(default_factory=list)


@dataclass
class FieldValidationResult:
    """Field-keyed result: field name -> message (None when the field is valid)."""
    is_valid: bool
    errors: Dict[str, Optional[str]]
    warnings: Dict[str, Optional[str]] = field(default_factory=dict)

    def has_error(self, field_name: str) -> bool:
        """Check if a field has a validation error."""
        return bool(self.errors.get(field_name))

    def all_errors(self) -> List[str]:
        """All error messages in schema order."""
        return [message for message in self.errors.values() if message]

    def first_error(self) -> Optional[str]:
        """First error message, or None."""
        messages = self.all_errors()
        return messages[0] if messages else None

    def to_result(self) -> ValidationResult:
        """Flatten into the list-of-messages form."""
        return ValidationResult(
            is_valid=self.is_valid,
            errors=self.all_errors(),
            warnings=[message for message in self.warnings.values() if message]
        )

    @staticmethod
    def merge(*results: 'FieldValidationResult') -> 'FieldValidationResult':
        """Combine several results; later results win on the same field."""
        combined: Dict[str, Optional[str]] = {}
        is_valid = True
        for result in results:
            combined.update(result.errors)
            if not result.is_valid:
                is_valid = False
        return FieldValidationResult(is_valid=is_valid, errors=combined)


class SchemaValidator:
    """Stateless evaluator for schemas of field rules."""

    @staticmethod
    def evaluate_fields(schema: Schema, data: Any,
                        now: Optional[datetime] = None) -> FieldValidationResult:
        """
        Validate data against a schema, keyed by field.

        Args:
            schema: Mapping of field name -> FieldRule
            data: Candidate record (normally a dict)
            now: Evaluation time for date-bounded rules (defaults to now)

        Returns:
            FieldValidationResult; never raises
        """
        if not isinstance(data, Mapping):
            return FieldValidationResult(
                is_valid=False,
                errors={GENERAL_FIELD: f"Expected form data, got {type(data).__name__}"}
            )

        now = now or datetime.now()
        errors: Dict[str, Optional[str]] = {}

        for field_name, rule in schema.items():
            try:
                errors[field_name] = rule.check(data.get(field_name), now)
            except Exception as e:
                logger.error(f"Rule {rule.kind} failed on field '{field_name}': {e}", exc_info=True)
                errors[field_name] = f"{field_name} could not be validated"

        failed = {name: message for name, message in errors.items() if message}
        return FieldValidationResult(is_valid=not failed, errors=failed)

    @staticmethod
    def evaluate(schema: Schema, data: Any,
                 now: Optional[datetime] = None) -> ValidationResult:
        """Validate data against a schema and return a flat list of messages."""
        return SchemaValidator.evaluate_fields(schema, data, now).to_result()
