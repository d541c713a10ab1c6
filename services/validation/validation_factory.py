# -*- coding: utf-8 -*-
"""
Validation Factory - Registry of named schemas.

Provides a central point for looking up the schema that validates a given
wizard step (e.g. 'shop.basic_info') and evaluating records against it.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from .schema_validator import FieldValidationResult, Schema, SchemaValidator, ValidationResult
from .maintenance_schemas import MAINTENANCE_SCHEMAS


class ValidationFactory:
    """
    Registry for schemas keyed by name.

    Names are case-insensitive. The maintenance wizard schemas are
    registered by default.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._schemas: Dict[str, Schema] = {}
        self._register_default_schemas()

    def _register_default_schemas(self):
        """Register built-in maintenance schemas."""
        for name, schema in MAINTENANCE_SCHEMAS.items():
            self.register_schema(name, schema)

    def register_schema(self, name: str, schema: Schema):
        """
        Register a schema under a name.

        Args:
            name: Schema identifier (e.g., 'diy.basic_info')
            schema: Mapping of field name -> FieldRule
        """
        self._schemas[name.lower()] = dict(schema)

    def get_schema(self, name: str) -> Optional[Schema]:
        """
        Get a registered schema by name.

        Returns:
            Schema or None if not found
        """
        return self._schemas.get(name.lower())

    def validate(self, record: Any, name: str,
                 now: Optional[datetime] = None) -> ValidationResult:
        """
        Validate a record using the named schema.

        Args:
            record: Dictionary containing record data
            name: Schema identifier
            now: Evaluation time for date-bounded rules

        Returns:
            ValidationResult (invalid if the schema is unknown)
        """
        schema = self.get_schema(name)
        if schema is None:
            return ValidationResult(
                is_valid=False,
                errors=[f"No schema registered for: {name}"]
            )
        return SchemaValidator.evaluate(schema, record, now)

    def validate_fields(self, record: Any, name: str,
                        now: Optional[datetime] = None) -> FieldValidationResult:
        """Validate a record using the named schema, keyed by field."""
        schema = self.get_schema(name)
        if schema is None:
            return FieldValidationResult(
                is_valid=False,
                errors={"general": f"No schema registered for: {name}"}
            )
        return SchemaValidator.evaluate_fields(schema, record, now)

    def is_valid(self, record: Any, name: str) -> bool:
        """Check if a record passes the named schema."""
        return self.validate(record, name).is_valid

    def get_registered_types(self) -> List[str]:
        """
        Get list of registered schema names.

        Returns:
            List of schema identifiers
        """
        return list(self._schemas.keys())
