# -*- coding: utf-8 -*-
"""
Data validation service.

Facade over the schema registry for the maintenance wizards. Every method
returns a result object; nothing here raises on bad input.
"""

from datetime import datetime
from typing import Any, List, Optional

from services.validation.schema_validator import FieldValidationResult, ValidationResult
from services.validation.validation_factory import ValidationFactory
from utils.logger import get_logger

logger = get_logger(__name__)

SERVICE_TYPES = ("diy", "shop")


class ValidationService:
    """Service for maintenance entry validation."""

    def __init__(self, factory: Optional[ValidationFactory] = None):
        """
        Initialize validation service.

        Args:
            factory: Schema registry to use (defaults to the built-in maintenance schemas)
        """
        self._validation_factory = factory or ValidationFactory()

    @property
    def factory(self) -> ValidationFactory:
        return self._validation_factory

    def validate_step(self, schema_name: str, data: Any,
                      now: Optional[datetime] = None) -> ValidationResult:
        """Validate step data against a named schema."""
        result = self._validation_factory.validate(data, schema_name, now)
        if not result.is_valid:
            logger.debug(f"Validation failed for {schema_name}: {result.errors}")
        return result

    def validate_step_fields(self, schema_name: str, data: Any,
                             now: Optional[datetime] = None) -> FieldValidationResult:
        """Validate step data against a named schema, keyed by field."""
        return self._validation_factory.validate_fields(data, schema_name, now)

    def validate_diy_basic_info(self, data: Any, now: Optional[datetime] = None) -> ValidationResult:
        """Validate DIY basic information (vehicle, date, odometer)."""
        return self.validate_step("diy.basic_info", data, now)

    def validate_shop_basic_info(self, data: Any, now: Optional[datetime] = None) -> ValidationResult:
        """Validate shop basic information (adds cost and shop details)."""
        return self.validate_step("shop.basic_info", data, now)

    def validate_services(self, data: Any, service_type: str = "diy") -> ValidationResult:
        """Validate the services selection step."""
        return self.validate_step(f"{self._check_type(service_type)}.services", data)

    def validate_photos(self, data: Any, service_type: str = "diy") -> ValidationResult:
        """Validate the photos step."""
        return self.validate_step(f"{self._check_type(service_type)}.photos", data)

    def validate_notes(self, data: Any) -> ValidationResult:
        """Validate the shop notes step."""
        return self.validate_step("shop.notes", data)

    def _check_type(self, service_type: str) -> str:
        if service_type not in SERVICE_TYPES:
            raise ValueError(f"Unknown service type: {service_type}")
        return service_type

    # =========================================================================
    # Result helpers
    # =========================================================================

    @staticmethod
    def merge_validation_results(*results: ValidationResult) -> ValidationResult:
        """Merge multiple validation results into one."""
        errors: List[str] = []
        warnings: List[str] = []
        for result in results:
            errors.extend(result.errors)
            warnings.extend(result.warnings)
        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    @staticmethod
    def get_first_error(result: FieldValidationResult) -> Optional[str]:
        """Get first error message from a field-keyed result."""
        return result.first_error()

    @staticmethod
    def get_all_errors(result: FieldValidationResult) -> List[str]:
        """Get all error messages from a field-keyed result."""
        return result.all_errors()
