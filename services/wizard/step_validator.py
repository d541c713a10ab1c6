# -*- coding: utf-8 -*-
"""
Step validation for the maintenance wizards.

Turns named schemas into wizard step validators without UI coupling. A
step validator has the signature ``(step_data, all_wizard_data) -> errors``.
"""

from typing import Any, Callable, Dict, List, Optional

from services.validation_service import ValidationService

StepValidatorFn = Callable[[Dict[str, Any], Dict[str, Any]], List[str]]


class StepValidator:
    """Builds wizard step validators from registered schemas."""

    _default_service: Optional[ValidationService] = None

    @classmethod
    def _service(cls) -> ValidationService:
        if cls._default_service is None:
            cls._default_service = ValidationService()
        return cls._default_service

    @classmethod
    def for_schema(cls, schema_name: str,
                   service: Optional[ValidationService] = None) -> StepValidatorFn:
        """
        Create a step validator for a named schema.

        Args:
            schema_name: Registered schema, e.g. 'shop.basic_info'
            service: Validation service to use (defaults to a shared instance)

        Returns:
            Callable returning the list of error messages for the step
        """
        validation_service = service or cls._service()

        def validate(step_data: Dict[str, Any], all_data: Dict[str, Any]) -> List[str]:
            return validation_service.validate_step(schema_name, step_data).errors

        validate.__name__ = f"validate_{schema_name.replace('.', '_')}"
        return validate

    @staticmethod
    def combine(*validators: StepValidatorFn) -> StepValidatorFn:
        """Run several validators and concatenate their errors."""

        def validate(step_data: Dict[str, Any], all_data: Dict[str, Any]) -> List[str]:
            errors: List[str] = []
            for validator in validators:
                errors.extend(validator(step_data, all_data) or [])
            return errors

        return validate
