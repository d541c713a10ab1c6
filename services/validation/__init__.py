# -*- coding: utf-8 -*-
"""Validation services package."""

from .field_rules import (
    FieldRule, RequiredRule, DateRule, WholeNumberRule, AmountRule, NameRule,
    SelectionRule, ListLengthRule, TextRule, PatternRule
)
from .schema_validator import (
    Schema, SchemaValidator, ValidationResult, FieldValidationResult
)
from .validation_factory import ValidationFactory

__all__ = [
    'FieldRule', 'RequiredRule', 'DateRule', 'WholeNumberRule', 'AmountRule',
    'NameRule', 'SelectionRule', 'ListLengthRule', 'TextRule', 'PatternRule',
    'Schema', 'SchemaValidator', 'ValidationResult', 'FieldValidationResult',
    'ValidationFactory'
]
