# -*- coding: utf-8 -*-
"""
Tests for field rules and the schema validator.

Tests cover:
- Odometer, cost, date and shop name field semantics
- Collect-all schema evaluation
- Malformed input handling
"""

from datetime import date, datetime, timedelta

import pytest

from services.validation.field_rules import (
    AmountRule, DateRule, ListLengthRule, NameRule, PatternRule,
    RequiredRule, SelectionRule, TextRule, WholeNumberRule
)
from services.validation.schema_validator import FieldValidationResult, SchemaValidator

NOW = datetime(2024, 6, 15, 12, 0, 0)

WHOLE_MESSAGE = "Odometer reading must be a whole number (no decimals)"
AMOUNT_MESSAGE = "Cost must be a valid amount (e.g., 25.99)"


class TestWholeNumberRule:
    """Odometer readings."""

    @pytest.fixture
    def rule(self):
        return WholeNumberRule(max_value=2000000)

    def test_required(self, rule):
        """Missing reading asks the user to enter one."""
        assert rule.check(None, NOW) == rule.required_message
        assert rule.check("", NOW) == rule.required_message

    def test_decimal_rejected(self, rule):
        """Decimals are not whole numbers."""
        assert rule.check("12.5", NOW) == WHOLE_MESSAGE

    def test_commas_stripped(self, rule):
        """Thousands separators are accepted."""
        assert rule.check("75,000", NOW) is None
        assert rule.check("1,234,567", NOW) is None

    def test_negative(self, rule):
        """Negative readings get their own message."""
        assert rule.check("-100", NOW) == "Odometer reading cannot be negative"

    def test_upper_bound(self, rule):
        """Readings above the bound are rejected; the bound itself passes."""
        assert rule.check("2,000,000", NOW) is None
        assert rule.check("2000001", NOW) == "Maximum odometer value is 2,000,000 miles"

    def test_non_numeric(self, rule):
        """Letters and other junk are not whole numbers."""
        assert rule.check("abc", NOW) == WHOLE_MESSAGE
        assert rule.check(12.0, NOW) == WHOLE_MESSAGE

    def test_int_tolerated(self, rule):
        """Plain ints pass through the text checks."""
        assert rule.check(42000, NOW) is None

    def test_parse(self):
        """Validated readings convert to int."""
        assert WholeNumberRule.parse("75,000") == 75000


class TestAmountRule:
    """Cost amounts."""

    @pytest.fixture
    def rule(self):
        return AmountRule(max_value=99999.99, label="Cost")

    def test_three_decimals_invalid(self, rule):
        assert rule.check("12.345", NOW) == AMOUNT_MESSAGE

    def test_two_decimals_valid(self, rule):
        assert rule.check("12.34", NOW) is None
        assert rule.check("12", NOW) is None
        assert rule.check("0.5", NOW) is None

    def test_negative(self, rule):
        """A negative amount reports the negative error, not the format error."""
        assert rule.check("-5", NOW) == "Cost cannot be negative"

    def test_required(self, rule):
        assert rule.check("", NOW) == "Cost is required"
        assert rule.check(None, NOW) == "Cost is required"

    def test_upper_bound(self, rule):
        assert rule.check("99999.99", NOW) is None
        assert rule.check("100000", NOW) == "Cost cannot exceed $99,999.99"

    def test_malformed(self, rule):
        assert rule.check("12.", NOW) == AMOUNT_MESSAGE
        assert rule.check("$12", NOW) == AMOUNT_MESSAGE
        assert rule.check(["12"], NOW) == AMOUNT_MESSAGE


class TestDateRule:
    """Service dates."""

    @pytest.fixture
    def rule(self):
        return DateRule(label="Service date")

    def test_required(self, rule):
        assert rule.check(None, NOW) == "Service date is required"

    def test_today_is_valid(self, rule):
        """A bare date for today is never in the future."""
        assert rule.check(NOW.date(), NOW) is None

    def test_past_is_valid(self, rule):
        assert rule.check(date(2020, 1, 1), NOW) is None
        assert rule.check("2024-06-01", NOW) is None

    def test_future_rejected(self, rule):
        assert rule.check(NOW + timedelta(days=1), NOW) == "Service date cannot be in the future"
        assert rule.check("2024-06-16", NOW) == "Service date cannot be in the future"

    def test_invalid(self, rule):
        assert rule.check("yesterday", NOW) == "Service date is invalid"
        assert rule.check(12345, NOW) == "Service date is invalid"

    def test_future_allowed(self):
        rule = DateRule(label="Due date", allow_future=True)
        assert rule.check(NOW + timedelta(days=30), NOW) is None


class TestNameRule:
    """Shop names."""

    @pytest.fixture
    def rule(self):
        return NameRule(label="Shop name", min_length=2, max_length=100)

    def test_valid_names(self, rule):
        assert rule.check("Joe's Auto & Tire", NOW) is None
        assert rule.check("  Quick   Lube  ", NOW) is None

    def test_normalize(self):
        assert NameRule.normalize("  Quick   Lube  ") == "Quick Lube"

    def test_required(self, rule):
        assert rule.check("", NOW) == "Shop name is required"
        assert rule.check(None, NOW) == "Shop name is required"

    def test_whitespace_only(self, rule):
        assert rule.check("    ", NOW) == "Shop name cannot be just whitespace"

    def test_length_bounds(self, rule):
        assert rule.check("A", NOW) == "Shop name must be at least 2 characters"
        assert rule.check("A" * 101, NOW) == "Shop name cannot exceed 100 characters"

    def test_invalid_characters(self, rule):
        message = rule.check("Shop<script>", NOW)
        assert message.startswith("Shop name contains invalid characters")
        assert rule.check("Tab\there", NOW) is None  # collapsed to a space


class TestSmallRules:
    """Selection, list, text, pattern and required rules."""

    def test_selection(self):
        rule = SelectionRule()
        assert rule.check([], NOW) == "Select at least one service that was performed"
        assert rule.check(None, NOW) == "Select at least one service that was performed"
        assert rule.check(["Oil Change"], NOW) is None

    def test_list_length(self):
        rule = ListLengthRule(max_items=2)
        assert rule.check(None, NOW) is None
        assert rule.check(["a", "b"], NOW) is None
        assert rule.check(["a", "b", "c"], NOW) == "Maximum 2 photos allowed"

    def test_text(self):
        rule = TextRule(max_length=5)
        assert rule.check("", NOW) is None
        assert rule.check("abcde", NOW) is None
        assert rule.check("abcdef", NOW) == "Text is too long (maximum 5 characters)"

    def test_pattern(self):
        rule = PatternRule(pattern=r"[0-9]+", message="Digits only")
        assert rule.check("", NOW) is None
        assert rule.check("123", NOW) is None
        assert rule.check("12a", NOW) == "Digits only"

    def test_required(self):
        rule = RequiredRule(message="Vehicle ID is required")
        assert rule.check("  ", NOW) == "Vehicle ID is required"
        assert rule.check("veh-1", NOW) is None

    def test_is_valid(self):
        assert AmountRule().is_valid("12.34")
        assert not AmountRule().is_valid("12.345")


class TestSchemaValidator:
    """Collect-all evaluation."""

    @pytest.fixture
    def schema(self):
        return {
            "date": DateRule(),
            "mileage": WholeNumberRule(),
            "total_cost": AmountRule(),
        }

    def test_collects_every_failure(self, schema):
        """One failing field does not stop the others from reporting."""
        result = SchemaValidator.evaluate(schema, {"mileage": "12.5", "total_cost": "-5"}, NOW)

        assert result.is_valid is False
        assert result.errors == [
            "Service date is required",
            WHOLE_MESSAGE,
            "Cost cannot be negative",
        ]

    def test_valid_record(self, schema):
        record = {"date": NOW.date(), "mileage": "75,000", "total_cost": "12.34"}
        result = SchemaValidator.evaluate(schema, record, NOW)

        assert result.is_valid is True
        assert result.errors == []

    def test_field_keyed_result(self, schema):
        result = SchemaValidator.evaluate_fields(schema, {"date": NOW.date(), "mileage": "1"}, NOW)

        assert result.has_error("total_cost")
        assert not result.has_error("mileage")
        assert result.first_error() == "Cost is required"

    def test_malformed_input_never_raises(self, schema):
        """A non-mapping record is invalid with an explanatory message."""
        result = SchemaValidator.evaluate(schema, ["not", "a", "dict"], NOW)

        assert result.is_valid is False
        assert result.errors == ["Expected form data, got list"]

    def test_idempotent(self, schema):
        """Same schema and data give the same result."""
        record = {"mileage": "12.5"}
        first = SchemaValidator.evaluate(schema, record, NOW)
        second = SchemaValidator.evaluate(schema, record, NOW)

        assert first == second

    def test_merge(self):
        first = FieldValidationResult(is_valid=False, errors={"a": "bad a"})
        second = FieldValidationResult(is_valid=True, errors={})

        merged = FieldValidationResult.merge(first, second)

        assert merged.is_valid is False
        assert merged.all_errors() == ["bad a"]
