# -*- coding: utf-8 -*-
"""
Field Rules - Declarative constraint descriptors for form fields.

Each rule is a small dataclass tagged with a ``kind`` and knows how to
check one field value. Rules never raise: a value that cannot be
interpreted yields an error message just like a value that breaks a bound.

A rule reports at most one message per field (the first failing check),
so a schema evaluator can collect one message per field across the whole
form.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Optional

from utils.datetime_utils import from_isoformat


class FieldRule(ABC):
    """
    Abstract base class for field rules.

    Subclasses implement check() for one kind of field.
    """

    kind: ClassVar[str] = "field"

    @abstractmethod
    def check(self, value: Any, now: datetime) -> Optional[str]:
        """
        Check a single field value.

        Args:
            value: The raw field value (may be missing/None)
            now: Evaluation time, used by date-bounded rules

        Returns:
            Error message, or None if the value passes
        """
        pass

    def is_valid(self, value: Any, now: Optional[datetime] = None) -> bool:
        """Check if value passes this rule."""
        return self.check(value, now or datetime.now()) is None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _as_text(value: Any) -> Optional[str]:
    """Numeric inputs arrive as strings; plain ints are tolerated."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return None


@dataclass(frozen=True)
class RequiredRule(FieldRule):
    """Non-empty value (e.g. vehicle id)."""

    kind: ClassVar[str] = "required"

    message: str = "This field is required"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return self.message
        if isinstance(value, str) and not value.strip():
            return self.message
        return None


@dataclass(frozen=True)
class DateRule(FieldRule):
    """Required date that must not be later than the evaluation time."""

    kind: ClassVar[str] = "date"

    label: str = "Service date"
    allow_future: bool = False
    required: bool = True

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return f"{self.label} is required" if self.required else None

        parsed = from_isoformat(value)
        if parsed is None:
            return f"{self.label} is invalid"

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone().replace(tzinfo=None)

        # A bare date compares as midnight, so "today" is never in the future
        if not self.allow_future and parsed > now:
            return f"{self.label} cannot be in the future"
        return None


@dataclass(frozen=True)
class WholeNumberRule(FieldRule):
    """
    Whole number entered as text (odometer readings).

    Commas are accepted as thousands separators and stripped before the
    numeric checks. Decimals are rejected.
    """

    kind: ClassVar[str] = "whole_number"

    NEGATIVE_PATTERN: ClassVar[re.Pattern] = re.compile(r"-[0-9]+(\.[0-9]*)?")
    DIGITS_PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]+")

    max_value: int = 2000000
    required_message: str = "Enter the odometer reading at the time of service before continuing"
    whole_message: str = "Odometer reading must be a whole number (no decimals)"
    negative_message: str = "Odometer reading cannot be negative"
    max_message: str = "Maximum odometer value is {max:,} miles"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return self.required_message

        text = _as_text(value)
        if text is None:
            return self.whole_message

        cleaned = text.replace(",", "")
        if self.NEGATIVE_PATTERN.fullmatch(cleaned):
            return self.negative_message
        if not self.DIGITS_PATTERN.fullmatch(cleaned):
            return self.whole_message
        if int(cleaned) > self.max_value:
            return self.max_message.format(max=self.max_value)
        return None

    @staticmethod
    def parse(value: Any) -> int:
        """Convert a validated reading to int ("75,000" -> 75000)."""
        return int(str(value).replace(",", ""))


@dataclass(frozen=True)
class AmountRule(FieldRule):
    """Currency amount entered as text with at most two decimals."""

    kind: ClassVar[str] = "amount"

    AMOUNT_PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
    NEGATIVE_PATTERN: ClassVar[re.Pattern] = re.compile(r"-[0-9]+(\.[0-9]*)?")

    max_value: float = 99999.99
    label: str = "Cost"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return f"{self.label} is required"

        text = _as_text(value)
        if text is None:
            return f"{self.label} must be a valid amount (e.g., 25.99)"

        if self.NEGATIVE_PATTERN.fullmatch(text):
            return f"{self.label} cannot be negative"
        if not self.AMOUNT_PATTERN.fullmatch(text):
            return f"{self.label} must be a valid amount (e.g., 25.99)"

        try:
            amount = Decimal(text)
        except InvalidOperation:
            return f"{self.label} must be a valid amount (e.g., 25.99)"
        if amount > Decimal(str(self.max_value)):
            return f"{self.label} cannot exceed ${self.max_value:,.2f}"
        return None


@dataclass(frozen=True)
class NameRule(FieldRule):
    """
    Free-text name such as a shop name.

    The value is trimmed and inner whitespace collapsed before the length
    and character checks. Allowed: letters, digits, single spaces and
    & . , ' ( ) - /
    """

    kind: ClassVar[str] = "name"

    ALLOWED_PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9&.,'()\-/ ]+")

    label: str = "Shop name"
    min_length: int = 2
    max_length: int = 100

    @staticmethod
    def normalize(value: str) -> str:
        """Trim and collapse runs of whitespace to single spaces."""
        return " ".join(value.split())

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value) or not isinstance(value, str):
            return f"{self.label} is required"

        normalized = self.normalize(value)
        if not normalized:
            return f"{self.label} cannot be just whitespace"
        if len(normalized) < self.min_length:
            return f"{self.label} must be at least {self.min_length} characters"
        if len(normalized) > self.max_length:
            return f"{self.label} cannot exceed {self.max_length} characters"
        if not self.ALLOWED_PATTERN.fullmatch(normalized):
            return (
                f"{self.label} contains invalid characters. Use only letters, "
                "numbers, and common punctuation (&.,'-()/ )"
            )
        return None


@dataclass(frozen=True)
class SelectionRule(FieldRule):
    """List field that needs at least ``min_items`` entries."""

    kind: ClassVar[str] = "selection"

    message: str = "Select at least one service that was performed"
    min_items: int = 1

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if not isinstance(value, (list, tuple)) or len(value) < self.min_items:
            return self.message
        return None


@dataclass(frozen=True)
class ListLengthRule(FieldRule):
    """Optional list with an upper bound (photo attachments)."""

    kind: ClassVar[str] = "list_length"

    max_items: int = 10
    message: str = "Maximum {max} photos allowed"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, (list, tuple)) or len(value) > self.max_items:
            return self.message.format(max=self.max_items)
        return None


@dataclass(frozen=True)
class TextRule(FieldRule):
    """Optional (or required) text with a maximum length."""

    kind: ClassVar[str] = "text"

    max_length: int = 100
    message: str = "Text is too long (maximum {max} characters)"
    required: bool = False
    required_message: str = "This field is required"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return self.required_message if self.required else None
        if not isinstance(value, str):
            return self.message.format(max=self.max_length)
        if self.required and not value.strip():
            return self.required_message
        if len(value) > self.max_length:
            return self.message.format(max=self.max_length)
        return None


@dataclass(frozen=True)
class PatternRule(FieldRule):
    """Optional text that must match a pattern when provided."""

    kind: ClassVar[str] = "pattern"

    pattern: str = r".*"
    message: str = "Invalid format"

    def check(self, value: Any, now: datetime) -> Optional[str]:
        if _is_blank(value):
            return None
        if not isinstance(value, str) or not re.fullmatch(self.pattern, value.strip()):
            return self.message
        return None
