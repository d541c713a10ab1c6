# -*- coding: utf-8 -*-
"""
DateTime Utilities.

Centralized datetime handling for service dates and draft snapshots.
Service dates travel through the wizard as ``date``/``datetime`` objects
and come back from draft storage as ISO strings; everything here accepts
all three forms.
"""

from datetime import datetime, date
from typing import Any, Optional, Union


def to_isoformat(value: Union[datetime, date, str]) -> str:
    """
    Convert a datetime-like value to ISO format string.

    Args:
        value: datetime, date or ISO string

    Returns:
        ISO format string (YYYY-MM-DDTHH:MM:SS or YYYY-MM-DD)

    Examples:
        >>> to_isoformat(datetime(2024, 1, 15, 10, 30))
        '2024-01-15T10:30:00'
        >>> to_isoformat(date(2024, 1, 15))
        '2024-01-15'
    """
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def from_isoformat(value: Any) -> Optional[datetime]:
    """
    Convert an ISO string, date or datetime to a datetime object.

    Reverse of to_isoformat() for deserialization. Anything that cannot be
    interpreted as a point in time yields None instead of raising.

    Examples:
        >>> from_isoformat('2024-01-15T10:30:00')
        datetime.datetime(2024, 1, 15, 10, 30)
        >>> from_isoformat('2024-01-15')
        datetime.datetime(2024, 1, 15, 0, 0)
        >>> from_isoformat('yesterday') is None
        True
    """
    if value is None:
        return None

    # Already datetime -> return as-is
    if isinstance(value, datetime):
        return value

    # date -> convert to datetime
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    if isinstance(value, str):
        value = value.strip()
        try:
            if 'T' in value or ' ' in value:
                return datetime.fromisoformat(value)
            parsed_date = date.fromisoformat(value)
            return datetime.combine(parsed_date, datetime.min.time())
        except ValueError:
            return None

    return None


def json_default(value: Any) -> Any:
    """``default=`` hook for json.dumps that serializes dates as ISO strings."""
    if isinstance(value, (datetime, date)):
        return to_isoformat(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return str(value)
