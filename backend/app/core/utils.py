"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def month_start(value: datetime, months_back: int = 0) -> datetime:
    """First instant of the calendar month `months_back` months before `value`."""
    month_index = value.year * 12 + (value.month - 1) - months_back
    return datetime(month_index // 12, month_index % 12 + 1, 1)


def format_error(message: str, code: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message, "code": code}
    if details:
        response["details"] = details
    return response
