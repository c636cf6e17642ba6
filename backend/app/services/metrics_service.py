"""
Derived metrics for budgets and goals.

Every response that carries a budget or goal runs through
``calculate_metrics``, so percentages, remaining amounts and deadline
status are computed in exactly one place and are never stored.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union
from app.core.utils import utcnow, to_naive_utc

Number = Union[Decimal, int, float]

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal(100)
SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class TrackableMetrics:
    """Fields derived from a target, its linked spending and a deadline."""
    percentage: Decimal
    remaining_amount: Decimal
    days_remaining: Optional[int]
    is_overdue: bool


def to_decimal(value: Optional[Number]) -> Decimal:
    """Coerce a stored or computed amount to Decimal (None counts as zero)."""
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def sum_amounts(amounts: Iterable[Optional[Number]]) -> Decimal:
    """Sum expense amounts; an empty collection sums to zero."""
    return sum((to_decimal(a) for a in amounts), Decimal(0))


def round_percentage(value: Number) -> Decimal:
    """Round to 2 decimal places, halves away from zero."""
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def capped_percentage(target_amount: Number, current_amount: Number) -> Decimal:
    """Unrounded progress in [0, 100]; a zero target yields 0."""
    target = to_decimal(target_amount)
    current = to_decimal(current_amount)
    if target <= 0:
        return Decimal(0)
    return max(min(current / target * HUNDRED, HUNDRED), Decimal(0))


def days_until(deadline: Optional[Union[date, datetime]], now: Optional[datetime] = None) -> Optional[int]:
    """
    Whole days left before the deadline, rounded up.

    The difference is elapsed time, not calendar dates: a deadline 25 hours
    away is 2 days, one 23 hours in the past is 0 days.
    """
    if deadline is None:
        return None
    if not isinstance(deadline, datetime):
        deadline = datetime(deadline.year, deadline.month, deadline.day)
    now = to_naive_utc(now) if now is not None else utcnow()
    seconds = (to_naive_utc(deadline) - now).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def calculate_metrics(
    target_amount: Number,
    current_amount: Number,
    deadline: Optional[Union[date, datetime]] = None,
    now: Optional[datetime] = None,
) -> TrackableMetrics:
    """Compute progress, remaining amount and deadline status."""
    target = to_decimal(target_amount)
    current = to_decimal(current_amount)
    days_remaining = days_until(deadline, now)
    return TrackableMetrics(
        percentage=round_percentage(capped_percentage(target, current)),
        remaining_amount=max(target - current, Decimal(0)),
        days_remaining=days_remaining,
        is_overdue=days_remaining is not None and days_remaining < 0,
    )
