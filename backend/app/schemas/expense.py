"""
Pydantic schemas for Expense entity.
"""
import re
from pydantic import Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from app.core.config import settings
from app.core.utils import to_naive_utc
from app.models.expense import RecurrenceType
from app.schemas.common import CamelModel, CursorPagination, Money

MAX_EXPENSE_AMOUNT = Decimal("1000000")
ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


class ExpenseCreate(CamelModel):
    """Schema for expense creation."""
    description: str = Field(min_length=1, max_length=255)
    amount: Decimal = Field(gt=0, le=MAX_EXPENSE_AMOUNT, decimal_places=2)
    category: str = Field(min_length=1, max_length=50)
    is_recurring: bool = False
    recurrence_type: RecurrenceType = RecurrenceType.NONE
    date: datetime
    budget_id: Optional[str] = None
    goal_id: Optional[str] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)


class ExpenseUpdate(CamelModel):
    """Schema for expense update; an explicit null link unlinks the expense."""
    description: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Decimal] = Field(default=None, gt=0, le=MAX_EXPENSE_AMOUNT, decimal_places=2)
    category: Optional[str] = Field(default=None, min_length=1, max_length=50)
    is_recurring: Optional[bool] = None
    recurrence_type: Optional[RecurrenceType] = None
    date: Optional[datetime] = None
    budget_id: Optional[str] = None
    goal_id: Optional[str] = None

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v):
        return to_naive_utc(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        for field in ("description", "amount", "category", "is_recurring", "recurrence_type", "date"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class ExpenseQuery(CamelModel):
    """Query parameters of the cursor-paginated expense list."""
    limit: int = Field(default=settings.PAGE_SIZE_DEFAULT, ge=1, le=settings.PAGE_SIZE_MAX)
    cursor: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, max_length=50)
    is_recurring: Optional[bool] = None
    budget_id: Optional[str] = None
    goal_id: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @field_validator("category", mode="before")
    @classmethod
    def blank_category(cls, v):
        return v or None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def require_time(cls, v):
        if isinstance(v, str) and not ISO_DATETIME.match(v):
            raise ValueError("expected an ISO 8601 date-time")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_bounds(cls, v):
        return to_naive_utc(v)


class ExpenseResponse(CamelModel):
    """Schema for expense response."""
    id: str
    description: str
    amount: Money
    category: str
    is_recurring: bool
    recurrence_type: RecurrenceType
    date: datetime
    budget_id: Optional[str] = None
    goal_id: Optional[str] = None
    user_id: str
    created_at: datetime
    updated_at: datetime


class ExpenseListResponse(CamelModel):
    """Cursor-paginated list of expenses."""
    items: List[ExpenseResponse]
    pagination: CursorPagination


class CategoryListResponse(CamelModel):
    """Suggested expense categories."""
    categories: List[str]
