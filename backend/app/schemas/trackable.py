"""
Pydantic schemas shared by budgets and goals.
"""
from pydantic import Field, field_validator, model_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from app.core.config import settings
from app.core.utils import to_naive_utc
from app.schemas.common import CamelModel, Money

MAX_TARGET_AMOUNT = Decimal("100000000")


class TrackableCreate(CamelModel):
    """Schema for creating a budget or goal."""
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    target_amount: Decimal = Field(gt=0, le=MAX_TARGET_AMOUNT, decimal_places=2)
    deadline: Optional[datetime] = None
    is_completed: bool = False

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v):
        return to_naive_utc(v)


class TrackableUpdate(CamelModel):
    """Schema for partial update; only fields present in the body change."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    target_amount: Optional[Decimal] = Field(default=None, gt=0, le=MAX_TARGET_AMOUNT, decimal_places=2)
    deadline: Optional[datetime] = None
    is_completed: Optional[bool] = None

    @field_validator("deadline")
    @classmethod
    def normalize_deadline(cls, v):
        return to_naive_utc(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        # description and deadline may be cleared, the rest may not
        for field in ("name", "target_amount", "is_completed"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class CompletionUpdate(CamelModel):
    """Body of the goal completion toggle."""
    is_completed: bool = Field(strict=True)


class TrackableQuery(CamelModel):
    """Query parameters of the offset-paginated list endpoints."""
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=settings.PAGE_SIZE_DEFAULT, ge=1, le=settings.PAGE_SIZE_MAX)
    is_completed: Optional[bool] = None
    has_deadline: Optional[bool] = None


class LinkedExpense(CamelModel):
    """Expense summary shown on a budget or goal detail view."""
    id: str
    description: str
    amount: Money
    category: str
    date: datetime


class TrackableResponse(CamelModel):
    """Stored fields plus the derived metrics common to both kinds."""
    id: str
    name: str
    description: Optional[str] = None
    target_amount: Money
    current_amount: Money
    deadline: Optional[datetime] = None
    is_completed: bool
    user_id: str
    created_at: datetime
    updated_at: datetime
    remaining_amount: Money
    days_remaining: Optional[int] = None
    is_overdue: bool
