"""
Pydantic schemas for Budget entity.
"""
from pydantic import Field
from typing import List
from app.schemas.common import CamelModel, OffsetPagination
from app.schemas.trackable import (
    TrackableCreate, TrackableUpdate, TrackableResponse, LinkedExpense
)


class BudgetCreate(TrackableCreate):
    """Schema for budget creation."""
    pass


class BudgetUpdate(TrackableUpdate):
    """Schema for budget update."""
    pass


class BudgetResponse(TrackableResponse):
    """Schema for budget response."""
    spent_percentage: float = Field(ge=0, le=100)  # Share of the target already spent


class BudgetDetailResponse(BudgetResponse):
    """Budget with its linked expenses, newest first."""
    expenses: List[LinkedExpense] = []


class BudgetListResponse(CamelModel):
    """Offset-paginated list of budgets."""
    items: List[BudgetResponse]
    pagination: OffsetPagination
