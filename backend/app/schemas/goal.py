"""
Pydantic schemas for Goal entity.
"""
from pydantic import Field
from typing import List
from app.schemas.common import CamelModel, OffsetPagination
from app.schemas.trackable import (
    TrackableCreate, TrackableUpdate, TrackableResponse, LinkedExpense, CompletionUpdate
)


class GoalCreate(TrackableCreate):
    """Schema for goal creation."""
    pass


class GoalUpdate(TrackableUpdate):
    """Schema for goal update."""
    pass


class GoalCompletion(CompletionUpdate):
    """Schema for the completion toggle."""
    pass


class GoalResponse(TrackableResponse):
    """Schema for goal response."""
    progress_percentage: float = Field(ge=0, le=100)  # Capped at 100 once the target is reached


class GoalDetailResponse(GoalResponse):
    """Goal with its linked expenses, newest first."""
    expenses: List[LinkedExpense] = []


class GoalListResponse(CamelModel):
    """Offset-paginated list of goals."""
    items: List[GoalResponse]
    pagination: OffsetPagination
