"""
Savings goal routes.
"""
from fastapi import Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.api.dependencies import get_current_user
from app.api.routes.trackables import build_trackable_router
from app.schemas.goal import (
    GoalCreate, GoalUpdate, GoalCompletion, GoalResponse, GoalDetailResponse, GoalListResponse
)
from app.services import trackable_service
from app.services.trackable_service import GOAL

router = build_trackable_router(
    GOAL,
    prefix="/goals",
    create_schema=GoalCreate,
    update_schema=GoalUpdate,
    item_schema=GoalResponse,
    detail_schema=GoalDetailResponse,
    list_schema=GoalListResponse,
)


@router.post("/{goal_id}/complete", response_model=GoalResponse)
async def complete_goal(
    goal_id: str,
    data: GoalCompletion,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Mark a goal as completed or uncompleted."""
    return trackable_service.set_completed(db, GOAL, current_user.id, goal_id, data.is_completed)
