"""
Dashboard statistics routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.stats import DashboardStats
from app.api.dependencies import get_current_user
from app.services.stats_service import dashboard_stats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=DashboardStats)
async def get_dashboard_stats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Overview statistics for expenses and goals."""
    return dashboard_stats(db, current_user.id)
