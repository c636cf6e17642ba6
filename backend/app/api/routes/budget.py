"""
Budget management routes.
"""
from app.api.routes.trackables import build_trackable_router
from app.schemas.budget import (
    BudgetCreate, BudgetUpdate, BudgetResponse, BudgetDetailResponse, BudgetListResponse
)
from app.services.trackable_service import BUDGET

router = build_trackable_router(
    BUDGET,
    prefix="/budgets",
    create_schema=BudgetCreate,
    update_schema=BudgetUpdate,
    item_schema=BudgetResponse,
    detail_schema=BudgetDetailResponse,
    list_schema=BudgetListResponse,
)
