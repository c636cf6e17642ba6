"""
Expense management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.expense import (
    ExpenseCreate, ExpenseUpdate, ExpenseQuery, ExpenseResponse, ExpenseListResponse, CategoryListResponse
)
from app.api.dependencies import get_current_user, query_params
from app.services import expense_service

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    current_user: User = Depends(get_current_user),
    query: ExpenseQuery = Depends(query_params(ExpenseQuery)),
    db: Session = Depends(get_db)
):
    """Get expenses, newest first, with cursor pagination and filters."""
    return expense_service.list_expenses(db, current_user.id, query)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new expense."""
    return expense_service.create_expense(db, current_user.id, expense_data)


@router.get("/categories", response_model=CategoryListResponse)
async def get_suggested_categories(current_user: User = Depends(get_current_user)):
    """Suggested categories for the expense form."""
    return {"categories": expense_service.SUGGESTED_CATEGORIES}


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return expense_service.get_expense(db, current_user.id, expense_id)


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: str,
    expense_data: ExpenseUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update an expense; only the provided fields change."""
    return expense_service.update_expense(db, current_user.id, expense_id, expense_data)


@router.delete("/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    expense_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    expense_service.delete_expense(db, current_user.id, expense_id)
    return {"message": "Expense deleted successfully"}
