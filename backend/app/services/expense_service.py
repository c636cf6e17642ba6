"""
Expense service for expense-related business logic.
"""
import logging
from typing import Any, Dict, List
from sqlalchemy import and_, or_
from sqlalchemy.orm import Session
from app.core.errors import BadRequestError, NotFoundError
from app.models.expense import Expense
from app.schemas.expense import ExpenseCreate, ExpenseQuery, ExpenseUpdate
from app.services.pagination import cursor_window
from app.services.trackable_service import BUDGET, GOAL, owns_trackable

logger = logging.getLogger(__name__)

SUGGESTED_CATEGORIES = [
    "Food & Dining",
    "Transportation",
    "Shopping",
    "Entertainment",
    "Healthcare",
    "Utilities",
    "Education",
    "Travel",
    "Insurance",
    "Other",
]


def _check_links(db: Session, user_id: str, values: Dict[str, Any]) -> None:
    """Reject links to budgets or goals the user does not own."""
    for kind in (BUDGET, GOAL):
        linked_id = values.get(kind.link_field)
        if linked_id is not None and not owns_trackable(db, kind, user_id, linked_id):
            raise BadRequestError(f"{kind.label} not found")


def _filters(user_id: str, query: ExpenseQuery) -> List[Any]:
    conditions = [Expense.user_id == user_id]
    if query.category:
        conditions.append(Expense.category.icontains(query.category, autoescape=True))
    if query.is_recurring is not None:
        conditions.append(Expense.is_recurring == query.is_recurring)
    if query.budget_id:
        conditions.append(Expense.budget_id == query.budget_id)
    if query.goal_id:
        conditions.append(Expense.goal_id == query.goal_id)
    if query.start_date:
        conditions.append(Expense.date >= query.start_date)
    if query.end_date:
        conditions.append(Expense.date <= query.end_date)
    return conditions


def list_expenses(db: Session, user_id: str, query: ExpenseQuery) -> Dict[str, Any]:
    """
    Newest-first page of expenses, resumable from an opaque cursor.

    The cursor is the id of the last expense of the previous page; rows are
    ordered by (date, id) descending so the anchor position is unambiguous.
    ``total`` counts every matching expense regardless of the cursor.
    """
    conditions = _filters(user_id, query)
    total = db.query(Expense).filter(*conditions).count()

    q = db.query(Expense).filter(*conditions)
    if query.cursor:
        anchor = db.query(Expense).filter(
            Expense.id == query.cursor,
            Expense.user_id == user_id
        ).first()
        if not anchor:
            raise BadRequestError("Invalid cursor")
        q = q.filter(or_(
            Expense.date < anchor.date,
            and_(Expense.date == anchor.date, Expense.id < anchor.id)
        ))

    rows = q.order_by(Expense.date.desc(), Expense.id.desc()).limit(query.limit + 1).all()
    items, has_next, next_cursor = cursor_window(rows, query.limit)

    return {
        "items": items,
        "pagination": {
            "limit": query.limit,
            "total": total,
            "has_next": has_next,
            "next_cursor": next_cursor,
        },
    }


def get_expense(db: Session, user_id: str, expense_id: str) -> Expense:
    """Fetch one expense owned by the user or raise NotFoundError."""
    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.user_id == user_id
    ).first()
    if not expense:
        raise NotFoundError("Expense not found")
    return expense


def create_expense(db: Session, user_id: str, data: ExpenseCreate) -> Expense:
    """Create an expense, optionally linked to a budget and/or a goal."""
    values = data.model_dump()
    _check_links(db, user_id, values)

    expense = Expense(user_id=user_id, **values)
    db.add(expense)
    db.commit()
    db.refresh(expense)
    logger.info("Expense %s created for user %s", expense.id, user_id)

    return expense


def update_expense(db: Session, user_id: str, expense_id: str, data: ExpenseUpdate) -> Expense:
    """Apply a partial update to an expense."""
    expense = get_expense(db, user_id, expense_id)
    values = data.model_dump(exclude_unset=True)
    _check_links(db, user_id, values)

    for field, value in values.items():
        setattr(expense, field, value)

    db.commit()
    db.refresh(expense)
    logger.info("Expense %s updated for user %s", expense.id, user_id)

    return expense


def delete_expense(db: Session, user_id: str, expense_id: str) -> None:
    """Delete an expense owned by the user."""
    expense = get_expense(db, user_id, expense_id)
    db.delete(expense)
    db.commit()
    logger.info("Expense %s deleted for user %s", expense_id, user_id)
