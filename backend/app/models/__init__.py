"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.budget import Budget
from app.models.goal import Goal
from app.models.expense import Expense, RecurrenceType

__all__ = [
    "User",
    "Budget",
    "Goal",
    "Expense",
    "RecurrenceType",
]
