"""
Pydantic schemas for the dashboard statistics.
"""
from typing import List
from app.schemas.common import CamelModel, Money


class CategoryTotal(CamelModel):
    """Summed spending for one category."""
    category: str
    amount: Money
    count: int


class ExpenseStats(CamelModel):
    total: int  # Number of expenses
    total_amount: Money
    this_month: Money
    last_month: Money
    month_over_month_change: float  # Percent change vs. last month, 0 if last month is empty
    by_category: List[CategoryTotal] = []


class GoalStats(CamelModel):
    total: int
    completed: int
    total_target_amount: Money
    total_current_amount: Money
    average_progress: float


class DashboardStats(CamelModel):
    """Schema for dashboard statistics response."""
    expenses: ExpenseStats
    goals: GoalStats
