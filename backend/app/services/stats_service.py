"""
Dashboard statistics over a user's expenses and goals.
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.utils import utcnow, month_start
from app.models.expense import Expense
from app.models.goal import Goal
from app.services.metrics_service import capped_percentage, round_percentage, to_decimal
from app.services.trackable_service import GOAL, current_amounts


def _sum_between(db: Session, user_id: str, start: datetime, end: datetime) -> Decimal:
    total = db.query(func.sum(Expense.amount)).filter(
        Expense.user_id == user_id,
        Expense.date >= start,
        Expense.date < end
    ).scalar()
    return to_decimal(total)


def month_over_month_change(this_month: Decimal, last_month: Decimal) -> Decimal:
    """Percent change from last month; 0 when last month had no spending."""
    if last_month == 0:
        return Decimal(0)
    return round_percentage((this_month - last_month) / last_month * 100)


def expense_stats(db: Session, user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Totals, calendar-month sums and top categories."""
    now = now or utcnow()
    this_month_start = month_start(now)
    next_month_start = month_start(now, months_back=-1)
    last_month_start = month_start(now, months_back=1)

    count, total_amount = db.query(func.count(Expense.id), func.sum(Expense.amount)).filter(
        Expense.user_id == user_id
    ).one()

    this_month = _sum_between(db, user_id, this_month_start, next_month_start)
    last_month = _sum_between(db, user_id, last_month_start, this_month_start)

    category_total = func.sum(Expense.amount).label("amount")
    by_category = db.query(
        Expense.category,
        category_total,
        func.count(Expense.id)
    ).filter(
        Expense.user_id == user_id
    ).group_by(Expense.category).order_by(category_total.desc()).limit(settings.STATS_TOP_CATEGORIES).all()

    return {
        "total": count,
        "total_amount": to_decimal(total_amount),
        "this_month": this_month,
        "last_month": last_month,
        "month_over_month_change": float(month_over_month_change(this_month, last_month)),
        "by_category": [
            {"category": category, "amount": to_decimal(amount), "count": n}
            for category, amount, n in by_category
        ],
    }


def goal_stats(db: Session, user_id: str) -> Dict[str, Any]:
    """Goal counts, aggregate amounts and average capped progress."""
    goals = db.query(Goal).filter(Goal.user_id == user_id).all()
    amounts = current_amounts(db, GOAL, [g.id for g in goals])

    total_target = Decimal(0)
    total_current = Decimal(0)
    total_progress = Decimal(0)
    for goal in goals:
        current = amounts.get(goal.id, Decimal(0))
        total_target += to_decimal(goal.target_amount)
        total_current += current
        total_progress += capped_percentage(goal.target_amount, current)

    average = total_progress / len(goals) if goals else Decimal(0)

    return {
        "total": len(goals),
        "completed": sum(1 for g in goals if g.is_completed),
        "total_target_amount": total_target,
        "total_current_amount": total_current,
        "average_progress": float(round_percentage(average)),
    }


def dashboard_stats(db: Session, user_id: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Everything shown on the dashboard."""
    return {
        "expenses": expense_stats(db, user_id, now),
        "goals": goal_stats(db, user_id),
    }
