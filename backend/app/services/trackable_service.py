"""
Budget and goal business logic.

Budgets and goals are the same target-tracking entity with different names:
each kind is described by a ``TrackableKind`` and every operation here takes
one. All queries are scoped to the owning user; a record owned by someone
else is reported exactly like a missing one.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.core.errors import NotFoundError
from app.core.utils import utcnow
from app.models.budget import Budget
from app.models.expense import Expense
from app.models.goal import Goal
from app.schemas.trackable import TrackableCreate, TrackableQuery, TrackableUpdate
from app.services.metrics_service import calculate_metrics, sum_amounts, to_decimal
from app.services.pagination import offset_pagination, page_offset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackableKind:
    """One configured variant of the target-tracking entity."""
    model: type
    label: str
    link_field: str  # Expense column pointing at this kind
    percentage_field: str  # Name of the progress field in responses

    @property
    def link_column(self):
        return getattr(Expense, self.link_field)


BUDGET = TrackableKind(model=Budget, label="Budget", link_field="budget_id", percentage_field="spent_percentage")
GOAL = TrackableKind(model=Goal, label="Goal", link_field="goal_id", percentage_field="progress_percentage")


def current_amounts(db: Session, kind: TrackableKind, ids: Sequence[str]) -> Dict[str, Decimal]:
    """Live sum of linked expense amounts per trackable id (missing ids spent nothing)."""
    if not ids:
        return {}
    rows = db.query(kind.link_column, func.sum(Expense.amount)).filter(
        kind.link_column.in_(list(ids))
    ).group_by(kind.link_column).all()
    return {link_id: to_decimal(total) for link_id, total in rows}


def build_payload(
    kind: TrackableKind,
    record,
    current_amount: Decimal,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Merge a stored record with its derived metrics."""
    metrics = calculate_metrics(record.target_amount, current_amount, record.deadline, now)
    return {
        "id": record.id,
        "name": record.name,
        "description": record.description,
        "target_amount": to_decimal(record.target_amount),
        "current_amount": to_decimal(current_amount),
        "deadline": record.deadline,
        "is_completed": record.is_completed,
        "user_id": record.user_id,
        "created_at": record.created_at,
        "updated_at": record.updated_at,
        kind.percentage_field: float(metrics.percentage),
        "remaining_amount": metrics.remaining_amount,
        "days_remaining": metrics.days_remaining,
        "is_overdue": metrics.is_overdue,
    }


def _with_live_amount(db: Session, kind: TrackableKind, record) -> Dict[str, Any]:
    amount = current_amounts(db, kind, [record.id]).get(record.id, Decimal(0))
    return build_payload(kind, record, amount)


def get_trackable(db: Session, kind: TrackableKind, user_id: str, trackable_id: str):
    """Fetch one record owned by the user or raise NotFoundError."""
    record = db.query(kind.model).filter(
        kind.model.id == trackable_id,
        kind.model.user_id == user_id
    ).first()
    if not record:
        raise NotFoundError(f"{kind.label} not found")
    return record


def list_trackables(db: Session, kind: TrackableKind, user_id: str, query: TrackableQuery) -> Dict[str, Any]:
    """Filtered, newest-first page of records with metrics and pagination info."""
    model = kind.model
    q = db.query(model).filter(model.user_id == user_id)

    if query.is_completed is not None:
        q = q.filter(model.is_completed == query.is_completed)
    if query.has_deadline is not None:
        q = q.filter(model.deadline.isnot(None) if query.has_deadline else model.deadline.is_(None))

    total = q.count()
    records = q.order_by(model.created_at.desc()).offset(
        page_offset(query.page, query.limit)
    ).limit(query.limit).all()

    amounts = current_amounts(db, kind, [r.id for r in records])
    now = utcnow()
    items = [build_payload(kind, r, amounts.get(r.id, Decimal(0)), now) for r in records]

    return {
        "items": items,
        "pagination": offset_pagination(query.page, query.limit, total),
    }


def trackable_detail(db: Session, kind: TrackableKind, user_id: str, trackable_id: str) -> Dict[str, Any]:
    """One record with metrics and its linked expenses, newest first."""
    record = get_trackable(db, kind, user_id, trackable_id)
    expenses: List[Expense] = db.query(Expense).filter(
        kind.link_column == record.id
    ).order_by(Expense.date.desc(), Expense.id.desc()).all()

    payload = build_payload(kind, record, sum_amounts(e.amount for e in expenses))
    payload["expenses"] = [
        {
            "id": e.id,
            "description": e.description,
            "amount": e.amount,
            "category": e.category,
            "date": e.date,
        }
        for e in expenses
    ]
    return payload


def create_trackable(db: Session, kind: TrackableKind, user_id: str, data: TrackableCreate) -> Dict[str, Any]:
    """Create a record; it starts with no linked spending."""
    record = kind.model(
        user_id=user_id,
        name=data.name,
        description=data.description,
        target_amount=data.target_amount,
        deadline=data.deadline,
        is_completed=data.is_completed,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("%s %s created for user %s", kind.label, record.id, user_id)

    return build_payload(kind, record, Decimal(0))


def update_trackable(
    db: Session,
    kind: TrackableKind,
    user_id: str,
    trackable_id: str,
    data: TrackableUpdate,
) -> Dict[str, Any]:
    """Apply a partial update; fields absent from the request keep their value."""
    record = get_trackable(db, kind, user_id, trackable_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(record, field, value)

    db.commit()
    db.refresh(record)
    logger.info("%s %s updated for user %s", kind.label, record.id, user_id)

    return _with_live_amount(db, kind, record)


def set_completed(db: Session, kind: TrackableKind, user_id: str, trackable_id: str, is_completed: bool) -> Dict[str, Any]:
    """Mark a record completed or not completed."""
    record = get_trackable(db, kind, user_id, trackable_id)
    record.is_completed = is_completed
    db.commit()
    db.refresh(record)
    logger.info("%s %s marked completed=%s", kind.label, record.id, is_completed)

    return _with_live_amount(db, kind, record)


def delete_trackable(db: Session, kind: TrackableKind, user_id: str, trackable_id: str) -> None:
    """Delete a record; its expenses are kept and unlinked."""
    record = get_trackable(db, kind, user_id, trackable_id)

    unlinked = db.query(Expense).filter(
        kind.link_column == record.id
    ).update({kind.link_column: None}, synchronize_session=False)

    db.delete(record)
    db.commit()
    logger.info("%s %s deleted for user %s (%d expenses unlinked)", kind.label, trackable_id, user_id, unlinked)


def owns_trackable(db: Session, kind: TrackableKind, user_id: str, trackable_id: str) -> bool:
    """Whether the user owns a record with this id."""
    return db.query(kind.model.id).filter(
        kind.model.id == trackable_id,
        kind.model.user_id == user_id
    ).first() is not None
