"""
Columns shared by every target-tracking entity (budgets and goals).

A trackable stores only its target; the current amount is always the live
sum of the expenses linked to it and is never persisted.
"""
from sqlalchemy import Column, String, Numeric, DateTime, Boolean, ForeignKey, Text
from sqlalchemy.orm import declared_attr


class TrackableMixin:
    """Target amount, optional deadline and completion flag owned by a user."""

    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    target_amount = Column(Numeric(12, 2), nullable=False)
    deadline = Column(DateTime, nullable=True, index=True)
    is_completed = Column(Boolean, default=False, nullable=False, index=True)

    @declared_attr
    def user_id(cls):
        return Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
