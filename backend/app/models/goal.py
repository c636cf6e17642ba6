"""
Goal model: a savings target tracked against linked expenses.
"""
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.models.trackable import TrackableMixin


class Goal(TrackableMixin, BaseModel):
    """Savings goal owned by a single user."""
    __tablename__ = "goals"

    # Relationships
    user = relationship("User", back_populates="goals")
    expenses = relationship("Expense", back_populates="goal", passive_deletes=True)
