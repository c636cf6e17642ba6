"""
Budget model: a spending limit tracked against linked expenses.
"""
from sqlalchemy.orm import relationship
from app.db.base import BaseModel
from app.models.trackable import TrackableMixin


class Budget(TrackableMixin, BaseModel):
    """Budget owned by a single user."""
    __tablename__ = "budgets"

    # Relationships
    user = relationship("User", back_populates="budgets")
    expenses = relationship("Expense", back_populates="budget", passive_deletes=True)
