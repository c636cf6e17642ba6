"""
Expense model for tracking spending.
"""
import enum
from sqlalchemy import Column, String, Numeric, DateTime, ForeignKey, Boolean, Enum as SQLEnum
from sqlalchemy.orm import relationship
from app.db.base import BaseModel


class RecurrenceType(str, enum.Enum):
    """How often a recurring expense repeats."""
    NONE = "NONE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class Expense(BaseModel):
    """Expense model representing a single spending event."""
    __tablename__ = "expenses"

    user_id = Column(String(32), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    description = Column(String(255), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    is_recurring = Column(Boolean, default=False, nullable=False)
    recurrence_type = Column(SQLEnum(RecurrenceType), default=RecurrenceType.NONE, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    # Links to a trackable; deleting the trackable unlinks instead of cascading
    budget_id = Column(String(32), ForeignKey("budgets.id", ondelete="SET NULL"), nullable=True, index=True)
    goal_id = Column(String(32), ForeignKey("goals.id", ondelete="SET NULL"), nullable=True, index=True)

    # Relationships
    user = relationship("User", back_populates="expenses")
    budget = relationship("Budget", back_populates="expenses")
    goal = relationship("Goal", back_populates="expenses")
