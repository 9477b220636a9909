"""
Friend model for trip participants.
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel


class Friend(BaseModel):
    """A person sharing the trip. Preferences only drive expense eligibility."""
    __tablename__ = "friends"
    
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    is_vegetarian = Column(Boolean, default=False, nullable=False)
    is_drinker = Column(Boolean, default=False, nullable=False)
    
    # Relationships
    trip = relationship("Trip", back_populates="friends")
    expenses_paid = relationship("Expense", foreign_keys="Expense.payer_id", back_populates="payer")
    expense_participants = relationship("ExpenseParticipant", back_populates="friend", cascade="all, delete-orphan")
