"""
Expense model for tracking shared spending.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event split evenly."""
    __tablename__ = "expenses"
    
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    payer_id = Column(Integer, ForeignKey("friends.id"), nullable=True, index=True)  # NULL once the payer is removed
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)
    
    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    payer = relationship("Friend", foreign_keys=[payer_id], back_populates="expenses_paid")
    participants = relationship("ExpenseParticipant", back_populates="expense", cascade="all, delete-orphan")
    
    @property
    def participant_ids(self):
        return [p.friend_id for p in self.participants]


class ExpenseParticipant(BaseModel):
    """Junction table for Expense and Friend many-to-many relationship."""
    __tablename__ = "expense_participants"
    
    expense_id = Column(Integer, ForeignKey("expenses.id"), nullable=False, index=True)
    friend_id = Column(Integer, ForeignKey("friends.id"), nullable=False, index=True)
    
    # Relationships
    expense = relationship("Expense", back_populates="participants")
    friend = relationship("Friend", back_populates="expense_participants")
