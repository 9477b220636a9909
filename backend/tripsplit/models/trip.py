"""
Trip model for group travel expense tracking.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from tripsplit.db.base import BaseModel


class Trip(BaseModel):
    """Trip model representing one group of friends sharing expenses."""
    __tablename__ = "trips"
    
    name = Column(String(200), nullable=False)
    currency = Column(String(3), nullable=False, default="INR")
    
    # Relationships
    friends = relationship("Friend", back_populates="trip", cascade="all, delete-orphan", order_by="Friend.id")
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan", order_by="Expense.id")
    categories = relationship("Category", back_populates="trip", cascade="all, delete-orphan", order_by="Category.id")
