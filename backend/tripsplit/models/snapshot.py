"""
Trip snapshot model for saved trip history.
"""
from sqlalchemy import Column, String, JSON
from tripsplit.db.base import BaseModel


class TripSnapshot(BaseModel):
    """Frozen copy of a trip's friends, expenses and categories."""
    __tablename__ = "trip_snapshots"
    
    name = Column(String(200), nullable=False)
    currency = Column(String(3), nullable=False)
    data = Column(JSON, nullable=False)  # Stores friends, expenses, categories
