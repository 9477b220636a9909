"""Models package - Import all models for SQLAlchemy registration."""
from tripsplit.models.trip import Trip
from tripsplit.models.friend import Friend
from tripsplit.models.category import Category
from tripsplit.models.expense import Expense, ExpenseParticipant
from tripsplit.models.snapshot import TripSnapshot

__all__ = [
    "Trip",
    "Friend",
    "Category",
    "Expense",
    "ExpenseParticipant",
    "TripSnapshot",
]
