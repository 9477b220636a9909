"""
Trip service for trip setup, clearing and saved history.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
from tripsplit.core.config import settings
from tripsplit.models.category import Category, DEFAULT_CATEGORIES, DEFAULT_CATEGORY_SLUGS
from tripsplit.models.expense import Expense, ExpenseParticipant
from tripsplit.models.friend import Friend
from tripsplit.models.snapshot import TripSnapshot
from tripsplit.models.trip import Trip

logger = logging.getLogger(__name__)


def create_trip(name: str, currency: str, db: Session, categories: List[dict] = None) -> Trip:
    """Create a trip seeded with the default categories."""
    trip = Trip(name=name, currency=currency.upper())
    db.add(trip)
    db.flush()

    for data in categories if categories is not None else DEFAULT_CATEGORIES:
        db.add(Category(
            trip_id=trip.id,
            slug=data["slug"],
            name=data["name"],
            description=data.get("description"),
            color=data.get("color", "slate"),
            is_default=data["slug"] in DEFAULT_CATEGORY_SLUGS
        ))

    db.commit()
    db.refresh(trip)
    logger.info(f"Created trip {trip.id} '{trip.name}'")
    return trip


def clear_trip_data(trip: Trip, db: Session) -> None:
    """Remove all friends and expenses of a trip; saved history is kept."""
    trip.expenses = []
    db.flush()
    trip.friends = []
    db.commit()
    logger.info(f"Cleared friends and expenses of trip {trip.id}")


def snapshot_trip(trip: Trip) -> dict:
    """Build the JSON document stored for a saved trip."""
    return {
        "friends": [
            {
                "id": f.id,
                "name": f.name,
                "is_vegetarian": f.is_vegetarian,
                "is_drinker": f.is_drinker,
            }
            for f in trip.friends
        ],
        "expenses": [
            {
                "description": e.description,
                "amount": str(e.amount),
                "payer_id": e.payer_id,
                "category": e.category,
                "participant_ids": e.participant_ids,
                "date": e.date.isoformat(),
            }
            for e in trip.expenses
        ],
        "categories": [
            {
                "slug": c.slug,
                "name": c.name,
                "description": c.description,
                "color": c.color,
            }
            for c in trip.categories
        ],
    }


def save_snapshot(trip: Trip, name: str, db: Session) -> TripSnapshot:
    """Save a trip to history, keeping only the newest HISTORY_LIMIT entries."""
    snapshot = TripSnapshot(name=name, currency=trip.currency, data=snapshot_trip(trip))
    db.add(snapshot)
    db.flush()

    stale = db.query(TripSnapshot).order_by(
        TripSnapshot.created_at.desc(), TripSnapshot.id.desc()
    ).offset(settings.HISTORY_LIMIT).all()
    for old in stale:
        db.delete(old)

    db.commit()
    db.refresh(snapshot)
    logger.info(f"Saved trip {trip.id} to history as snapshot {snapshot.id}")
    return snapshot


def restore_snapshot(snapshot: TripSnapshot, db: Session) -> Trip:
    """Create a new trip from a saved snapshot, remapping friend ids."""
    data = snapshot.data
    trip = create_trip(snapshot.name, snapshot.currency, db, categories=data.get("categories"))

    id_map = {}
    for f in data.get("friends", []):
        friend = Friend(
            trip_id=trip.id,
            name=f["name"],
            is_vegetarian=f.get("is_vegetarian", False),
            is_drinker=f.get("is_drinker", False)
        )
        db.add(friend)
        db.flush()
        id_map[f["id"]] = friend.id

    for e in data.get("expenses", []):
        expense = Expense(
            trip_id=trip.id,
            payer_id=id_map.get(e.get("payer_id")),
            date=date.fromisoformat(e["date"]),
            amount=Decimal(e["amount"]),
            description=e.get("description"),
            category=e.get("category"),
            participants=[
                ExpenseParticipant(friend_id=id_map[pid])
                for pid in e.get("participant_ids", [])
                if pid in id_map
            ]
        )
        db.add(expense)

    db.commit()
    db.refresh(trip)
    logger.info(f"Restored snapshot {snapshot.id} as trip {trip.id}")
    return trip
