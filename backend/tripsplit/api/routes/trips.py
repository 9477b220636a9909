"""
Trip management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.trip import Trip
from tripsplit.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripDetailResponse,
    SnapshotCreate, SnapshotResponse
)
from tripsplit.services import trip_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


def check_trip_exists(trip_id: int, db: Session) -> Trip:
    """Get a trip or raise 404."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    return trip


def snapshot_response(snapshot) -> SnapshotResponse:
    return SnapshotResponse(
        id=snapshot.id,
        name=snapshot.name,
        currency=snapshot.currency,
        friend_count=len(snapshot.data.get("friends", [])),
        expense_count=len(snapshot.data.get("expenses", [])),
        created_at=snapshot.created_at
    )


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    db: Session = Depends(get_db)
):
    """Create a new trip with the default categories."""
    return trip_service.create_trip(trip_data.name, trip_data.currency, db)


@router.get("", response_model=List[TripResponse])
async def list_trips(db: Session = Depends(get_db)):
    """List all trips."""
    return db.query(Trip).order_by(Trip.id).all()


@router.get("/{trip_id}", response_model=TripDetailResponse)
async def get_trip(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Get trip details with friends and categories."""
    return check_trip_exists(trip_id, db)


@router.patch("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    db: Session = Depends(get_db)
):
    """Rename a trip or change its currency."""
    trip = check_trip_exists(trip_id, db)
    
    for field, value in trip_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(trip, field, value)
    
    db.commit()
    db.refresh(trip)
    return trip


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trip(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Delete a trip with all its friends, expenses and categories."""
    trip = check_trip_exists(trip_id, db)
    db.delete(trip)
    db.commit()
    logger.info(f"Deleted trip {trip_id}")


@router.delete("/{trip_id}/data", status_code=status.HTTP_204_NO_CONTENT)
async def clear_trip(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Clear friends and expenses of a trip. Saved history is kept."""
    trip = check_trip_exists(trip_id, db)
    trip_service.clear_trip_data(trip, db)


@router.post("/{trip_id}/snapshots", response_model=SnapshotResponse, status_code=status.HTTP_201_CREATED)
async def save_trip_to_history(
    trip_id: int,
    snapshot_data: SnapshotCreate,
    db: Session = Depends(get_db)
):
    """Save the current state of a trip to history."""
    trip = check_trip_exists(trip_id, db)
    snapshot = trip_service.save_snapshot(trip, snapshot_data.name.strip(), db)
    return snapshot_response(snapshot)
