"""
Saved trip history routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.snapshot import TripSnapshot
from tripsplit.schemas.trip import SnapshotResponse, TripDetailResponse
from tripsplit.services import trip_service
from tripsplit.api.routes.trips import snapshot_response

router = APIRouter(prefix="/history", tags=["history"])


def get_snapshot_or_404(snapshot_id: int, db: Session) -> TripSnapshot:
    snapshot = db.query(TripSnapshot).filter(TripSnapshot.id == snapshot_id).first()
    if not snapshot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Saved trip not found"
        )
    return snapshot


@router.get("", response_model=List[SnapshotResponse])
async def list_history(db: Session = Depends(get_db)):
    """List saved trips, newest first."""
    snapshots = db.query(TripSnapshot).order_by(
        TripSnapshot.created_at.desc(), TripSnapshot.id.desc()
    ).all()
    return [snapshot_response(s) for s in snapshots]


@router.post("/{snapshot_id}/restore", response_model=TripDetailResponse, status_code=status.HTTP_201_CREATED)
async def restore_trip(
    snapshot_id: int,
    db: Session = Depends(get_db)
):
    """Load a saved trip back as a new trip."""
    snapshot = get_snapshot_or_404(snapshot_id, db)
    return trip_service.restore_snapshot(snapshot, db)


@router.delete("/{snapshot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_saved_trip(
    snapshot_id: int,
    db: Session = Depends(get_db)
):
    """Remove a saved trip from history."""
    snapshot = get_snapshot_or_404(snapshot_id, db)
    db.delete(snapshot)
    db.commit()
