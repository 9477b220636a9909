"""
Friend management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripsplit.db.session import get_db
from tripsplit.models.friend import Friend
from tripsplit.schemas.friend import FriendCreate, FriendUpdate, FriendResponse
from tripsplit.services.expense_service import remove_friend
from tripsplit.api.routes.trips import check_trip_exists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}/friends", tags=["friends"])


def get_friend_or_404(trip_id: int, friend_id: int, db: Session) -> Friend:
    friend = db.query(Friend).filter(
        Friend.id == friend_id,
        Friend.trip_id == trip_id
    ).first()
    if not friend:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Friend not found"
        )
    return friend


@router.post("", response_model=FriendResponse, status_code=status.HTTP_201_CREATED)
async def add_friend(
    trip_id: int,
    friend_data: FriendCreate,
    db: Session = Depends(get_db)
):
    """Add a friend to a trip."""
    check_trip_exists(trip_id, db)
    
    friend = Friend(trip_id=trip_id, **friend_data.model_dump())
    db.add(friend)
    db.commit()
    db.refresh(friend)
    logger.info(f"Added friend {friend.id} to trip {trip_id}")
    
    return friend


@router.get("", response_model=List[FriendResponse])
async def list_friends(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """List friends on a trip."""
    check_trip_exists(trip_id, db)
    return db.query(Friend).filter(Friend.trip_id == trip_id).order_by(Friend.id).all()


@router.patch("/{friend_id}", response_model=FriendResponse)
async def update_friend(
    trip_id: int,
    friend_id: int,
    friend_data: FriendUpdate,
    db: Session = Depends(get_db)
):
    """Update a friend's name or preferences."""
    friend = get_friend_or_404(trip_id, friend_id, db)
    
    for field, value in friend_data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(friend, field, value)
    
    db.commit()
    db.refresh(friend)
    return friend


@router.delete("/{friend_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_friend(
    trip_id: int,
    friend_id: int,
    db: Session = Depends(get_db)
):
    """Remove a friend and detach them from all expenses."""
    friend = get_friend_or_404(trip_id, friend_id, db)
    remove_friend(friend, db)
