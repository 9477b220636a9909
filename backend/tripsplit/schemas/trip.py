"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from tripsplit.core.config import settings
from tripsplit.schemas.friend import FriendResponse
from tripsplit.schemas.category import CategoryResponse


def _check_currency(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.upper()
    if v not in settings.SUPPORTED_CURRENCIES:
        raise ValueError(f"Unsupported currency '{v}'")
    return v


class TripBase(BaseModel):
    """Base trip schema."""
    name: str = Field(min_length=1, max_length=200)
    currency: str = settings.DEFAULT_CURRENCY

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        return _check_currency(v)


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class TripUpdate(BaseModel):
    """Schema for trip update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    currency: Optional[str] = None

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        return _check_currency(v)


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True


class TripDetailResponse(TripResponse):
    """Schema for detailed trip response with friends and categories."""
    friends: List[FriendResponse] = []
    categories: List[CategoryResponse] = []


class SnapshotCreate(BaseModel):
    """Schema for saving a trip to history."""
    name: str = Field(min_length=1, max_length=200)


class SnapshotResponse(BaseModel):
    """Schema for a saved trip in history."""
    id: int
    name: str
    currency: str
    friend_count: int
    expense_count: int
    created_at: datetime
