"""
Pydantic schemas for Friend entity.
"""
from pydantic import BaseModel, Field
from typing import Optional


class FriendBase(BaseModel):
    """Base friend schema."""
    name: str = Field(min_length=1, max_length=100)
    is_vegetarian: bool = False
    is_drinker: bool = False


class FriendCreate(FriendBase):
    """Schema for adding a friend to a trip."""
    pass


class FriendUpdate(BaseModel):
    """Schema for friend update."""
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    is_vegetarian: Optional[bool] = None
    is_drinker: Optional[bool] = None


class FriendResponse(FriendBase):
    """Schema for friend response."""
    id: int
    trip_id: int
    
    class Config:
        from_attributes = True
