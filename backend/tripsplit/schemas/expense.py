"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date as dt_date, datetime
from decimal import Decimal


def _unique_ids(v: Optional[List[int]]) -> Optional[List[int]]:
    if v is None:
        return v
    v = list(dict.fromkeys(v))
    if not v:
        raise ValueError("At least one participant is required")
    return v


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    description: Optional[str] = None
    amount: Decimal = Field(gt=0, max_digits=15, decimal_places=2)
    payer_id: int
    participant_ids: List[int] = Field(min_length=1)  # Friend IDs who share this expense
    category: Optional[str] = None
    date: dt_date = Field(default_factory=dt_date.today)

    @field_validator("participant_ids")
    @classmethod
    def validate_participants(cls, v):
        return _unique_ids(v)


class ExpenseUpdate(BaseModel):
    """Schema for expense update."""
    description: Optional[str] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, max_digits=15, decimal_places=2)
    payer_id: Optional[int] = None
    participant_ids: Optional[List[int]] = None
    category: Optional[str] = None
    date: Optional[dt_date] = None

    @field_validator("participant_ids")
    @classmethod
    def validate_participants(cls, v):
        return _unique_ids(v)


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    trip_id: int
    description: Optional[str] = None
    amount: Decimal
    payer_id: Optional[int] = None  # None once the payer has been removed
    participant_ids: List[int] = []
    category: Optional[str] = None
    date: dt_date
    created_at: datetime
    updated_at: datetime
    
    class Config:
        from_attributes = True
