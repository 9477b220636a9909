"""
Pydantic schemas for balances and settlement plans.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union


class BalanceItem(BaseModel):
    """Schema for one friend's balance."""
    friend_id: int
    name: str
    paid: float
    owes: float
    net_balance: float  # Positive = should receive, negative = should pay


class TransferItem(BaseModel):
    """Schema for a single payment in the settlement plan."""
    from_id: int
    from_name: str
    to_id: int
    to_name: str
    amount: float


class SettlementSummary(BaseModel):
    """Schema for a trip's settlement."""
    trip_id: int
    currency: str
    total_expenses: float
    participant_count: int
    balances: List[BalanceItem]
    transactions: List[TransferItem]
    summary: str


class ParticipantInput(BaseModel):
    """Participant for a stateless settlement calculation."""
    id: Union[int, str]
    name: Optional[str] = None


class ExpenseInput(BaseModel):
    """Expense for a stateless settlement calculation."""
    id: Optional[Union[int, str]] = None
    amount: float = Field(gt=0)
    payer_id: Optional[Union[int, str]] = None
    participant_ids: List[Union[int, str]] = Field(min_length=1)


class CalculateRequest(BaseModel):
    """Schema for a stateless settlement calculation."""
    participants: List[ParticipantInput] = []
    expenses: List[ExpenseInput] = []


class BalanceResult(BaseModel):
    participant_id: Union[int, str]
    paid: float
    owes: float
    net_balance: float


class TransactionResult(BaseModel):
    from_id: Union[int, str]
    to_id: Union[int, str]
    amount: float


class CalculateResponse(BaseModel):
    """Schema for a stateless settlement calculation result."""
    balances: List[BalanceResult]
    transactions: List[TransactionResult]
