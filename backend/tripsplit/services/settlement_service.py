"""
Settlement service for minimizing the payments that settle a trip.
"""
import logging
from collections import deque
from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Union
from sqlalchemy.orm import Session, selectinload
from tripsplit.core.utils import EPSILON, is_effectively_zero, is_zero_sum
from tripsplit.models.expense import Expense
from tripsplit.models.trip import Trip
from tripsplit.services.balance_service import Balance, compute_balances

logger = logging.getLogger(__name__)


class Transaction:
    """Represents a single payment from a debtor to a creditor."""
    def __init__(self, from_id: Hashable, to_id: Hashable, amount: float):
        self.from_id = from_id
        self.to_id = to_id
        self.amount = amount

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return (
            self.from_id == other.from_id
            and self.to_id == other.to_id
            and self.amount == other.amount
        )

    def __repr__(self):
        return f"Transaction(from_id={self.from_id!r}, to_id={self.to_id!r}, amount={self.amount})"


def compute_settlement(
    balances: Union[Mapping[Hashable, Balance], Iterable[Balance]],
    tolerance: float = EPSILON
) -> List[Transaction]:
    """
    Minimize the number of payments needed to settle all balances.
    Uses a greedy algorithm: the biggest debtor pays the biggest creditor
    until one of them is settled.
    """
    if isinstance(balances, Mapping):
        balances = balances.values()

    # Work on [participant_id, net_balance] pairs so the input is never mutated
    entries = [[b.participant_id, b.net_balance] for b in balances]
    if not is_zero_sum((net for _, net in entries), tolerance):
        logger.warning("Balances do not sum to zero; the settlement plan will not clear them")

    entries.sort(key=lambda entry: entry[1])
    working = deque(entries)
    transactions = []

    while len(working) > 1:
        debtor = working[0]
        creditor = working[-1]

        if is_effectively_zero(debtor[1], tolerance) and creditor[1] < tolerance:
            working.popleft()
            working.pop()
            continue

        amount = min(abs(debtor[1]), creditor[1])
        if amount > tolerance:
            transactions.append(Transaction(debtor[0], creditor[0], amount))

        debtor[1] += amount
        creditor[1] -= amount

        if is_effectively_zero(debtor[1], tolerance):
            working.popleft()
        if creditor[1] < tolerance:
            working.pop()

    if working and not is_effectively_zero(working[0][1], tolerance):
        logger.warning(f"Discarding unsettled leftover balance {working[0][1]} for {working[0][0]!r}")

    logger.debug(f"Settlement plan has {len(transactions)} transaction(s)")
    return transactions


def apply_settlement(
    balances: Union[Mapping[Hashable, Balance], Iterable[Balance]],
    transactions: Iterable[Transaction]
) -> Dict[Hashable, float]:
    """Return the net balances left after every transaction is paid."""
    if isinstance(balances, Mapping):
        balances = balances.values()
    remaining = {b.participant_id: b.net_balance for b in balances}
    for transaction in transactions:
        remaining[transaction.from_id] += transaction.amount
        remaining[transaction.to_id] -= transaction.amount
    return remaining


def load_trip(trip_id: int, db: Session) -> Optional[Trip]:
    """Load a trip with everything needed to settle it, or None."""
    return db.query(Trip).options(
        selectinload(Trip.friends),
        selectinload(Trip.expenses).selectinload(Expense.participants)
    ).filter(Trip.id == trip_id).first()


def calculate_settlement(trip: Trip) -> dict:
    """
    Calculate balances and the settlement plan for a stored trip.
    Nothing is persisted; the result is rebuilt on every call.
    """
    balances = compute_balances(trip.friends, trip.expenses)
    transactions = compute_settlement(balances)
    names = {friend.id: friend.name for friend in trip.friends}

    return {
        "trip_id": trip.id,
        "currency": trip.currency,
        "total_expenses": float(sum(expense.amount for expense in trip.expenses)),
        "participant_count": len(balances),
        "balances": [
            {
                "friend_id": b.participant_id,
                "name": names.get(b.participant_id, "Unknown"),
                "paid": b.paid,
                "owes": b.owes,
                "net_balance": b.net_balance,
            }
            for b in balances.values()
        ],
        "transactions": [
            {
                "from_id": t.from_id,
                "from_name": names.get(t.from_id, "Unknown"),
                "to_id": t.to_id,
                "to_name": names.get(t.to_id, "Unknown"),
                "amount": t.amount,
            }
            for t in transactions
        ],
    }
