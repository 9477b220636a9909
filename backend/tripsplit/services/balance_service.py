"""
Balance aggregation for shared trip expenses.

Every expense is split evenly between its participants. A participant's
net balance is what they paid minus their share of what they consumed;
positive means the group owes them, negative means they owe the group.
"""
import logging
from typing import Dict, Hashable, Iterable, List, Optional

logger = logging.getLogger(__name__)


class InvalidExpenseError(ValueError):
    """Raised when an expense cannot be split between its participants."""


class Balance:
    """Paid, owed and net amounts for a single participant."""
    def __init__(self, participant_id: Hashable, paid: float = 0.0, owes: float = 0.0):
        self.participant_id = participant_id
        self.paid = paid
        self.owes = owes
        self.net_balance = paid - owes

    def copy(self) -> "Balance":
        clone = Balance(self.participant_id, self.paid, self.owes)
        clone.net_balance = self.net_balance
        return clone

    def __eq__(self, other):
        if not isinstance(other, Balance):
            return NotImplemented
        return (
            self.participant_id == other.participant_id
            and self.paid == other.paid
            and self.owes == other.owes
            and self.net_balance == other.net_balance
        )

    def __repr__(self):
        return (
            f"Balance(participant_id={self.participant_id!r}, paid={self.paid}, "
            f"owes={self.owes}, net_balance={self.net_balance})"
        )


def validate_amount(amount) -> None:
    if amount is None or amount <= 0:
        raise InvalidExpenseError("Expense amount must be greater than zero")


def validate_participants(participant_ids: Optional[Iterable]) -> List:
    """Return the de-duplicated participant ids in their original order."""
    unique_ids = list(dict.fromkeys(participant_ids or []))
    if not unique_ids:
        raise InvalidExpenseError("Expense must have at least one participant")
    return unique_ids


def validate_expense(amount, participant_ids: Optional[Iterable]) -> List:
    """
    Validate that an expense can be split.
    Returns the de-duplicated participant ids in their original order.
    """
    validate_amount(amount)
    return validate_participants(participant_ids)


def compute_balances(participants: Iterable, expenses: Iterable) -> Dict[Hashable, Balance]:
    """
    Reduce participants and expenses to one Balance per participant.

    Participants need an ``id``; expenses need ``amount``, ``payer_id`` and
    ``participant_ids``. Payer or participant ids that match no participant
    are ignored, so expenses recorded before a friend was removed still
    count for everybody else. Expenses with no participants are skipped.
    """
    balances: Dict[Hashable, Balance] = {}
    for participant in participants:
        balances[participant.id] = Balance(participant.id)

    for expense in expenses:
        amount = float(expense.amount)
        participant_ids = list(dict.fromkeys(expense.participant_ids or []))
        if not participant_ids:
            logger.warning(
                f"Skipping expense {getattr(expense, 'id', None)!r}: it has no participants"
            )
            continue

        payer = balances.get(expense.payer_id)
        if payer is not None:
            payer.paid += amount

        share_per_person = amount / len(participant_ids)
        for participant_id in participant_ids:
            balance = balances.get(participant_id)
            if balance is not None:
                balance.owes += share_per_person

    for balance in balances.values():
        balance.net_balance = balance.paid - balance.owes

    return balances
