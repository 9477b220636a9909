"""
Expense service for expense-related business logic.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from tripsplit.models.category import Category
from tripsplit.models.expense import Expense, ExpenseParticipant
from tripsplit.models.friend import Friend
from tripsplit.services.balance_service import (
    validate_amount, validate_expense, validate_participants
)
from tripsplit.services.eligibility_service import is_eligible

logger = logging.getLogger(__name__)


class ExpenseReferenceError(ValueError):
    """Raised when an expense points at a friend or category outside its trip."""


def check_expense_references(
    trip_id: int,
    payer_id: Optional[int],
    participant_ids: List[int],
    category: Optional[str],
    db: Session,
    check_payer: bool = True,
    check_category: bool = True,
    check_eligibility: bool = True
) -> None:
    """Check payer, participants and category all belong to the trip."""
    friends = {
        f.id: f for f in db.query(Friend).filter(Friend.trip_id == trip_id).all()
    }
    if check_payer and payer_id not in friends:
        raise ExpenseReferenceError(f"Payer {payer_id} is not a friend on this trip")

    unknown = [pid for pid in participant_ids if pid not in friends]
    if unknown:
        raise ExpenseReferenceError(f"Participants {unknown} are not friends on this trip")

    if check_category and category is not None:
        exists = db.query(Category).filter(
            Category.trip_id == trip_id,
            Category.slug == category
        ).first()
        if not exists:
            raise ExpenseReferenceError(f"Unknown category '{category}'")

    if not check_eligibility:
        return
    ineligible = [pid for pid in participant_ids if not is_eligible(friends[pid], category)]
    if ineligible:
        raise ExpenseReferenceError(
            f"Participants {ineligible} are not eligible for category '{category}'"
        )


def create_expense_with_participants(
    trip_id: int,
    payer_id: int,
    expense_date: date,
    amount: Decimal,
    participant_ids: list,
    description: str = None,
    category: str = None,
    db: Session = None
) -> Expense:
    """Create an expense shared evenly by its participants."""
    participant_ids = validate_expense(amount, participant_ids)
    check_expense_references(trip_id, payer_id, participant_ids, category, db)

    expense = Expense(
        trip_id=trip_id,
        payer_id=payer_id,
        date=expense_date,
        amount=amount,
        description=description,
        category=category
    )
    db.add(expense)
    db.flush()

    for friend_id in participant_ids:
        db.add(ExpenseParticipant(expense_id=expense.id, friend_id=friend_id))

    db.commit()
    db.refresh(expense)
    logger.info(f"Created expense {expense.id} of {amount} for trip {trip_id}")

    return expense


def update_expense(
    expense: Expense,
    db: Session,
    payer_id: Optional[int] = None,
    expense_date: Optional[date] = None,
    amount: Optional[Decimal] = None,
    participant_ids: Optional[list] = None,
    description: Optional[str] = None,
    category: Optional[str] = None
) -> Expense:
    """
    Update an expense, replacing its participants if new ones are given.
    Only the supplied fields are validated, so an expense whose payer was
    removed can still be edited.
    """
    if amount is not None:
        validate_amount(amount)
    if participant_ids is not None:
        participant_ids = validate_participants(participant_ids)

    new_participants = participant_ids if participant_ids is not None else expense.participant_ids
    new_category = category if category is not None else expense.category

    check_expense_references(
        expense.trip_id,
        payer_id,
        new_participants,
        new_category,
        db,
        check_payer=payer_id is not None,
        check_category=category is not None,
        check_eligibility=participant_ids is not None or category is not None
    )

    if amount is not None:
        expense.amount = amount
    if payer_id is not None:
        expense.payer_id = payer_id
    expense.category = new_category
    if expense_date is not None:
        expense.date = expense_date
    if description is not None:
        expense.description = description

    if participant_ids is not None:
        # Old participant rows are removed by the delete-orphan cascade
        expense.participants = [
            ExpenseParticipant(friend_id=friend_id) for friend_id in participant_ids
        ]

    db.commit()
    db.refresh(expense)

    return expense


def remove_friend(friend: Friend, db: Session) -> None:
    """
    Delete a friend and detach them from the trip's expenses.
    Expenses they paid keep their amount but lose their payer.
    """
    friend_id, trip_id = friend.id, friend.trip_id
    # Deleting the friend nulls payer_id on expenses_paid and
    # cascades to their expense_participants rows
    db.delete(friend)
    db.commit()
    logger.info(f"Removed friend {friend_id} from trip {trip_id}")
