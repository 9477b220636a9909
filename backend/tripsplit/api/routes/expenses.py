"""
Expense management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from tripsplit.db.session import get_db
from tripsplit.models.expense import Expense
from tripsplit.models.friend import Friend
from tripsplit.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from tripsplit.schemas.friend import FriendResponse
from tripsplit.services import expense_service
from tripsplit.services.eligibility_service import get_eligible_friends
from tripsplit.api.routes.trips import check_trip_exists

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips/{trip_id}", tags=["expenses"])


def get_expense_or_404(trip_id: int, expense_id: int, db: Session) -> Expense:
    expense = db.query(Expense).options(
        selectinload(Expense.participants)
    ).filter(
        Expense.id == expense_id,
        Expense.trip_id == trip_id
    ).first()
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return expense


@router.post("/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    trip_id: int,
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db)
):
    """Record a new expense shared evenly by its participants."""
    check_trip_exists(trip_id, db)
    
    try:
        expense = expense_service.create_expense_with_participants(
            trip_id=trip_id,
            payer_id=expense_data.payer_id,
            expense_date=expense_data.date,
            amount=expense_data.amount,
            participant_ids=expense_data.participant_ids,
            description=expense_data.description,
            category=expense_data.category,
            db=db
        )
    except expense_service.ExpenseReferenceError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    
    return expense


@router.get("/expenses", response_model=List[ExpenseResponse])
async def list_expenses(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """List expenses of a trip, most recent date first."""
    check_trip_exists(trip_id, db)
    
    return db.query(Expense).options(
        selectinload(Expense.participants)
    ).filter(
        Expense.trip_id == trip_id
    ).order_by(Expense.date.desc(), Expense.id.desc()).all()


@router.patch("/expenses/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    trip_id: int,
    expense_id: int,
    expense_data: ExpenseUpdate,
    db: Session = Depends(get_db)
):
    """Update an expense."""
    expense = get_expense_or_404(trip_id, expense_id, db)
    
    try:
        expense = expense_service.update_expense(
            expense,
            db,
            payer_id=expense_data.payer_id,
            expense_date=expense_data.date,
            amount=expense_data.amount,
            participant_ids=expense_data.participant_ids,
            description=expense_data.description,
            category=expense_data.category
        )
    except expense_service.ExpenseReferenceError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    
    return expense


@router.delete("/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(
    trip_id: int,
    expense_id: int,
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    expense = get_expense_or_404(trip_id, expense_id, db)
    db.delete(expense)
    db.commit()
    logger.info(f"Deleted expense {expense_id} from trip {trip_id}")


@router.get("/eligible", response_model=List[FriendResponse])
async def list_eligible_friends(
    trip_id: int,
    category: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List friends who may share an expense of the given category."""
    check_trip_exists(trip_id, db)
    
    friends = db.query(Friend).filter(Friend.trip_id == trip_id).order_by(Friend.id).all()
    return get_eligible_friends(friends, category)
