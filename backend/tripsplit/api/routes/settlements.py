"""
Settlement routes. Settlements are recomputed on every request.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.orm import Session
from tripsplit.db.session import get_db
from tripsplit.schemas.settlement import (
    SettlementSummary, CalculateRequest, CalculateResponse,
    BalanceResult, TransactionResult
)
from tripsplit.services.balance_service import compute_balances
from tripsplit.services.settlement_service import (
    calculate_settlement, compute_settlement, load_trip
)
from tripsplit.services import export_service

router = APIRouter(prefix="/settlement", tags=["settlement"])


def get_settled_trip(trip_id: int, db: Session):
    trip = load_trip(trip_id, db)
    if not trip:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )
    return trip, calculate_settlement(trip)


@router.post("/calculate", response_model=CalculateResponse)
async def calculate(request: CalculateRequest):
    """Compute balances and a settlement plan for ad-hoc input."""
    balances = compute_balances(request.participants, request.expenses)
    transactions = compute_settlement(balances)
    
    return CalculateResponse(
        balances=[
            BalanceResult(
                participant_id=b.participant_id,
                paid=b.paid,
                owes=b.owes,
                net_balance=b.net_balance
            )
            for b in balances.values()
        ],
        transactions=[
            TransactionResult(from_id=t.from_id, to_id=t.to_id, amount=t.amount)
            for t in transactions
        ]
    )


@router.get("/{trip_id}", response_model=SettlementSummary)
async def get_settlement(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Get balances and the settlement plan for a trip."""
    _, summary = get_settled_trip(trip_id, db)
    return SettlementSummary(**summary, summary=export_service.settlement_to_text(summary))


@router.get("/{trip_id}/export.csv")
async def export_settlement_csv(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Download balances and settlement plan as CSV."""
    _, summary = get_settled_trip(trip_id, db)
    return Response(
        content=export_service.settlement_to_csv(summary),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{export_service.export_filename("csv")}"'
        }
    )


@router.get("/{trip_id}/export.json")
async def export_settlement_json(
    trip_id: int,
    db: Session = Depends(get_db)
):
    """Download settlement and expenses as JSON."""
    trip, summary = get_settled_trip(trip_id, db)
    return Response(
        content=export_service.settlement_to_json(trip, summary),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{export_service.export_filename("json")}"'
        }
    )
