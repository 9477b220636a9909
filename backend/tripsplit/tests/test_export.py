"""
Tests for settlement export and currency formatting.
"""
import json
from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace
from tripsplit.core.utils import format_currency, get_currency_symbol
from tripsplit.services import export_service

SUMMARY = {
    "trip_id": 1,
    "currency": "USD",
    "total_expenses": 100.0,
    "participant_count": 2,
    "balances": [
        {"friend_id": 1, "name": "Alice", "paid": 100.0, "owes": 50.0, "net_balance": 50.0},
        {"friend_id": 2, "name": "Bob", "paid": 0.0, "owes": 50.0, "net_balance": -50.0},
    ],
    "transactions": [
        {"from_id": 2, "from_name": "Bob", "to_id": 1, "to_name": "Alice", "amount": 50.0},
    ],
}


def test_currency_symbols():
    assert get_currency_symbol("USD") == "$"
    assert get_currency_symbol("EUR") == "€"
    assert get_currency_symbol("XYZ") == "₹"


def test_format_currency():
    assert format_currency(12.5, "GBP") == "£12.50"
    assert format_currency(1234.6, "JPY") == "¥1235"
    assert format_currency(3, "INR") == "₹3.00"


def test_csv_export():
    content = export_service.settlement_to_csv(SUMMARY)
    assert content == (
        "Friend,Paid,Owes,Net Balance\n"
        "Alice,100.00,50.00,50.00\n"
        "Bob,0.00,50.00,-50.00\n"
        "\n"
        "Settlement Plan\n"
        "From,To,Amount\n"
        "Bob,Alice,50.00\n"
    )


def test_json_export():
    trip = SimpleNamespace(
        friends=[SimpleNamespace(id=1, name="Alice"), SimpleNamespace(id=2, name="Bob")],
        expenses=[
            SimpleNamespace(
                description="Dinner",
                amount=Decimal("100.00"),
                payer_id=1,
                date=date(2024, 5, 1),
                participant_ids=[1, 2, 9],
            ),
            SimpleNamespace(
                description="Taxi",
                amount=Decimal("10.00"),
                payer_id=None,
                date=date(2024, 5, 2),
                participant_ids=[2],
            ),
        ]
    )
    document = json.loads(
        export_service.settlement_to_json(trip, SUMMARY, generated_at=datetime(2024, 5, 3, 12, 0))
    )

    assert document["summary"] == {
        "total_expenses": 100.0,
        "currency": "USD",
        "date": "2024-05-03T12:00:00",
    }
    assert document["transactions"] == [{"from": "Bob", "to": "Alice", "amount": 50.0}]
    assert document["balances"][1]["net_balance"] == -50.0
    assert document["expenses"][0]["participants"] == ["Alice", "Bob", "Unknown"]
    assert document["expenses"][0]["date"] == "2024-05-01"
    assert document["expenses"][1]["paid_by"] == "Unknown"


def test_text_summary():
    text = export_service.settlement_to_text(SUMMARY)
    assert "Total expenses: $100.00" in text
    assert "  Alice: +$50.00" in text
    assert "  Bob -> Alice: $50.00" in text


def test_export_filename():
    assert export_service.export_filename("csv", datetime(2024, 5, 1, 9, 30)) == "trip-settlement-2024-05-01.csv"
