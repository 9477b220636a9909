"""
Export service producing downloadable settlement reports.
"""
import csv
import io
import json
from datetime import datetime
from tripsplit.core.utils import format_currency, serialize_date
from tripsplit.models.trip import Trip


def export_filename(extension: str, today: datetime = None) -> str:
    """Build the download file name, e.g. trip-settlement-2024-05-01.csv."""
    today = today or datetime.utcnow()
    return f"trip-settlement-{today.date().isoformat()}.{extension}"


def settlement_to_csv(summary: dict) -> str:
    """Render balances and the settlement plan as CSV."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")

    writer.writerow(["Friend", "Paid", "Owes", "Net Balance"])
    for b in summary["balances"]:
        writer.writerow([b["name"], f"{b['paid']:.2f}", f"{b['owes']:.2f}", f"{b['net_balance']:.2f}"])

    writer.writerow([])
    writer.writerow(["Settlement Plan"])
    writer.writerow(["From", "To", "Amount"])
    for t in summary["transactions"]:
        writer.writerow([t["from_name"], t["to_name"], f"{t['amount']:.2f}"])

    return buffer.getvalue()


def settlement_to_json(trip: Trip, summary: dict, generated_at: datetime = None) -> str:
    """Render the settlement together with the trip's expenses as JSON."""
    names = {friend.id: friend.name for friend in trip.friends}
    document = {
        "summary": {
            "total_expenses": summary["total_expenses"],
            "currency": summary["currency"],
            "date": generated_at or datetime.utcnow(),
        },
        "balances": [
            {
                "name": b["name"],
                "paid": b["paid"],
                "owes": b["owes"],
                "net_balance": b["net_balance"],
            }
            for b in summary["balances"]
        ],
        "transactions": [
            {
                "from": t["from_name"],
                "to": t["to_name"],
                "amount": t["amount"],
            }
            for t in summary["transactions"]
        ],
        "expenses": [
            {
                "description": e.description,
                "amount": float(e.amount),
                "paid_by": names.get(e.payer_id, "Unknown"),
                "date": e.date,
                "participants": [names.get(pid, "Unknown") for pid in e.participant_ids],
            }
            for e in trip.expenses
        ],
    }
    return json.dumps(document, indent=2, default=serialize_date, ensure_ascii=False)


def settlement_to_text(summary: dict) -> str:
    """Human readable summary of a settlement."""
    currency = summary["currency"]
    lines = [
        f"Total expenses: {format_currency(summary['total_expenses'], currency)}",
        f"Participants: {summary['participant_count']}",
        "",
        "Net balances:",
    ]
    for b in summary["balances"]:
        sign = "+" if b["net_balance"] > 0 else ""
        lines.append(f"  {b['name']}: {sign}{format_currency(b['net_balance'], currency)}")
    lines.append("")
    lines.append("Transfers:")
    for t in summary["transactions"]:
        lines.append(f"  {t['from_name']} -> {t['to_name']}: {format_currency(t['amount'], currency)}")
    return "\n".join(lines)
