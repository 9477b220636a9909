"""
Tests for settlement endpoints.
"""
import json
import pytest


def test_calculate_two_participants(client):
    response = client.post(
        "/api/settlement/calculate",
        json={
            "participants": [{"id": "A"}, {"id": "B"}],
            "expenses": [{"amount": 100, "payer_id": "A", "participant_ids": ["A", "B"]}],
        }
    )
    assert response.status_code == 200
    data = response.json()
    assert data["balances"] == [
        {"participant_id": "A", "paid": 100.0, "owes": 50.0, "net_balance": 50.0},
        {"participant_id": "B", "paid": 0.0, "owes": 50.0, "net_balance": -50.0},
    ]
    assert data["transactions"] == [{"from_id": "B", "to_id": "A", "amount": 50.0}]


def test_calculate_empty(client):
    response = client.post("/api/settlement/calculate", json={})
    assert response.status_code == 200
    assert response.json() == {"balances": [], "transactions": []}


def test_calculate_rejects_expense_without_participants(client):
    response = client.post(
        "/api/settlement/calculate",
        json={
            "participants": [{"id": "A"}],
            "expenses": [{"amount": 10, "payer_id": "A", "participant_ids": []}],
        }
    )
    assert response.status_code == 422


def test_calculate_dangling_payer(client):
    response = client.post(
        "/api/settlement/calculate",
        json={
            "participants": [{"id": 1}, {"id": 2}],
            "expenses": [{"amount": 40, "payer_id": 3, "participant_ids": [1, 2]}],
        }
    )
    assert response.status_code == 200
    assert [b["paid"] for b in response.json()["balances"]] == [0.0, 0.0]


def test_trip_settlement(client, trip, friends):
    """A pays 90 split by all three, B pays 30 split by B and C."""
    alice, bob, carol = friends
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={
            "amount": 90,
            "payer_id": alice["id"],
            "participant_ids": [alice["id"], bob["id"], carol["id"]],
        }
    )
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"amount": 30, "payer_id": bob["id"], "participant_ids": [bob["id"], carol["id"]]}
    )

    response = client.get(f"/api/settlement/{trip['id']}")
    assert response.status_code == 200
    data = response.json()

    assert data["total_expenses"] == 120
    assert data["participant_count"] == 3
    nets = {b["name"]: b["net_balance"] for b in data["balances"]}
    assert nets["Alice"] == pytest.approx(60)
    assert nets["Bob"] == pytest.approx(-15)
    assert nets["Carol"] == pytest.approx(-45)

    remaining = {b["friend_id"]: b["net_balance"] for b in data["balances"]}
    for t in data["transactions"]:
        remaining[t["from_id"]] += t["amount"]
        remaining[t["to_id"]] -= t["amount"]
    assert all(abs(v) < 0.01 for v in remaining.values())
    assert "Carol -> Alice" in data["summary"]


def test_settlement_after_payer_removed(client, trip, friends):
    alice, bob, carol = friends
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"amount": 30, "payer_id": alice["id"], "participant_ids": [bob["id"], carol["id"]]}
    )
    client.delete(f"/api/trips/{trip['id']}/friends/{alice['id']}")

    data = client.get(f"/api/settlement/{trip['id']}").json()
    assert [b["paid"] for b in data["balances"]] == [0.0, 0.0]
    assert [b["owes"] for b in data["balances"]] == [15.0, 15.0]


def test_settlement_missing_trip(client):
    assert client.get("/api/settlement/404").status_code == 404


def test_export_csv(client, trip, friends):
    alice, bob, _ = friends
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"amount": 100, "payer_id": alice["id"], "participant_ids": [alice["id"], bob["id"]]}
    )
    response = client.get(f"/api/settlement/{trip['id']}/export.csv")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "attachment" in response.headers["content-disposition"]
    assert "Bob,Alice,50.00" in response.text


def test_export_json(client, trip, friends):
    alice, bob, _ = friends
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={
            "description": "Beach shack",
            "amount": 100,
            "payer_id": alice["id"],
            "participant_ids": [alice["id"], bob["id"]],
        }
    )
    response = client.get(f"/api/settlement/{trip['id']}/export.json")
    assert response.status_code == 200
    document = json.loads(response.text)
    assert document["summary"]["currency"] == "INR"
    assert document["transactions"] == [{"from": "Bob", "to": "Alice", "amount": 50.0}]
    assert document["expenses"][0]["description"] == "Beach shack"
