"""
Tests for trip, category and history endpoints.
"""


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_trip_seeds_default_categories(client, trip):
    response = client.get(f"/api/trips/{trip['id']}")
    assert response.status_code == 200
    slugs = [c["slug"] for c in response.json()["categories"]]
    assert slugs == ["food-veg", "food-non-veg", "drinks", "shared-expenses"]
    assert all(c["is_default"] for c in response.json()["categories"])


def test_create_trip_rejects_unknown_currency(client):
    response = client.post("/api/trips", json={"name": "Mars", "currency": "XYZ"})
    assert response.status_code == 422


def test_currency_is_upper_cased(client):
    response = client.post("/api/trips", json={"name": "Paris", "currency": "eur"})
    assert response.status_code == 201
    assert response.json()["currency"] == "EUR"


def test_get_missing_trip(client):
    assert client.get("/api/trips/999").status_code == 404


def test_update_trip(client, trip):
    response = client.patch(f"/api/trips/{trip['id']}", json={"currency": "USD"})
    assert response.status_code == 200
    assert response.json()["currency"] == "USD"
    assert response.json()["name"] == "Goa"


def test_custom_category(client, trip):
    response = client.post(
        f"/api/trips/{trip['id']}/categories",
        json={"slug": "museum", "name": "Museum tickets"}
    )
    assert response.status_code == 201
    category = response.json()
    assert category["is_default"] is False

    duplicate = client.post(
        f"/api/trips/{trip['id']}/categories",
        json={"slug": "museum", "name": "Again"}
    )
    assert duplicate.status_code == 400

    deleted = client.delete(f"/api/trips/{trip['id']}/categories/{category['id']}")
    assert deleted.status_code == 204


def test_default_category_cannot_be_deleted(client, trip):
    categories = client.get(f"/api/trips/{trip['id']}/categories").json()
    response = client.delete(f"/api/trips/{trip['id']}/categories/{categories[0]['id']}")
    assert response.status_code == 400


def test_clear_trip_keeps_history(client, trip, friends):
    alice = friends[0]
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"amount": 10, "payer_id": alice["id"], "participant_ids": [alice["id"]]}
    )
    client.post(f"/api/trips/{trip['id']}/snapshots", json={"name": "Goa 2024"})

    response = client.delete(f"/api/trips/{trip['id']}/data")
    assert response.status_code == 204

    assert client.get(f"/api/trips/{trip['id']}/friends").json() == []
    assert client.get(f"/api/trips/{trip['id']}/expenses").json() == []
    assert len(client.get("/api/history").json()) == 1


def test_save_and_restore_snapshot(client, trip, friends):
    alice, bob, carol = friends
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={
            "amount": 90,
            "payer_id": alice["id"],
            "participant_ids": [alice["id"], bob["id"], carol["id"]],
        }
    )
    saved = client.post(f"/api/trips/{trip['id']}/snapshots", json={"name": "Goa 2024"})
    assert saved.status_code == 201
    assert saved.json()["friend_count"] == 3
    assert saved.json()["expense_count"] == 1

    restored = client.post(f"/api/history/{saved.json()['id']}/restore")
    assert restored.status_code == 201
    new_trip = restored.json()
    assert new_trip["id"] != trip["id"]
    assert new_trip["name"] == "Goa 2024"
    assert [f["name"] for f in new_trip["friends"]] == ["Alice", "Bob", "Carol"]

    original = client.get(f"/api/settlement/{trip['id']}").json()
    copy = client.get(f"/api/settlement/{new_trip['id']}").json()
    assert [b["net_balance"] for b in copy["balances"]] == [b["net_balance"] for b in original["balances"]]


def test_history_is_capped(client, trip):
    for i in range(7):
        client.post(f"/api/trips/{trip['id']}/snapshots", json={"name": f"Save {i}"})

    history = client.get("/api/history").json()
    assert len(history) == 5
    assert history[0]["name"] == "Save 6"


def test_delete_snapshot(client, trip):
    saved = client.post(f"/api/trips/{trip['id']}/snapshots", json={"name": "Once"}).json()
    assert client.delete(f"/api/history/{saved['id']}").status_code == 204
    assert client.get("/api/history").json() == []
    assert client.post(f"/api/history/{saved['id']}/restore").status_code == 404


def test_delete_trip(client, trip, friends):
    assert client.delete(f"/api/trips/{trip['id']}").status_code == 204
    assert client.get(f"/api/trips/{trip['id']}").status_code == 404
