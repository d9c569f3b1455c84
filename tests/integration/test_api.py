"""
End-to-end tests of the HTTP API against an in-memory database.
"""

import pytest


PASSENGER = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@x.com",
    "flightId": 1,
}


@pytest.mark.asyncio
async def test_passenger_lifecycle(client):
    response = await client.post("/api/passengers", json=PASSENGER)
    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 1
    assert {k: created[k] for k in PASSENGER} == PASSENGER

    response = await client.get(f"/api/passengers/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created

    assert (await client.get("/api/passengers/99")).status_code == 404

    assert (await client.delete("/api/passengers/1")).status_code == 200
    assert (await client.delete("/api/passengers/99")).status_code == 404
    assert (await client.get("/api/passengers/1")).status_code == 404


@pytest.mark.asyncio
async def test_create_passenger_missing_fields(client):
    response = await client.post("/api/passengers", json={"firstName": "John", "flightId": 1})

    assert response.status_code == 400
    assert response.json()["error"]["details"]["errors"] == [
        "lastName is required",
        "email is required",
    ]
    assert (await client.get("/api/passengers")).json() == []


@pytest.mark.asyncio
async def test_flight_cancellation_flow(client):
    for i, flight_id in enumerate([7, 7, 8]):
        payload = dict(PASSENGER, email=f"p{i}@x.com", flightId=flight_id)
        assert (await client.post("/api/passengers", json=payload)).status_code == 201

    response = await client.post("/api/notifications/flight-cancelled", json={"flightId": 7})
    assert response.status_code == 200
    assert response.json()["count"] == 2

    passengers = (await client.get("/api/passengers")).json()
    counts = {p["email"]: len(p["notifications"]) for p in passengers}
    assert counts == {"p0@x.com": 1, "p1@x.com": 1, "p2@x.com": 0}

    notifications = (await client.get("/api/passengers/1/notifications")).json()
    assert notifications[0]["content"] == "Flight 7 has been cancelled."
    assert notifications[0]["email"] == "p0@x.com"

    response = await client.post("/api/notifications/flight-cancelled", json={"flightId": 404})
    assert response.status_code == 200
    assert response.json() == {"flightId": 404, "count": 0, "notifications": []}

    assert (await client.delete("/api/notifications")).json() == {"deleted": 2}
    assert (await client.get("/api/passengers/1/notifications")).json() == []


@pytest.mark.asyncio
async def test_flight_cancelled_with_bad_template(client):
    response = await client.post(
        "/api/notifications/flight-cancelled",
        json={"flightId": 7, "message": "Flight {gate} is cancelled"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "validation_error"


@pytest.mark.asyncio
async def test_delete_passenger_removes_notifications(client):
    await client.post("/api/passengers", json=PASSENGER)
    await client.post("/api/notifications/flight-cancelled", json={"flightId": 1})
    assert len((await client.get("/api/passengers/1/notifications")).json()) == 1

    assert (await client.delete("/api/passengers/1")).status_code == 200

    assert (await client.get("/api/passengers/1/notifications")).json() == []


@pytest.mark.asyncio
async def test_notification_timestamp_is_consistent_across_endpoints(client):
    await client.post("/api/passengers", json=PASSENGER)

    fan_out = (await client.post("/api/notifications/flight-cancelled", json={"flightId": 1})).json()
    listed = (await client.get("/api/passengers/1/notifications")).json()
    embedded = (await client.get("/api/passengers/1")).json()["notifications"]

    created_at = fan_out["notifications"][0]["createdAt"]
    assert listed[0]["createdAt"] == created_at
    assert embedded[0]["createdAt"] == created_at
    assert created_at.endswith("Z") or created_at.endswith("+00:00")
