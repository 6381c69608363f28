"""
Integration tests for the dashboard views.
"""

from datetime import date, timedelta

import pytest


@pytest.mark.asyncio
async def test_drivers_grouped_by_location(client):
    for name, location in [("John Doe", "Berlin"), ("Maria Schmidt", "Hamburg"), ("Anna Lee", "Berlin")]:
        await client.post("/api/drivers", json={"name": name, "location": location})

    response = await client.get("/api/dashboard/drivers")

    assert response.status_code == 200
    groups = response.json()
    assert [g["location"] for g in groups] == ["Berlin", "Hamburg"]
    assert [d["name"] for d in groups[0]["drivers"]] == ["John Doe", "Anna Lee"]
    assert groups[0]["drivers"][0]["initials"] == "JD"


@pytest.mark.asyncio
async def test_empty_dashboard(client):
    assert (await client.get("/api/dashboard/drivers")).json() == []
    assert (await client.get("/api/dashboard/tours")).json() == []


@pytest.mark.asyncio
async def test_tour_board_sorted_and_annotated(client, berlin_driver, tour_payload):
    yesterday = (date.today() - timedelta(days=1)).isoformat()
    next_week = (date.today() + timedelta(days=7)).isoformat()

    await client.post("/api/tours", json=tour_payload(customerName="Old", shipmentDate=yesterday))
    await client.post("/api/tours", json=tour_payload(
        customerName="New", shipmentDate=next_week, driverId=berlin_driver["id"]
    ))

    response = await client.get("/api/dashboard/tours")

    assert response.status_code == 200
    board = response.json()
    assert [t["customerName"] for t in board] == ["New", "Old"]

    new, old = board
    assert new["driverName"] == "Anna"
    assert new["isPast"] is False
    assert new["daysUntil"] == 7
    assert new["locationMismatch"] is False
    assert new["displayDate"] == date.fromisoformat(next_week).strftime("%d.%m.%Y")

    assert old["driverName"] == "Unassigned"
    assert old["driverId"] is None
    assert old["isPast"] is True
    assert old["daysUntil"] == -1
    assert old["locationMismatch"] is False


@pytest.mark.asyncio
async def test_tour_board_flags_relocated_driver(client, berlin_driver, tour_payload):
    await client.post("/api/tours", json=tour_payload(driverId=berlin_driver["id"]))
    await client.put(f"/api/drivers/{berlin_driver['id']}", json={"location": "Hamburg"})

    board = (await client.get("/api/dashboard/tours")).json()

    assert len(board) == 1
    assert board[0]["driverId"] == berlin_driver["id"]
    assert board[0]["locationMismatch"] is True
