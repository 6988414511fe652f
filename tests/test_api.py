"""Tests for the HTTP API."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random

import pytest
from fastapi.testclient import TestClient

from api import create_app
from data.building import Building
from engine.booking_service import BookingService
from engine.errors import UnknownRoom


class BrokenBuilding(Building):
    def mark_occupied(self, room_numbers):
        raise UnknownRoom(9999)


@pytest.fixture
def client():
    service = BookingService(Building(), rng=random.Random(42))
    return TestClient(create_app(service))


class TestRooms:
    def test_list_rooms(self, client):
        response = client.get("/api/rooms")
        assert response.status_code == 200
        rooms = response.json()
        assert len(rooms) == 97
        assert rooms[0] == {"number": 101, "floor": 1, "position": 1, "occupied": False}

    def test_floors_and_stats(self, client):
        floors = client.get("/api/floors").json()
        assert len(floors) == 10
        stats = client.get("/api/stats").json()
        assert stats["total"] == 97
        assert stats["available"] == 97


class TestBook:
    def test_book_three(self, client):
        response = client.post("/api/book", json={"count": 3})
        assert response.status_code == 200
        data = response.json()
        assert [r["number"] for r in data["booked"]] == [101, 102, 103]
        assert data["travel_time"] == 2
        assert data["strategy"] == "single_floor"
        assert all(r["occupied"] for r in data["booked"])
        assert client.get("/api/stats").json()["available"] == 94

    def test_num_rooms_alias(self, client):
        response = client.post("/api/book", json={"numRooms": 2})
        assert response.status_code == 200
        assert len(response.json()["booked"]) == 2

    def test_more_than_five_rejected(self, client):
        response = client.post("/api/book", json={"count": 6})
        assert response.status_code == 400
        assert response.json() == {"error": "Cannot book more than 5 rooms"}

    def test_zero_rejected(self, client):
        response = client.post("/api/book", json={"count": 0})
        assert response.status_code == 400

    def test_missing_count(self, client):
        response = client.post("/api/book", json={})
        assert response.status_code == 422

    def test_non_integer_count_rejected(self, client):
        for body in ({"count": True}, {"count": "2"}, {"numRooms": 2.0}):
            response = client.post("/api/book", json=body)
            assert response.status_code == 422
        assert client.get("/api/stats").json()["occupied"] == 0

    def test_unknown_room_is_server_error(self):
        client = TestClient(create_app(BookingService(BrokenBuilding())), raise_server_exceptions=False)
        response = client.post("/api/book", json={"count": 1})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_insufficient_rooms(self):
        building = Building()
        building.mark_occupied([r.number for r in building.list_all()][:-1])
        client = TestClient(create_app(BookingService(building)))

        response = client.post("/api/book", json={"count": 2})
        assert response.status_code == 400
        assert response.json()["error"] == "Only 1 rooms available"
        assert response.json()["available"] == 1


class TestResetAndRandom:
    def test_random_then_reset(self, client):
        response = client.post("/api/random")
        assert response.status_code == 200
        data = response.json()
        assert 30 <= data["occupancy_pct"] <= 70
        assert data["message"] == f"Random occupancy: {data['occupancy_pct']}%"
        assert client.get("/api/stats").json()["occupied"] == data["rooms_occupied"]

        response = client.post("/api/reset")
        assert response.json() == {"message": "All bookings reset"}
        assert client.get("/api/stats").json()["occupied"] == 0

    def test_random_occupancy_alias(self, client):
        assert client.post("/api/random-occupancy").status_code == 200


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
