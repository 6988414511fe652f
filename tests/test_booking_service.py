"""Tests for the booking service."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from data.building import Building, build_layout
from data.sample_data import pick_random_occupancy
from data.validator import validate_room_count
from engine.booking_service import BookingService
from engine.errors import InsufficientRooms, InvalidRequestCount


def make_service(seed=42, **config):
    return BookingService(Building(), booking_config=config, rng=random.Random(seed))


class TestValidateRoomCount:
    def test_valid_range(self):
        for n in range(1, 6):
            assert validate_room_count(n).is_valid

    def test_too_many(self):
        result = validate_room_count(6)
        assert not result.is_valid
        assert "more than 5" in result.errors[0]

    def test_non_positive_and_non_integer(self):
        assert not validate_room_count(0).is_valid
        assert not validate_room_count(-1).is_valid
        assert not validate_room_count("3").is_valid
        assert not validate_room_count(True).is_valid

    def test_config_override(self):
        assert validate_room_count(7, {"max_rooms_per_booking": 8}).is_valid


class TestBook:
    def test_end_to_end_three_rooms(self):
        service = make_service()
        result = service.book(3)
        assert result.room_numbers == [101, 102, 103]
        assert result.travel_time == 2
        assert all(r.occupied for r in result.rooms)
        assert len(service.building.available()) == 94

    def test_successive_bookings_do_not_overlap(self):
        service = make_service()
        first = service.book(5)
        second = service.book(5)
        third = service.book(2)
        assert first.room_numbers == [101, 102, 103, 104, 105]
        assert second.room_numbers == [106, 107, 108, 109, 110]
        assert third.room_numbers == [201, 202]

    def test_over_limit_rejected_before_engine(self):
        service = make_service()
        with pytest.raises(InvalidRequestCount) as exc_info:
            service.book(6)
        assert str(exc_info.value) == "Cannot book more than 5 rooms"
        assert service.building.counts()["occupied"] == 0

    def test_zero_rejected(self):
        with pytest.raises(InvalidRequestCount) as exc_info:
            make_service().book(0)
        assert str(exc_info.value) == "Must book at least 1 room"

    def test_non_integer_counts_report_whole_number(self):
        service = make_service()
        for bad in ("3", 2.5, True):
            with pytest.raises(InvalidRequestCount) as exc_info:
                service.book(bad)
            assert "whole number" in str(exc_info.value)
            assert exc_info.value.count == bad
        assert service.building.counts()["occupied"] == 0

    def test_insufficient_rooms_writes_nothing(self):
        service = make_service()
        numbers = build_layout()
        service.building.mark_occupied(numbers[:-2])
        version = service.building.version

        with pytest.raises(InsufficientRooms) as exc_info:
            service.book(3)
        assert exc_info.value.available == 2
        assert service.building.version == version
        assert len(service.building.available()) == 2

    def test_concurrent_bookings_never_double_book(self):
        service = make_service()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: service.book(5), range(19)))

        booked = [n for r in results for n in r.room_numbers]
        assert len(booked) == 95
        assert len(set(booked)) == 95
        assert service.building.counts()["available"] == 2


class TestResetAndRandom:
    def test_reset(self):
        service = make_service()
        service.book(4)
        service.reset()
        service.reset()
        assert service.building.counts()["occupied"] == 0

    def test_random_occupancy_bounds(self):
        service = make_service(seed=3)
        for _ in range(20):
            result = service.random_occupancy()
            assert 30 <= result.occupancy_pct <= 70
            assert result.rooms_occupied == (97 * result.occupancy_pct) // 100
            assert service.building.counts()["occupied"] == result.rooms_occupied

    def test_random_occupancy_resets_first(self):
        service = make_service(random_min_pct=30, random_max_pct=30)
        service.book(5)
        result = service.random_occupancy()
        assert result.rooms_occupied == 29
        assert service.building.counts()["occupied"] == 29
        assert result.message == "Random occupancy: 30%"

    def test_pick_random_occupancy_unique(self):
        pct, chosen = pick_random_occupancy(build_layout(), random.Random(1), 50, 50)
        assert pct == 50
        assert len(chosen) == 48
        assert len(set(chosen)) == 48

    def test_booking_after_random_fill(self):
        service = make_service(seed=11)
        service.random_occupancy()
        free_before = service.building.counts()["available"]
        result = service.book(3)
        assert len(result.rooms) == 3
        assert service.building.counts()["available"] == free_before - 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
