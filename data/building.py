"""Authoritative room table for the hotel building."""

import threading
from dataclasses import replace
from typing import Dict, Iterable, List

from models.room import Room
from engine.errors import UnknownRoom
from config.defaults import (
    FULL_FLOORS, ROOMS_PER_FULL_FLOOR, TOP_FLOOR, TOP_FLOOR_ROOMS,
    ROOM_NUMBER_FLOOR_FACTOR,
)


def build_layout() -> List[int]:
    """Room numbers of the fixed layout, floor then position order."""
    numbers = []
    for floor in range(1, FULL_FLOORS + 1):
        for pos in range(1, ROOMS_PER_FULL_FLOOR + 1):
            numbers.append(floor * ROOM_NUMBER_FLOOR_FACTOR + pos)
    for pos in range(1, TOP_FLOOR_ROOMS + 1):
        numbers.append(TOP_FLOOR * ROOM_NUMBER_FLOOR_FACTOR + pos)
    return numbers


class Building:
    """Fixed room layout plus mutable occupancy.

    `lock` is re-entrant; hold it across read-select-write sequences so two
    bookings never see the same free room. `version` increases on every
    mutation. Reads hand out copies; only the methods below change occupancy.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.version = 0
        self._rooms: Dict[int, Room] = {}
        self.initialize()

    def initialize(self):
        """(Re)build every room as unoccupied."""
        with self.lock:
            self._rooms = {n: Room.from_number(n) for n in build_layout()}
            self.version += 1

    def list_all(self) -> List[Room]:
        with self.lock:
            return [replace(self._rooms[n]) for n in sorted(self._rooms)]

    def available(self) -> List[Room]:
        with self.lock:
            return [r for r in self.list_all() if not r.occupied]

    def mark_occupied(self, room_numbers: Iterable[int]):
        """Occupy each named room. Nothing is written if any number is unknown."""
        numbers = list(room_numbers)
        with self.lock:
            for n in numbers:
                if n not in self._rooms:
                    raise UnknownRoom(n)
            for n in numbers:
                self._rooms[n].occupied = True
            self.version += 1

    def get_room(self, room_number: int) -> Room:
        with self.lock:
            if room_number not in self._rooms:
                raise UnknownRoom(room_number)
            return replace(self._rooms[room_number])

    def counts(self) -> dict:
        with self.lock:
            total = len(self._rooms)
            occupied = sum(1 for r in self._rooms.values() if r.occupied)
            return {
                "total": total,
                "available": total - occupied,
                "occupied": occupied,
                "version": self.version,
            }

    @property
    def room_numbers(self) -> List[int]:
        return sorted(self._rooms)
