from dataclasses import dataclass, field
from typing import List

from models.room import Room


@dataclass
class SelectionResult:
    """Rooms chosen for one booking request and their travel time."""
    rooms: List[Room]
    travel_time: int                # minutes between lowest and highest room
    strategy: str                   # "single_floor", "multi_floor", "fallback"
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def room_numbers(self) -> List[int]:
        return [r.number for r in self.rooms]

    @property
    def floors(self) -> List[int]:
        return sorted(set(r.floor for r in self.rooms))


@dataclass
class RandomOccupancyResult:
    occupancy_pct: int
    rooms_occupied: int

    @property
    def message(self) -> str:
        return f"Random occupancy: {self.occupancy_pct}%"
