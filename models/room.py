from dataclasses import dataclass

from config.defaults import ROOM_NUMBER_FLOOR_FACTOR, ROOMS_PER_FULL_FLOOR


def floor_of(room_number: int) -> int:
    return room_number // ROOM_NUMBER_FLOOR_FACTOR


def position_of(room_number: int) -> int:
    """Position on floor (1-based). A remainder of 0 means the 10th room."""
    pos = room_number % ROOM_NUMBER_FLOOR_FACTOR
    return ROOMS_PER_FULL_FLOOR if pos == 0 else pos


@dataclass
class Room:
    number: int
    floor: int
    occupied: bool = False

    @property
    def position(self) -> int:
        return position_of(self.number)

    @classmethod
    def from_number(cls, number: int, occupied: bool = False) -> "Room":
        return cls(number=number, floor=floor_of(number), occupied=occupied)

    def to_dict(self) -> dict:
        return {
            "number": self.number,
            "floor": self.floor,
            "position": self.position,
            "occupied": self.occupied,
        }
