"""Travel-time cost model between the rooms of one booking."""

from typing import Iterable

from models.room import Room
from config.defaults import FLOOR_TRAVEL_MINUTES, CORRIDOR_ENTRY_POSITION


def travel_time(rooms: Iterable[Room]) -> int:
    """Minutes to walk from the lowest- to the highest-numbered room.

    Only the two extreme rooms count. On one floor the cost is the corridor
    distance between them; across floors each room is walked back to the
    corridor entry and every floor crossed adds FLOOR_TRAVEL_MINUTES.
    """
    ordered = sorted(rooms, key=lambda r: r.number)
    if len(ordered) <= 1:
        return 0

    first = ordered[0]
    last = ordered[-1]

    floor_travel = abs(last.floor - first.floor) * FLOOR_TRAVEL_MINUTES

    if first.floor == last.floor:
        room_travel = last.number - first.number
    else:
        room_travel = (
            (first.position - CORRIDOR_ENTRY_POSITION)
            + (last.position - CORRIDOR_ENTRY_POSITION)
        )

    return floor_travel + room_travel
