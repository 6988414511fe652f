"""Room selection heuristic, the core of booking.

Selection prefers a single floor: the lowest floor with enough free rooms wins
outright, even when a higher floor could give a shorter walk. Only when no
floor fits on its own are multi-floor combinations compared.
"""

from typing import Dict, List, Optional, Tuple

from models.room import Room
from models.booking import SelectionResult
from engine.errors import InsufficientRooms, InvalidRequestCount
from engine.travel_time import travel_time
from engine.explainer import explain_single_floor, explain_multi_floor, explain_fallback
from config.defaults import STRATEGY_SINGLE_FLOOR, STRATEGY_MULTI_FLOOR, STRATEGY_FALLBACK


def group_by_floor(available: List[Room]) -> Dict[int, List[Room]]:
    """Partition rooms by floor, each floor's rooms ascending by number.

    The returned dict is keyed in ascending floor order.
    """
    floors: Dict[int, List[Room]] = {}
    for room in available:
        floors.setdefault(room.floor, []).append(room)
    return {f: sorted(floors[f], key=lambda r: r.number) for f in sorted(floors)}


def best_window_on_floor(floor_rooms: List[Room], count: int) -> Tuple[List[Room], int, int]:
    """Cheapest run of `count` consecutive free rooms on one floor.

    Ties keep the earliest window. Returns (rooms, travel_time, windows_evaluated).
    """
    best: Optional[List[Room]] = None
    best_time = None
    windows = len(floor_rooms) - count + 1

    for i in range(windows):
        candidate = floor_rooms[i:i + count]
        t = travel_time(candidate)
        if best_time is None or t < best_time:
            best_time = t
            best = candidate

    return best, best_time, windows


def best_multi_floor_combination(
    floors: Dict[int, List[Room]],
    count: int,
) -> Tuple[Optional[List[Room]], Optional[int], Optional[int], int]:
    """Greedy upward fill from every starting floor; keep the cheapest.

    For each starting floor the lowest-numbered rooms are taken floor by floor
    until `count` are gathered. Only that first fill is costed per start.
    Returns (rooms, travel_time, start_floor, combinations_evaluated); rooms is
    None when no start gathers enough.
    """
    sorted_floors = sorted(floors)
    best_combo = None
    best_time = None
    best_start = None
    evaluated = 0

    for i in range(len(sorted_floors)):
        selected: List[Room] = []
        remaining = count
        idx = i

        while remaining > 0 and idx < len(sorted_floors):
            floor_rooms = floors[sorted_floors[idx]]
            take = min(remaining, len(floor_rooms))
            selected.extend(floor_rooms[:take])
            remaining -= take
            idx += 1

        if len(selected) >= count:
            evaluated += 1
            combo = selected[:count]
            t = travel_time(combo)
            if best_time is None or t < best_time:
                best_time = t
                best_combo = combo
                best_start = sorted_floors[i]

    return best_combo, best_time, best_start, evaluated


def select_rooms(available: List[Room], count: int) -> SelectionResult:
    """Choose `count` rooms from `available` minimising travel time.

    Pure: occupancy is not touched, the caller marks the rooms afterwards.
    """
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidRequestCount(count)
    if count > len(available):
        raise InsufficientRooms(requested=count, available=len(available))

    floors = group_by_floor(available)
    floor_counts = {f: len(rooms) for f, rooms in floors.items()}

    # Step 1: lowest floor that can hold the whole booking
    for floor, floor_rooms in floors.items():
        if len(floor_rooms) >= count:
            rooms, t, windows = best_window_on_floor(floor_rooms, count)
            numbers = [r.number for r in rooms]
            return SelectionResult(
                rooms=rooms,
                travel_time=t,
                strategy=STRATEGY_SINGLE_FLOOR,
                explanation_steps=explain_single_floor(
                    count, floor_counts, floor, windows, numbers, t,
                ),
            )

    # Step 2: span floors
    combo, t, start_floor, evaluated = best_multi_floor_combination(floors, count)
    if combo is not None:
        numbers = [r.number for r in combo]
        return SelectionResult(
            rooms=combo,
            travel_time=t,
            strategy=STRATEGY_MULTI_FLOOR,
            explanation_steps=explain_multi_floor(
                count, floor_counts, start_floor, evaluated, numbers, t,
            ),
        )

    # Step 3: unreachable while count <= len(available); kept as a plain fallback
    rooms = list(available[:count])
    t = travel_time(rooms)
    return SelectionResult(
        rooms=rooms,
        travel_time=t,
        strategy=STRATEGY_FALLBACK,
        explanation_steps=explain_fallback(count, [r.number for r in rooms], t),
    )
