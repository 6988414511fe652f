"""Per-floor occupancy summaries for the building view."""

from typing import Dict, List

from models.room import Room


def get_floor_availability(rooms: List[Room]) -> List[dict]:
    """Compute availability stats per floor, lowest floor first."""
    by_floor: Dict[int, List[Room]] = {}
    for r in rooms:
        by_floor.setdefault(r.floor, []).append(r)

    results = []
    for floor_number in sorted(by_floor):
        floor_rooms = sorted(by_floor[floor_number], key=lambda r: r.number)
        occupied = sum(1 for r in floor_rooms if r.occupied)
        total = len(floor_rooms)
        results.append({
            "floor_number": floor_number,
            "total_rooms": total,
            "occupied_rooms": occupied,
            "available_rooms": total - occupied,
            "occupancy_pct": occupied / total if total > 0 else 0,
            "room_numbers": [r.number for r in floor_rooms],
            "available_room_numbers": [r.number for r in floor_rooms if not r.occupied],
        })
    return results


def get_occupancy_grid(rooms: List[Room], highlight: List[int] = None) -> List[dict]:
    """Flatten rooms into (floor, position) cells for the building chart.

    status is "booked" for rooms in `highlight` that are still occupied, else
    "occupied"/"available".
    """
    highlighted = set(highlight or [])
    cells = []
    for r in sorted(rooms, key=lambda r: r.number):
        if r.number in highlighted and r.occupied:
            status = "booked"
        elif r.occupied:
            status = "occupied"
        else:
            status = "available"
        cells.append({
            "floor_number": r.floor,
            "position": r.position,
            "room_number": r.number,
            "status": status,
        })
    return cells
