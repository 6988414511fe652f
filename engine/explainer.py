"""Generates human-readable explanations for room selections."""

from typing import Dict, List


def _fmt_numbers(numbers: List[int]) -> str:
    return ", ".join(str(n) for n in numbers)


def explain_single_floor(
    count: int,
    floor_counts: Dict[int, int],
    floor: int,
    windows_evaluated: int,
    room_numbers: List[int],
    travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a same-floor selection."""
    steps = []

    steps.append(
        f"Step 1 - Availability: {sum(floor_counts.values())} rooms free across "
        f"{len(floor_counts)} floors, {count} requested"
    )

    skipped = [f for f in sorted(floor_counts) if f < floor]
    if skipped:
        steps.append(
            f"Step 2 - Floor choice: floors {_fmt_numbers(skipped)} have fewer than {count} "
            f"free rooms => floor {floor} is the lowest floor that fits"
        )
    else:
        steps.append(
            f"Step 2 - Floor choice: floor {floor} is the lowest floor with "
            f"{count}+ free rooms ({floor_counts[floor]} free)"
        )

    steps.append(
        f"Step 3 - Windows: compared {windows_evaluated} run(s) of {count} consecutive "
        f"free rooms on floor {floor}"
    )

    steps.append(
        f"Step 4 - Result: rooms {_fmt_numbers(room_numbers)} => travel time {travel_time} min"
    )

    return steps


def explain_multi_floor(
    count: int,
    floor_counts: Dict[int, int],
    start_floor: int,
    combinations_evaluated: int,
    room_numbers: List[int],
    travel_time: int,
) -> List[str]:
    """Produce step-by-step explanation for a selection spanning floors."""
    steps = []

    steps.append(
        f"Step 1 - Availability: {sum(floor_counts.values())} rooms free across "
        f"{len(floor_counts)} floors, {count} requested"
    )

    steps.append(
        f"Step 2 - Floor choice: no floor has {count} free rooms "
        f"(most on one floor: {max(floor_counts.values())}) => spanning floors"
    )

    steps.append(
        f"Step 3 - Combinations: filled upward from {combinations_evaluated} starting "
        f"floor(s); best start is floor {start_floor}"
    )

    steps.append(
        f"Step 4 - Result: rooms {_fmt_numbers(room_numbers)} => travel time {travel_time} min"
    )

    return steps


def explain_fallback(count: int, room_numbers: List[int], travel_time: int) -> List[str]:
    return [
        f"No floor combination produced {count} rooms; took the first {count} free rooms",
        f"Result: rooms {_fmt_numbers(room_numbers)} => travel time {travel_time} min",
    ]
