"""Generate random demo occupancy for the hotel building."""

import random
from typing import List, Optional, Tuple

from config.defaults import RANDOM_OCCUPANCY_MIN_PCT, RANDOM_OCCUPANCY_MAX_PCT


def pick_random_occupancy(
    room_numbers: List[int],
    rng: Optional[random.Random] = None,
    min_pct: int = RANDOM_OCCUPANCY_MIN_PCT,
    max_pct: int = RANDOM_OCCUPANCY_MAX_PCT,
) -> Tuple[int, List[int]]:
    """Pick a uniform occupancy % in [min_pct, max_pct] and that share of rooms.

    Returns (pct, chosen room numbers). The count is floor(total * pct / 100)
    and no room is chosen twice.
    """
    rng = rng or random.Random()
    pct = rng.randint(min_pct, max_pct)
    num_to_occupy = (len(room_numbers) * pct) // 100
    chosen = rng.sample(list(room_numbers), num_to_occupy)
    return pct, chosen


if __name__ == "__main__":
    from data.building import build_layout

    pct, chosen = pick_random_occupancy(build_layout(), random.Random(42))
    print(f"Random occupancy {pct}%: {len(chosen)} rooms -> {sorted(chosen)}")
