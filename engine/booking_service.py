"""Request handling around the building: book, reset, random fill."""

import logging
import random
from typing import List, Optional

from models.room import Room
from models.booking import SelectionResult, RandomOccupancyResult
from data.building import Building
from data.sample_data import pick_random_occupancy
from data.validator import validate_room_count
from engine.allocation_engine import select_rooms
from engine.errors import InsufficientRooms, InvalidRequestCount
from config.defaults import (
    MAX_ROOMS_PER_BOOKING, RANDOM_OCCUPANCY_MIN_PCT, RANDOM_OCCUPANCY_MAX_PCT,
)

logger = logging.getLogger(__name__)


class BookingService:
    """Serialises every occupancy change on one Building.

    Each public call holds the building lock for its whole duration, so a
    booking reads availability, selects and marks rooms as one unit.
    """

    def __init__(
        self,
        building: Optional[Building] = None,
        booking_config: Optional[dict] = None,
        rng: Optional[random.Random] = None,
    ):
        self.building = building or Building()
        self.booking_config = booking_config or {}
        self.rng = rng or random.Random()

    @property
    def max_rooms_per_booking(self) -> int:
        return self.booking_config.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    def get_rooms(self) -> List[Room]:
        return self.building.list_all()

    def reset(self):
        with self.building.lock:
            self.building.initialize()
        logger.info("All bookings reset")

    def random_occupancy(self) -> RandomOccupancyResult:
        cfg = self.booking_config
        with self.building.lock:
            self.building.initialize()
            pct, chosen = pick_random_occupancy(
                self.building.room_numbers,
                self.rng,
                min_pct=cfg.get("random_min_pct", RANDOM_OCCUPANCY_MIN_PCT),
                max_pct=cfg.get("random_max_pct", RANDOM_OCCUPANCY_MAX_PCT),
            )
            self.building.mark_occupied(chosen)
        logger.info("Random occupancy %d%%: %d rooms occupied", pct, len(chosen))
        return RandomOccupancyResult(occupancy_pct=pct, rooms_occupied=len(chosen))

    def book(self, count) -> SelectionResult:
        """Select and occupy `count` rooms.

        Raises InvalidRequestCount before touching the building, and
        InsufficientRooms without writing anything.
        """
        validation = validate_room_count(count, self.booking_config)
        if not validation.is_valid:
            logger.warning("Rejected booking request: %s", "; ".join(validation.errors))
            raise InvalidRequestCount(count, self.max_rooms_per_booking, message=validation.errors[0])

        with self.building.lock:
            available = self.building.available()
            try:
                selection = select_rooms(available, count)
            except InsufficientRooms as e:
                logger.warning("Booking of %d rooms refused: %s", count, e)
                raise
            self.building.mark_occupied(selection.room_numbers)
            selection.rooms = [self.building.get_room(n) for n in selection.room_numbers]

        logger.info(
            "Booked rooms %s (%s, travel time %d min)",
            selection.room_numbers, selection.strategy, selection.travel_time,
        )
        return selection
