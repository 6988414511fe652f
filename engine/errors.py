"""Error taxonomy for booking and allocation."""

from typing import Optional

from config.defaults import MIN_ROOMS_PER_BOOKING


class BookingError(Exception):
    """Base class for every error raised while booking rooms."""


class InsufficientRooms(BookingError):
    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(f"Only {available} rooms available")


class UnknownRoom(BookingError):
    """A room number outside the building layout reached a mutation path."""

    def __init__(self, room_number: int):
        self.room_number = room_number
        super().__init__(f"Room {room_number} is not part of the building layout")


class InvalidRequestCount(BookingError, ValueError):
    """Rejected room count. `message` carries the validator's wording when given."""

    def __init__(self, count, max_count: Optional[int] = None, message: Optional[str] = None):
        self.count = count
        self.max_count = max_count
        if message is None:
            if isinstance(count, bool) or not isinstance(count, int):
                message = f"Room count must be a whole number, got {count!r}"
            elif max_count is not None and count > max_count:
                message = f"Cannot book more than {max_count} rooms"
            else:
                message = f"Must book at least {MIN_ROOMS_PER_BOOKING} room"
        super().__init__(message)
