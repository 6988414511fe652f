"""Validation for incoming booking requests."""

from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)


def validate_room_count(count, booking_config: Optional[dict] = None) -> ValidationResult:
    """Check a requested room count against the booking policy bounds."""
    cfg = booking_config or {}
    max_rooms = cfg.get("max_rooms_per_booking", MAX_ROOMS_PER_BOOKING)

    result = ValidationResult()
    if isinstance(count, bool) or not isinstance(count, int):
        result.is_valid = False
        result.errors.append(f"Room count must be a whole number, got {count!r}")
    elif count < MIN_ROOMS_PER_BOOKING:
        result.is_valid = False
        result.errors.append(f"Must book at least {MIN_ROOMS_PER_BOOKING} room")
    elif count > max_rooms:
        result.is_valid = False
        result.errors.append(f"Cannot book more than {max_rooms} rooms")
    return result
