"""Default configuration constants for the Hotel Room Allocation Platform."""

import os

# Building layout: floors 1-9 hold 10 rooms each, the top floor holds 7
FULL_FLOORS = 9
ROOMS_PER_FULL_FLOOR = 10
TOP_FLOOR = 10
TOP_FLOOR_ROOMS = 7
ROOM_NUMBER_FLOOR_FACTOR = 100  # room number = floor * 100 + position

# Travel-time cost model (minutes)
FLOOR_TRAVEL_MINUTES = 2  # Per floor crossed via the stairs/lift core
CORRIDOR_ENTRY_POSITION = 1  # Rooms are walked from the position-1 end of each floor

# Booking policy
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5

# Random occupancy demo fill
RANDOM_OCCUPANCY_MIN_PCT = 30
RANDOM_OCCUPANCY_MAX_PCT = 70

# Selection strategies
STRATEGY_SINGLE_FLOOR = "single_floor"
STRATEGY_MULTI_FLOOR = "multi_floor"
STRATEGY_FALLBACK = "fallback"

# UI colours
COLOR_AVAILABLE = "#4A90D9"
COLOR_OCCUPIED = "#E8734A"
COLOR_JUST_BOOKED = "#2E9E5B"

# HTTP API
API_HOST = os.getenv("HOST", "0.0.0.0")
API_PORT = int(os.getenv("PORT", "5000"))
API_PREFIX = "/api"
