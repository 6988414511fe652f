from models.room import Room, floor_of, position_of
from models.booking import SelectionResult, RandomOccupancyResult
