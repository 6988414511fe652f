"""HTTP API for the hotel booking service."""

import logging
from datetime import datetime
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, StrictInt

from engine.booking_service import BookingService
from engine.errors import InsufficientRooms, InvalidRequestCount
from engine.spatial import get_floor_availability
from models.room import Room
from config.defaults import API_HOST, API_PORT, API_PREFIX

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Models
class RoomOut(BaseModel):
    number: int
    floor: int
    position: int
    occupied: bool


class BookRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    count: StrictInt = Field(alias="numRooms")


class BookResponse(BaseModel):
    booked: List[RoomOut]
    travel_time: int
    strategy: str
    explanation: List[str]


class MessageResponse(BaseModel):
    message: str


class RandomOccupancyResponse(MessageResponse):
    occupancy_pct: int
    rooms_occupied: int


class StatsResponse(BaseModel):
    total: int
    available: int
    occupied: int
    version: int


class FloorOut(BaseModel):
    floor_number: int
    total_rooms: int
    occupied_rooms: int
    available_rooms: int
    occupancy_pct: float
    room_numbers: List[int]
    available_room_numbers: List[int]


def _room_out(room: Room) -> RoomOut:
    return RoomOut(**room.to_dict())


def create_app(service: Optional[BookingService] = None) -> FastAPI:
    """Build the FastAPI app around one BookingService."""
    app = FastAPI(title="Hotel Room Booking API", version="1.0.0")
    app.state.booking_service = service or BookingService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    @app.exception_handler(InvalidRequestCount)
    async def invalid_count_handler(request: Request, exc: InvalidRequestCount):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    @app.exception_handler(InsufficientRooms)
    async def insufficient_rooms_handler(request: Request, exc: InsufficientRooms):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc), "requested": exc.requested, "available": exc.available},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    def get_service() -> BookingService:
        return app.state.booking_service

    @app.get(f"{API_PREFIX}/rooms", response_model=List[RoomOut])
    def list_rooms():
        return [_room_out(r) for r in get_service().get_rooms()]

    @app.get(f"{API_PREFIX}/floors", response_model=List[FloorOut])
    def list_floors():
        return get_floor_availability(get_service().get_rooms())

    @app.get(f"{API_PREFIX}/stats", response_model=StatsResponse)
    def stats():
        return get_service().building.counts()

    @app.post(f"{API_PREFIX}/reset", response_model=MessageResponse)
    def reset():
        get_service().reset()
        return {"message": "All bookings reset"}

    @app.post(f"{API_PREFIX}/random", response_model=RandomOccupancyResponse)
    @app.post(f"{API_PREFIX}/random-occupancy", response_model=RandomOccupancyResponse)
    def random_occupancy():
        result = get_service().random_occupancy()
        return {
            "message": result.message,
            "occupancy_pct": result.occupancy_pct,
            "rooms_occupied": result.rooms_occupied,
        }

    @app.post(f"{API_PREFIX}/book", response_model=BookResponse)
    def book(request: BookRequest):
        selection = get_service().book(request.count)
        return {
            "booked": [_room_out(r) for r in selection.rooms],
            "travel_time": selection.travel_time,
            "strategy": selection.strategy,
            "explanation": selection.explanation_steps,
        }

    @app.get("/health")
    def health():
        return {"status": "healthy", "timestamp": datetime.now().isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api:app", host=API_HOST, port=API_PORT)
