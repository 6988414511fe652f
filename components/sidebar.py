"""Global sidebar controls: book, random occupancy, reset."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import get_booking_service, set_last_booking, set_message, get_message
from engine.errors import InsufficientRooms, InvalidRequestCount
from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING


@dataclass
class SidebarState:
    requested_rooms: int
    version: int


def _handle_book(count: int):
    service = get_booking_service()
    try:
        selection = service.book(count)
    except (InvalidRequestCount, InsufficientRooms) as e:
        set_last_booking(None)
        set_message(str(e), "error")
        return
    set_last_booking(selection)
    set_message(f"Successfully booked {count} room(s)!", "success")


def _handle_random():
    result = get_booking_service().random_occupancy()
    set_last_booking(None)
    set_message(result.message, "info")


def _handle_reset():
    get_booking_service().reset()
    set_last_booking(None)
    set_message("All bookings reset", "info")


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Hotel Room Booking")
        st.divider()

        count = st.number_input(
            f"Number of Rooms ({MIN_ROOMS_PER_BOOKING}-{MAX_ROOMS_PER_BOOKING})",
            min_value=MIN_ROOMS_PER_BOOKING,
            max_value=MAX_ROOMS_PER_BOOKING,
            step=1,
            key="requested_rooms",
        )

        if st.button("Book Rooms", type="primary", use_container_width=True):
            _handle_book(int(count))

        col1, col2 = st.columns(2)
        with col1:
            if st.button("Random Occupancy", use_container_width=True):
                _handle_random()
        with col2:
            if st.button("Reset All", use_container_width=True):
                _handle_reset()

        st.divider()

        message, level = get_message()
        if message:
            if level == "error":
                st.error(message)
            elif level == "success":
                st.success(message)
            else:
                st.info(message)

        version = get_booking_service().building.version
        st.caption(f"State version: {version}")

    return SidebarState(requested_rooms=int(count), version=version)
