"""Typed wrapper around st.session_state for UI data."""

import streamlit as st
from typing import Optional

from engine.booking_service import BookingService
from models.booking import SelectionResult


@st.cache_resource
def get_booking_service() -> BookingService:
    """One building per server process, shared by every browser session."""
    return BookingService()


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "last_booking": None,
        "message": "",
        "message_level": "info",
        "requested_rooms": 1,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_last_booking() -> Optional[SelectionResult]:
    return st.session_state.get("last_booking")


def get_message() -> tuple[str, str]:
    return st.session_state.get("message", ""), st.session_state.get("message_level", "info")


# --- Setters ---

def set_last_booking(selection: Optional[SelectionResult]):
    st.session_state["last_booking"] = selection


def set_message(message: str, level: str = "info"):
    st.session_state["message"] = message
    st.session_state["message_level"] = level
