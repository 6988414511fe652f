"""Tab 2: Allocation Details, why the last booking got its rooms."""

import streamlit as st

from data.session_store import get_last_booking
from components.tables import booked_rooms_frame, render_styled_table
from config.defaults import FLOOR_TRAVEL_MINUTES, STRATEGY_SINGLE_FLOOR, STRATEGY_MULTI_FLOOR

STRATEGY_LABELS = {
    STRATEGY_SINGLE_FLOOR: "Single floor",
    STRATEGY_MULTI_FLOOR: "Spans floors",
}


def render(sidebar_state):
    """Render the Allocation Details tab."""
    st.header("Allocation Details")

    last = get_last_booking()
    if not last:
        st.info("No booking yet. Choose a room count in the sidebar and press Book Rooms.")
        return

    st.markdown(
        f"**Strategy:** {STRATEGY_LABELS.get(last.strategy, 'First free rooms')} · "
        f"**Travel time:** {last.travel_time} min"
    )

    st.subheader("Explanation")
    for step in last.explanation_steps:
        st.markdown(f"- {step}")

    render_styled_table(booked_rooms_frame(last.rooms), title="Booked Rooms")

    with st.expander("How travel time is computed"):
        st.markdown(
            f"Only the lowest- and highest-numbered rooms count. On one floor the cost is "
            f"the difference in room numbers. Across floors each floor crossed costs "
            f"{FLOOR_TRAVEL_MINUTES} min, plus the walk from each room back to position 1, "
            f"where the stairs and lift are."
        )
