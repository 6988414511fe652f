"""Tab 1: Building View: live room occupancy by floor."""

import streamlit as st

from data.session_store import get_booking_service, get_last_booking
from engine.spatial import get_floor_availability, get_occupancy_grid
from components.charts import building_grid, utilization_donut, floor_availability_bar
from components.metrics_cards import render_occupancy_metrics, render_booking_card
from components.tables import floor_availability_frame, render_availability_table


def render(sidebar_state):
    """Render the Building View tab."""
    st.header("Building View")

    service = get_booking_service()
    rooms = service.get_rooms()
    counts = service.building.counts()
    last = get_last_booking()

    render_occupancy_metrics(counts)

    if last:
        render_booking_card(last)

    st.divider()

    highlight = last.room_numbers if last else []
    fig = building_grid(get_occupancy_grid(rooms, highlight))
    st.plotly_chart(fig, use_container_width=True)
    st.caption("Blue: available · Orange: occupied · Green: your last booking")

    st.divider()

    availability = get_floor_availability(rooms)
    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_availability_bar(availability), use_container_width=True)
    with col2:
        st.plotly_chart(utilization_donut(counts["occupied"], counts["total"]), use_container_width=True)

    st.subheader("Floor Detail")
    render_availability_table(floor_availability_frame(availability))
