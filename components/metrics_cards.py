"""Reusable KPI metric card widgets."""

import streamlit as st

from models.booking import SelectionResult


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], delta=m.get("delta"))


def render_occupancy_metrics(counts: dict):
    render_metric_row([
        {"label": "Total Rooms", "value": counts["total"]},
        {"label": "Available", "value": counts["available"]},
        {"label": "Booked", "value": counts["occupied"]},
        {"label": "Occupancy", "value": f"{counts['occupied'] / counts['total']:.0%}"},
    ])


def render_booking_card(selection: SelectionResult):
    """Summary of the last booking."""
    st.markdown("#### Last Booking")
    render_metric_row([
        {"label": "Rooms", "value": ", ".join(str(n) for n in selection.room_numbers)},
        {"label": "Travel Time", "value": f"{selection.travel_time} min"},
        {"label": "Floors", "value": len(selection.floors)},
    ])
