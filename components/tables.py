"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from models.room import Room


def floor_availability_frame(availability: List[dict]) -> pd.DataFrame:
    rows = []
    for fa in availability:
        free = fa["available_room_numbers"]
        rows.append({
            "Floor": fa["floor_number"],
            "Rooms": fa["total_rooms"],
            "Occupied": fa["occupied_rooms"],
            "Free": fa["available_rooms"],
            "Occupancy": f"{fa['occupancy_pct']:.0%}",
            "Free rooms": ", ".join(str(n) for n in free) if free else "—",
        })
    return pd.DataFrame(rows)


def booked_rooms_frame(rooms: List[Room]) -> pd.DataFrame:
    return pd.DataFrame([{
        "Room": r.number,
        "Floor": r.floor,
        "Position": r.position,
    } for r in rooms])


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_availability_table(df: pd.DataFrame, free_column: str = "Free"):
    """Render the per-floor table, flagging full floors."""
    def color_free(val):
        try:
            if int(val) == 0:
                return "background-color: #ffcccc; color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if free_column in df.columns:
        styled = df.style.map(color_free, subset=[free_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
