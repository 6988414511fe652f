"""Plotly chart builders for the hotel building view."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List

from config.defaults import (
    COLOR_AVAILABLE, COLOR_OCCUPIED, COLOR_JUST_BOOKED, ROOMS_PER_FULL_FLOOR,
)

STATUS_CODES = {"available": 0, "occupied": 1, "booked": 2}


def building_grid(cells: List[dict], title: str = "Building Occupancy") -> go.Figure:
    """Floor x position grid, top floor drawn on top. Empty slots stay blank."""
    df = pd.DataFrame(cells)
    floors = sorted(df["floor_number"].unique(), reverse=True)
    positions = list(range(1, ROOMS_PER_FULL_FLOOR + 1))

    z, text = [], []
    for floor in floors:
        floor_df = df[df["floor_number"] == floor].set_index("position")
        z_row, text_row = [], []
        for pos in positions:
            if pos in floor_df.index:
                z_row.append(STATUS_CODES[floor_df.loc[pos, "status"]])
                text_row.append(str(floor_df.loc[pos, "room_number"]))
            else:
                z_row.append(None)
                text_row.append("")
        z.append(z_row)
        text.append(text_row)

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=[f"#{p}" for p in positions],
        y=[f"Floor {f}" for f in floors],
        text=text,
        texttemplate="%{text}",
        zmin=0,
        zmax=2,
        colorscale=[
            [0.0, COLOR_AVAILABLE], [0.33, COLOR_AVAILABLE],
            [0.34, COLOR_OCCUPIED], [0.66, COLOR_OCCUPIED],
            [0.67, COLOR_JUST_BOOKED], [1.0, COLOR_JUST_BOOKED],
        ],
        showscale=False,
        xgap=3,
        ygap=3,
        hovertemplate="Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title=title,
        xaxis_title="Position on floor (stairs/lift at #1)",
        height=max(400, len(floors) * 45),
        yaxis_type="category",
    )
    return fig


def utilization_donut(used: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing overall room occupancy."""
    available = total - used
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Available"],
        values=[used, available],
        hole=0.6,
        marker_colors=[COLOR_OCCUPIED, COLOR_AVAILABLE],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{used}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def floor_availability_bar(availability: List[dict]) -> go.Figure:
    """Horizontal bar of free rooms per floor."""
    df = pd.DataFrame(availability).sort_values("floor_number", ascending=False)
    df["floor_label"] = "Floor " + df["floor_number"].astype(str)

    fig = px.bar(
        df, x="available_rooms", y="floor_label",
        orientation="h",
        title="Free Rooms per Floor",
        labels={"available_rooms": "Free rooms", "floor_label": "Floor"},
        color="occupancy_pct",
        color_continuous_scale=[COLOR_AVAILABLE, "#F5C542", COLOR_OCCUPIED],
        range_color=[0, 1],
    )
    fig.update_layout(height=max(300, len(df) * 35), yaxis_type="category")
    fig.update_traces(texttemplate="%{x}", textposition="auto")
    return fig
