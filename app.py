"""Hotel Room Allocation Platform: Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_building_view,
    tab_allocation_details,
)


def main():
    st.set_page_config(
        page_title="Hotel Room Booking",
        page_icon="🏨",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2 = st.tabs([
        "🏨 Building View",
        "🧭 Allocation Details",
    ])

    with tab1:
        tab_building_view.render(sidebar_state)
    with tab2:
        tab_allocation_details.render(sidebar_state)


if __name__ == "__main__":
    main()
