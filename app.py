"""Medical Supply Distribution Optimizer — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_LEVEL, LOG_FORMAT
from tabs import (
    tab_input,
    tab_results,
    tab_dashboard,
)


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    st.set_page_config(
        page_title="Medical Supply Optimizer",
        page_icon="🏥",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "🧮 Supply & Demand",
        "📦 Results",
        "📊 Live Status",
    ])

    with tab1:
        tab_input.render(sidebar_state)
    with tab2:
        tab_results.render(sidebar_state)
    with tab3:
        tab_dashboard.render(sidebar_state)


if __name__ == "__main__":
    main()
