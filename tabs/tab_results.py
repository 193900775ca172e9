"""Tab 2: Optimization Results — distribution matrix, supply and hospital status."""

import streamlit as st

from data.session_store import get_result, set_result
from data.export import (
    distribution_frame, distribution_to_csv, supply_status_frame, demand_status_frame,
)
from components.metrics_cards import render_feasibility_badge
from components.tables import render_distribution_table, render_status_table
from config.defaults import ALLOCATION_METHODS, EXPORT_FILENAME


def render(sidebar_state):
    """Render the Optimization Results tab."""
    st.header("Optimization Results")

    result = get_result()
    if result is None:
        st.info("No results yet. Configure the problem and click **Optimize Distribution**.")
        return

    render_feasibility_badge(result.is_feasible, result.total_cost)
    st.caption(f"Method: {ALLOCATION_METHODS.get(result.method, result.method)}")

    if not result.is_feasible:
        st.warning(result.message, icon="⚠️")

    tab_dist, tab_supply, tab_demand = st.tabs([
        "Distribution Matrix",
        "Supply Center Status",
        "Hospital Demand Status",
    ])

    with tab_dist:
        render_distribution_table(distribution_frame(result))
        st.download_button(
            "Download as CSV",
            distribution_to_csv(result),
            EXPORT_FILENAME,
            "text/csv",
            key="btn_export_distribution",
        )

    with tab_supply:
        render_status_table(supply_status_frame(result))

    with tab_demand:
        render_status_table(demand_status_frame(result))

    if result.explanation_steps:
        with st.expander("How was this plan built?", expanded=False):
            for line in result.explanation_steps:
                st.markdown(f"- {line}")

    st.divider()
    if st.button("Reset Optimization", key="btn_reset_result"):
        set_result(None)
        st.rerun()
