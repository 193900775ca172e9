"""Tab 3: Live Status Monitoring — KPIs and charts for the latest allocation."""

import streamlit as st

from data.session_store import get_result
from engine.statistics import compute_dashboard_stats
from components.metrics_cards import render_dashboard_metrics, render_metric_row
from components.charts import (
    distribution_heatmap, supply_utilization_bar, demand_fulfillment_bar, utilization_donut,
)


def render(sidebar_state):
    """Render the Live Status Monitoring tab."""
    st.header("Live Status Monitoring")

    result = get_result()
    stats = compute_dashboard_stats(result)
    render_dashboard_metrics(stats)

    if result is None:
        st.info("Run an optimization to populate the dashboard.")
        return

    high_id, high_pct = stats.highest_utilized_center
    low_id, low_pct = stats.lowest_utilized_center
    render_metric_row([
        {"label": "Highest Utilized Center", "value": f"Center {high_id + 1}", "delta": f"{high_pct:.1f}%",
         "delta_color": "off"},
        {"label": "Lowest Utilized Center", "value": f"Center {low_id + 1}", "delta": f"{low_pct:.1f}%",
         "delta_color": "off"},
        {"label": "Critical Hospitals", "value": str(len(stats.critical_hospitals))},
    ])

    if stats.critical_hospitals:
        names = ", ".join(f"Hospital {h + 1}" for h in stats.critical_hospitals)
        st.error(f"Hospitals below full demand: {names}", icon="🔴")
    else:
        st.success("All hospitals fully supplied.", icon="🟢")

    if not result.is_feasible:
        return

    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(supply_utilization_bar(result), use_container_width=True)
    with col2:
        capacity = sum(s.initial_supply for s in result.supply_status)
        st.plotly_chart(utilization_donut(result.total_shipped, capacity), use_container_width=True)

    st.plotly_chart(demand_fulfillment_bar(result), use_container_width=True)
    st.plotly_chart(distribution_heatmap(result), use_container_width=True)
