"""KPI metric card widgets for results and the status dashboard."""

import streamlit as st

from engine.statistics import DashboardStats


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally delta, delta_color, help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(
                label=m["label"],
                value=m["value"],
                delta=m.get("delta"),
                delta_color=m.get("delta_color", "normal"),
                help=m.get("help"),
            )


def render_dashboard_metrics(stats: DashboardStats):
    render_metric_row([
        {"label": "Total Supplies Moved", "value": f"{stats.total_supplies_moved:,.0f}"},
        {"label": "Avg. Cost Per Unit", "value": f"{stats.avg_cost_per_unit:.2f}"},
        {"label": "Supply Utilization", "value": f"{stats.avg_supply_utilization:.1f}%"},
        {"label": "Demand Satisfaction", "value": f"{stats.avg_demand_satisfaction:.1f}%",
         "delta": f"{len(stats.critical_hospitals)} hospitals short" if stats.critical_hospitals else None,
         "delta_color": "inverse"},
    ])


def render_feasibility_badge(is_feasible: bool, total_cost: float):
    """Feasibility and total cost, shown above the result tabs."""
    col1, col2 = st.columns(2)
    with col1:
        if is_feasible:
            st.success("Feasible Solution", icon="✅")
        else:
            st.warning("Infeasible Solution", icon="⚠️")
    with col2:
        st.info(f"Total Cost: {total_cost:,}", icon="💰")
