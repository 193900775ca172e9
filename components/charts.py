"""Plotly chart builders for the Medical Supply Distribution Optimizer."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

from models.result import AllocationResult
from data.problem_builder import center_labels, hospital_labels


def distribution_heatmap(result: AllocationResult) -> go.Figure:
    """Heatmap of units shipped per center/hospital route."""
    m = len(result.distribution)
    n = len(result.distribution[0]) if m else 0
    fig = go.Figure(data=go.Heatmap(
        z=result.distribution,
        x=hospital_labels(n),
        y=center_labels(m),
        colorscale="Blues",
        text=result.distribution,
        texttemplate="%{text}",
        hovertemplate="Center: %{y}<br>Hospital: %{x}<br>Units: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title="Shipments by Route",
        xaxis_title="Hospital",
        yaxis_title="Supply Center",
        yaxis_autorange="reversed",
        height=max(350, m * 45),
    )
    return fig


def supply_utilization_bar(result: AllocationResult) -> go.Figure:
    """Shipped vs remaining capacity per supply center."""
    df = pd.DataFrame([{
        "center": f"Center {s.center_id + 1}",
        "Shipped": s.initial_supply - s.remaining_supply,
        "Remaining": s.remaining_supply,
    } for s in result.supply_status])
    fig = px.bar(
        df, x="center", y=["Shipped", "Remaining"],
        barmode="stack",
        labels={"value": "Units", "center": "Supply Center", "variable": ""},
        title="Supply Center Utilization",
        color_discrete_map={"Shipped": "#0E7C86", "Remaining": "#A7D8DC"},
    )
    fig.update_layout(legend_title_text="", height=380)
    return fig


def demand_fulfillment_bar(result: AllocationResult) -> go.Figure:
    """Fulfillment % per hospital."""
    df = pd.DataFrame([{
        "hospital": f"Hospital {d.hospital_id + 1}",
        "fulfilled_pct": float(d.percent_fulfilled),
    } for d in result.demand_status])
    fig = px.bar(
        df, x="hospital", y="fulfilled_pct",
        labels={"fulfilled_pct": "Fulfilled %", "hospital": "Hospital"},
        title="Hospital Demand Fulfillment",
        color="fulfilled_pct",
        color_continuous_scale=["#D64545", "#F5C542", "#2E9E5B"],
        range_color=[0, 100],
    )
    fig.update_layout(height=380, yaxis_range=[0, 105])
    return fig


def utilization_donut(shipped: float, capacity: float, title: str = "Overall Utilization") -> go.Figure:
    """Donut chart of total shipped vs idle capacity."""
    idle = max(0, capacity - shipped)
    fig = go.Figure(data=[go.Pie(
        labels=["Shipped", "Idle"],
        values=[shipped, idle],
        hole=0.6,
        marker_colors=["#0E7C86", "#A7D8DC"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{shipped:,.0f}/{capacity:,.0f}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig
