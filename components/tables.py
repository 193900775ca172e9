"""Styled dataframe display helpers for allocation results."""

import streamlit as st
import pandas as pd


STATUS_STYLES = {
    "Fully Utilized": "background-color: #d4edda; color: #155724; font-weight: bold",
    "Fully Satisfied": "background-color: #d4edda; color: #155724; font-weight: bold",
    "Nearly Depleted": "background-color: #fff3cd; color: #856404; font-weight: bold",
    "Partially Filled": "background-color: #fff3cd; color: #856404; font-weight: bold",
    "Capacity Available": "background-color: #e3f2fd; color: #0d47a1",
    "Unfulfilled": "background-color: #ffcccc; color: #cc0000; font-weight: bold",
}


def render_distribution_table(df: pd.DataFrame):
    """Distribution matrix with used routes highlighted."""
    def highlight_route(val):
        try:
            if float(val) > 0:
                return "background-color: #e0f2f1; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    st.dataframe(df.style.map(highlight_route), use_container_width=True)


def render_status_table(df: pd.DataFrame, status_column: str = "Status"):
    """Render a supply or demand status table with color-coded status labels."""
    def color_status(val):
        return STATUS_STYLES.get(val, "")

    if status_column in df.columns:
        styled = df.style.map(color_status, subset=[status_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
