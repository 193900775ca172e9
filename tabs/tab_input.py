"""Tab 1: Supply & Demand Configuration — problem form, upload, and solve."""

import streamlit as st

from data.problem_builder import resize_problem, problem_to_tableau, tableau_to_problem
from data.loader import load_problem
from data.validator import InvalidInputError, validate_problem
from data.sample_data import generate_sample_tableau, generate_random_problem
from data.session_store import (
    get_problem, set_problem, set_result, reset_problem, record_solve,
)
from engine.allocator import solve
from components.metrics_cards import render_metric_row
from config.defaults import (
    MIN_SUPPLY_CENTERS, MAX_SUPPLY_CENTERS, MIN_HOSPITALS, MAX_HOSPITALS,
    FORM_SHORTFALL_MESSAGE,
)

SIZE_WIDGET_KEYS = ("input_supply_count", "input_demand_count")


def _replace_problem(problem):
    """Swap in a new problem and let the size inputs pick up its counts."""
    set_problem(problem)
    set_result(None)
    for key in SIZE_WIDGET_KEYS:
        st.session_state.pop(key, None)
    st.rerun()


def _render_upload():
    with st.expander("Load problem from file", expanded=False):
        st.caption(
            "Upload a CSV or XLSX tableau: first column holds the row labels "
            "(**Center 1..m**, then **Demand**), one column per hospital plus a **Supply** column."
        )
        uploaded = st.file_uploader("Tableau file", type=["csv", "xlsx"], key="upload_tableau")

        col_upload, col_sample = st.columns(2)
        with col_upload:
            if st.button("Upload & Validate", key="btn_upload_tableau"):
                if uploaded:
                    try:
                        _replace_problem(load_problem(uploaded))
                    except InvalidInputError as e:
                        for err in e.errors:
                            st.error(err)
                    except ValueError as e:
                        st.error(f"Error loading file: {e}")
                else:
                    st.warning("Please upload a tableau file.")
        with col_sample:
            st.download_button(
                "Download Sample Tableau (CSV)",
                generate_sample_tableau().to_csv(),
                "sample_tableau.csv",
                "text/csv",
                key="btn_sample_tableau",
            )


def render(sidebar_state):
    """Render the Supply & Demand Configuration tab."""
    st.header("Supply & Demand Configuration")

    problem = get_problem()

    # --- Problem size ---
    col1, col2 = st.columns(2)
    with col1:
        supply_count = st.number_input(
            "Number of Supply Centers",
            min_value=min(MIN_SUPPLY_CENTERS, problem.supply_count),
            max_value=max(MAX_SUPPLY_CENTERS, problem.supply_count),
            value=problem.supply_count, step=1, key="input_supply_count",
        )
    with col2:
        demand_count = st.number_input(
            "Number of Hospitals",
            min_value=min(MIN_HOSPITALS, problem.demand_count),
            max_value=max(MAX_HOSPITALS, problem.demand_count),
            value=problem.demand_count, step=1, key="input_demand_count",
        )

    if supply_count != problem.supply_count or demand_count != problem.demand_count:
        problem = resize_problem(problem, supply_count, demand_count)
        set_problem(problem)

    _render_upload()

    # --- Tableau editor ---
    st.subheader("Transportation Cost Matrix")
    st.caption(
        "Cells are unit transport costs. Edit center capacities in the **Supply** column "
        "and hospital requirements in the **Demand** row."
    )
    edited = st.data_editor(
        problem_to_tableau(problem),
        use_container_width=True,
        key=f"tableau_editor_{problem.supply_count}x{problem.demand_count}",
        num_rows="fixed",
    )

    try:
        edited_problem = tableau_to_problem(edited)
    except InvalidInputError as e:
        for err in e.errors:
            st.error(err)
        return

    check = validate_problem(edited_problem)
    for err in check.errors:
        st.error(err)
    for warning in check.warnings:
        st.caption(warning)

    render_metric_row([
        {"label": "Total Supply", "value": f"{edited_problem.total_supply:,}"},
        {"label": "Total Demand", "value": f"{edited_problem.total_demand:,}"},
        {"label": "Balance", "value": f"{edited_problem.total_supply - edited_problem.total_demand:+,}"},
    ])

    st.divider()

    # --- Actions ---
    col_reset, col_random, col_run = st.columns([1, 1, 2])
    with col_reset:
        if st.button("Reset", key="btn_reset_form"):
            reset_problem()
            for key in SIZE_WIDGET_KEYS:
                st.session_state.pop(key, None)
            st.rerun()
    with col_random:
        if st.button("Random Balanced Problem", key="btn_random_problem"):
            _replace_problem(generate_random_problem(problem.supply_count, problem.demand_count, seed=None))
    with col_run:
        run = st.button("Optimize Distribution", type="primary", key="btn_optimize",
                        disabled=not check.is_valid)

    if run:
        set_problem(edited_problem)
        if edited_problem.total_supply < edited_problem.total_demand:
            st.error(FORM_SHORTFALL_MESSAGE)
            return
        try:
            with st.spinner("Allocating supplies..."):
                result = solve(
                    edited_problem,
                    method=sidebar_state.method,
                    solver_config={"time_limit": sidebar_state.time_limit},
                )
        except InvalidInputError as e:
            for err in e.errors:
                st.error(err)
            return

        set_result(result)
        record_solve(edited_problem, result)
        if result.is_feasible:
            st.success(f"{result.message}. Total cost: {result.total_cost:,}. See the Results tab.")
        else:
            st.warning(result.message)
