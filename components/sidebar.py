"""Global sidebar controls for allocation method selection."""

import streamlit as st
from dataclasses import dataclass

from data.session_store import get_solver_config, set_solver_config, get_solve_history
from config.defaults import ALLOCATION_METHODS, ALLOCATION_METHOD, OPTIMIZER_TIME_LIMIT


@dataclass
class SidebarState:
    method: str
    time_limit: int


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    config = get_solver_config()

    with st.sidebar:
        st.title("Medical Supply Optimizer")
        st.divider()

        methods = list(ALLOCATION_METHODS.keys())
        current = config.get("method", ALLOCATION_METHOD)
        method = st.radio(
            "Allocation Method",
            options=methods,
            format_func=lambda k: ALLOCATION_METHODS[k],
            index=methods.index(current) if current in methods else 0,
            key="sidebar_method",
            help="North-West Corner fills routes in order and ignores cost. "
                 "Least Cost solves a linear program for the cheapest plan.",
        )

        time_limit = config.get("time_limit", OPTIMIZER_TIME_LIMIT)
        if method == "least_cost":
            time_limit = st.slider(
                "Solver time limit (seconds)",
                min_value=5, max_value=120, value=int(time_limit), step=5,
                key="sidebar_time_limit",
            )

        if method != config.get("method") or time_limit != config.get("time_limit"):
            set_solver_config({"method": method, "time_limit": time_limit})

        st.divider()

        history = get_solve_history()
        if history:
            st.caption("Recent runs")
            for run in history:
                status = "feasible" if run["feasible"] else "infeasible"
                st.caption(
                    f"{run['timestamp']} · {run['size']} · "
                    f"{ALLOCATION_METHODS.get(run['method'], run['method'])} · "
                    f"cost {run['total_cost']:,} ({status})"
                )
        else:
            st.caption("No runs yet — configure the problem and optimize.")

    return SidebarState(method=method, time_limit=time_limit)
