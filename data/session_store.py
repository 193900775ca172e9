"""Typed wrapper around st.session_state for form and result data."""

import streamlit as st
from datetime import datetime
from typing import List, Optional

from models.problem import ProblemSpec
from models.result import AllocationResult
from data.problem_builder import default_problem
from config.defaults import ALLOCATION_METHOD, OPTIMIZER_TIME_LIMIT, HISTORY_SIZE


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "problem": default_problem(),
        "result": None,
        "solve_history": [],
        "solver_config": {
            "method": ALLOCATION_METHOD,
            "time_limit": OPTIMIZER_TIME_LIMIT,
        },
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_problem() -> ProblemSpec:
    return st.session_state.get("problem") or default_problem()


def get_result() -> Optional[AllocationResult]:
    return st.session_state.get("result")


def get_solver_config() -> dict:
    return st.session_state.get("solver_config", {})


def get_solve_history() -> List[dict]:
    return st.session_state.get("solve_history", [])


# --- Setters ---

def set_problem(problem: ProblemSpec):
    st.session_state["problem"] = problem


def set_result(result: Optional[AllocationResult]):
    st.session_state["result"] = result


def set_solver_config(config: dict):
    st.session_state["solver_config"] = config


def reset_problem():
    """Restore the default form values and clear the last result."""
    st.session_state["problem"] = default_problem()
    st.session_state["result"] = None


# --- History ---

def record_solve(problem: ProblemSpec, result: AllocationResult):
    """Keep the last few runs for the sidebar."""
    history = get_solve_history()
    history.insert(0, {
        "timestamp": datetime.now().strftime("%H:%M:%S"),
        "size": f"{problem.supply_count}x{problem.demand_count}",
        "method": result.method,
        "total_cost": result.total_cost,
        "feasible": result.is_feasible,
    })
    st.session_state["solve_history"] = history[:HISTORY_SIZE]
