"""Generates human-readable explanations for allocation results."""

from typing import List, Sequence
from models.result import AllocationStep


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}"


def explain_northwest_corner(
    steps: Sequence[AllocationStep],
    total_cost: float,
) -> List[str]:
    """Produce step-by-step explanation of a North-West Corner walk."""
    lines = []

    for n, step in enumerate(steps, start=1):
        if step.remaining_supply == 0 and step.remaining_demand == 0:
            outcome = "center depleted and hospital satisfied"
        elif step.remaining_supply == 0:
            outcome = f"center depleted, hospital still needs {_fmt(step.remaining_demand)}"
        elif step.remaining_demand == 0:
            outcome = f"hospital satisfied, center has {_fmt(step.remaining_supply)} left"
        else:
            outcome = "no further movement possible"
        lines.append(
            f"Step {n} - Center {step.supply_index + 1} -> Hospital {step.demand_index + 1}: "
            f"ship {_fmt(step.quantity)} units ({outcome})"
        )

    lines.append(
        f"Total cost: {_fmt(total_cost)} "
        "(routes chosen by position only; unit costs were not used to pick them)"
    )
    return lines


def explain_least_cost(
    distribution: Sequence[Sequence[float]],
    costs: Sequence[Sequence[float]],
    total_cost: float,
) -> List[str]:
    """List every route used by the LP plan with its cost contribution."""
    lines = []
    for i, row in enumerate(distribution):
        for j, qty in enumerate(row):
            if qty:
                lines.append(
                    f"Center {i + 1} -> Hospital {j + 1}: {_fmt(qty)} units "
                    f"x {_fmt(costs[i][j])} = {_fmt(qty * costs[i][j])}"
                )
    lines.append(f"Total cost: {_fmt(total_cost)} (minimum over all feasible plans)")
    return lines
