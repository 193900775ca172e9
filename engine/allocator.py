"""Transportation-problem solver — North-West Corner allocation of supplies to hospitals."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence, Tuple

from models.problem import ProblemSpec
from models.result import AllocationResult, AllocationStep, DemandStatus, SupplyStatus
from data.validator import InvalidInputError, ensure_valid
from engine.explainer import explain_northwest_corner, explain_least_cost
from engine.optimizer import optimize_distribution
from config.defaults import (
    ALLOCATION_METHOD, ALLOCATION_METHODS, OPTIMIZER_TIME_LIMIT,
    SUCCESS_MESSAGE, INFEASIBLE_MESSAGE,
)

logger = logging.getLogger(__name__)


def format_percent(part: float, whole: float) -> str:
    """part / whole * 100 with one decimal, ties rounded up. A zero whole is 0% used (or 100% met, see callers)."""
    if whole == 0:
        return "0.0"
    value = Decimal(part / whole * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{value:f}"


def northwest_corner(
    supplies: Sequence[float],
    demands: Sequence[float],
) -> Tuple[List[List[float]], List[AllocationStep]]:
    """Fill the shipment matrix from the top-left cell, ignoring cost.

    Assumes sum(supplies) >= sum(demands). Returns the matrix and the visited cells.
    """
    m, n = len(supplies), len(demands)
    remaining_supply = list(supplies)
    remaining_demand = list(demands)
    distribution = [[0] * n for _ in range(m)]
    steps = []

    i = j = 0
    while i < m and j < n:
        quantity = min(remaining_supply[i], remaining_demand[j])
        distribution[i][j] = quantity
        remaining_supply[i] -= quantity
        remaining_demand[j] -= quantity
        steps.append(AllocationStep(i, j, quantity, remaining_supply[i], remaining_demand[j]))
        logger.debug(
            "NWC cell (%d, %d): shipped %s, supply left %s, demand left %s",
            i, j, quantity, remaining_supply[i], remaining_demand[j],
        )

        supply_done = remaining_supply[i] == 0
        demand_done = remaining_demand[j] == 0
        last_row = i == m - 1
        last_col = j == n - 1

        if supply_done and not demand_done and not last_row:
            i += 1
        elif demand_done and not supply_done and not last_col:
            j += 1
        elif supply_done and demand_done:
            if not last_row and not last_col:
                i += 1
                j += 1
            elif not last_row:
                i += 1
            elif not last_col:
                j += 1
            else:
                break
        else:
            # Surplus left after the last hospital, or residue on the last row/column
            break

    return distribution, steps


def compute_total_cost(
    distribution: Sequence[Sequence[float]],
    costs: Sequence[Sequence[float]],
) -> float:
    total = 0
    for i, row in enumerate(distribution):
        for j, qty in enumerate(row):
            total += qty * costs[i][j]
    return total


def build_supply_status(
    supplies: Sequence[float],
    distribution: Sequence[Sequence[float]],
) -> List[SupplyStatus]:
    statuses = []
    for i, supply in enumerate(supplies):
        used = sum(distribution[i])
        statuses.append(SupplyStatus(
            center_id=i,
            initial_supply=supply,
            remaining_supply=supply - used,
            percent_utilized=format_percent(used, supply),
        ))
    return statuses


def build_demand_status(
    demands: Sequence[float],
    distribution: Sequence[Sequence[float]],
) -> List[DemandStatus]:
    statuses = []
    for j, demand in enumerate(demands):
        fulfilled = sum(row[j] for row in distribution)
        # A hospital that needs nothing is fully served
        pct = format_percent(fulfilled, demand) if demand != 0 else "100.0"
        statuses.append(DemandStatus(
            hospital_id=j,
            total_demand=demand,
            fulfilled_demand=fulfilled,
            percent_fulfilled=pct,
        ))
    return statuses


def infeasible_result(
    spec: ProblemSpec,
    message: str = INFEASIBLE_MESSAGE,
    method: str = ALLOCATION_METHOD,
) -> AllocationResult:
    """Result returned without allocating: zero plan, zero cost, literal "0" percentages."""
    return AllocationResult(
        distribution=[[0] * spec.demand_count for _ in range(spec.supply_count)],
        total_cost=0,
        supply_status=[
            SupplyStatus(center_id=i, initial_supply=s, remaining_supply=s, percent_utilized="0")
            for i, s in enumerate(spec.supplies)
        ],
        demand_status=[
            DemandStatus(hospital_id=j, total_demand=d, fulfilled_demand=0, percent_fulfilled="0")
            for j, d in enumerate(spec.demands)
        ],
        is_feasible=False,
        message=message,
        method=method,
    )


def solve(
    spec: ProblemSpec,
    method: str = ALLOCATION_METHOD,
    solver_config: Optional[dict] = None,
) -> AllocationResult:
    """Allocate supplies to hospitals and evaluate the plan.

    Methods:
    - northwest_corner: staircase fill from the top-left cell; feasible, not cost optimal
    - least_cost: LP minimising total transport cost (see engine.optimizer)

    Raises InvalidInputError for malformed input. An infeasible problem
    (supply < demand) is a normal result with is_feasible=False.
    """
    if method not in ALLOCATION_METHODS:
        raise InvalidInputError([
            f"Unknown allocation method '{method}'. "
            f"Expected one of: {', '.join(ALLOCATION_METHODS)}."
        ])
    ensure_valid(spec)
    cfg = solver_config or {}

    total_supply = spec.total_supply
    total_demand = spec.total_demand
    if total_supply < total_demand:
        logger.warning(
            "Infeasible problem: total supply %s < total demand %s", total_supply, total_demand,
        )
        return infeasible_result(spec, method=method)

    supplies = list(spec.supplies)
    demands = list(spec.demands)
    costs = [list(row) for row in spec.costs]

    if method == "least_cost":
        outcome = optimize_distribution(
            spec, time_limit=cfg.get("time_limit", OPTIMIZER_TIME_LIMIT),
        )
        if outcome.status != "Optimal":
            logger.error("LP solver returned status %s", outcome.status)
            return infeasible_result(
                spec,
                message=f"Optimization could not find a solution. Status: {outcome.status}",
                method=method,
            )
        distribution = outcome.distribution
        total_cost = compute_total_cost(distribution, costs)
        explanation = explain_least_cost(distribution, costs, total_cost)
    else:
        distribution, steps = northwest_corner(supplies, demands)
        total_cost = compute_total_cost(distribution, costs)
        explanation = explain_northwest_corner(steps, total_cost)

    logger.info(
        "Solved %dx%d problem with %s: total cost %s",
        spec.supply_count, spec.demand_count, method, total_cost,
    )

    return AllocationResult(
        distribution=distribution,
        total_cost=total_cost,
        supply_status=build_supply_status(supplies, distribution),
        demand_status=build_demand_status(demands, distribution),
        is_feasible=True,
        message=SUCCESS_MESSAGE,
        method=method,
        explanation_steps=explanation,
    )
