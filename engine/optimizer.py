"""PuLP LP-based least-cost transportation plan."""

from dataclasses import dataclass
from typing import List
import pulp

from models.problem import ProblemSpec
from config.defaults import OPTIMIZER_TIME_LIMIT


@dataclass
class OptimizationOutcome:
    status: str  # "Optimal", "Infeasible", "Not Solved", ...
    distribution: List[List[float]]
    objective_value: float


def _all_integral(values) -> bool:
    return all(float(v).is_integer() for v in values)


def optimize_distribution(
    spec: ProblemSpec,
    time_limit: int = OPTIMIZER_TIME_LIMIT,
) -> OptimizationOutcome:
    """
    Minimise total transport cost subject to:
    - C1: each center ships at most its supply
    - C2: each hospital receives exactly its demand

    The constraint matrix is totally unimodular, so integral supplies and
    demands give an integral optimum; values are rounded back to int then.
    """
    m, n = spec.supply_count, spec.demand_count
    centers = range(m)
    hospitals = range(n)

    prob = pulp.LpProblem("MedicalSupplyTransport", pulp.LpMinimize)

    # Decision variables: x[i][j] = units shipped from center i to hospital j
    x = {
        (i, j): pulp.LpVariable(f"x_{i}_{j}", lowBound=0)
        for i in centers for j in hospitals
    }

    prob += pulp.lpSum(spec.costs[i][j] * x[(i, j)] for i in centers for j in hospitals), "total_cost"

    # C1: Supply capacity
    for i in centers:
        prob += pulp.lpSum(x[(i, j)] for j in hospitals) <= spec.supplies[i], f"supply_{i}"

    # C2: Demand satisfaction
    for j in hospitals:
        prob += pulp.lpSum(x[(i, j)] for i in centers) == spec.demands[j], f"demand_{j}"

    prob.solve(pulp.PULP_CBC_CMD(msg=0, timeLimit=time_limit))
    status = pulp.LpStatus[prob.status]

    if status != "Optimal":
        return OptimizationOutcome(
            status=status,
            distribution=[[0] * n for _ in centers],
            objective_value=0,
        )

    integral = _all_integral(spec.supplies) and _all_integral(spec.demands)
    distribution = []
    for i in centers:
        row = []
        for j in hospitals:
            val = x[(i, j)].varValue or 0
            row.append(int(round(val)) if integral else val)
        distribution.append(row)

    return OptimizationOutcome(
        status=status,
        distribution=distribution,
        objective_value=pulp.value(prob.objective) or 0,
    )
