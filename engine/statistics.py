"""Summary statistics and status labels for the live status dashboard."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from models.result import AllocationResult
from config.defaults import FULL_PERCENT, NEARLY_DEPLETED_THRESHOLD


@dataclass
class DashboardStats:
    total_supplies_moved: float = 0
    avg_cost_per_unit: float = 0.0
    avg_supply_utilization: float = 0.0     # mean percent across centers
    avg_demand_satisfaction: float = 0.0    # mean percent across hospitals
    highest_utilized_center: Tuple[int, float] = (0, 0.0)
    lowest_utilized_center: Tuple[int, float] = (0, 100.0)
    critical_hospitals: List[int] = field(default_factory=list)


def supply_status_label(percent_utilized: str) -> str:
    pct = float(percent_utilized)
    if pct == FULL_PERCENT:
        return "Fully Utilized"
    elif pct > NEARLY_DEPLETED_THRESHOLD:
        return "Nearly Depleted"
    return "Capacity Available"


def demand_status_label(percent_fulfilled: str) -> str:
    pct = float(percent_fulfilled)
    if pct == FULL_PERCENT:
        return "Fully Satisfied"
    elif pct > 0:
        return "Partially Filled"
    return "Unfulfilled"


def compute_dashboard_stats(result: Optional[AllocationResult]) -> DashboardStats:
    """Aggregate a result into dashboard KPIs. No result gives the zeroed defaults."""
    if result is None:
        return DashboardStats()

    moved = result.total_shipped
    avg_cost = result.total_cost / moved if moved else 0.0

    utilization = [float(s.percent_utilized) for s in result.supply_status]
    satisfaction = [float(d.percent_fulfilled) for d in result.demand_status]

    highest = (0, 0.0)
    lowest = (0, 100.0)
    for status, pct in zip(result.supply_status, utilization):
        if pct > highest[1]:
            highest = (status.center_id, pct)
        if pct < lowest[1]:
            lowest = (status.center_id, pct)

    critical = [
        d.hospital_id for d, pct in zip(result.demand_status, satisfaction)
        if pct < FULL_PERCENT
    ]

    return DashboardStats(
        total_supplies_moved=moved,
        avg_cost_per_unit=avg_cost,
        avg_supply_utilization=sum(utilization) / max(1, len(utilization)),
        avg_demand_satisfaction=sum(satisfaction) / max(1, len(satisfaction)),
        highest_utilized_center=highest,
        lowest_utilized_center=lowest,
        critical_hospitals=critical,
    )
