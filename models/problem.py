from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ProblemSpec:
    supply_count: int               # number of supply centers
    demand_count: int               # number of hospitals
    supplies: Sequence[float]       # capacity per center
    demands: Sequence[float]        # requirement per hospital
    costs: Sequence[Sequence[float]]  # unit cost, center x hospital

    @property
    def total_supply(self) -> float:
        return sum(self.supplies)

    @property
    def total_demand(self) -> float:
        return sum(self.demands)

    @property
    def is_balanced(self) -> bool:
        return self.total_supply == self.total_demand

    @classmethod
    def from_dict(cls, data: dict) -> "ProblemSpec":
        """Build from the form payload; accepts both supplyCenters/hospitals and supplyCount/demandCount."""
        supplies = list(data["supplies"])
        demands = list(data["demands"])
        supply_count = data.get("supplyCount", data.get("supplyCenters", len(supplies)))
        demand_count = data.get("demandCount", data.get("hospitals", len(demands)))
        return cls(
            supply_count=int(supply_count),
            demand_count=int(demand_count),
            supplies=supplies,
            demands=demands,
            costs=[list(row) for row in data["costs"]],
        )

    def to_dict(self) -> dict:
        return {
            "supplyCount": self.supply_count,
            "demandCount": self.demand_count,
            "supplies": list(self.supplies),
            "demands": list(self.demands),
            "costs": [list(row) for row in self.costs],
        }
