from dataclasses import dataclass, field
from typing import List


@dataclass
class SupplyStatus:
    center_id: int
    initial_supply: float
    remaining_supply: float
    percent_utilized: str   # one decimal, e.g. "66.7"; "0" when infeasible

    def to_dict(self) -> dict:
        return {
            "centerId": self.center_id,
            "initialSupply": self.initial_supply,
            "remainingSupply": self.remaining_supply,
            "percentUtilized": self.percent_utilized,
        }


@dataclass
class DemandStatus:
    hospital_id: int
    total_demand: float
    fulfilled_demand: float
    percent_fulfilled: str

    def to_dict(self) -> dict:
        return {
            "hospitalId": self.hospital_id,
            "totalDemand": self.total_demand,
            "fulfilledDemand": self.fulfilled_demand,
            "percentFulfilled": self.percent_fulfilled,
        }


@dataclass
class AllocationStep:
    """One cell visited by the North-West Corner walk."""
    supply_index: int
    demand_index: int
    quantity: float
    remaining_supply: float     # left at the center after this shipment
    remaining_demand: float     # still required by the hospital


@dataclass
class AllocationResult:
    distribution: List[List[float]]
    total_cost: float
    supply_status: List[SupplyStatus]
    demand_status: List[DemandStatus]
    is_feasible: bool
    message: str
    method: str = "northwest_corner"
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def total_shipped(self) -> float:
        return sum(sum(row) for row in self.distribution)

    def to_dict(self) -> dict:
        """Plain structure with the field names the result views bind to."""
        return {
            "distribution": [list(row) for row in self.distribution],
            "totalCost": self.total_cost,
            "supplyStatus": [s.to_dict() for s in self.supply_status],
            "demandStatus": [d.to_dict() for d in self.demand_status],
            "isFeasible": self.is_feasible,
            "message": self.message,
        }
