from models.problem import ProblemSpec
from models.result import AllocationResult, AllocationStep, DemandStatus, SupplyStatus
