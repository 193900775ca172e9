"""Default configuration constants for the Medical Supply Distribution Optimizer."""

import os

# Allocation methods: "northwest_corner" (heuristic, default) or "least_cost" (LP)
ALLOCATION_METHOD = "northwest_corner"
ALLOCATION_METHODS = {
    "northwest_corner": "North-West Corner",
    "least_cost": "Least Cost (LP)",
}

# LP solver time limit (seconds)
OPTIMIZER_TIME_LIMIT = 30

# Form bounds for the number of supply centers / hospitals
MIN_SUPPLY_CENTERS = 2
MAX_SUPPLY_CENTERS = 10
MIN_HOSPITALS = 2
MAX_HOSPITALS = 10

# Values used when a center, hospital or cost cell is added to the form
DEFAULT_NEW_SUPPLY = 100
DEFAULT_NEW_DEMAND = 100
DEFAULT_NEW_COST = 5

# Initial form values
DEFAULT_SUPPLIES = [100, 150, 200]
DEFAULT_DEMANDS = [80, 90, 120, 160]
DEFAULT_COSTS = [
    [4, 6, 8, 5],
    [7, 3, 4, 9],
    [5, 8, 3, 2],
]

# Result messages
SUCCESS_MESSAGE = "Optimization completed successfully"
INFEASIBLE_MESSAGE = "Total supply is less than total demand. The problem has no feasible solution."
FORM_SHORTFALL_MESSAGE = "Total supply must be greater than or equal to total demand."

# Status thresholds (percent)
NEARLY_DEPLETED_THRESHOLD = 90.0
FULL_PERCENT = 100.0

# Tableau labels
CENTER_LABEL = "Center"
HOSPITAL_LABEL = "Hospital"
SUPPLY_COLUMN = "Supply"
DEMAND_ROW = "Demand"
EXPORT_INDEX_LABEL = "Supply Center"
EXPORT_FILENAME = "supply_distribution.csv"

# Number of past runs kept in the sidebar history
HISTORY_SIZE = 3

# Logging
LOG_LEVEL = os.environ.get("MEDSUPPLY_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
