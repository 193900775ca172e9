"""Form-state helpers: default problem, resizing, and the transportation tableau."""

from typing import List
import pandas as pd

from models.problem import ProblemSpec
from data.validator import InvalidInputError, validate_tableau
from config.defaults import (
    DEFAULT_SUPPLIES, DEFAULT_DEMANDS, DEFAULT_COSTS,
    DEFAULT_NEW_SUPPLY, DEFAULT_NEW_DEMAND, DEFAULT_NEW_COST,
    MIN_SUPPLY_CENTERS, MAX_SUPPLY_CENTERS, MIN_HOSPITALS, MAX_HOSPITALS,
    CENTER_LABEL, HOSPITAL_LABEL, SUPPLY_COLUMN, DEMAND_ROW,
)


def _to_number(value):
    """Keep whole numbers as int so tables and exports show 80, not 80.0."""
    number = float(value)
    return int(number) if number.is_integer() else number


def center_labels(count: int) -> List[str]:
    return [f"{CENTER_LABEL} {i + 1}" for i in range(count)]


def hospital_labels(count: int) -> List[str]:
    return [f"{HOSPITAL_LABEL} {j + 1}" for j in range(count)]


def default_problem() -> ProblemSpec:
    return ProblemSpec(
        supply_count=len(DEFAULT_SUPPLIES),
        demand_count=len(DEFAULT_DEMANDS),
        supplies=list(DEFAULT_SUPPLIES),
        demands=list(DEFAULT_DEMANDS),
        costs=[list(row) for row in DEFAULT_COSTS],
    )


def resize_problem(spec: ProblemSpec, supply_count: int, demand_count: int) -> ProblemSpec:
    """Grow or shrink the problem, keeping existing values.

    Counts are clamped to the form bounds. New centers start with the default
    supply, new hospitals with the default demand, new cost cells with the default cost.
    """
    supply_count = max(MIN_SUPPLY_CENTERS, min(MAX_SUPPLY_CENTERS, int(supply_count)))
    demand_count = max(MIN_HOSPITALS, min(MAX_HOSPITALS, int(demand_count)))

    supplies = list(spec.supplies[:supply_count])
    supplies += [DEFAULT_NEW_SUPPLY] * (supply_count - len(supplies))

    demands = list(spec.demands[:demand_count])
    demands += [DEFAULT_NEW_DEMAND] * (demand_count - len(demands))

    costs = []
    for i in range(supply_count):
        row = list(spec.costs[i][:demand_count]) if i < len(spec.costs) else []
        row += [DEFAULT_NEW_COST] * (demand_count - len(row))
        costs.append(row)

    return ProblemSpec(
        supply_count=supply_count,
        demand_count=demand_count,
        supplies=supplies,
        demands=demands,
        costs=costs,
    )


def problem_to_tableau(spec: ProblemSpec) -> pd.DataFrame:
    """Cost matrix with a Supply column and a Demand row, as edited in the form."""
    columns = hospital_labels(spec.demand_count)
    rows = []
    for i in range(spec.supply_count):
        row = dict(zip(columns, spec.costs[i]))
        row[SUPPLY_COLUMN] = spec.supplies[i]
        rows.append(row)
    demand_row = dict(zip(columns, spec.demands))
    demand_row[SUPPLY_COLUMN] = None
    rows.append(demand_row)

    index = center_labels(spec.supply_count) + [DEMAND_ROW]
    return pd.DataFrame(rows, index=index, columns=columns + [SUPPLY_COLUMN])


def tableau_to_problem(df: pd.DataFrame) -> ProblemSpec:
    """Parse a tableau back into a ProblemSpec. Raises InvalidInputError on a malformed table."""
    check = validate_tableau(df)
    if not check.is_valid:
        raise InvalidInputError(check.errors)

    hospital_cols = [c for c in df.columns if c != SUPPLY_COLUMN]
    body = df.iloc[:-1]
    demand_row = df.iloc[-1]

    supplies = [_to_number(v) for v in body[SUPPLY_COLUMN]]
    demands = [_to_number(demand_row[c]) for c in hospital_cols]
    costs = [[_to_number(row[c]) for c in hospital_cols] for _, row in body.iterrows()]

    return ProblemSpec(
        supply_count=len(supplies),
        demand_count=len(demands),
        supplies=supplies,
        demands=demands,
        costs=costs,
    )
