"""Validation for problem inputs and uploaded tableau files."""

import math
from dataclasses import dataclass, field
from numbers import Integral, Real
from typing import List, Optional
import pandas as pd

from models.problem import ProblemSpec
from config.defaults import SUPPLY_COLUMN, DEMAND_ROW


class InvalidInputError(ValueError):
    """Raised when a problem is malformed (shapes, negative or non-finite values)."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid input")


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _check_values(values, label: str, result: ValidationResult):
    for idx, value in enumerate(values):
        if not _is_number(value):
            result.is_valid = False
            result.errors.append(f"{label}: entry {idx + 1} is not a number ({value!r}).")
        elif not math.isfinite(value):
            result.is_valid = False
            result.errors.append(f"{label}: entry {idx + 1} must be finite.")
        elif value < 0:
            result.is_valid = False
            result.errors.append(f"{label}: entry {idx + 1} cannot be negative.")


def _as_list(value, label: str, result: ValidationResult) -> Optional[list]:
    if not isinstance(value, (list, tuple)):
        result.is_valid = False
        result.errors.append(f"{label}: expected a list, got {type(value).__name__}.")
        return None
    return list(value)


def _check_count(value, label: str, result: ValidationResult) -> bool:
    if not isinstance(value, Integral) or isinstance(value, bool) or value <= 0:
        result.is_valid = False
        result.errors.append(f"{label} must be a positive integer, got {value!r}.")
        return False
    return True


def validate_problem(spec: ProblemSpec) -> ValidationResult:
    """Collect every structural and value problem in a ProblemSpec."""
    result = ValidationResult()

    supply_ok = _check_count(spec.supply_count, "Supply center count", result)
    demand_ok = _check_count(spec.demand_count, "Hospital count", result)

    supplies = _as_list(spec.supplies, "Supplies", result)
    demands = _as_list(spec.demands, "Demands", result)
    rows = _as_list(spec.costs, "Costs", result)

    if supplies == []:
        result.is_valid = False
        result.errors.append("Supplies: at least one supply center is required.")
    elif supplies and supply_ok and len(supplies) != spec.supply_count:
        result.is_valid = False
        result.errors.append(
            f"Supplies: expected {spec.supply_count} values, got {len(supplies)}."
        )

    if demands == []:
        result.is_valid = False
        result.errors.append("Demands: at least one hospital is required.")
    elif demands and demand_ok and len(demands) != spec.demand_count:
        result.is_valid = False
        result.errors.append(
            f"Demands: expected {spec.demand_count} values, got {len(demands)}."
        )

    _check_values(supplies or [], "Supplies", result)
    _check_values(demands or [], "Demands", result)

    if rows is None:
        rows = []
    elif supply_ok and len(rows) != spec.supply_count:
        result.is_valid = False
        result.errors.append(
            f"Costs: expected {spec.supply_count} rows, got {len(rows)}."
        )
    for i, raw_row in enumerate(rows):
        row = _as_list(raw_row, f"Costs row {i + 1}", result)
        if row is None:
            continue
        if demand_ok and len(row) != spec.demand_count:
            result.is_valid = False
            result.errors.append(
                f"Costs: row {i + 1} has {len(row)} columns, expected {spec.demand_count}."
            )
        _check_values(row, f"Costs row {i + 1}", result)

    if result.is_valid:
        surplus = spec.total_supply - spec.total_demand
        if surplus > 0:
            result.warnings.append(
                f"Total supply exceeds total demand by {surplus:g} units. "
                "The surplus stays at the supply centers."
            )

    return result


def ensure_valid(spec: ProblemSpec) -> ValidationResult:
    """Validate and raise InvalidInputError on any error."""
    result = validate_problem(spec)
    if not result.is_valid:
        raise InvalidInputError(result.errors)
    return result


def validate_tableau(df: pd.DataFrame) -> ValidationResult:
    """Check an uploaded transportation tableau: hospital columns + Supply, center rows + Demand."""
    result = ValidationResult()
    if df.empty:
        result.is_valid = False
        result.errors.append("Tableau: File contains no data rows.")
        return result

    if SUPPLY_COLUMN not in df.columns:
        result.is_valid = False
        result.errors.append(f"Tableau: Missing required column: {SUPPLY_COLUMN}")

    labels = [str(v).strip() for v in df.index]
    if DEMAND_ROW not in labels:
        result.is_valid = False
        result.errors.append(f"Tableau: Missing required row: {DEMAND_ROW}")
    elif labels[-1] != DEMAND_ROW:
        result.is_valid = False
        result.errors.append(f"Tableau: '{DEMAND_ROW}' must be the last row.")

    if not result.is_valid:
        return result

    hospital_cols = [c for c in df.columns if c != SUPPLY_COLUMN]
    if not hospital_cols:
        result.is_valid = False
        result.errors.append("Tableau: At least one hospital column is required.")
    if len(df.index) < 2:
        result.is_valid = False
        result.errors.append("Tableau: At least one supply center row is required.")
    if not result.is_valid:
        return result

    body = df.iloc[:-1][hospital_cols + [SUPPLY_COLUMN]]
    demand_row = df.iloc[-1][hospital_cols]
    numeric = pd.Series(list(body.to_numpy().ravel()) + list(demand_row.to_numpy()))
    coerced = pd.to_numeric(numeric, errors="coerce")
    if coerced.isna().any():
        result.is_valid = False
        result.errors.append("Tableau: All supply, demand and cost cells must be numeric.")
    elif (coerced < 0).any():
        result.is_valid = False
        result.errors.append("Tableau: Supply, demand and cost values cannot be negative.")

    return result
