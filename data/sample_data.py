"""Generate sample tableau files for the upload form."""

import os
import random
import pandas as pd
from typing import Optional

from data.problem_builder import default_problem, problem_to_tableau
from models.problem import ProblemSpec


def generate_sample_tableau() -> pd.DataFrame:
    """The default 3-center x 4-hospital problem as an uploadable tableau."""
    return problem_to_tableau(default_problem())


def generate_random_problem(supply_count: int, demand_count: int, seed: Optional[int] = 42) -> ProblemSpec:
    """Random balanced problem: total supply equals total demand."""
    rng = random.Random(seed)
    demands = [rng.randint(50, 200) for _ in range(demand_count)]
    total = sum(demands)
    # Split the total demand across centers so the problem is balanced
    cuts = sorted(rng.sample(range(1, total), supply_count - 1)) if supply_count > 1 else []
    bounds = [0] + cuts + [total]
    supplies = [bounds[k + 1] - bounds[k] for k in range(supply_count)]
    costs = [[rng.randint(1, 10) for _ in range(demand_count)] for _ in range(supply_count)]
    return ProblemSpec(supply_count, demand_count, supplies, demands, costs)


def generate_sample_csv(output_dir: str) -> str:
    """Write the sample tableau CSV to the given directory."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_tableau.csv")
    generate_sample_tableau().to_csv(path)
    return path


def generate_sample_excel(output_dir: str) -> str:
    """Write the sample tableau as a single-sheet Excel file."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, "sample_tableau.xlsx")
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        generate_sample_tableau().to_excel(writer, sheet_name="Tableau")
    return path


if __name__ == "__main__":
    out = os.path.join(os.path.dirname(__file__), "..", "sample_files")
    generate_sample_csv(out)
    generate_sample_excel(out)
    print("Sample CSV and Excel files generated in sample_files/")
