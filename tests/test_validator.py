"""Tests for input validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import math
import pytest
import numpy as np
import pandas as pd

from models.problem import ProblemSpec
from data.validator import (
    InvalidInputError,
    validate_problem,
    ensure_valid,
    validate_tableau,
)
from data.problem_builder import default_problem, problem_to_tableau
from engine.allocator import solve


def make_spec(supplies, demands, costs, supply_count=None, demand_count=None):
    return ProblemSpec(
        supply_count if supply_count is not None else len(supplies),
        demand_count if demand_count is not None else len(demands),
        supplies, demands, costs,
    )


class TestValidateProblem:
    def test_default_problem_is_valid(self):
        result = validate_problem(default_problem())
        assert result.is_valid
        assert result.errors == []

    def test_surplus_is_a_warning(self):
        result = validate_problem(make_spec([20, 10], [5], [[1], [1]]))
        assert result.is_valid
        assert len(result.warnings) == 1
        assert "25" in result.warnings[0]

    def test_cost_row_count_mismatch(self):
        result = validate_problem(make_spec([10, 10], [5, 5], [[1, 1]]))
        assert not result.is_valid
        assert any("expected 2 rows" in e for e in result.errors)

    def test_cost_column_count_mismatch(self):
        result = validate_problem(make_spec([10], [5, 5], [[1]]))
        assert not result.is_valid
        assert any("row 1 has 1 columns" in e for e in result.errors)

    def test_count_mismatch(self):
        result = validate_problem(make_spec([10, 10], [5], [[1], [1]], supply_count=3))
        assert not result.is_valid
        assert any("expected 3 values" in e for e in result.errors)

    def test_negative_values(self):
        result = validate_problem(make_spec([10, -1], [5], [[1], [-2]]))
        assert not result.is_valid
        assert any("Supplies: entry 2 cannot be negative" in e for e in result.errors)
        assert any("Costs row 2" in e for e in result.errors)

    def test_non_finite_values(self):
        result = validate_problem(make_spec([math.inf], [math.nan], [[1]]))
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_non_numeric_values(self):
        result = validate_problem(make_spec([True], ["5"], [[1]]))
        assert not result.is_valid
        assert len(result.errors) == 2

    def test_empty_lists(self):
        result = validate_problem(ProblemSpec(0, 0, [], [], []))
        assert not result.is_valid
        assert any("at least one supply center" in e for e in result.errors)
        assert any("at least one hospital" in e for e in result.errors)

    def test_non_list_fields(self):
        result = validate_problem(ProblemSpec(1, 1, None, [5], [[1]]))
        assert not result.is_valid
        assert "Supplies: expected a list, got NoneType." in result.errors

    def test_flat_cost_row(self):
        result = validate_problem(ProblemSpec(1, 1, [5], [5], [3]))
        assert not result.is_valid
        assert result.errors == ["Costs row 1: expected a list, got int."]

    def test_numpy_integer_counts(self):
        spec = ProblemSpec(np.int64(2), np.int64(1), [10, 10], [5], [[1], [2]])
        assert validate_problem(spec).is_valid


class TestEnsureValid:
    def test_raises_with_all_errors(self):
        spec = make_spec([10, -1], [5], [[1]])
        with pytest.raises(InvalidInputError) as exc:
            ensure_valid(spec)
        assert len(exc.value.errors) >= 2

    def test_solve_rejects_malformed_input(self):
        with pytest.raises(InvalidInputError):
            solve(make_spec([10], [5, 5], [[1]]))

    def test_solve_rejects_unknown_method(self):
        with pytest.raises(InvalidInputError):
            solve(default_problem(), method="vogel")

    def test_solve_rejects_non_list_input(self):
        with pytest.raises(InvalidInputError):
            solve(ProblemSpec(1, 1, [5], [5], [3]))
        with pytest.raises(InvalidInputError):
            solve(ProblemSpec(1, 1, None, [5], [[1]]))

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            solve(ProblemSpec(0, 0, [], [], []))


class TestValidateTableau:
    def test_default_tableau_is_valid(self):
        assert validate_tableau(problem_to_tableau(default_problem())).is_valid

    def test_missing_supply_column(self):
        df = problem_to_tableau(default_problem()).drop(columns=["Supply"])
        result = validate_tableau(df)
        assert not result.is_valid
        assert any("Supply" in e for e in result.errors)

    def test_missing_demand_row(self):
        df = problem_to_tableau(default_problem()).iloc[:-1]
        result = validate_tableau(df)
        assert not result.is_valid
        assert any("Demand" in e for e in result.errors)

    def test_non_numeric_cell(self):
        df = problem_to_tableau(default_problem()).astype(object)
        df.iloc[0, 0] = "abc"
        result = validate_tableau(df)
        assert not result.is_valid

    def test_negative_cell(self):
        df = problem_to_tableau(default_problem())
        df.iloc[1, 1] = -3
        assert not validate_tableau(df).is_valid

    def test_empty_frame(self):
        assert not validate_tableau(pd.DataFrame()).is_valid


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
