"""Tests for CSV and status-table exports."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.problem import ProblemSpec
from engine.allocator import solve
from data.export import (
    distribution_to_csv,
    distribution_frame,
    supply_status_frame,
    demand_status_frame,
)
from data.problem_builder import default_problem


def make_result(supplies, demands):
    costs = [[1] * len(demands) for _ in supplies]
    return solve(ProblemSpec(len(supplies), len(demands), supplies, demands, costs))


class TestDistributionExport:
    def test_csv_layout(self):
        result = solve(default_problem())
        assert distribution_to_csv(result) == (
            "Supply Center,Hospital 1,Hospital 2,Hospital 3,Hospital 4\n"
            "Center 1,80,20,0,0\n"
            "Center 2,0,70,80,0\n"
            "Center 3,0,0,40,160\n"
        )

    def test_fractional_units_keep_decimals(self):
        result = make_result([2.5, 2.5], [5.0])
        csv = distribution_to_csv(result)
        assert "Center 1,2.5\n" in csv
        assert "Center 2,2.5\n" in csv

    def test_whole_floats_exported_as_int(self):
        result = make_result([4.0], [4.0])
        assert distribution_frame(result).iloc[0, 0] == 4
        assert "Center 1,4\n" in distribution_to_csv(result)


class TestStatusFrames:
    def test_supply_status(self):
        df = supply_status_frame(make_result([10, 10], [5, 5]))

        assert list(df.columns) == [
            "Supply Center", "Initial Supply", "Remaining Supply", "Utilized", "Status",
        ]
        assert df.iloc[0]["Utilized"] == "100.0%"
        assert df.iloc[0]["Status"] == "Fully Utilized"
        assert df.iloc[1]["Remaining Supply"] == 10
        assert df.iloc[1]["Status"] == "Capacity Available"

    def test_demand_status_infeasible(self):
        df = demand_status_frame(make_result([5], [10]))

        assert df.iloc[0]["Hospital"] == "Hospital 1"
        assert df.iloc[0]["Fulfillment %"] == "0%"
        assert df.iloc[0]["Status"] == "Unfulfilled"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
