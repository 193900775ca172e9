"""Tests for tableau file loading."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import io
from types import SimpleNamespace

import pytest

from data.loader import load_file, load_problem, load_csv_path
from data.problem_builder import default_problem
from data.sample_data import generate_sample_csv, generate_sample_excel
from data.validator import InvalidInputError


def make_upload(text: str, name: str = "tableau.csv"):
    buf = io.BytesIO(text.encode("utf-8"))
    buf.name = name
    return buf


class TestLoader:
    def test_sample_csv_round_trip(self, tmp_path):
        path = generate_sample_csv(str(tmp_path))
        assert load_csv_path(path) == default_problem()

    def test_sample_excel_upload(self, tmp_path):
        path = generate_sample_excel(str(tmp_path))
        with open(path, "rb") as fh:
            upload = io.BytesIO(fh.read())
        upload.name = "sample_tableau.xlsx"
        assert load_problem(upload) == default_problem()

    def test_uploaded_csv(self):
        text = (
            ",Hospital 1,Hospital 2,Supply\n"
            "Center 1,3,1,20\n"
            "Center 2,2,6,15\n"
            "Demand,10,25,\n"
        )
        spec = load_problem(make_upload(text))
        assert spec.supply_count == 2
        assert spec.demand_count == 2
        assert list(spec.supplies) == [20, 15]
        assert list(spec.demands) == [10, 25]
        assert spec.costs == [[3, 1], [2, 6]]

    def test_labels_are_stripped(self):
        text = (
            ", Hospital 1 , Supply \n"
            " Center 1 ,3,20\n"
            " Demand ,10,\n"
        )
        df = load_file(make_upload(text))
        assert list(df.columns) == ["Hospital 1", "Supply"]
        assert list(df.index) == ["Center 1", "Demand"]

    def test_negative_cell_rejected(self):
        text = (
            ",Hospital 1,Supply\n"
            "Center 1,-3,20\n"
            "Demand,10,\n"
        )
        with pytest.raises(InvalidInputError):
            load_problem(make_upload(text))

    def test_unsupported_format(self):
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_file(SimpleNamespace(name="tableau.json"))

    def test_legacy_xls_rejected(self):
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_file(SimpleNamespace(name="tableau.xls"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
