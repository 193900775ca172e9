"""File upload parsing — CSV/XLSX tableau into a ProblemSpec."""

import logging
import pandas as pd

from models.problem import ProblemSpec
from data.problem_builder import tableau_to_problem
from data.validator import ensure_valid

logger = logging.getLogger(__name__)


def _clean_labels(df: pd.DataFrame) -> pd.DataFrame:
    df.index = [str(label).strip() for label in df.index]
    df.columns = [str(col).strip() for col in df.columns]
    return df


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded tableau (CSV or XLSX); the first column holds the row labels."""
    name = uploaded_file.name.lower()
    if name.endswith(".csv"):
        df = pd.read_csv(uploaded_file, index_col=0)
    elif name.endswith(".xlsx"):
        df = pd.read_excel(uploaded_file, index_col=0, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")
    return _clean_labels(df)


def parse_problem(df: pd.DataFrame, source: str = "table") -> ProblemSpec:
    """Turn a loaded tableau into a validated ProblemSpec. Raises InvalidInputError."""
    spec = tableau_to_problem(df)
    ensure_valid(spec)
    logger.info(
        "Loaded %d supply centers x %d hospitals from %s",
        spec.supply_count, spec.demand_count, source,
    )
    return spec


def load_problem(uploaded_file) -> ProblemSpec:
    """Load and validate an uploaded tableau file."""
    return parse_problem(load_file(uploaded_file), source=uploaded_file.name)


def load_csv_path(path: str) -> ProblemSpec:
    """Load a tableau CSV from a local path."""
    df = _clean_labels(pd.read_csv(path, index_col=0))
    return parse_problem(df, source=path)
