"""CSV and table exports of allocation results."""

import pandas as pd

from models.result import AllocationResult
from engine.statistics import supply_status_label, demand_status_label
from data.problem_builder import center_labels, hospital_labels
from config.defaults import EXPORT_INDEX_LABEL


def _plain(value):
    """80.0 -> 80 so exported cells match what the tables show."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def distribution_frame(result: AllocationResult) -> pd.DataFrame:
    m = len(result.distribution)
    n = len(result.distribution[0]) if m else 0
    rows = [[_plain(v) for v in row] for row in result.distribution]
    df = pd.DataFrame(rows, index=center_labels(m), columns=hospital_labels(n), dtype=object)
    df.index.name = EXPORT_INDEX_LABEL
    return df


def distribution_to_csv(result: AllocationResult) -> str:
    """Header `Supply Center,Hospital 1,...`, then one `Center k,...` row per center."""
    return distribution_frame(result).to_csv(lineterminator="\n")


def supply_status_frame(result: AllocationResult) -> pd.DataFrame:
    return pd.DataFrame([{
        "Supply Center": f"Center {s.center_id + 1}",
        "Initial Supply": _plain(s.initial_supply),
        "Remaining Supply": _plain(s.remaining_supply),
        "Utilized": f"{s.percent_utilized}%",
        "Status": supply_status_label(s.percent_utilized),
    } for s in result.supply_status])


def demand_status_frame(result: AllocationResult) -> pd.DataFrame:
    return pd.DataFrame([{
        "Hospital": f"Hospital {d.hospital_id + 1}",
        "Total Demand": _plain(d.total_demand),
        "Fulfilled": _plain(d.fulfilled_demand),
        "Fulfillment %": f"{d.percent_fulfilled}%",
        "Status": demand_status_label(d.percent_fulfilled),
    } for d in result.demand_status])
