from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
import pandas as pd

from rainfall.config import CATEGORY_COLUMN, MONTHS
from rainfall.ingest import RawRecord


@dataclass(frozen=True)
class AggregatedEntry:
    category: str
    value: float


def records_to_frame(records: Sequence[RawRecord]) -> pd.DataFrame:
    """Month-by-month table, one row per district in input order."""
    rows = [{CATEGORY_COLUMN: r.category, **{m: r.months.get(m) for m in MONTHS}} for r in records]
    return pd.DataFrame(rows, columns=[CATEGORY_COLUMN, *MONTHS])


def aggregate_monthly_means(records: Sequence[RawRecord]) -> List[AggregatedEntry]:
    """
    Average each district's twelve monthly values and rank the districts.

    Missing, non-numeric and non-finite months count as zero and negative
    readings are clipped to zero. The mean always divides by twelve. Result is
    sorted by average descending; districts with equal averages keep their
    input order.
    """
    if not records:
        return []

    df = records_to_frame(records)

    # Treat missing or unparseable months as zero rainfall
    for col in MONTHS:
        df[col] = (
            pd.to_numeric(df[col], errors="coerce")
            .replace([np.inf, -np.inf], np.nan)
            .fillna(0)
            .clip(lower=0)
        )

    # Divide before summing so twelve near-max readings cannot overflow to inf
    df["average"] = (df[list(MONTHS)] / len(MONTHS)).sum(axis=1)
    df = df.sort_values("average", ascending=False, kind="stable")

    return [
        AggregatedEntry(category=row[CATEGORY_COLUMN], value=float(row["average"]))
        for _, row in df.iterrows()
    ]


def entries_to_frame(entries: Sequence[AggregatedEntry]) -> pd.DataFrame:
    """Ranking table with 1-based dense ranks, as written by the batch run."""
    df = pd.DataFrame(
        [{"district": e.category, "average_mm": round(e.value, 1)} for e in entries],
        columns=["district", "average_mm"],
    )
    df.insert(0, "rank", df["average_mm"].rank(method="dense", ascending=False).astype(int))
    return df
