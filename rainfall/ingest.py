import asyncio
import logging
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union
from urllib.parse import urlparse

import duckdb

from rainfall.config import CATEGORY_COLUMN, MONTHS
from rainfall.errors import DataLoadError, EmptyDataset

logger = logging.getLogger(__name__)

Location = Union[str, Path]

# Header row, comma separated, every column read as text; months are cast per cell below
_READ_CSV = "read_csv(?, header=true, delim=',', quote='\"', escape='\"', all_varchar=true)"


@dataclass(frozen=True)
class RawRecord:
    category: str
    months: Mapping[str, Optional[float]]


def _is_remote(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https", "s3")


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _resolve_columns(source: str, columns: List[str]) -> Dict[str, str]:
    """Map the expected column names to the file's actual header names."""
    by_name = {c.strip(): c for c in columns}
    required = [CATEGORY_COLUMN, *MONTHS]
    missing = [c for c in required if c not in by_name]
    if missing and any(re.fullmatch(r"column\d+", c) for c in columns):
        # DuckDB falls back to generated column0.. names when rows outgrow the header
        logger.warning(f"Schema check failed for {source}: rows wider than header")
        raise DataLoadError(source, "header/row width mismatch: data rows have more fields than the header")
    if missing:
        logger.warning(f"Schema check failed for {source}: missing {missing}")
        raise DataLoadError(source, f"missing columns: {missing}")
    return {name: by_name[name] for name in required}


def load_records(location: Location) -> List[RawRecord]:
    """
    Read a district rainfall CSV into RawRecords using DuckDB.

    Monthly cells that are blank or non-numeric come back as None. Raises
    DataLoadError for unreadable files or schema problems and EmptyDataset
    when the header is followed by no rows.
    """
    source = str(location)
    if not _is_remote(source):
        try:
            exists = Path(source).exists()
        except (OSError, ValueError) as exc:
            raise DataLoadError(source, str(exc)) from exc
        if not exists:
            raise DataLoadError(source, "file not found")

    con = duckdb.connect()
    try:
        cols = con.execute(
            f"DESCRIBE SELECT * FROM {_READ_CSV}", [source]
        ).df()["column_name"].tolist()
        mapping = _resolve_columns(source, cols)

        casts = ",\n".join(
            f"TRY_CAST({_quote(mapping[m])} AS DOUBLE) AS {_quote(m)}" for m in MONTHS
        )
        rows = con.execute(f"""
            SELECT
                {_quote(mapping[CATEGORY_COLUMN])} AS category,
                {casts}
            FROM {_READ_CSV}
        """, [source]).fetchall()
    except duckdb.Error as exc:
        raise DataLoadError(source, str(exc)) from exc
    finally:
        con.close()

    if not rows:
        logger.warning(f"{source} has a header but no data rows")
        raise EmptyDataset(source)

    records = []
    for row in rows:
        category = (row[0] or "").strip()
        if not category:
            raise DataLoadError(source, f"blank {CATEGORY_COLUMN} name")
        records.append(RawRecord(category=category, months=dict(zip(MONTHS, row[1:]))))

    duplicates = sorted(name for name, n in Counter(r.category for r in records).items() if n > 1)
    if duplicates:
        raise DataLoadError(source, f"duplicate {CATEGORY_COLUMN} names: {duplicates}")

    logger.info(f"Loaded {len(records)} records from {source}")
    return records


async def fetch_records(location: Location) -> List[RawRecord]:
    """Load records without blocking the event loop."""
    return await asyncio.to_thread(load_records, location)
