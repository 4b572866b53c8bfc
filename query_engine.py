# query_engine.py
"""
Filtering and aggregation over a snapshot of tanker records.

Every function takes the records to work on; callers capture
``RecordStore.list()`` once and pass that snapshot along.
"""

from datetime import date as dt_date
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union

import pandas as pd

from models import TankerRecord

DateLike = Union[str, dt_date, None]


class Totals(NamedTuple):
    total_loaded: float
    total_ordered: float
    count: int


class HourlyBucket(NamedTuple):
    hour: str
    loaded: float
    ordered: float


def _iso(value: DateLike) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, dt_date):
        return value.isoformat()
    return str(value)


# ---------- filters ----------
def filter_by_date_range(records: Iterable[TankerRecord], start: DateLike, end: DateLike) -> List[TankerRecord]:
    """Records whose date lies in [start, end]; a missing bound is open"""
    start_s, end_s = _iso(start), _iso(end)
    result = []
    for r in records:
        # ISO dates sort lexicographically in calendar order
        if start_s is not None and r.date < start_s:
            continue
        if end_s is not None and r.date > end_s:
            continue
        result.append(r)
    return result


def filter_by_date_exact(records: Iterable[TankerRecord], day: DateLike) -> List[TankerRecord]:
    day_s = _iso(day)
    return [r for r in records if r.date == day_s]


def filter_by_text(records: Iterable[TankerRecord], query: str) -> List[TankerRecord]:
    """Case-insensitive match on tanker number, destination or BC number"""
    needle = (query or "").lower()
    return [
        r for r in records
        if needle in r.tanker_number.lower()
        or needle in r.destination.lower()
        or needle in r.bc_number.lower()
    ]


def filter_by_id_set(records: Iterable[TankerRecord], ids: Iterable[str]) -> List[TankerRecord]:
    wanted = set(ids)
    return [r for r in records if r.id in wanted]


# ---------- aggregation ----------
def aggregate_totals(records: Sequence[TankerRecord]) -> Totals:
    return Totals(
        total_loaded=sum((r.loaded_quantity for r in records), 0),
        total_ordered=sum((r.ordered_quantity for r in records), 0),
        count=len(records),
    )


def _hour_key(entry_time: str) -> str:
    # No separator: the whole string is the key
    return (entry_time or "").split(":", 1)[0]


def bucket_by_hour(records: Sequence[TankerRecord]) -> List[HourlyBucket]:
    """Loaded/ordered sums per entry hour, ascending by 'HH:00' label"""
    if not records:
        return []

    df = pd.DataFrame(
        [
            {
                "hour": f"{_hour_key(r.entry_time)}:00",
                "loaded": r.loaded_quantity,
                "ordered": r.ordered_quantity,
            }
            for r in records
        ]
    )
    grouped = df.groupby("hour", sort=True)[["loaded", "ordered"]].sum()
    return [
        HourlyBucket(hour=str(hour), loaded=row["loaded"].item(), ordered=row["ordered"].item())
        for hour, row in grouped.iterrows()
    ]
