"""
Record access and loading.

Records are opaque to the engine: a mapping is read by key, anything else by
attribute. ``load_records`` turns a CSV or JSON export of a list screen into
the in-memory snapshot the engine works over.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pandas as pd


class _Missing:
    """Sentinel for a field the record does not have."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_field(record: Any, key: str) -> Any:
    """Read a field from a record, returning MISSING when it is absent."""
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    return getattr(record, key, MISSING)


def is_missing(value: Any) -> bool:
    """True for absent fields, None, NaN and NaT."""
    if value is MISSING or value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, set, frozenset, dict)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_timestamp(value: Any) -> pd.Timestamp | None:
    """
    Parse a date-like value into a naive UTC timestamp.

    Accepts strings, dates, datetimes and pandas timestamps. Returns None for
    anything that does not parse instead of raising.
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC").tz_localize(None)
    return ts


def load_records(path: str | Path) -> list[dict]:
    """
    Load a list-screen export into a list of dicts.

    Supported formats are ``.csv``, ``.json`` (an array of objects) and
    ``.jsonl``. Empty cells come back as None. JSON values keep the type
    they were written with; CSV columns go through pandas' type inference.

    Raises:
        ValueError: If the file type is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
    elif suffix == ".jsonl":
        df = pd.read_json(path, orient="records", lines=True, dtype=False, convert_dates=False)
    else:
        raise ValueError(f"Unsupported record file type: {path.suffix or path.name}")

    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")
