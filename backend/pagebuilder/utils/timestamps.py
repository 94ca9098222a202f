from datetime import datetime, timezone
from typing import Any, Optional

from dateutil.parser import isoparse


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_ts(ts: datetime) -> datetime:
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Accepts datetimes, ISO-8601 strings or empty values.

    Backends hand back naive datetimes (SQLite) or strings (JSON
    payloads); both come out as aware UTC-normalized datetimes.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return normalize_ts(value)

    if isinstance(value, str):
        try:
            return normalize_ts(isoparse(value))
        except ValueError as exc:
            raise ValueError(f"Invalid timestamp: {value!r}") from exc

    raise ValueError(f"Invalid timestamp: {value!r}")
