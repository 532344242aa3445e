"""
Date helpers for backend payloads
"""
from datetime import datetime, timezone
from typing import Optional


def to_iso_z(value: datetime) -> str:
    """UTC timestamp with milliseconds and a ``Z`` suffix, e.g. 2024-05-01T08:00:00.000Z"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return to_iso_z(datetime.now(timezone.utc))


def normalize_iso_date(value: str) -> Optional[str]:
    """
    Parse an ISO 8601 date or date-time and return it as UTC ``to_iso_z`` text.

    Naive values are taken as UTC. Returns None when the value does not parse.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    return to_iso_z(parsed)
