"""UTC timestamp helper for response envelopes."""

from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds, e.g. 2026-10-19T09:45:00.123Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
