"""Helpers for timestamp-like endpoints.

Instants are represented as whole microseconds since the Unix epoch so that
ints, timezone-aware datetimes and dates can be ordered against each other
without float rounding.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MICROSECOND = timedelta(microseconds=1)


def to_instant(value: Any) -> int:
    """Convert a timestamp-like value to microseconds since the Unix epoch.

    Accepts:
    - int: Unix seconds
    - datetime: Must be timezone-aware
    - date: Midnight UTC on that day

    Raises:
        TypeError: If value is an unsupported type or naive datetime
    """
    if isinstance(value, bool):
        raise TypeError(
            f"Instant must be int, datetime, or date, not bool.\n"
            f"Got: {value!r}"
        )
    if isinstance(value, int):
        return value * 1_000_000
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Instant must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return (value - EPOCH) // MICROSECOND
    if isinstance(value, date):
        midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
        return (midnight - EPOCH) // MICROSECOND
    raise TypeError(
        f"Instant must be int, datetime, or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  chronological(1735689600, 1735776000)  # int (Unix seconds)\n"
        f"  chronological(datetime(2025,1,1,tzinfo=timezone.utc), ...)  "
        f"# timezone-aware datetime\n"
        f"  chronological(date(2025,1,1), date(2025,12,31))  # date objects"
    )
