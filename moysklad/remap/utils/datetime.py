"""Date-time codec for service timestamps.

The service exchanges timestamps as ``YYYY-MM-DD HH:MM:SS[.fff]`` strings
in Moscow time (UTC+3), without an offset marker.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone

MOSCOW_TZ = timezone(timedelta(hours=3), "MSK")

_DATETIME_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})\s(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,3}))?$"
)


def parse_datetime(value: str) -> datetime:
    """Parse a service timestamp.

    Args:
        value: Timestamp such as ``"2017-04-08 13:33:00.123"``

    Returns:
        Timezone-aware datetime in Moscow time

    Raises:
        ValueError: If the string is not in the service format
    """
    match = _DATETIME_RE.match(value)
    if match is None:
        raise ValueError(f'Incorrect DateTime format "{value}"')

    year, month, day, hour, minute, second, fraction = match.groups()
    # ".1" means 100 ms, ".12" means 120 ms
    milliseconds = int(fraction.ljust(3, "0")) if fraction else 0

    return datetime(
        int(year),
        int(month),
        int(day),
        int(hour),
        int(minute),
        int(second),
        milliseconds * 1000,
        tzinfo=MOSCOW_TZ,
    )


def compose_datetime(value: datetime | int | float, include_ms: bool = False) -> str:
    """Format a datetime as a service timestamp.

    Args:
        value: Datetime (naive values are taken as UTC) or epoch milliseconds
        include_ms: Whether to append milliseconds

    Returns:
        Timestamp string in Moscow time
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
    else:
        moment = datetime.fromtimestamp(value / 1000, tz=UTC)

    moscow_time = moment.astimezone(MOSCOW_TZ)
    text = moscow_time.strftime("%Y-%m-%d %H:%M:%S")
    if include_ms:
        text += f".{moscow_time.microsecond // 1000:03d}"
    return text
