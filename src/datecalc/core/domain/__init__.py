"""
Domain models and value objects.

Contains the CalendarTimestamp value type and its calendar adapter.
"""

from datecalc.core.domain.timestamp import (
    MAX_UTC_OFFSET_MINUTES,
    MINUTES_PER_DAY,
    CalendarTimestamp,
    CalendarTimestampAdapter,
)

__all__ = [
    "MAX_UTC_OFFSET_MINUTES",
    "MINUTES_PER_DAY",
    "CalendarTimestamp",
    "CalendarTimestampAdapter",
]
