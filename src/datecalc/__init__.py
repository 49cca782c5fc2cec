"""
datecalc — calendar arithmetic over timestamped dates.

- add_months: shift by a signed number of months, clamping the day-of-month
- years_since: whole years between two dates, normalized to UTC
"""

from datecalc.core.adapters import (
    AdapterConfig,
    CalendarAdapter,
    CalendarFields,
    DateAdapter,
    DatetimeAdapter,
    get_adapter,
    register_adapter,
)
from datecalc.core.domain import CalendarTimestamp
from datecalc.core.errors import (
    DateCalcError,
    RepresentationOverflow,
    UnsupportedTimestampType,
)
from datecalc.core.math import (
    add_months,
    closest_valid_day,
    days_in_month,
    is_leap_year,
    shift_year_month,
    with_closest_day,
    years_since,
)

__version__ = "0.1.0"

__all__ = [
    # Operations
    "add_months",
    "years_since",
    "with_closest_day",
    "shift_year_month",
    # Calendar rules
    "is_leap_year",
    "days_in_month",
    "closest_valid_day",
    # Value type
    "CalendarTimestamp",
    # Adapters
    "AdapterConfig",
    "CalendarAdapter",
    "CalendarFields",
    "DateAdapter",
    "DatetimeAdapter",
    "get_adapter",
    "register_adapter",
    # Errors
    "DateCalcError",
    "RepresentationOverflow",
    "UnsupportedTimestampType",
]
