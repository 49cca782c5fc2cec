"""
Contract Validation Module

Модуль для валидации JSON контрактов datecalc.
"""

from .validators import (
    CalendarTimestampValidator,
    ContractValidator,
    MonthShiftRequestValidator,
    SchemaLoader,
    YearsSinceRequestValidator,
    load_calendar_timestamp,
    validate_calendar_timestamp,
    validate_month_shift_request,
    validate_years_since_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalendarTimestampValidator",
    "MonthShiftRequestValidator",
    "YearsSinceRequestValidator",
    # Functions
    "load_calendar_timestamp",
    "validate_calendar_timestamp",
    "validate_month_shift_request",
    "validate_years_since_request",
]
