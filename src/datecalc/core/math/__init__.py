"""
Core math modules для datecalc

Календарная арифметика: правила григорианского календаря, сдвиг на месяцы
и разница в годах.
"""

# Calendar Rules
from datecalc.core.math.calendar_rules import (
    FEBRUARY,
    MAX_DAY_OF_MONTH,
    MONTHS_PER_YEAR,
    MONTHS_WITH_30_DAYS,
    MONTHS_WITH_31_DAYS,
    closest_valid_day,
    days_in_month,
    is_leap_year,
    validate_month,
)

# Month Calc
from datecalc.core.math.month_calc import (
    add_months,
    shift_year_month,
    validate_month_offset,
    with_closest_day,
)

# Year Calc
from datecalc.core.math.year_calc import (
    cmp_month_day,
    years_between,
    years_since,
)

__all__ = [
    # Calendar Rules — Constants
    "FEBRUARY",
    "MAX_DAY_OF_MONTH",
    "MONTHS_PER_YEAR",
    "MONTHS_WITH_30_DAYS",
    "MONTHS_WITH_31_DAYS",
    # Calendar Rules — Functions
    "closest_valid_day",
    "days_in_month",
    "is_leap_year",
    "validate_month",
    # Month Calc
    "add_months",
    "shift_year_month",
    "validate_month_offset",
    "with_closest_day",
    # Year Calc
    "cmp_month_day",
    "years_between",
    "years_since",
]
