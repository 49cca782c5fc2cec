"""
Month Calc — сдвиг даты на N месяцев с clamp дня месяца

Модуль обеспечивает:
- Сдвиг (year, month) на знаковое число месяцев с floor-делением
- Clamp дня месяца к последнему дню месяца назначения
- Установку дня месяца с clamp (with_closest_day)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. year_delta = floor((month0 + n) / 12), а не усечение к нулю
   (raw = -1 → year_delta = -1, month0 = 11)
2. Високосность определяется по году НАЗНАЧЕНИЯ
3. День берётся из исходного значения; в представление никогда не
   передаётся невалидный промежуточный день
4. add_months(t, 0) возвращает t без изменений

ФОРМУЛЫ:
    raw = month0 + n
    year' = year + floor(raw / 12)
    month0' = raw mod 12  (в [0, 12))
    day' = min(day, days_in_month(year', month0' + 1))
"""

import logging
from typing import Tuple, TypeVar

from datecalc.core.adapters import get_adapter
from datecalc.core.math.calendar_rules import (
    MONTHS_PER_YEAR,
    closest_valid_day,
    validate_month,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# FIELD-LEVEL
# =============================================================================


def validate_month_offset(months: int) -> None:
    """
    Проверка, что смещение в месяцах является целым числом.

    bool формально подкласс int, но как смещение это почти всегда ошибка.

    Raises:
        TypeError: если months не int или является bool
    """
    if isinstance(months, bool) or not isinstance(months, int):
        raise TypeError(f"months must be an int, got {type(months).__name__}")


def shift_year_month(year: int, month: int, months: int) -> Tuple[int, int]:
    """
    Сдвиг пары (year, month) на знаковое число месяцев.

    Args:
        year: Исходный год (не ограничен)
        month: Исходный месяц 1..12
        months: Смещение в месяцах (может быть отрицательным)

    Returns:
        (new_year, new_month) с new_month в 1..12

    Raises:
        ValueError: если month вне 1..12
        TypeError: если months не int

    Examples:
        >>> shift_year_month(2018, 3, 23)
        (2020, 2)
        >>> shift_year_month(2018, 3, -23)
        (2016, 4)
        >>> shift_year_month(2018, 1, -1)
        (2017, 12)
    """
    validate_month(month)
    validate_month_offset(months)

    abs_new_month0 = (month - 1) + months

    # // и % в Python округляют к -inf: для raw < 0 год "занимается"
    # автоматически, а остаток сразу лежит в [0, 12)
    years_change = abs_new_month0 // MONTHS_PER_YEAR
    new_month0 = abs_new_month0 % MONTHS_PER_YEAR

    return year + years_change, new_month0 + 1


# =============================================================================
# TIMESTAMP-LEVEL
# =============================================================================


def add_months(timestamp: T, months: int) -> T:
    """
    Сдвиг timestamp на знаковое число месяцев.

    Если в месяце назначения нет исходного дня, день ограничивается
    последним днём месяца: 2017-01-31 + 1 → 2017-02-28,
    2016-01-31 + 1 → 2016-02-29.

    Время суток и зона сохраняются адаптером представления.

    Args:
        timestamp: datetime, date, CalendarTimestamp или любой тип с
            зарегистрированным CalendarAdapter
        months: Смещение в месяцах (может быть отрицательным или 0)

    Returns:
        Новое значение того же типа

    Raises:
        TypeError: если months не int
        UnsupportedTimestampType: если для типа нет адаптера
        RepresentationOverflow: если представление не вмещает год результата

    Examples:
        >>> from datetime import date
        >>> add_months(date(2017, 3, 31), 1)
        datetime.date(2017, 4, 30)
    """
    validate_month_offset(months)
    adapter = get_adapter(timestamp)

    if months == 0:
        return timestamp

    year, month, day = adapter.fields(timestamp)
    new_year, new_month = shift_year_month(year, month, months)
    new_day = closest_valid_day(new_year, new_month, day)

    if new_day != day:
        logger.debug(
            "Day %d clamped to %d shifting %04d-%02d by %+d months to %04d-%02d",
            day, new_day, year, month, months, new_year, new_month,
        )

    return adapter.replace_fields(timestamp, new_year, new_month, new_day)


def with_closest_day(timestamp: T, day: int) -> T:
    """
    Установка дня месяца с clamp к последнему дню месяца.

    with_closest_day(<февраль 2017>, 30) → 28 февраля,
    with_closest_day(<февраль 2016>, 30) → 29 февраля.
    Значения > 31 ограничиваются 31 до проверки месяца.

    Args:
        timestamp: Значение с зарегистрированным CalendarAdapter
        day: Желаемый день месяца (>= 1)

    Returns:
        Новое значение того же типа в том же году и месяце

    Raises:
        ValueError: если day < 1
    """
    adapter = get_adapter(timestamp)
    year, month, _ = adapter.fields(timestamp)
    return adapter.replace_fields(timestamp, year, month, closest_valid_day(year, month, day))
