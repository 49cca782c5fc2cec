"""
Year Calc — количество полных лет между двумя датами

Модуль обеспечивает:
- Нормализацию обеих дат в UTC перед сравнением полей
- Знаковую разницу лет с учётом порядка (month, day)

ПРАВИЛА:
    base = year(a) - year(b)
    base == 0 → 0 (независимо от month/day)
    base > 0  → base - 1, если (month, day) у a строго раньше, чем у b
    base < 0  → base + 1, если (month, day) у a строго раньше, чем у b
    Совпадение (month, day) считается полным годом.

years_since(a, b) НЕ обязан быть равен -years_since(b, a): при base == 0
всегда 0, а при base != 0 коррекция зависит только от позиции a.
Эта асимметрия сохраняется намеренно.
"""

from typing import Any

from datecalc.core.adapters import CalendarFields, get_adapter


def cmp_month_day(a: CalendarFields, b: CalendarFields) -> int:
    """
    Сравнение позиции в году: -1 если (month, day) у a строго раньше, иначе 0.

    Examples:
        >>> cmp_month_day(CalendarFields(2018, 3, 15), CalendarFields(2010, 5, 11))
        -1
        >>> cmp_month_day(CalendarFields(2018, 3, 15), CalendarFields(2010, 3, 15))
        0
    """
    if (a.month, a.day) < (b.month, b.day):
        return -1
    return 0


def years_between(a: CalendarFields, b: CalendarFields) -> int:
    """
    Знаковая разница полных лет между полями a и b (уже в одной зоне).

    Examples:
        >>> years_between(CalendarFields(2018, 3, 15), CalendarFields(2010, 1, 11))
        8
        >>> years_between(CalendarFields(2018, 3, 15), CalendarFields(2030, 3, 21))
        -11
    """
    base_years = a.year - b.year

    if base_years == 0:
        return 0
    if base_years > 0:
        return base_years + cmp_month_day(a, b)
    return base_years - cmp_month_day(a, b)


def years_since(a: Any, b: Any) -> int:
    """
    Количество полных лет от b до a.

    Обе даты переводятся в UTC, затем сравниваются календарные поля.
    a и b могут быть разных типов и в разных зонах.

    Args:
        a: Опорная дата (self)
        b: Дата сравнения

    Returns:
        > 0 если a позже b, < 0 если раньше, 0 для одного и того же года

    Raises:
        UnsupportedTimestampType: если для типа a или b нет адаптера

    Examples:
        >>> from datetime import date
        >>> years_since(date(2018, 3, 15), date(2010, 5, 11))
        7
    """
    a_utc = get_adapter(a).utc_fields(a)
    b_utc = get_adapter(b).utc_fields(b)
    return years_between(a_utc, b_utc)
