"""
Calendar Rules — Gregorian Leap Years & Month Lengths

Единственное место, где определены правила григорианского календаря:
- Високосный год: делится на 4, и если делится на 100, то и на 400
- Длина месяца: 31 / 30 / 28-29 (февраль)
- Clamp дня месяца к последнему допустимому дню

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Правило високосного года реализовано один раз (здесь) и больше нигде
2. Календарь пролептический: год не ограничен (год 0 и отрицательные годы допустимы)
3. closest_valid_day всегда возвращает день, валидный для (year, month)
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ КАЛЕНДАРЯ
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

# Ни в одном месяце нет больше 31 дня
MAX_DAY_OF_MONTH: Final[int] = 31

FEBRUARY: Final[int] = 2

# Jan, Mar, May, Jul, Aug, Oct, Dec
MONTHS_WITH_31_DAYS: Final[frozenset[int]] = frozenset({1, 3, 5, 7, 8, 10, 12})

# Apr, Jun, Sep, Nov
MONTHS_WITH_30_DAYS: Final[frozenset[int]] = frozenset({4, 6, 9, 11})


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Проверка високосного года по григорианскому правилу.

    Args:
        year: Год (любое целое, включая 0 и отрицательные)

    Returns:
        True если год високосный

    Examples:
        >>> is_leap_year(2016)
        True
        >>> is_leap_year(2017)
        False
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2000)
        True
    """
    # Python % уже floor-based, поэтому для отрицательных лет правило то же
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


# =============================================================================
# ДЛИНА МЕСЯЦА
# =============================================================================


def validate_month(month: int) -> None:
    """
    Проверка номера месяца (1..12).

    Raises:
        ValueError: если month вне диапазона 1..12
    """
    if not 1 <= month <= MONTHS_PER_YEAR:
        raise ValueError(f"month must be in 1..{MONTHS_PER_YEAR}, got {month}")


def days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце с учётом високосного года.

    Args:
        year: Год (определяет длину февраля)
        month: Месяц 1..12

    Returns:
        28, 29, 30 или 31

    Raises:
        ValueError: если month вне диапазона 1..12

    Examples:
        >>> days_in_month(2017, 4)
        30
        >>> days_in_month(2016, 2)
        29
        >>> days_in_month(2017, 2)
        28
    """
    validate_month(month)

    if month in MONTHS_WITH_31_DAYS:
        return 31
    if month in MONTHS_WITH_30_DAYS:
        return 30
    return 29 if is_leap_year(year) else 28


def closest_valid_day(year: int, month: int, day: int) -> int:
    """
    Ближайший допустимый день месяца.

    Если дня нет в месяце (например, 31 апреля или 30 февраля),
    возвращается последний день месяца. Значения больше 31 сначала
    ограничиваются 31.

    Args:
        year: Год назначения (для февраля важен именно он)
        month: Месяц назначения 1..12
        day: Запрошенный день (>= 1)

    Returns:
        min(day, 31, days_in_month(year, month))

    Raises:
        ValueError: если day < 1 или month вне диапазона

    Examples:
        >>> closest_valid_day(2017, 4, 31)
        30
        >>> closest_valid_day(2016, 2, 30)
        29
        >>> closest_valid_day(2017, 2, 29)
        28
        >>> closest_valid_day(2017, 3, 45)
        31
    """
    if day < 1:
        raise ValueError(f"day must be >= 1, got {day}")

    check_day = min(day, MAX_DAY_OF_MONTH)
    return min(check_day, days_in_month(year, month))
