"""
Ошибки datecalc

Арифметика календаря (add_months / years_since) сама по себе тотальна и
не выбрасывает исключений для валидных входов. Исключения ниже описывают
ошибки на границе с конкретным представлением даты (stdlib datetime и т.п.).
"""


class DateCalcError(Exception):
    """Базовый класс всех ошибок datecalc."""
    pass


class RepresentationOverflow(DateCalcError, OverflowError):
    """
    Конкретное представление не может вместить вычисленные поля.

    Пример: datetime(9999, 12, 15) + 1 месяц → год 10000, что выходит за
    datetime.MAXYEAR. Сама арифметика корректна, ошибка возникает только
    при построении результата в stdlib-типе.

    Всегда поднимается через `raise ... from exc`, исходная ошибка
    представления доступна в __cause__.
    """
    pass


class UnsupportedTimestampType(DateCalcError, TypeError):
    """Для типа значения не зарегистрирован CalendarAdapter."""
    pass
