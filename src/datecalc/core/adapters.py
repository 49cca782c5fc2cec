"""
Calendar Adapters — доступ к полям конкретных представлений дат

Алгоритмы month_calc / year_calc не знают о конкретном типе даты.
Всё, что им нужно, это три возможности:
- прочитать (year, month, day)
- построить новое значение с другими (year, month, day), сохранив
  время суток и зону
- получить (year, month, day) в UTC для сравнения между зонами

Адаптеры регистрируются по типу; поиск идёт по MRO, поэтому datetime
(подкласс date) получает DatetimeAdapter, а не DateAdapter.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Dict, NamedTuple, Protocol

from datecalc.core.errors import RepresentationOverflow, UnsupportedTimestampType

logger = logging.getLogger(__name__)

UTC = timezone.utc


class CalendarFields(NamedTuple):
    """Календарные поля значения (без времени суток)."""
    year: int
    month: int  # 1..12
    day: int  # 1..31


class CalendarAdapter(Protocol):
    """Возможности, которые алгоритмы требуют от представления даты."""

    def fields(self, value: Any) -> CalendarFields:
        ...

    def replace_fields(self, value: Any, year: int, month: int, day: int) -> Any:
        ...

    def utc_fields(self, value: Any) -> CalendarFields:
        ...


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AdapterConfig:
    """Конфигурация нормализации stdlib datetime.

    naive_tz: зона, в которой интерпретируются naive datetime перед
    переводом в UTC (по умолчанию naive считается уже UTC).
    """
    naive_tz: tzinfo = field(default=UTC)


# =============================================================================
# STDLIB АДАПТЕРЫ
# =============================================================================


class DatetimeAdapter:
    """Адаптер для datetime.datetime (aware и naive)."""

    def __init__(self, config: AdapterConfig = AdapterConfig()):
        self.config = config

    def fields(self, value: datetime) -> CalendarFields:
        return CalendarFields(value.year, value.month, value.day)

    def replace_fields(self, value: datetime, year: int, month: int, day: int) -> datetime:
        """
        Новый datetime с заменёнными (year, month, day).

        Время суток, микросекунды, tzinfo и fold сохраняются.

        Raises:
            RepresentationOverflow: если год вне datetime.MINYEAR..MAXYEAR
        """
        try:
            return value.replace(year=year, month=month, day=day)
        except (ValueError, OverflowError) as e:
            raise RepresentationOverflow(
                f"datetime cannot represent {year:04d}-{month:02d}-{day:02d}: {e}"
            ) from e

    def utc_fields(self, value: datetime) -> CalendarFields:
        if value.tzinfo is None:
            value = value.replace(tzinfo=self.config.naive_tz)
        try:
            value_utc = value.astimezone(UTC)
        except (ValueError, OverflowError) as e:
            raise RepresentationOverflow(f"datetime {value!r} cannot be converted to UTC: {e}") from e
        return self.fields(value_utc)


class DateAdapter:
    """Адаптер для datetime.date. У date нет зоны: UTC-поля совпадают с полями."""

    def fields(self, value: date) -> CalendarFields:
        return CalendarFields(value.year, value.month, value.day)

    def replace_fields(self, value: date, year: int, month: int, day: int) -> date:
        try:
            return value.replace(year=year, month=month, day=day)
        except (ValueError, OverflowError) as e:
            raise RepresentationOverflow(
                f"date cannot represent {year:04d}-{month:02d}-{day:02d}: {e}"
            ) from e

    def utc_fields(self, value: date) -> CalendarFields:
        return self.fields(value)


# =============================================================================
# РЕЕСТР
# =============================================================================

_ADAPTERS: Dict[type, CalendarAdapter] = {
    datetime: DatetimeAdapter(),
    date: DateAdapter(),
}


def register_adapter(cls: type, adapter: CalendarAdapter) -> None:
    """
    Регистрация адаптера для типа (и, через MRO, его подклассов).

    Повторная регистрация заменяет прежний адаптер.
    """
    logger.debug("Registering calendar adapter %s for %s", type(adapter).__name__, cls.__name__)
    _ADAPTERS[cls] = adapter


def get_adapter(value: Any) -> CalendarAdapter:
    """
    Адаптер для значения, найденный по MRO его типа.

    Raises:
        UnsupportedTimestampType: если ни один тип из MRO не зарегистрирован
    """
    for cls in type(value).__mro__:
        adapter = _ADAPTERS.get(cls)
        if adapter is not None:
            return adapter

    raise UnsupportedTimestampType(
        f"No calendar adapter registered for {type(value).__name__}"
    )
