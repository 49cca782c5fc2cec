"""
CalendarTimestamp — неизменяемая календарная метка времени

Immutable Pydantic модель: календарные поля (year, month, day), время суток
и смещение зоны в минутах. Год не ограничен (в отличие от stdlib datetime),
поэтому арифметика над CalendarTimestamp никогда не упирается в диапазон
представления.

Все операции возвращают новый экземпляр.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from datecalc.core.adapters import CalendarFields, register_adapter
from datecalc.core.errors import RepresentationOverflow
from datecalc.core.math.calendar_rules import days_in_month
from datecalc.core.math.month_calc import add_months, shift_year_month, with_closest_day
from datecalc.core.math.year_calc import years_since

MINUTES_PER_DAY: Final[int] = 24 * 60

# Смещения зон строго меньше суток
MAX_UTC_OFFSET_MINUTES: Final[int] = MINUTES_PER_DAY - 1


# =============================================================================
# CALENDAR TIMESTAMP MODEL
# =============================================================================


class CalendarTimestamp(BaseModel):
    """
    Календарная метка времени.

    Invariant: day <= days_in_month(year, month).
    Время суток и utc_offset_minutes не участвуют в арифметике месяцев
    и переносятся в результат без изменений.
    """

    # Календарные поля
    year: int = Field(..., description="Год (пролептический григорианский, не ограничен)")
    month: int = Field(..., ge=1, le=12, description="Месяц 1..12")
    day: int = Field(..., ge=1, le=31, description="День месяца 1..31")

    # Время суток
    hour: int = Field(0, ge=0, le=23)
    minute: int = Field(0, ge=0, le=59)
    second: int = Field(0, ge=0, le=59)
    microsecond: int = Field(0, ge=0, le=999_999)

    # Зона
    utc_offset_minutes: int = Field(
        0,
        ge=-MAX_UTC_OFFSET_MINUTES,
        le=MAX_UTC_OFFSET_MINUTES,
        description="Смещение локального времени от UTC в минутах (UTC+3 → 180)",
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CalendarTimestamp":
        """Проверка, что день существует в указанном месяце (30 февраля → ошибка)."""
        max_day = days_in_month(self.year, self.month)
        if self.day > max_day:
            raise ValueError(
                f"day {self.day} out of range for {self.year:04d}-{self.month:02d} "
                f"(max {max_day})"
            )
        return self

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, value: datetime) -> "CalendarTimestamp":
        """
        Построение из stdlib datetime.

        Naive datetime считается UTC. Смещение зоны должно быть кратно минуте.

        Raises:
            ValueError: если смещение зоны не кратно минуте
        """
        offset = value.utcoffset()
        offset_minutes = 0
        if offset is not None:
            offset_seconds = int(offset.total_seconds())
            if offset_seconds % 60 != 0 or offset.microseconds:
                raise ValueError(f"UTC offset {offset} is not a whole number of minutes")
            offset_minutes = offset_seconds // 60

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            microsecond=value.microsecond,
            utc_offset_minutes=offset_minutes,
        )

    @classmethod
    def from_date(cls, value: date) -> "CalendarTimestamp":
        """Полночь UTC указанной даты."""
        return cls(year=value.year, month=value.month, day=value.day)

    def to_datetime(self) -> datetime:
        """
        Aware datetime с фиксированным смещением.

        Raises:
            RepresentationOverflow: если год вне datetime.MINYEAR..MAXYEAR
        """
        tz = timezone(timedelta(minutes=self.utc_offset_minutes))
        try:
            return datetime(
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.microsecond,
                tzinfo=tz,
            )
        except (ValueError, OverflowError) as e:
            raise RepresentationOverflow(
                f"datetime cannot represent year {self.year}: {e}"
            ) from e

    def to_utc(self) -> "CalendarTimestamp":
        """
        Та же точка во времени со смещением 0.

        Смещение меньше суток, поэтому дата сдвигается максимум на один день;
        переход через границу месяца/года считается по календарным правилам,
        без stdlib datetime (год не ограничен).
        """
        if self.utc_offset_minutes == 0:
            return self

        minute_of_day = self.hour * 60 + self.minute - self.utc_offset_minutes
        day_delta, minute_of_day = divmod(minute_of_day, MINUTES_PER_DAY)

        year, month, day = self.year, self.month, self.day
        if day_delta > 0:
            if day == days_in_month(year, month):
                year, month = shift_year_month(year, month, 1)
                day = 1
            else:
                day += 1
        elif day_delta < 0:
            if day == 1:
                year, month = shift_year_month(year, month, -1)
                day = days_in_month(year, month)
            else:
                day -= 1

        return self._rebuild(
            year=year,
            month=month,
            day=day,
            hour=minute_of_day // 60,
            minute=minute_of_day % 60,
            utc_offset_minutes=0,
        )

    # -------------------------------------------------------------------------
    # Календарные поля
    # -------------------------------------------------------------------------

    def calendar_fields(self) -> CalendarFields:
        return CalendarFields(self.year, self.month, self.day)

    def replace_fields(self, year: int, month: int, day: int) -> "CalendarTimestamp":
        """Новый экземпляр с другими (year, month, day); валидируется заново."""
        return self._rebuild(year=year, month=month, day=day)

    def _rebuild(self, **changes: Any) -> "CalendarTimestamp":
        # model_copy(update=...) не запускает валидацию
        return type(self).model_validate({**self.model_dump(), **changes})

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_months(self, months: int) -> "CalendarTimestamp":
        """Сдвиг на знаковое число месяцев с clamp дня (см. month_calc.add_months)."""
        return add_months(self, months)

    def with_closest_day(self, day: int) -> "CalendarTimestamp":
        return with_closest_day(self, day)

    def years_since(self, other: Any) -> int:
        """Полные годы от other до self (см. year_calc.years_since)."""
        return years_since(self, other)

    def isoformat(self) -> str:
        """
        ISO-подобное представление: 2018-03-15T12:00:00+03:00.

        Микросекунды выводятся только если не равны нулю.
        """
        text = (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
        if self.microsecond:
            text += f".{self.microsecond:06d}"

        sign = "-" if self.utc_offset_minutes < 0 else "+"
        offset_hours, offset_minutes = divmod(abs(self.utc_offset_minutes), 60)
        return f"{text}{sign}{offset_hours:02d}:{offset_minutes:02d}"


# =============================================================================
# ADAPTER
# =============================================================================


class CalendarTimestampAdapter:
    """CalendarAdapter для CalendarTimestamp: всё делегируется модели."""

    def fields(self, value: CalendarTimestamp) -> CalendarFields:
        return value.calendar_fields()

    def replace_fields(
        self, value: CalendarTimestamp, year: int, month: int, day: int
    ) -> CalendarTimestamp:
        return value.replace_fields(year, month, day)

    def utc_fields(self, value: CalendarTimestamp) -> CalendarFields:
        return value.to_utc().calendar_fields()


register_adapter(CalendarTimestamp, CalendarTimestampAdapter())
