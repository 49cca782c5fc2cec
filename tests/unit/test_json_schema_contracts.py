"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и диапазонов
- Интеграция с Pydantic моделью CalendarTimestamp
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import ValidationError as PydanticValidationError

from datecalc.core.contracts import (
    CalendarTimestampValidator,
    MonthShiftRequestValidator,
    SchemaLoader,
    YearsSinceRequestValidator,
    load_calendar_timestamp,
    validate_calendar_timestamp,
    validate_month_shift_request,
    validate_years_since_request,
)
from datecalc.core.domain import CalendarTimestamp


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_calendar_timestamp():
    """Валидный calendar_timestamp для тестирования."""
    return {
        "year": 2018,
        "month": 3,
        "day": 15,
        "hour": 12,
        "minute": 0,
        "second": 0,
        "microsecond": 0,
        "utc_offset_minutes": 180,
    }


@pytest.fixture
def valid_month_shift_request(valid_calendar_timestamp):
    return {"timestamp": valid_calendar_timestamp, "months": -23}


@pytest.fixture
def valid_years_since_request(valid_calendar_timestamp):
    return {
        "a": valid_calendar_timestamp,
        "b": {"year": 2010, "month": 5, "day": 11},
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Загрузка и meta-валидация схем."""

    @pytest.mark.parametrize(
        "schema_name", ["calendar_timestamp", "month_shift_request", "years_since_request"]
    )
    def test_bundled_schemas_load(self, schema_name):
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["type"] == "object"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("calendar_timestamp") is loader.load_schema("calendar_timestamp")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CALENDAR TIMESTAMP
# =============================================================================


class TestCalendarTimestampContract:
    """Контракт calendar_timestamp."""

    def test_valid(self, valid_calendar_timestamp):
        validate_calendar_timestamp(valid_calendar_timestamp)

    def test_minimal(self):
        validate_calendar_timestamp({"year": -44, "month": 3, "day": 15})

    @pytest.mark.parametrize("field", ["year", "month", "day"])
    def test_missing_required(self, valid_calendar_timestamp, field):
        del valid_calendar_timestamp[field]
        with pytest.raises(ValidationError):
            validate_calendar_timestamp(valid_calendar_timestamp)

    @pytest.mark.parametrize(
        "field,value",
        [
            ("month", 13),
            ("month", 0),
            ("day", 32),
            ("hour", 24),
            ("utc_offset_minutes", 1440),
            ("year", "2018"),
            ("day", 15.5),
        ],
    )
    def test_invalid_values(self, valid_calendar_timestamp, field, value):
        valid_calendar_timestamp[field] = value
        assert not CalendarTimestampValidator().is_valid(valid_calendar_timestamp)

    def test_additional_properties_rejected(self, valid_calendar_timestamp):
        valid_calendar_timestamp["tz_name"] = "Europe/Moscow"
        with pytest.raises(ValidationError):
            validate_calendar_timestamp(valid_calendar_timestamp)

    def test_iter_errors_reports_all(self):
        errors = list(CalendarTimestampValidator().iter_errors({"year": 2018, "month": 13, "day": 0}))
        assert len(errors) == 2

    def test_schema_matches_model_fields(self):
        """Свойства схемы совпадают с полями Pydantic модели."""
        schema = CalendarTimestampValidator().schema
        assert set(schema["properties"]) == set(CalendarTimestamp.model_fields)

    def test_model_dump_is_valid(self):
        value = CalendarTimestamp(year=2016, month=2, day=29, utc_offset_minutes=-330)
        validate_calendar_timestamp(value.model_dump())


class TestLoadCalendarTimestamp:
    """Валидация по схеме + построение модели."""

    def test_load(self, valid_calendar_timestamp):
        value = load_calendar_timestamp(valid_calendar_timestamp)
        assert value == CalendarTimestamp(year=2018, month=3, day=15, hour=12, utc_offset_minutes=180)

    def test_schema_error_first(self):
        with pytest.raises(ValidationError):
            load_calendar_timestamp({"year": 2018, "month": 13, "day": 1})

    def test_calendar_invalid_day(self):
        """30 февраля проходит схему, но отвергается моделью."""
        data = {"year": 2017, "month": 2, "day": 30}
        validate_calendar_timestamp(data)
        with pytest.raises(PydanticValidationError):
            load_calendar_timestamp(data)


# =============================================================================
# REQUESTS
# =============================================================================


class TestMonthShiftRequestContract:
    """Контракт month_shift_request."""

    def test_valid(self, valid_month_shift_request):
        validate_month_shift_request(valid_month_shift_request)

    def test_nested_timestamp_validated(self, valid_month_shift_request):
        valid_month_shift_request["timestamp"]["month"] = 13
        with pytest.raises(ValidationError):
            validate_month_shift_request(valid_month_shift_request)

    @pytest.mark.parametrize("months", ["1", 1.5, True, None])
    def test_months_must_be_integer(self, valid_month_shift_request, months):
        valid_month_shift_request["months"] = months
        assert not MonthShiftRequestValidator().is_valid(valid_month_shift_request)

    def test_missing_months(self, valid_month_shift_request):
        del valid_month_shift_request["months"]
        with pytest.raises(ValidationError):
            validate_month_shift_request(valid_month_shift_request)


class TestYearsSinceRequestContract:
    """Контракт years_since_request."""

    def test_valid(self, valid_years_since_request):
        validate_years_since_request(valid_years_since_request)

    def test_missing_b(self, valid_years_since_request):
        del valid_years_since_request["b"]
        assert not YearsSinceRequestValidator().is_valid(valid_years_since_request)

    def test_end_to_end(self, valid_years_since_request):
        validate_years_since_request(valid_years_since_request)
        a = CalendarTimestamp.model_validate(valid_years_since_request["a"])
        b = CalendarTimestamp.model_validate(valid_years_since_request["b"])
        assert a.years_since(b) == 7
