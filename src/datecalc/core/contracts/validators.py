"""
JSON Schema Contract Validators

Модуль для валидации сериализованных запросов datecalc согласно JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (schema/ внутри пакета):
- calendar_timestamp.json
- month_shift_request.json
- years_since_request.json

Схемы проверяют форму и диапазоны полей. Календарная валидность
(например, 30 февраля) проверяется моделью CalendarTimestamp.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from datecalc.core.domain.timestamp import CalendarTimestamp


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'calendar_timestamp')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class CalendarTimestampValidator(ContractValidator):
    """Валидатор для calendar_timestamp контракта."""

    def __init__(self):
        super().__init__("calendar_timestamp")


class MonthShiftRequestValidator(ContractValidator):
    """Валидатор для month_shift_request контракта."""

    def __init__(self):
        super().__init__("month_shift_request")


class YearsSinceRequestValidator(ContractValidator):
    """Валидатор для years_since_request контракта."""

    def __init__(self):
        super().__init__("years_since_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_calendar_timestamp(data: Dict[str, Any]) -> None:
    """
    Валидация calendar_timestamp данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    CalendarTimestampValidator().validate(data)


def validate_month_shift_request(data: Dict[str, Any]) -> None:
    MonthShiftRequestValidator().validate(data)


def validate_years_since_request(data: Dict[str, Any]) -> None:
    YearsSinceRequestValidator().validate(data)


def load_calendar_timestamp(data: Dict[str, Any]) -> CalendarTimestamp:
    """
    Валидация по схеме и построение CalendarTimestamp.

    Args:
        data: Сериализованный calendar_timestamp

    Returns:
        CalendarTimestamp

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если день не существует в месяце
    """
    validate_calendar_timestamp(data)
    return CalendarTimestamp.model_validate(data)
