"""
JSON Schema Contract Validators

Валидация JSON, которым движок сдачи обменивается с presentation layer.
Использует библиотеку jsonschema (Draft 2020-12).

Схемы (package data, src/core/contracts/schema/):
- change_request.json — цена + переданные номиналы
- change_result.json — insufficient | exact | breakdown
"""

import json
from decimal import Decimal
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.tender import Tender


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из package data (src/core/contracts/schema/),
    поэтому работает и после обычной (не editable) установки.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or (files(__package__) / "schema")
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'change_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Базовый валидатор: данные против одной JSON Schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class ChangeRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("change_request")


class ChangeResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("change_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_change_request(data: Dict[str, Any]) -> None:
    """
    Валидация change_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChangeRequestValidator().validate(data)


def validate_change_result(data: Dict[str, Any]) -> None:
    """
    Валидация change_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ChangeResultValidator().validate(data)


def parse_change_request(data: Dict[str, Any]) -> tuple[Decimal, list[Tender]]:
    """
    Валидация и разбор change_request в (price, tenders).

    Цена-число конвертируется через str(), как и в движке.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_change_request(data)
    price = Decimal(str(data["price"]))
    tenders = [Tender(name=t["name"], count=t["count"]) for t in data["tenders"]]
    return price, tenders
