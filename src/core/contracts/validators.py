"""
JSON Schema Contract Validators

Модуль для валидации JSON payload'ов движка факторизации согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Контракты предназначены для внешних потребителей (UI, CLI), которые
сериализуют входы и результаты факторизации.

Схемы:
- coefficient_triple.json (входные коэффициенты a, b, c)
- factored_result.json (plain + latex рендеринг)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'factored_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
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
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)

    def get_errors(self, data: Dict[str, Any]) -> list[str]:
        """
        Сообщения всех ошибок валидации, отсортированные по пути в документе.

        Returns:
            Пустой список если данные валидны
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(e.path))
        return [
            f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}"
            for e in errors
        ]


class CoefficientTripleValidator(ContractValidator):
    """Валидатор для coefficient_triple контракта."""

    def __init__(self):
        super().__init__("coefficient_triple")


class FactoredResultValidator(ContractValidator):
    """Валидатор для factored_result контракта."""

    def __init__(self):
        super().__init__("factored_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_coefficient_triple(data: Dict[str, Any]) -> None:
    """
    Валидация coefficient_triple данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoefficientTripleValidator().validate(data)


def validate_factored_result(data: Dict[str, Any]) -> None:
    """
    Валидация factored_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FactoredResultValidator().validate(data)
