"""
JSON Schema Contract Validators

Валидация сериализованных значений расширенной плоскости против формального
JSON Schema контракта (Draft 2020-12, библиотека jsonschema).

Схемы (riemann/core/contracts/schema/):
- complex_value.json — {"schema_version", "kind", "re"?, "im"?}

Схема загружается один раз и проходит meta-валидацию до первого использования.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from jsonschema import Draft202012Validator, SchemaError, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов.

    По умолчанию читает каталог schema/, поставляемый вместе с пакетом
    (package-data в pyproject.toml).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем каталога (без расширения .json)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не проходит meta-валидацию Draft 2020-12
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор документа против одной схемы каталога."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Документ не соответствует схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения схемы в виде "<json path>: <сообщение>".

        Returns:
            Пустой список для валидного документа
        """
        return [f"{error.json_path}: {error.message}" for error in self.iter_errors(data)]


class ComplexValueValidator(ContractValidator):
    """Валидатор контракта complex_value."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("complex_value", loader)


_COMPLEX_VALUE_VALIDATOR: Optional[ComplexValueValidator] = None


def validate_complex_value(data: Dict[str, Any]) -> None:
    """
    Валидация документа complex_value (валидатор создаётся один раз).

    Raises:
        ValidationError: Документ не соответствует схеме
    """
    global _COMPLEX_VALUE_VALIDATOR
    if _COMPLEX_VALUE_VALIDATOR is None:
        _COMPLEX_VALUE_VALIDATOR = ComplexValueValidator()
    _COMPLEX_VALUE_VALIDATOR.validate(data)
