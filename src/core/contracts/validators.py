"""
JSON Schema Contract Validators

Модуль для валидации внешнего контракта арифметического движка согласно
формальной JSON Schema. Использует библиотеку jsonschema.

Схемы:
- arithmetic_result.json (статус + выходной литерал одной операции)

Контракт — всё, что движок гарантирует внешнему test-driver:
стабильный набор кодов статусов и детерминированный формат вывода.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.arithmetic_result import ArithmeticResult


# Каталог схем: <project root>/contracts/schema
CONTRACTS_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

ARITHMETIC_RESULT_SCHEMA: Final[str] = "arithmetic_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш контрактных схем.

    Каждая схема проходит meta-validation (Draft 2020-12) и должна объявлять
    $id, совпадающий с именем файла.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else CONTRACTS_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available_schemas(self) -> List[str]:
        """Имена схем (без .json) в каталоге, по алфавиту"""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени (результат кэшируется).

        Raises:
            FileNotFoundError: Схемы нет в каталоге
            ValueError: Схема не проходит meta-validation или $id не совпадает с именем
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        declared_id = schema.get("$id")
        if declared_id != schema_path.name:
            raise ValueError(
                f"Schema $id mismatch in {schema_path.name}: expected {schema_path.name!r}, "
                f"got {declared_id!r}"
            )

        self._schemas[schema_name] = schema
        return schema


# Общий загрузчик для валидаторов модуля
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной контрактной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        """
        Args:
            schema_name: Имя схемы без расширения
            loader: Загрузчик схем (default: общий загрузчик модуля)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Проверка данных; первая найденная ошибка поднимается как исключение.

        Raises:
            ValidationError: Данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные соответствуют схеме (без исключения)"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Все нарушения схемы, по одному ValidationError на нарушение.

        Пустой итератор означает валидные данные.
        """
        return self.validator.iter_errors(data)


class ArithmeticResultValidator(ContractValidator):
    """Валидатор для arithmetic_result контракта."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__(ARITHMETIC_RESULT_SCHEMA, loader)

    def validate_result(self, result: ArithmeticResult) -> None:
        """Валидация ArithmeticResult через его контрактное представление"""
        self.validate(result.to_contract())


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_arithmetic_result(data: Dict[str, Any] | ArithmeticResult) -> None:
    """
    Валидация arithmetic_result данных.

    Args:
        data: dict контракта или ArithmeticResult

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    if isinstance(data, ArithmeticResult):
        data = data.to_contract()
    ArithmeticResultValidator().validate(data)
