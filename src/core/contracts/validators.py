"""
JSON Schema Contract Validators

Модуль для валидации экспортируемого результата извлечения корня согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema.

Схемы:
- sqrt_result.json (корень, позиция точки, финальный остаток, трасса шагов)
"""

import json
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

# Схемы поставляются вместе с пакетом (package data)
SCHEMA_DIR: Traversable = resources.files(__package__) / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из каталога schema/ внутри пакета
    src.core.contracts, как при запуске из исходников, так и после установки.
    """

    def __init__(self, schema_dir: Optional[Traversable] = None):
        self._schema_dir = schema_dir if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Traversable:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'sqrt_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика, создаётся при первой валидации
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий SchemaLoader (ленивая инициализация).

    Raises:
        RuntimeError: если каталог схем не найден
    """
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


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
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SqrtResultValidator(ContractValidator):
    """Валидатор для sqrt_result контракта."""

    def __init__(self):
        super().__init__("sqrt_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_sqrt_result(data: Dict[str, Any]) -> None:
    """
    Валидация экспортированного результата.

    Кроме схемы проверяется согласованность трассы с корнем: цифры d всех
    шагов, записанные подряд, дают корень без точки.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SqrtResultValidator().validate(data)

    steps = data["steps"]
    if steps is None:
        return
    digits = "".join(str(step["d"]) for step in steps)
    if digits != data["root"].replace(".", ""):
        raise jsonschema.ValidationError(
            f"steps digits {digits!r} do not match root {data['root']!r}"
        )
