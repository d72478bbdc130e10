"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (atm/core/contracts/schema/):
- inventory.json: снапшот кассет банкомата
- dispensation_plan.json: план выдачи
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
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
            schema_name: Имя схемы без расширения (например, 'inventory')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

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

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class InventoryValidator(ContractValidator):
    """Валидатор для inventory контракта."""

    def __init__(self):
        super().__init__("inventory")


class DispensationPlanValidator(ContractValidator):
    """Валидатор для dispensation_plan контракта."""

    def __init__(self):
        super().__init__("dispensation_plan")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_inventory(data: Dict[str, Any]) -> None:
    """
    Валидация inventory данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    InventoryValidator().validate(data)


def validate_dispensation_plan(data: list) -> None:
    """
    Валидация плана выдачи (список {value, count}).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DispensationPlanValidator().validate(data)
