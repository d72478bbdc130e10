"""
Contract Validation Module

Модуль для валидации JSON контрактов банкомата (inventory, dispensation_plan).
"""

from .validators import (
    ContractValidator,
    DispensationPlanValidator,
    InventoryValidator,
    SchemaLoader,
    validate_dispensation_plan,
    validate_inventory,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "InventoryValidator",
    "DispensationPlanValidator",
    # Functions
    "validate_inventory",
    "validate_dispensation_plan",
]
