"""Dispenser — расчёт выдачи купюр по снапшоту кассет.

Состав:
- inventory_query: доступный остаток с учётом reserve
- amount_validator: кратность суммы и ближайшие допустимые суммы
- allocator: жадный расчёт плана выдачи
"""

from .allocator import GreedyAllocator, allocate
from .amount_validator import (
    AmountBounds,
    is_satisfiable,
    is_valid_amount_type,
    nearest_bounds,
    validate_amount,
)
from .config import DispenserConfig, DuplicatePolicy
from .errors import (
    INSUFFICIENT_FUNDS_MESSAGE,
    DispenserError,
    InsufficientFunds,
    InvalidInput,
)
from .inventory_query import (
    InventoryLike,
    as_banknotes,
    is_usable,
    max_dispensable,
    resolve_duplicates,
    smallest_usable_denomination,
    smallest_usable_value,
    sort_by_value,
    usable_count,
)

__all__ = [
    # Allocator
    "GreedyAllocator",
    "allocate",
    # Amount validator
    "AmountBounds",
    "is_satisfiable",
    "is_valid_amount_type",
    "nearest_bounds",
    "validate_amount",
    # Config
    "DispenserConfig",
    "DuplicatePolicy",
    # Errors
    "INSUFFICIENT_FUNDS_MESSAGE",
    "DispenserError",
    "InsufficientFunds",
    "InvalidInput",
    # Inventory query
    "InventoryLike",
    "as_banknotes",
    "is_usable",
    "max_dispensable",
    "resolve_duplicates",
    "smallest_usable_denomination",
    "smallest_usable_value",
    "sort_by_value",
    "usable_count",
]
