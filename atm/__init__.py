"""
ATM banknote dispenser.

Greedy calculation of banknotes to hand out for a requested amount,
honouring per-cassette reserves, plus amount validation helpers that
suggest the nearest amounts the machine can actually produce.
"""

from atm.core.domain import Banknote, DispensationPlan, Inventory, PlanItem
from atm.dispenser import (
    AmountBounds,
    DispenserConfig,
    DispenserError,
    DuplicatePolicy,
    GreedyAllocator,
    InsufficientFunds,
    InvalidInput,
    allocate,
    is_satisfiable,
    nearest_bounds,
)

__all__ = [
    "Banknote",
    "Inventory",
    "PlanItem",
    "DispensationPlan",
    "AmountBounds",
    "DispenserConfig",
    "DuplicatePolicy",
    "GreedyAllocator",
    "DispenserError",
    "InsufficientFunds",
    "InvalidInput",
    "allocate",
    "is_satisfiable",
    "nearest_bounds",
]
