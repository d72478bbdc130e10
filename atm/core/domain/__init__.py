"""
Domain models and value objects.

Contains the banknote cassette, inventory snapshot and dispensation plan models.
"""

from atm.core.domain.banknote import (
    Banknote,
    DispensationPlan,
    Inventory,
    PlanItem,
)

__all__ = [
    "Banknote",
    "Inventory",
    "PlanItem",
    "DispensationPlan",
]
