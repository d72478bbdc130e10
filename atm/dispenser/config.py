"""Конфигурация расчёта выдачи."""

from dataclasses import dataclass
from enum import Enum


class DuplicatePolicy(str, Enum):
    """Что делать, если в снапшоте несколько кассет одного номинала."""

    REJECT = "reject"  # InvalidInput
    MERGE = "merge"  # count и reserve суммируются


@dataclass(frozen=True)
class DispenserConfig:
    """Конфигурация GreedyAllocator.

    strict_input=False отключает проверку суммы: отрицательная сумма
    тогда просто не собирается и даёт InsufficientFunds.
    """

    strict_input: bool = True
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT
