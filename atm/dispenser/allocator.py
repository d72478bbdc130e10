"""
Greedy Allocator — Расчёт выдачи купюр

Жадный проход от крупных номиналов к мелким:
1. Кассеты сортируются по убыванию номинала
2. remainder = requested_amount
3. Для каждой кассеты: пропуск, если value > remainder или доступных купюр нет,
   иначе count = min(remainder // value, usable_count), remainder -= value × count
4. Сумма построенного плана сверяется с запросом; расхождение → InsufficientFunds

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Сумма успешного плана в точности равна запрошенной
2. Позиции плана строго по убыванию номинала, count > 0
3. count никогда не превышает usable_count (reserve не выдаётся)
4. Снапшот не изменяется, повторный вызов даёт тот же результат

Перебора с возвратом нет: сумма, собираемая только "не жадной" комбинацией
(например, 5400 при недоступных 200 и одной 100), отклоняется с InsufficientFunds.
"""

import logging
from typing import List, Optional

from atm.core.domain.banknote import DispensationPlan, PlanItem
from atm.dispenser.amount_validator import validate_amount
from atm.dispenser.config import DispenserConfig
from atm.dispenser.errors import InsufficientFunds
from atm.dispenser.inventory_query import (
    InventoryLike,
    max_dispensable,
    resolve_duplicates,
    sort_by_value,
    usable_count,
)

logger = logging.getLogger(__name__)


class GreedyAllocator:
    """Жадный расчёт выдачи (stateless, конфигурация только читается)."""

    def __init__(self, config: Optional[DispenserConfig] = None):
        self.config = config or DispenserConfig()

    def allocate(self, requested_amount: int, inventory: InventoryLike) -> DispensationPlan:
        """
        План выдачи для запрошенной суммы.

        Args:
            requested_amount: Сумма в минимальных единицах валюты
            inventory: Снапшот кассет (не изменяется)

        Returns:
            DispensationPlan (для суммы 0 пустой)

        Raises:
            InvalidInput: Некорректная сумма или повторный номинал (strict/REJECT)
            InsufficientFunds: Жадный проход не собрал сумму точно
        """
        if self.config.strict_input:
            validate_amount(requested_amount, name="requested_amount")

        banknotes = resolve_duplicates(inventory, self.config.duplicate_policy)

        remainder = requested_amount
        items: List[PlanItem] = []
        for banknote in sort_by_value(banknotes, descending=True):
            available = usable_count(banknote)
            if banknote.value > remainder or not available:
                continue

            needed = remainder // banknote.value
            count = min(needed, available)
            if count > 0:
                items.append(PlanItem(value=banknote.value, count=count))
                remainder -= banknote.value * count

            logger.debug(
                "value=%s needed=%s available=%s taken=%s remainder=%s",
                banknote.value, needed, available, count, remainder,
            )

        plan = DispensationPlan(items=tuple(items))

        # Приёмка по сумме построенного плана, а не по remainder
        dispensed = plan.total_amount()
        if dispensed != requested_amount:
            ceiling = max_dispensable(banknotes)
            logger.debug(
                "rejected: requested=%s dispensed=%s max_dispensable=%s",
                requested_amount, dispensed, ceiling,
            )
            raise InsufficientFunds(
                requested_amount=requested_amount,
                dispensed_amount=dispensed,
                max_dispensable=ceiling,
            )

        logger.debug("accepted: requested=%s plan=%s", requested_amount, plan.as_pairs())
        return plan


def allocate(
    requested_amount: int,
    inventory: InventoryLike,
    config: Optional[DispenserConfig] = None,
) -> DispensationPlan:
    """Расчёт выдачи с конфигурацией по умолчанию (см. GreedyAllocator.allocate)."""
    return GreedyAllocator(config).allocate(requested_amount, inventory)
