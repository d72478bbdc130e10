"""
Inventory Query — Доступный остаток кассет

Чистые функции над снапшотом кассет:
- доступное количество купюр с учётом неснижаемого остатка (reserve)
- минимальный доступный номинал (шаг, с которым банкомат может выдавать)
- максимальная сумма, которую теоретически можно выдать

Снапшот принимается как Inventory или как любая коллекция Banknote.
Входные коллекции не изменяются: сортировка всегда возвращает новый список.
"""

from typing import Dict, Iterable, List, Optional, Union

from atm.core.domain.banknote import Banknote, Inventory
from atm.dispenser.config import DuplicatePolicy
from atm.dispenser.errors import InvalidInput

InventoryLike = Union[Inventory, Iterable[Banknote]]


# =============================================================================
# НОРМАЛИЗАЦИЯ СНАПШОТА
# =============================================================================


def as_banknotes(inventory: InventoryLike) -> List[Banknote]:
    """Снапшот как новый список кассет."""
    if isinstance(inventory, Inventory):
        return list(inventory.banknotes)
    return list(inventory)


def resolve_duplicates(
    inventory: InventoryLike,
    policy: DuplicatePolicy = DuplicatePolicy.REJECT,
) -> List[Banknote]:
    """
    Приведение снапшота к виду "один номинал, одна кассета".

    Args:
        inventory: Снапшот кассет
        policy: REJECT (ошибка на повторный номинал) или
            MERGE (count и reserve повторов суммируются в одну кассету)

    Returns:
        Список кассет с уникальными номиналами (порядок первого вхождения)

    Raises:
        InvalidInput: Повторный номинал при policy=REJECT
    """
    merged: Dict[int, Banknote] = {}
    for banknote in as_banknotes(inventory):
        existing = merged.get(banknote.value)
        if existing is None:
            merged[banknote.value] = banknote
            continue
        if policy == DuplicatePolicy.REJECT:
            raise InvalidInput(f"Duplicate banknote value in inventory: {banknote.value}")
        merged[banknote.value] = Banknote(
            value=banknote.value,
            count=existing.count + banknote.count,
            reserve=existing.reserve + banknote.reserve,
        )
    return list(merged.values())


def sort_by_value(inventory: InventoryLike, descending: bool = False) -> List[Banknote]:
    """Кассеты, отсортированные по номиналу (новый список)."""
    return sorted(as_banknotes(inventory), key=lambda b: b.value, reverse=descending)


# =============================================================================
# ДОСТУПНЫЙ ОСТАТОК
# =============================================================================


def usable_count(banknote: Banknote) -> int:
    """
    Количество купюр, которое можно выдать.

    usable = count - reserve, если count > reserve, иначе 0.
    """
    if banknote.count > banknote.reserve:
        return banknote.count - banknote.reserve
    return 0


def is_usable(banknote: Banknote) -> bool:
    return usable_count(banknote) > 0


def smallest_usable_denomination(inventory: InventoryLike) -> Optional[Banknote]:
    """
    Кассета с минимальным номиналом среди тех, где есть доступные купюры.

    Returns:
        Banknote или None, если выдавать нечего
    """
    for banknote in sort_by_value(inventory):
        if is_usable(banknote):
            return banknote
    return None


def smallest_usable_value(inventory: InventoryLike) -> int:
    """Минимальный доступный номинал, 0 если выдавать нечего."""
    banknote = smallest_usable_denomination(inventory)
    return banknote.value if banknote else 0


def max_dispensable(inventory: InventoryLike) -> int:
    """
    Максимальная сумма разовой выдачи: Σ value × usable_count.

    Используется как потолок при диагностике отказа в выдаче.
    """
    return sum(b.value * usable_count(b) for b in as_banknotes(inventory))
