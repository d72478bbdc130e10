"""
Amount Validator — Проверка запрошенной суммы

Минимальный доступный номинал: шаг, с которым банкомат вообще может выдавать.
Любая выдаваемая сумма кратна ему. Обратное неверно: кратность необходима,
но не достаточна, окончательно сумму подтверждает только allocator.

Для подсказки пользователю вычисляются ближайшие кратные суммы снизу и сверху.
"""

from dataclasses import dataclass

from atm.dispenser.errors import InvalidInput
from atm.dispenser.inventory_query import InventoryLike, smallest_usable_value


@dataclass(frozen=True)
class AmountBounds:
    """Ближайшие кратные суммы. floor может совпадать с запрошенной суммой."""

    floor: int
    ceil: int

    def is_empty(self) -> bool:
        """Нечего предложить: в банкомате нет доступных купюр."""
        return self.floor == 0 and self.ceil == 0


# =============================================================================
# ВАЛИДАЦИЯ ВХОДА
# =============================================================================


def is_valid_amount_type(amount: object) -> bool:
    """Сумма является целым числом (bool не считается числом)."""
    return isinstance(amount, int) and not isinstance(amount, bool)


def validate_amount(amount: object, name: str = "amount") -> None:
    """
    Валидация, что сумма является неотрицательным целым.

    Raises:
        InvalidInput: Если сумма не целая или отрицательная
    """
    if not is_valid_amount_type(amount):
        raise InvalidInput(f"{name} must be an integer, got {amount!r}")

    if amount < 0:
        raise InvalidInput(f"{name} must be non-negative, got {amount}")


# =============================================================================
# КРАТНОСТЬ
# =============================================================================


def is_satisfiable(amount: object, inventory: InventoryLike) -> bool:
    """
    Сумма кратна минимальному доступному номиналу.

    amount > 0 AND min_value > 0 AND amount % min_value == 0.
    Никогда не бросает исключений: нецелая или отрицательная сумма невыполнима.
    """
    if not is_valid_amount_type(amount):
        return False

    min_value = smallest_usable_value(inventory)
    return amount > 0 and min_value > 0 and amount % min_value == 0


def nearest_bounds(amount: int, inventory: InventoryLike) -> AmountBounds:
    """
    Ближайшие суммы, кратные минимальному доступному номиналу.

    floor = amount - amount % min_value, ceil = floor + min_value.

    Args:
        amount: Запрошенная сумма
        inventory: Снапшот кассет

    Returns:
        AmountBounds(0, 0), если доступных купюр нет

    Raises:
        InvalidInput: Если сумма не целая или отрицательная
    """
    validate_amount(amount)

    min_value = smallest_usable_value(inventory)
    if not min_value:
        return AmountBounds(floor=0, ceil=0)

    floor = amount - amount % min_value
    return AmountBounds(floor=floor, ceil=floor + min_value)
