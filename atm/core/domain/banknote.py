"""
Banknote — Модели кассеты банкомата и плана выдачи

Immutable Pydantic модели:
- Banknote: номинал, количество купюр в кассете и неснижаемый остаток (reserve)
- Inventory: снапшот всех кассет банкомата
- PlanItem / DispensationPlan: результат расчёта выдачи

Все суммы и номиналы являются целыми числами в минимальных единицах валюты.
Ядро только читает модели; изменение остатков остаётся за вызывающей стороной.
"""

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# BANKNOTE
# =============================================================================


class Banknote(BaseModel):
    """
    Кассета с купюрами одного номинала.

    reserve задаёт количество купюр, которые нельзя выдавать ни при каких условиях.
    Хранится отдельно от count, доступный остаток вычисляется в inventory_query.
    """

    value: int = Field(..., gt=0, description="Номинал купюры")
    count: int = Field(..., ge=0, description="Всего купюр в кассете")
    reserve: int = Field(default=0, ge=0, description="Неснижаемый остаток купюр")

    model_config = {"frozen": True}


# =============================================================================
# INVENTORY
# =============================================================================


class Inventory(BaseModel):
    """
    Снапшот содержимого банкомата.

    Номиналы уникальны: одна кассета на номинал. Порядок кассет произвольный.
    """

    banknotes: tuple[Banknote, ...] = Field(
        default_factory=tuple, description="Кассеты банкомата"
    )

    model_config = {"frozen": True}

    @field_validator("banknotes")
    @classmethod
    def validate_unique_values(cls, v: tuple[Banknote, ...]) -> tuple[Banknote, ...]:
        """Один номинал, одна кассета."""
        seen: set[int] = set()
        for banknote in v:
            if banknote.value in seen:
                raise ValueError(f"duplicate banknote value {banknote.value}")
            seen.add(banknote.value)
        return v

    def values(self) -> list[int]:
        """Номиналы в порядке кассет."""
        return [banknote.value for banknote in self.banknotes]


# =============================================================================
# DISPENSATION PLAN
# =============================================================================


class PlanItem(BaseModel):
    """Позиция плана выдачи: номинал и число купюр (всегда > 0)."""

    value: int = Field(..., gt=0, description="Номинал купюры")
    count: int = Field(..., gt=0, description="Количество купюр к выдаче")

    model_config = {"frozen": True}

    def amount(self) -> int:
        return self.value * self.count


class DispensationPlan(BaseModel):
    """
    План выдачи.

    Позиции упорядочены строго по убыванию номинала.
    Пустой план является корректным результатом для суммы 0.
    """

    items: tuple[PlanItem, ...] = Field(
        default_factory=tuple, description="Позиции плана по убыванию номинала"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_descending_order(self) -> "DispensationPlan":
        values = [item.value for item in self.items]
        for higher, lower in zip(values, values[1:]):
            if higher <= lower:
                raise ValueError(
                    f"plan items must be strictly descending by value, got {values}"
                )
        return self

    def total_amount(self) -> int:
        """Сумма плана: Σ value × count."""
        return sum(item.amount() for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def as_pairs(self) -> list[tuple[int, int]]:
        """План как список пар (value, count)."""
        return [(item.value, item.count) for item in self.items]

    def to_records(self) -> list[dict[str, int]]:
        """
        План в формате контракта dispensation_plan.

        Returns:
            [{"value": 5000, "count": 1}, ...]
        """
        return [item.model_dump() for item in self.items]
