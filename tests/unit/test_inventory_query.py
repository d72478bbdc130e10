"""
Тесты для Inventory Query — доступный остаток кассет

Проверяемые инварианты:
1. usable_count = count - reserve, но не меньше 0
2. Минимальный доступный номинал игнорирует кассеты без доступных купюр
3. max_dispensable не учитывает неснижаемый остаток
4. Входная коллекция не изменяется
"""

import pytest

from atm.core.domain import Banknote, Inventory
from atm.dispenser import (
    DuplicatePolicy,
    InvalidInput,
    as_banknotes,
    is_usable,
    max_dispensable,
    resolve_duplicates,
    smallest_usable_denomination,
    smallest_usable_value,
    sort_by_value,
    usable_count,
)


# =============================================================================
# ТЕСТЫ: usable_count / is_usable
# =============================================================================


class TestUsableCount:
    """Тесты usable_count и is_usable."""

    def test_no_reserve(self):
        assert usable_count(Banknote(value=100, count=40)) == 40

    def test_reserve_subtracted(self):
        assert usable_count(Banknote(value=200, count=40, reserve=2)) == 38

    def test_fully_reserved(self):
        banknote = Banknote(value=200, count=2, reserve=2)
        assert usable_count(banknote) == 0
        assert is_usable(banknote) is False

    def test_reserve_above_count_floors_at_zero(self):
        assert usable_count(Banknote(value=200, count=1, reserve=5)) == 0

    def test_empty_cassette(self):
        assert is_usable(Banknote(value=5000, count=0)) is False

    def test_single_usable(self):
        assert is_usable(Banknote(value=200, count=3, reserve=2)) is True


# =============================================================================
# ТЕСТЫ: минимальный доступный номинал
# =============================================================================


class TestSmallestUsable:
    """Тесты smallest_usable_denomination и smallest_usable_value."""

    def test_full_atm(self, full_atm):
        assert smallest_usable_value(full_atm) == 100
        assert smallest_usable_denomination(full_atm) == Banknote(value=100, count=40)

    def test_empty_atm(self, empty_atm):
        assert smallest_usable_denomination(empty_atm) is None
        assert smallest_usable_value(empty_atm) == 0

    def test_skips_reserved_cassette(self):
        inventory = Inventory(
            banknotes=(
                Banknote(value=1000, count=1),
                Banknote(value=200, count=2, reserve=2),
            )
        )
        assert smallest_usable_value(inventory) == 1000

    def test_skips_empty_small_cassette(self):
        inventory = [Banknote(value=100, count=0), Banknote(value=5000, count=3)]
        assert smallest_usable_value(inventory) == 5000

    def test_unordered_input(self):
        inventory = [
            Banknote(value=1000, count=1),
            Banknote(value=100, count=1),
            Banknote(value=5000, count=1),
        ]
        assert smallest_usable_value(inventory) == 100

    def test_empty_collection(self):
        assert smallest_usable_value([]) == 0


# =============================================================================
# ТЕСТЫ: max_dispensable
# =============================================================================


class TestMaxDispensable:
    """Тесты max_dispensable: Σ value × usable_count."""

    def test_full_atm(self, full_atm):
        # 5000*40 + 1000*40 + 200*38 + 100*40
        assert max_dispensable(full_atm) == 251600

    def test_empty_atm(self, empty_atm):
        assert max_dispensable(empty_atm) == 0

    def test_reserved_atm(self, reserved_atm):
        # 200 целиком в резерве
        assert max_dispensable(reserved_atm) == 6100

    def test_low_atm(self, low_atm):
        assert max_dispensable(low_atm) == 5000 + 2000 + 200 + 4000


# =============================================================================
# ТЕСТЫ: сортировка и нормализация
# =============================================================================


class TestSortAndNormalize:
    """Тесты sort_by_value, as_banknotes, resolve_duplicates."""

    def test_sort_ascending(self, full_atm):
        assert [b.value for b in sort_by_value(full_atm)] == [100, 200, 1000, 5000]

    def test_sort_descending(self, full_atm):
        values = [b.value for b in sort_by_value(full_atm, descending=True)]
        assert values == [5000, 1000, 200, 100]

    def test_sort_does_not_mutate_input(self):
        banknotes = [Banknote(value=100, count=1), Banknote(value=5000, count=1)]
        sort_by_value(banknotes, descending=True)
        assert [b.value for b in banknotes] == [100, 5000]

    def test_as_banknotes_accepts_generator(self):
        result = as_banknotes(Banknote(value=v, count=1) for v in (100, 200))
        assert [b.value for b in result] == [100, 200]

    def test_as_banknotes_returns_new_list(self):
        banknotes = [Banknote(value=100, count=1)]
        assert as_banknotes(banknotes) is not banknotes

    def test_unique_values_untouched(self, full_atm):
        assert resolve_duplicates(full_atm) == list(full_atm.banknotes)

    def test_duplicates_rejected_by_default(self):
        banknotes = [Banknote(value=100, count=1), Banknote(value=100, count=2)]
        with pytest.raises(InvalidInput, match="Duplicate banknote value"):
            resolve_duplicates(banknotes)

    def test_duplicates_merged(self):
        banknotes = [
            Banknote(value=100, count=1),
            Banknote(value=500, count=4),
            Banknote(value=100, count=2, reserve=1),
        ]
        merged = resolve_duplicates(banknotes, DuplicatePolicy.MERGE)
        assert merged == [
            Banknote(value=100, count=3, reserve=1),
            Banknote(value=500, count=4),
        ]
