"""Общие снапшоты кассет для тестов (пять демонстрационных банкоматов)."""

import pytest

from atm.core.domain import Banknote, Inventory


def make_inventory(*rows: tuple) -> Inventory:
    """Снапшот из кортежей (value, count) или (value, count, reserve)."""
    return Inventory(
        banknotes=tuple(
            Banknote(value=row[0], count=row[1], reserve=row[2] if len(row) > 2 else 0)
            for row in rows
        )
    )


# Номиналы 5000/1000/200/100, у кассеты 200 неснижаемый остаток 2 купюры
ATM_LIST = [
    make_inventory((5000, 40), (1000, 40), (200, 40, 2), (100, 40)),
    make_inventory((5000, 0), (1000, 0), (200, 0, 2), (100, 0)),
    make_inventory((5000, 1), (1000, 1), (200, 2, 2), (100, 1)),
    make_inventory((5000, 5), (1000, 7), (200, 23, 2), (100, 12)),
    make_inventory((5000, 1), (1000, 2), (200, 3, 2), (100, 40)),
]


@pytest.fixture
def full_atm() -> Inventory:
    """По 40 купюр каждого номинала."""
    return ATM_LIST[0]


@pytest.fixture
def empty_atm() -> Inventory:
    """Все кассеты пусты."""
    return ATM_LIST[1]


@pytest.fixture
def reserved_atm() -> Inventory:
    """По одной купюре, кассета 200 целиком в неснижаемом остатке."""
    return ATM_LIST[2]


@pytest.fixture
def mixed_atm() -> Inventory:
    return ATM_LIST[3]


@pytest.fixture
def low_atm() -> Inventory:
    """Одна доступная купюра 200, много 100."""
    return ATM_LIST[4]
