"""Withdrawal Session — диалог запроса суммы и выдачи.

Цикл запрос → проверка → повторный запрос с подсказкой:
- первый вопрос: "Enter the amount"
- после невыполнимой суммы: "Choose available amounts: {ceil} or {floor}",
  по умолчанию предлагается ceil
- нечисловой или отрицательный ввод: повтор без подсказки
- ask() вернул None, это отмена

Число попыток ограничено SessionConfig.max_attempts. Ввод/вывод внедряется
через ask(), поэтому сессия не зависит от терминала.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from atm.core.domain.banknote import DispensationPlan
from atm.dispenser.allocator import GreedyAllocator
from atm.dispenser.amount_validator import AmountBounds, is_satisfiable, nearest_bounds
from atm.dispenser.config import DispenserConfig
from atm.dispenser.errors import InsufficientFunds, InvalidInput
from atm.dispenser.inventory_query import InventoryLike, resolve_duplicates

logger = logging.getLogger(__name__)

ENTER_AMOUNT_MESSAGE = "Enter the amount"

# ask(message, default) -> введённая строка или None (отмена)
AskFn = Callable[[str, str], Optional[str]]


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация диалога."""

    max_attempts: int = 10

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")


@dataclass(frozen=True)
class WithdrawalOutcome:
    """Результат сессии выдачи."""

    success: bool
    requested_amount: Optional[int]
    plan: Optional[DispensationPlan]
    error: str
    details: str


def build_prompt(bounds: Optional[AmountBounds] = None) -> tuple[str, str]:
    """
    Текст вопроса и значение по умолчанию.

    Returns:
        (message, default): default равен str(ceil) или пустая строка
    """
    if bounds is None:
        return ENTER_AMOUNT_MESSAGE, ""

    available = " or ".join(str(amount) for amount in (bounds.ceil, bounds.floor) if amount)
    if not available:
        return ENTER_AMOUNT_MESSAGE, ""
    return f"Choose available amounts: {available}", str(bounds.ceil) if bounds.ceil else ""


def parse_amount(raw: str) -> Optional[int]:
    """Целая сумма из строки ввода, None если ввод не число."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


class WithdrawalSession:
    """Сессия выдачи над неизменяемым снапшотом кассет.

    Повторные номиналы разрешаются при создании сессии по duplicate_policy
    (REJECT → InvalidInput сразу в конструкторе).
    """

    def __init__(
        self,
        inventory: InventoryLike,
        ask: AskFn,
        config: Optional[SessionConfig] = None,
        dispenser_config: Optional[DispenserConfig] = None,
    ):
        self.allocator = GreedyAllocator(dispenser_config)
        # Снапшот фиксируется один раз: генератор нельзя прочитать дважды
        self.banknotes = resolve_duplicates(inventory, self.allocator.config.duplicate_policy)
        self.ask = ask
        self.config = config or SessionConfig()

    def request_amount(self) -> Optional[int]:
        """
        Запрос суммы до первой кратной минимальному доступному номиналу.

        Returns:
            Сумма или None (отмена / исчерпаны попытки)
        """
        bounds: Optional[AmountBounds] = None
        for attempt in range(1, self.config.max_attempts + 1):
            message, default = build_prompt(bounds)
            raw = self.ask(message, default)
            if raw is None:
                logger.info("amount request cancelled at attempt %s", attempt)
                return None

            amount = parse_amount(raw)
            if amount is None:
                logger.warning("not a number: %r", raw)
                bounds = None
                continue

            if is_satisfiable(amount, self.banknotes):
                logger.info("amount accepted: %s", amount)
                return amount

            try:
                bounds = nearest_bounds(amount, self.banknotes)
            except InvalidInput as e:
                logger.warning("rejected amount %s: %s", amount, e)
                bounds = None
                continue
            logger.warning(
                "amount %s not satisfiable, suggesting floor=%s ceil=%s",
                amount, bounds.floor, bounds.ceil,
            )

        logger.warning("no valid amount after %s attempts", self.config.max_attempts)
        return None

    def run(self) -> WithdrawalOutcome:
        """Запрос суммы и расчёт выдачи. Ошибки выдачи не пробрасываются."""
        amount = self.request_amount()
        if amount is None:
            return WithdrawalOutcome(
                success=False,
                requested_amount=None,
                plan=None,
                error="No valid amount entered",
                details=f"cancelled or {self.config.max_attempts} attempt(s) exhausted",
            )

        try:
            plan = self.allocator.allocate(amount, self.banknotes)
        except InsufficientFunds as e:
            logger.info("withdrawal of %s failed: %s", amount, e)
            return WithdrawalOutcome(
                success=False,
                requested_amount=amount,
                plan=None,
                error=str(e),
                details=(
                    f"dispensed={e.dispensed_amount} of requested={e.requested_amount}, "
                    f"max_dispensable={e.max_dispensable}"
                ),
            )

        logger.info("withdrawal of %s ok: %s", amount, plan.as_pairs())
        return WithdrawalOutcome(
            success=True,
            requested_amount=amount,
            plan=plan,
            error="",
            details=f"PASS: {len(plan.items)} denomination(s)",
        )
