"""Ошибки расчёта выдачи."""

INSUFFICIENT_FUNDS_MESSAGE = "Not enough banknotes"


class DispenserError(Exception):
    """Базовая ошибка ядра выдачи."""
    pass


class InsufficientFunds(DispenserError):
    """
    Жадный проход не собрал запрошенную сумму точно.

    Покрывает оба случая:
    - сумма больше всего доступного остатка
    - остаток не закрывается купюрами при проходе от крупных к мелким,
      хотя другая комбинация могла бы существовать (перебор не выполняется)
    """

    def __init__(
        self,
        requested_amount: int,
        dispensed_amount: int,
        max_dispensable: int,
    ):
        super().__init__(INSUFFICIENT_FUNDS_MESSAGE)
        self.requested_amount = requested_amount
        self.dispensed_amount = dispensed_amount
        self.max_dispensable = max_dispensable


class InvalidInput(DispenserError, ValueError):
    """Некорректная сумма или противоречивый снапшот кассет."""
    pass
