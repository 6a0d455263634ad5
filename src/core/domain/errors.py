"""
Errors — Ошибки домена монет

Иерархия:
- CoinError
  - InvalidFormat      текст не соответствует грамматике монеты
  - InvalidCoinSet     набор монет нарушает инварианты Coins
  - CoinOverflowError  выход amount за пределы signed 64-bit

InvalidFormat и InvalidCoinSet наследуют ValueError, CoinOverflowError наследует
OverflowError, чтобы вызывающий код мог ловить их привычными builtin-типами.
"""

from typing import Any


class CoinError(Exception):
    """Базовый класс всех ошибок домена монет."""


class InvalidFormat(CoinError, ValueError):
    """
    Строка не является корректной записью монеты.

    Attributes:
        text: Исходная строка, как она была передана в парсер
    """

    def __init__(self, text: str, reason: str = "is invalid coin definition"):
        self.text = text
        super().__init__(f"{text!r} {reason}")


class InvalidCoinSet(CoinError, ValueError):
    """
    Набор монет не отсортирован строго по denom или содержит нулевой amount.

    Attributes:
        coins: Отвергнутая последовательность (для диагностики)
    """

    def __init__(self, coins: Any):
        self.coins = coins
        super().__init__(f"invalid coin set: {coins!r}")


class CoinOverflowError(CoinError, OverflowError):
    """
    Результат арифметики не помещается в signed 64-bit.

    Attributes:
        denom: Деноминация, на которой произошло переполнение
    """

    def __init__(self, denom: str, message: str):
        self.denom = denom
        super().__init__(f"{denom}: {message}")
