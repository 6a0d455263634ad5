"""
Coin — Одна деноминированная сумма

Immutable Pydantic модель пары (denom, amount) и её текстовый формат:
    "<amount><denom>", например "10atom" или "-3btc"

Парсер принимает только неотрицательные целые литералы; отрицательный amount
появляется исключительно как результат арифметики (Coins.negative, minus).
"""

import logging

from pydantic import BaseModel, Field

from src.core.domain.errors import InvalidFormat
from src.core.domain.limits import COIN_PATTERN, INT64_MAX, INT64_MIN
from src.core.math.int64 import ensure_int64

logger = logging.getLogger(__name__)


# =============================================================================
# COIN MODEL
# =============================================================================


class Coin(BaseModel):
    """
    Модель одной монеты.

    Immutable модель (frozen=True): арифметика всегда создаёт новый экземпляр.
    Сериализуется в JSON как {"denom": "atom", "amount": 10}.
    """

    denom: str = Field(..., min_length=1, description="Деноминация (например, 'atom')")
    amount: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Количество, signed 64-bit"
    )

    model_config = {"frozen": True}  # Immutable

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


# =============================================================================
# PARSING
# =============================================================================


def parse_coin(text: str) -> Coin:
    """
    Разбор одной монеты из строки.

    Грамматика (после strip): <digits>+ <whitespace>* <letters>+
    Denom сохраняется как есть, регистр не нормализуется.

    Args:
        text: Строка вида "10atom" или " 10 atom "

    Returns:
        Coin с распознанными denom и amount

    Raises:
        InvalidFormat: Если строка не соответствует грамматике или amount
            не помещается в int64
    """
    match = COIN_PATTERN.fullmatch(text.strip())
    if match is None:
        logger.debug(f"Rejected coin text {text!r}: no grammar match")
        raise InvalidFormat(text)

    digits, denom = match.groups()
    try:
        amount = ensure_int64(int(digits), name="amount")
    except (ValueError, OverflowError) as e:
        # ValueError: слишком длинная строка цифр для int()
        logger.debug(f"Rejected coin text {text!r}: {e}")
        raise InvalidFormat(text, reason="has amount out of int64 range") from e

    return Coin(denom=denom, amount=amount)
