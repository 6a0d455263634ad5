"""
Int64 — Арифметика signed 64-bit с проверкой переполнения

Python int не ограничен по разрядности, а amount в формате данных имеет тип signed
64-bit. Модуль даёт примитивы, которые либо возвращают точный результат
в диапазоне [INT64_MIN, INT64_MAX], либо поднимают OverflowError.
Тихого wrap-around (как у машинного сложения) здесь нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой функции модуля всегда в диапазоне int64
2. Вне диапазона → OverflowError, никаких частичных значений
3. Все операции детерминированы
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_int64(value: int) -> bool:
    """Попадает ли value в диапазон signed 64-bit."""
    return INT64_MIN <= value <= INT64_MAX


def ensure_int64(value: int, name: str = "value") -> int:
    """
    Возвращает value без изменений, если оно помещается в int64.

    Raises:
        OverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if not is_int64(value):
        raise OverflowError(f"{name} {value} out of int64 range [{INT64_MIN}, {INT64_MAX}]")
    return value


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def checked_add(a: int, b: int) -> int:
    """
    Сложение двух int64 с проверкой переполнения.

    Examples:
        >>> checked_add(2, 3)
        5
        >>> checked_add(INT64_MAX, -1) == INT64_MAX - 1
        True
    """
    return ensure_int64(a + b, name="sum")


def checked_neg(a: int) -> int:
    """
    Смена знака с проверкой переполнения.

    Единственный проблемный случай: INT64_MIN, его модуль на единицу
    больше INT64_MAX.
    """
    return ensure_int64(-a, name="negation")
