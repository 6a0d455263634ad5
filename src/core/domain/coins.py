"""
Coins — Набор монет разных деноминаций

Immutable Pydantic модель упорядоченного набора Coin и вся арифметика над ним.

КАНОНИЧЕСКАЯ ФОРМА (is_valid):
1. denom строго возрастают (ordinal сравнение строк), дублей нет
2. Нет монет с amount == 0
3. Пустой набор валиден ("нет средств")

Два пути построения:
- Coins.from_coins / parse_coins: сортируют и проверяют каноническую форму
- Coins(...) напрямую: доверенный путь без проверки инвариантов,
  им пользуется арифметика

plus/minus делают merge двух отсортированных последовательностей (как шаг merge
sort). Входы НЕ перепроверяются: вызывающий код отвечает за каноническую
форму операндов. Монета с amount == 0 в одном операнде без пары в другом
переносится в результат как есть.
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from pydantic import RootModel

from src.core.domain.coin import Coin, parse_coin
from src.core.domain.errors import CoinOverflowError, InvalidCoinSet
from src.core.domain.limits import COINS_SEPARATOR
from src.core.math.int64 import checked_add, checked_neg

logger = logging.getLogger(__name__)


# =============================================================================
# COINS MODEL
# =============================================================================


class Coins(RootModel[Tuple[Coin, ...]]):
    """
    Упорядоченный набор монет.

    Immutable модель (frozen=True). Сериализуется в JSON как массив
    объектов Coin: [{"denom": "atom", "amount": 5}, ...]
    """

    root: Tuple[Coin, ...] = ()

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def from_coins(cls, coins: Iterable[Coin]) -> "Coins":
        """
        Валидирующий конструктор: сортирует по denom и проверяет is_valid.

        Сортировка не устраняет дубли: два одинаковых denom окажутся рядом
        и не пройдут проверку строгого возрастания.

        Raises:
            InvalidCoinSet: Если после сортировки набор не канонический
        """
        result = cls(tuple(coins)).sort()
        if not result.is_valid():
            logger.debug(f"Rejected coin set {result}: not sorted/unique or has zero amount")
            raise InvalidCoinSet(result)
        return result

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> Iterator[Coin]:  # type: ignore[override]
        return iter(self.root)

    def __getitem__(self, index: int) -> Coin:
        return self.root[index]

    def __str__(self) -> str:
        return COINS_SEPARATOR.join(str(coin) for coin in self.root)

    # -------------------------------------------------------------------------
    # Валидация и сортировка
    # -------------------------------------------------------------------------

    def is_valid(self) -> bool:
        """
        Проверка канонической формы.

        Returns:
            True если denom строго возрастают и нет нулевых amount
        """
        if len(self.root) == 0:
            return True
        if len(self.root) == 1:
            return self.root[0].amount != 0

        # Первая монета проверяется на ноль наравне с остальными
        if self.root[0].amount == 0:
            return False

        low_denom = self.root[0].denom
        for coin in self.root[1:]:
            if coin.denom <= low_denom:
                return False
            if coin.amount == 0:
                return False
            low_denom = coin.denom
        return True

    def sort(self) -> "Coins":
        """
        Новый набор, отсортированный по denom (стабильно).

        Дубли и нулевые монеты не удаляются, это задача is_valid / plus.
        """
        return Coins(tuple(sorted(self.root, key=lambda coin: coin.denom)))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def plus(self, other: "Coins") -> "Coins":
        """
        Сумма двух наборов (merge по denom).

        Одинаковые denom складываются; нулевая сумма из результата исчезает.
        Остальные монеты переносятся без изменений.

        Args:
            other: Отсортированный набор без дублей denom

        Returns:
            Новый набор, отсортированный по denom

        Raises:
            CoinOverflowError: Если сумма по какому-то denom выходит за int64
        """
        coins_a, coins_b = self.root, other.root
        len_a, len_b = len(coins_a), len(coins_b)
        index_a, index_b = 0, 0
        result: List[Coin] = []

        while index_a < len_a and index_b < len_b:
            coin_a, coin_b = coins_a[index_a], coins_b[index_b]
            if coin_a.denom < coin_b.denom:
                result.append(coin_a)
                index_a += 1
            elif coin_a.denom > coin_b.denom:
                result.append(coin_b)
                index_b += 1
            else:
                total = _sum_amounts(coin_a, coin_b)
                if total != 0:
                    result.append(Coin(denom=coin_a.denom, amount=total))
                index_a += 1
                index_b += 1

        # Один из наборов исчерпан, хвост другого переносится как есть
        result.extend(coins_a[index_a:])
        result.extend(coins_b[index_b:])
        return Coins(tuple(result))

    def negative(self) -> "Coins":
        """
        Новый набор с противоположными знаками amount, порядок сохраняется.

        Raises:
            CoinOverflowError: Для amount == INT64_MIN
        """
        return Coins(
            tuple(Coin(denom=coin.denom, amount=_negate_amount(coin)) for coin in self.root)
        )

    def minus(self, other: "Coins") -> "Coins":
        """Разность: self.plus(other.negative())."""
        return self.plus(other.negative())

    def __add__(self, other: "Coins") -> "Coins":
        if not isinstance(other, Coins):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Coins") -> "Coins":
        if not isinstance(other, Coins):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> "Coins":
        return self.negative()

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def is_gte(self, other: "Coins") -> bool:
        """
        self >= other покомпонентно: разность пустая или неотрицательная.

        Разность считается тем же merge, что и в minus, но на неограниченных
        int, поэтому сравнение не поднимает CoinOverflowError.
        """
        coins_a, coins_b = self.root, other.root
        len_a, len_b = len(coins_a), len(coins_b)
        index_a, index_b = 0, 0

        while index_a < len_a and index_b < len_b:
            coin_a, coin_b = coins_a[index_a], coins_b[index_b]
            if coin_a.denom < coin_b.denom:
                if coin_a.amount < 0:
                    return False
                index_a += 1
            elif coin_a.denom > coin_b.denom:
                if -coin_b.amount < 0:
                    return False
                index_b += 1
            else:
                if coin_a.amount - coin_b.amount < 0:
                    return False
                index_a += 1
                index_b += 1

        # Хвост self входит в разность как есть, хвост other с обратным знаком
        if any(coin.amount < 0 for coin in coins_a[index_a:]):
            return False
        return all(-coin.amount >= 0 for coin in coins_b[index_b:])

    def is_zero(self) -> bool:
        """
        Пустой ли набор.

        Набор из одних нулевых монет НЕ считается нулём, важна только пустота.
        """
        return len(self.root) == 0

    def is_equal(self, other: "Coins") -> bool:
        """Поэлементное совпадение (denom, amount) в том же порядке, без нормализации."""
        if len(self.root) != len(other.root):
            return False
        return all(coin_a == coin_b for coin_a, coin_b in zip(self.root, other.root))

    def is_positive(self) -> bool:
        """Непустой и все amount > 0."""
        if len(self.root) == 0:
            return False
        return all(coin.amount > 0 for coin in self.root)

    def is_nonnegative(self) -> bool:
        """Все amount >= 0 (для пустого набора True)."""
        return all(coin.amount >= 0 for coin in self.root)


# =============================================================================
# PARSING
# =============================================================================


def parse_coins(text: str) -> Coins:
    """
    Разбор списка монет через запятую, например "10btc,5atom".

    Каждый сегмент разбирается parse_coin (со strip), затем набор
    сортируется и проверяется. Пустая строка даёт пустой набор.

    Args:
        text: Строка со списком монет

    Returns:
        Канонический Coins

    Raises:
        InvalidFormat: Первый сегмент, не прошедший разбор
        InvalidCoinSet: Дубли denom или нулевой amount
    """
    if len(text) == 0:
        return Coins()

    coins = [parse_coin(segment) for segment in text.split(COINS_SEPARATOR)]
    return Coins.from_coins(coins)


# =============================================================================
# HELPERS
# =============================================================================


def _sum_amounts(coin_a: Coin, coin_b: Coin) -> int:
    try:
        return checked_add(coin_a.amount, coin_b.amount)
    except OverflowError as e:
        raise CoinOverflowError(coin_a.denom, str(e)) from e


def _negate_amount(coin: Coin) -> int:
    try:
        return checked_neg(coin.amount)
    except OverflowError as e:
        raise CoinOverflowError(coin.denom, str(e)) from e
