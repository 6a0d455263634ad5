"""
Domain models and value objects.

Contains fundamental domain entities: Coin, Coins and their error kinds.
"""

from src.core.domain.coin import Coin, parse_coin
from src.core.domain.coins import Coins, parse_coins
from src.core.domain.errors import (
    CoinError,
    CoinOverflowError,
    InvalidCoinSet,
    InvalidFormat,
)
from src.core.domain.limits import (
    COIN_PATTERN,
    COINS_SEPARATOR,
    INT64_MAX,
    INT64_MIN,
)

__all__ = [
    # Limits module
    "INT64_MIN",
    "INT64_MAX",
    "COIN_PATTERN",
    "COINS_SEPARATOR",
    # Coin model
    "Coin",
    "parse_coin",
    # Coins model
    "Coins",
    "parse_coins",
    # Errors
    "CoinError",
    "InvalidFormat",
    "InvalidCoinSet",
    "CoinOverflowError",
]
