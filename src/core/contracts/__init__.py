"""
Contract Validation Module

Модуль для валидации JSON контрактов монет.
"""

from .validators import (
    CoinsValidator,
    CoinValidator,
    ContractValidator,
    SchemaLoader,
    coins_from_payload,
    validate_coin,
    validate_coins,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoinValidator",
    "CoinsValidator",
    # Functions
    "validate_coin",
    "validate_coins",
    "coins_from_payload",
]
