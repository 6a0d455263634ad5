"""
Limits — Параметры представления монет

Единственное место, где задаются:
- границы amount (signed 64-bit)
- грамматика текстовой записи одной монеты
- разделитель списка монет

Все остальные модули домена берут значения отсюда.
"""

import re
from typing import Final

from src.core.math.int64 import INT64_MAX, INT64_MIN


# =============================================================================
# ТЕКСТОВЫЙ ФОРМАТ
# =============================================================================
# "<digits>+<whitespace>*<letters>+", только ASCII-классы
COIN_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]+)[ \t\n\r\f\v]*([A-Za-z]+)")

# Разделитель в записи "10atom,5btc"
COINS_SEPARATOR: Final[str] = ","


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "COIN_PATTERN",
    "COINS_SEPARATOR",
]
