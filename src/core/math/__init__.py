"""
Core math modules

Целочисленные примитивы с гарантией отсутствия тихого переполнения.
"""

# Int64 (signed 64-bit с проверкой переполнения)
from src.core.math.int64 import (
    # Constants
    INT64_MAX,
    INT64_MIN,
    # Checks
    ensure_int64,
    is_int64,
    # Arithmetic
    checked_add,
    checked_neg,
)

__all__ = [
    # Int64 — Constants
    "INT64_MAX",
    "INT64_MIN",
    # Int64 — Checks
    "ensure_int64",
    "is_int64",
    # Int64 — Arithmetic
    "checked_add",
    "checked_neg",
]
