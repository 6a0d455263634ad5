"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks for multi-denomination
coin amounts: the Coin/Coins value objects, int64-safe arithmetic and the
JSON contracts. Nothing here depends on external systems.
"""
