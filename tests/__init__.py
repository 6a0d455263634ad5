"""
Test suite for coin amounts

Contains:
- tests/unit/          : Unit tests for individual modules
"""
