"""
Test suite for random_utils

Contains:
- tests/unit/          : Unit tests for individual modules
"""
