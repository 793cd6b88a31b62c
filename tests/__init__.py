"""
Test suite for range_random

Contains:
- tests/unit/          : Unit tests for individual modules
"""
