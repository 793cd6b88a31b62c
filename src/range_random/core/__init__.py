"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of range_random:
the RangeRandom value object, float precision helpers, and the JSON Schema
contract of its structured representation.
"""
