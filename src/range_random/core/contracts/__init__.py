"""
Contract Validation Module

Модуль для валидации JSON контрактов range_random.
"""

from .validators import (
    RANDOM_RANGE_SCHEMA,
    ContractValidator,
    RandomRangeValidator,
    SchemaLoader,
    validate_random_range,
)

__all__ = [
    # Constants
    "RANDOM_RANGE_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RandomRangeValidator",
    # Functions
    "validate_random_range",
]
