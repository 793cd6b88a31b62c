"""
Domain models and value objects.

Contains the RangeRandom value object and its error types.
"""

from range_random.core.domain.random_range import (
    DEFAULT_STEP,
    DEFAULT_USFPP,
    JSON_INDENT,
    RandomInvalidInputError,
    RandomParseError,
    RangeRandom,
)

__all__ = [
    # Constants
    "DEFAULT_STEP",
    "DEFAULT_USFPP",
    "JSON_INDENT",
    # Exceptions
    "RandomParseError",
    "RandomInvalidInputError",
    # Model
    "RangeRandom",
]
