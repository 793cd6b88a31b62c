"""
range_random — random numbers over a bounded range

Continuous and discrete (stepped) sampling with optional strict
floating-point precision, plus choice/shuffle helpers.
"""

import logging

from range_random.core.domain import (
    RandomInvalidInputError,
    RandomParseError,
    RangeRandom,
)
from range_random.core.math import EmptySequenceError, choice, shuffle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "RangeRandom",
    "RandomParseError",
    "RandomInvalidInputError",
    "EmptySequenceError",
    "choice",
    "shuffle",
]
