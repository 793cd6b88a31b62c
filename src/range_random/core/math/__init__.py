"""
Core math modules для range_random

Численные примитивы и операции над последовательностями.
"""

# Numerical Safeguards
from range_random.core.math.numerical_safeguards import (
    CONTINUOUS_STEP_MAX,
    decimal_places,
    interpolate,
    is_continuous_step,
    is_real_number,
    is_valid_float,
    lattice_value,
    round_to_precision_of,
    step_count,
    validate_count,
    validate_positive,
)

# Sequences
from range_random.core.math.sequences import (
    DEFAULT_RNG,
    EmptySequenceError,
    choice,
    resolve_rng,
    shuffle,
)

__all__ = [
    # Numerical Safeguards — Constants
    "CONTINUOUS_STEP_MAX",
    # Numerical Safeguards — Checks
    "is_real_number",
    "is_valid_float",
    "is_continuous_step",
    # Numerical Safeguards — Precision
    "decimal_places",
    "round_to_precision_of",
    "step_count",
    "lattice_value",
    "interpolate",
    # Numerical Safeguards — Validation
    "validate_count",
    "validate_positive",
    # Sequences — RNG
    "DEFAULT_RNG",
    "resolve_rng",
    # Sequences — Exceptions
    "EmptySequenceError",
    # Sequences — Functions
    "choice",
    "shuffle",
]
