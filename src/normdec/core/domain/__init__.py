"""
Domain models and value objects.

Contains the NormalizedDecimal value type, its persistence record and errors.
"""

from normdec.core.domain.errors import (
    DigitsOutOfRangeError,
    DivisionByZeroError,
    ExponentOverflowError,
    NormalizedDecimalError,
    UndefinedOperationError,
    UnsupportedOperandError,
)
from normdec.core.domain.normalized_decimal import (
    DOUBLE_PRECISION_OFFSET,
    FLOAT_PRECISION_OFFSET,
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    NormalizedDecimal,
    NumberKind,
    floor,
    lerp,
    max_of,
    min_of,
)
from normdec.core.domain.record import INFINITY_EXPONENT_BITS, DecimalRecord

__all__ = [
    # Errors
    "NormalizedDecimalError",
    "DigitsOutOfRangeError",
    "DivisionByZeroError",
    "ExponentOverflowError",
    "UndefinedOperationError",
    "UnsupportedOperandError",
    # Value type
    "NormalizedDecimal",
    "NumberKind",
    "FLOAT_PRECISION_OFFSET",
    "DOUBLE_PRECISION_OFFSET",
    "ZERO",
    "ONE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    # Helpers
    "floor",
    "lerp",
    "max_of",
    "min_of",
    # Persistence record
    "DecimalRecord",
    "INFINITY_EXPONENT_BITS",
]
