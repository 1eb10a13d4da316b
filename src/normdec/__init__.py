"""
normdec — fixed-width normalized decimal numbers

mantissa × 10^exponent с ровно 9 значащими цифрами мантиссы: диапазон
далеко за пределами float при хранении в двух 32-битных целых.
"""

from normdec.core.domain import (
    DOUBLE_PRECISION_OFFSET,
    FLOAT_PRECISION_OFFSET,
    INFINITY_EXPONENT_BITS,
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    DecimalRecord,
    DigitsOutOfRangeError,
    DivisionByZeroError,
    ExponentOverflowError,
    NormalizedDecimal,
    NormalizedDecimalError,
    NumberKind,
    UndefinedOperationError,
    UnsupportedOperandError,
    floor,
    lerp,
    max_of,
    min_of,
)
from normdec.core.formatting import DEFAULT_FORMATTERS, FormatHook, FormatterRegistry

__version__ = "0.1.0"

__all__ = [
    "NormalizedDecimal",
    "NumberKind",
    "ZERO",
    "ONE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "FLOAT_PRECISION_OFFSET",
    "DOUBLE_PRECISION_OFFSET",
    "floor",
    "lerp",
    "max_of",
    "min_of",
    "DEFAULT_FORMATTERS",
    "FormatHook",
    "FormatterRegistry",
    "DecimalRecord",
    "INFINITY_EXPONENT_BITS",
    "NormalizedDecimalError",
    "DigitsOutOfRangeError",
    "DivisionByZeroError",
    "ExponentOverflowError",
    "UndefinedOperationError",
    "UnsupportedOperandError",
]
