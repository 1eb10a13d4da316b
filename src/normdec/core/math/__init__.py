"""
Core math modules для normdec

Нормализация, таблицы степеней десяти и числовые защитные примитивы.
"""

# Normalizer
from normdec.core.math.normalizer import (
    NORMALIZE_MAX,
    NORMALIZE_MIN,
    SIGNIFICANT_DIGITS,
    ZERO_EXPONENT,
    is_normalized,
    normalize_pair,
    truncate_low_digits,
)

# Numerical Safeguards
from normdec.core.math.numerical_safeguards import (
    DBL_MAX,
    DBL_MAX_DECIMAL_ORDER,
    DBL_TRUE_MIN,
    FLT_MAX,
    FLT_MAX_DECIMAL_ORDER,
    FLT_TRUE_MIN,
    INT32_MAX,
    INT32_MIN,
    clamp,
    fits_int32,
    is_valid_float,
    saturate,
    to_single_precision,
    validate_int32,
    validate_non_negative,
)

# Powers of Ten
from normdec.core.math.powers_of_ten import (
    DOUBLE_EXP_MAX,
    DOUBLE_EXP_MIN,
    INT_POWER_MAX,
    float_power,
    int_power,
    scale_by_power_of_ten,
)

__all__ = [
    # Normalizer - Constants
    "NORMALIZE_MAX",
    "NORMALIZE_MIN",
    "SIGNIFICANT_DIGITS",
    "ZERO_EXPONENT",
    # Normalizer - Functions
    "is_normalized",
    "normalize_pair",
    "truncate_low_digits",
    # Numerical Safeguards - Limits
    "DBL_MAX",
    "DBL_MAX_DECIMAL_ORDER",
    "DBL_TRUE_MIN",
    "FLT_MAX",
    "FLT_MAX_DECIMAL_ORDER",
    "FLT_TRUE_MIN",
    "INT32_MAX",
    "INT32_MIN",
    # Numerical Safeguards - Functions
    "clamp",
    "fits_int32",
    "is_valid_float",
    "saturate",
    "to_single_precision",
    "validate_int32",
    "validate_non_negative",
    # Powers of Ten - Constants
    "DOUBLE_EXP_MAX",
    "DOUBLE_EXP_MIN",
    "INT_POWER_MAX",
    # Powers of Ten - Functions
    "float_power",
    "int_power",
    "scale_by_power_of_ten",
]
