"""
Numerical Safeguards — пределы типов и защитные примитивы

Модуль собирает всё, что нужно NormalizedDecimal на границе с нативными
числовыми типами:
- Пределы float32 / float64 / int32 (для saturation и проверки диапазонов)
- Проверка finite-значений
- Округление float до single precision (эмуляция narrowing cast)
- clamp и валидация аргументов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_single_precision никогда не бросает исключение: переполнение → ±inf
2. saturate никогда не возвращает inf/NaN
3. Все операции детерминированы и воспроизводимы
"""

import math
import struct
from typing import Final

# =============================================================================
# ПРЕДЕЛЫ ТИПОВ
# =============================================================================

# Максимальное конечное значение float32
FLT_MAX: Final[float] = 3.4028234663852886e38

# Минимальное положительное (subnormal) значение float32
FLT_TRUE_MIN: Final[float] = 1.401298464324817e-45

# Максимальный десятичный порядок, представимый в float32
FLT_MAX_DECIMAL_ORDER: Final[int] = 38

# Максимальное конечное значение float64
DBL_MAX: Final[float] = 1.7976931348623157e308

# Минимальное положительное (subnormal) значение float64
DBL_TRUE_MIN: Final[float] = 5e-324

# Максимальный десятичный порядок, представимый в float64
DBL_MAX_DECIMAL_ORDER: Final[int] = 308

# Диапазон signed 32-bit integer
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


def to_single_precision(value: float) -> float:
    """
    Округление Python float (double) до ближайшего float32.

    Эмулирует narrowing cast double → float: конечные значения за пределами
    float32 превращаются в ±inf, NaN/Inf проходят без изменений.

    Args:
        value: Исходное значение (double)

    Returns:
        Значение, точно представимое в float32 (как Python float)

    Examples:
        >>> to_single_precision(0.5)
        0.5
        >>> to_single_precision(3.14)
        3.140000104904175
        >>> to_single_precision(1e39)
        inf
    """
    if not is_valid_float(value):
        return value

    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def saturate(value: float, limit: float) -> float:
    """
    Ограничение значения симметричным диапазоном [-limit, limit].

    В отличие от clamp, превращает ±inf в ±limit (saturation), а не
    пропускает их.

    Args:
        value: Исходное значение
        limit: Положительный предел (например, FLT_MAX)

    Returns:
        Значение в диапазоне [-limit, limit]

    Raises:
        ValueError: Если value равно NaN
    """
    if math.isnan(value):
        raise ValueError("Cannot saturate NaN")

    if value > limit:
        return limit
    if value < -limit:
        return -limit
    return value


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(0.5, 0.0, 1.0)
        0.5
        >>> clamp(-1.0, 0.0, 1.0)
        0.0
        >>> clamp(15.0, 0.0, 1.0)
        1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def fits_int32(value: int) -> bool:
    """Проверка, что целое помещается в signed 32-bit."""
    return INT32_MIN <= value <= INT32_MAX


def validate_int32(value: int, name: str) -> None:
    """
    Валидация, что значение является целым в диапазоне signed 32-bit.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value вне диапазона int32
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if not fits_int32(value):
        raise ValueError(f"{name} must be within int32 range, got {value}")


def validate_non_negative(value: int, name: str) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
