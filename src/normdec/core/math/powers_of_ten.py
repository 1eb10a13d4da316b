"""
Powers of Ten — таблицы степеней десяти

Предвычисленные таблицы для масштабирования мантисс при арифметике,
конверсиях и усечении разрядов (без повторного возведения в степень):
- Float-таблица 1e-324 … 1e308 (весь диапазон порядков double)
- Integer-таблица 10^0 … 10^18 (точные целые множители)

Float-степени строятся парсингом строки "1e<n>", а не через 10.0 ** n:
так каждое значение является ближайшим double к точной степени.
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ТАБЛИЦ
# =============================================================================

# Максимальный порядок, встречающийся в double (не все мантиссы допустимы)
DOUBLE_EXP_MAX: Final[int] = 308

# Минимальный порядок, встречающийся в double (не все мантиссы допустимы)
DOUBLE_EXP_MIN: Final[int] = -324

# Максимальная степень в целочисленной таблице (10^18 помещается в int64)
INT_POWER_MAX: Final[int] = 18

_INDEX_OF_ZERO: Final[int] = -DOUBLE_EXP_MIN

_FLOAT_POWERS: Final[tuple[float, ...]] = tuple(
    float(f"1e{power}") for power in range(DOUBLE_EXP_MIN, DOUBLE_EXP_MAX + 1)
)

_INT_POWERS: Final[tuple[int, ...]] = tuple(10**power for power in range(INT_POWER_MAX + 1))


# =============================================================================
# LOOKUP
# =============================================================================


def float_power(power: int) -> float:
    """
    Степень десяти как double.

    Args:
        power: Порядок в диапазоне [DOUBLE_EXP_MIN, DOUBLE_EXP_MAX]

    Returns:
        Ближайший double к 10^power

    Raises:
        ValueError: Если порядок вне таблицы
    """
    if not DOUBLE_EXP_MIN <= power <= DOUBLE_EXP_MAX:
        raise ValueError(
            f"power must be within [{DOUBLE_EXP_MIN}, {DOUBLE_EXP_MAX}], got {power}"
        )
    return _FLOAT_POWERS[_INDEX_OF_ZERO + power]


def int_power(power: int) -> int:
    """
    Точная степень десяти как int.

    Args:
        power: Порядок в диапазоне [0, INT_POWER_MAX]

    Returns:
        10^power

    Raises:
        ValueError: Если порядок вне таблицы
    """
    if not 0 <= power <= INT_POWER_MAX:
        raise ValueError(f"power must be within [0, {INT_POWER_MAX}], got {power}")
    return _INT_POWERS[power]


def scale_by_power_of_ten(value: float, power: int) -> float:
    """
    Умножение double на 10^power для произвольного целого power.

    Если порядок выходит за пределы таблицы, умножение выполняется по шагам
    (каждый шаг — табличная степень), пока результат не станет 0 или inf
    либо порядок не будет исчерпан.

    Args:
        value: Масштабируемое значение
        power: Порядок десяти (любой int)

    Returns:
        value × 10^power в арифметике double (может быть 0.0 или ±inf)

    Examples:
        >>> scale_by_power_of_ten(1.5, 2)
        150.0
        >>> scale_by_power_of_ten(1.0, -330)
        0.0
    """
    result = value
    remaining = power

    while remaining > DOUBLE_EXP_MAX:
        result *= _FLOAT_POWERS[_INDEX_OF_ZERO + DOUBLE_EXP_MAX]
        remaining -= DOUBLE_EXP_MAX
        if result == 0.0 or math.isinf(result):
            return result

    # Шаг -300 оставляет результат в normal-диапазоне дольше, чем -324
    while remaining < DOUBLE_EXP_MIN:
        result *= _FLOAT_POWERS[_INDEX_OF_ZERO - 300]
        remaining += 300
        if result == 0.0:
            return result

    return result * _FLOAT_POWERS[_INDEX_OF_ZERO + remaining]
