"""
Normalizer — каноническая форма пары (mantissa, exponent)

Любая пара (mantissa, exponent) приводится к нормальной форме:
- mantissa != 0  →  100000000 <= |mantissa| < 1000000000 (ровно 9 цифр)
- mantissa == 0  →  exponent == ZERO_EXPONENT

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. normalize_pair идемпотентна: повторная нормализация ничего не меняет
2. Два значения математически равны тогда и только тогда, когда равны их
   нормализованные пары
3. Лишние младшие цифры отбрасываются усечением (к нулю), без округления
"""

from typing import Final

from normdec.core.math.powers_of_ten import int_power

# =============================================================================
# ПАРАМЕТРЫ НОРМАЛЬНОЙ ФОРМЫ
# =============================================================================

# Количество значащих десятичных цифр мантиссы
SIGNIFICANT_DIGITS: Final[int] = 9

# Нижняя граница модуля нормализованной мантиссы (включительно)
NORMALIZE_MIN: Final[int] = 100_000_000

# Верхняя граница модуля нормализованной мантиссы (исключительно)
NORMALIZE_MAX: Final[int] = 1_000_000_000

# Базовый порядок канонического нуля
ZERO_EXPONENT: Final[int] = 0


# =============================================================================
# NORMALIZE
# =============================================================================


def normalize_pair(raw_mantissa: int, raw_exponent: int) -> tuple[int, int]:
    """
    Приведение (mantissa, exponent) к нормальной форме.

    Модуль мантиссы умножается на 10, пока он меньше NORMALIZE_MIN, и
    делится на 10 (усечением), пока он не меньше NORMALIZE_MAX. Каждый сдвиг
    компенсируется изменением порядка, так что значение сохраняется с точностью
    до отброшенных младших цифр.

    Args:
        raw_mantissa: Произвольная целая мантисса (в том числе > int64)
        raw_exponent: Исходный порядок

    Returns:
        Нормализованная пара (mantissa, exponent)

    Examples:
        >>> normalize_pair(50000, 0)
        (500000000, -4)
        >>> normalize_pair(-1987654321, 0)
        (-198765432, 1)
        >>> normalize_pair(0, 42)
        (0, 0)
    """
    if raw_mantissa == 0:
        return 0, ZERO_EXPONENT

    magnitude = abs(raw_mantissa)
    shifts = 0

    while magnitude < NORMALIZE_MIN:
        magnitude *= 10
        shifts -= 1

    while magnitude >= NORMALIZE_MAX:
        magnitude //= 10
        shifts += 1

    mantissa = magnitude if raw_mantissa > 0 else -magnitude
    return mantissa, raw_exponent + shifts


def is_normalized(mantissa: int, exponent: int) -> bool:
    """
    Проверка, что пара уже находится в нормальной форме.

    Args:
        mantissa: Мантисса
        exponent: Порядок

    Returns:
        True если normalize_pair(mantissa, exponent) вернёт ту же пару
    """
    if mantissa == 0:
        return exponent == ZERO_EXPONENT
    return NORMALIZE_MIN <= abs(mantissa) < NORMALIZE_MAX


def truncate_low_digits(mantissa: int, count: int) -> int:
    """
    Обнуление count младших цифр мантиссы (усечение к нулю).

    Args:
        mantissa: Мантисса (знаковая)
        count: Количество младших цифр для обнуления (0..SIGNIFICANT_DIGITS)

    Returns:
        Мантисса с обнулёнными младшими цифрами, знак сохраняется
    """
    scale = int_power(count)
    magnitude = abs(mantissa) // scale * scale
    return magnitude if mantissa >= 0 else -magnitude
