"""
Renderers — текстовое представление нормализованной пары

Две формы:
- Plain decimal: "123.45", "-0.0000000123", "400000000000000000000"
- Scientific: "1.2345e2", "-1.23e-8", "1e2147483638"

Обе функции работают только с целыми (mantissa, exponent) и собирают
результат в локальном списке: общего буфера между вызовами нет.

Правило обрезки хвостовых нулей (общее для обеих форм): младшие нулевые
цифры дробной части не выводятся, пока не встретится первая ненулевая;
все цифры старше неё сохраняются.
"""

from typing import Final

# Символ десятичной точки
DECIMAL_POINT: Final[str] = "."

# Маркер порядка в научной форме
EXPONENT_MARKER: Final[str] = "e"


# =============================================================================
# PLAIN DECIMAL
# =============================================================================


def render_plain(mantissa: int, exponent: int) -> str:
    """
    Plain decimal форма без научной нотации.

    exponent >= 0: цифры мантиссы, затем exponent нулей (без точки).
    exponent < 0: младшие |exponent| цифр образуют дробную часть (с обрезкой
    хвостовых нулей), остальные — целую часть ("0", если цифр не осталось).

    Args:
        mantissa: Нормализованная мантисса
        exponent: Порядок

    Returns:
        Строка вида "[-]int[.frac]"

    Examples:
        >>> render_plain(314000000, -8)
        '3.14'
        >>> render_plain(123000000, -16)
        '0.0000000123'
        >>> render_plain(400000000, 12)
        '400000000000000000000'
    """
    if exponent >= 0:
        return str(mantissa) + "0" * exponent

    magnitude = abs(mantissa)
    fraction: list[str] = []
    kept = False

    remaining = -exponent
    while remaining > 0 and magnitude > 0:
        digit = magnitude % 10
        if kept or digit != 0:
            kept = True
            fraction.append(str(digit))
        magnitude //= 10
        remaining -= 1

    # Цифры мантиссы исчерпаны: оставшиеся позиции дробной части заполняются нулями
    if kept and remaining > 0:
        fraction.append("0" * remaining)

    parts: list[str] = []
    if mantissa < 0:
        parts.append("-")
    parts.append(str(magnitude) if magnitude > 0 else "0")
    if kept:
        parts.append(DECIMAL_POINT)
        parts.extend(reversed(fraction))

    return "".join(parts)


# =============================================================================
# SCIENTIFIC
# =============================================================================


def render_scientific(mantissa: int, exponent: int) -> str:
    """
    Научная форма: одна ведущая цифра, дробная часть, порядок.

    Маркер порядка опускается, если итоговый порядок равен нулю.

    Args:
        mantissa: Нормализованная мантисса
        exponent: Порядок

    Returns:
        Строка вида "[-]d[.frac][e<exp>]"

    Examples:
        >>> render_scientific(100000000, 2147483630)
        '1e2147483638'
        >>> render_scientific(123000000, -16)
        '1.23e-8'
        >>> render_scientific(-314000000, -8)
        '-3.14'
    """
    magnitude = abs(mantissa)
    fraction: list[str] = []
    kept = False
    additional_exponent = 0

    while magnitude >= 10:
        digit = magnitude % 10
        if kept or digit != 0:
            kept = True
            fraction.append(str(digit))
        magnitude //= 10
        additional_exponent += 1

    parts = ["-" if mantissa < 0 else "", str(magnitude)]
    if kept:
        parts.append(DECIMAL_POINT)
        parts.extend(reversed(fraction))

    total_exponent = exponent + additional_exponent
    if total_exponent != 0:
        parts.append(f"{EXPONENT_MARKER}{total_exponent}")

    return "".join(parts)
