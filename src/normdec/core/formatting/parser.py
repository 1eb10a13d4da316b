"""
Parser — разбор десятичной и научной записи

Грамматика: [+-]? digits [. digits*]? [(e|E) [+-]? digits]?

Мантиссная часть сдвигается к одной ведущей цифре ("12345.6" → 1.23456,
сдвиг 4), поэтому строки из сотен цифр не переполняют double. Итоговый
порядок = сдвиг + явный порядок после маркера.
"""

import re
from dataclasses import dataclass
from typing import Final

_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>[+-]?)(?P<integer>\d+)(?:\.(?P<fraction>\d*))?(?:[eE](?P<exponent>[+-]?\d+))?"
)


@dataclass(frozen=True)
class ParsedNumber:
    """
    Результат разбора строки.

    leading: знаковое значение с одной цифрой до точки (|leading| in [1, 10))
        либо 0.0 для нулевой записи
    exponent: порядок, на который нужно умножить leading
    """

    leading: float
    exponent: int


def parse_number(text: str) -> ParsedNumber | None:
    """
    Структурный разбор числа.

    Ведущие и хвостовые пробелы игнорируются.

    Args:
        text: Исходная строка

    Returns:
        ParsedNumber при совпадении с грамматикой, иначе None

    Raises:
        TypeError: Если text не str
        ValueError: Если явный порядок слишком длинный для int()

    Examples:
        >>> parse_number("123.45")
        ParsedNumber(leading=1.2345, exponent=2)
        >>> parse_number("-0.0012e3")
        ParsedNumber(leading=-1.2, exponent=0)
        >>> parse_number("abc") is None
        True
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    match = _NUMBER_PATTERN.fullmatch(text.strip())
    if match is None:
        return None

    integer = match["integer"]
    digits = integer + (match["fraction"] or "")
    significant = digits.lstrip("0")
    exponent = int(match["exponent"]) if match["exponent"] else 0

    if not significant:
        return ParsedNumber(leading=0.0, exponent=0)

    leading_zeros = len(digits) - len(significant)
    shift = len(integer) - leading_zeros - 1
    leading = float(f"{match['sign']}{significant[0]}.{significant[1:]}")

    return ParsedNumber(leading=leading, exponent=exponent + shift)
