"""
NormalizedDecimal — число фиксированной ширины в научной нотации

Значение = mantissa × 10^exponent, где mantissa всегда содержит ровно
9 значащих десятичных цифр (или равна 0). Хранение — два 32-битных целых,
точность сверх 9 цифр намеренно отбрасывается. Предназначено для доменов
(idle/incremental симуляции), где порядки величин выходят далеко за
пределы float, а арифметика должна оставаться дешёвой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое конечное значение нормализовано (проверяется в __post_init__)
2. Равенство и hash — структурные: нормализованные пары равны ⇔ значения равны
3. Значения неизменяемы: каждая операция создаёт новый экземпляр
4. Неявных конверсий int/float нет: только from_int / from_float / from_double

ПОЛИТИКИ ПОТЕРИ ТОЧНОСТИ:
- Сложение: слагаемое, отстающее по порядку на >= 9, отбрасывается целиком
- Деление: делимое предварительно масштабируется на 10^9, частное усекается
- Нормализация: лишние младшие цифры усекаются к нулю
- to_float / to_double: saturation до максимального конечного значения
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Final

from normdec.core.domain.errors import (
    DigitsOutOfRangeError,
    DivisionByZeroError,
    ExponentOverflowError,
    NormalizedDecimalError,
    UndefinedOperationError,
    UnsupportedOperandError,
)
from normdec.core.formatting.parser import parse_number
from normdec.core.formatting.registry import DEFAULT_FORMATTERS, FormatterRegistry
from normdec.core.formatting.renderers import render_plain, render_scientific
from normdec.core.math.normalizer import (
    NORMALIZE_MAX,
    SIGNIFICANT_DIGITS,
    ZERO_EXPONENT,
    normalize_pair,
    truncate_low_digits,
)
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
    saturate,
    to_single_precision,
    validate_int32,
    validate_non_negative,
)
from normdec.core.math.powers_of_ten import int_power, scale_by_power_of_ten

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ КОНВЕРСИИ
# =============================================================================

# Смещение порядка для float32 входа (~7 значащих цифр)
FLOAT_PRECISION_OFFSET: Final[int] = 6

# Смещение порядка для float64 входа (~9 значащих цифр)
DOUBLE_PRECISION_OFFSET: Final[int] = 8

# Текстовое представление бесконечности (совместимо с float())
INFINITY_TEXT: Final[str] = "inf"


# =============================================================================
# ENUMS
# =============================================================================


class NumberKind(str, Enum):
    """Вид значения: конечное или бесконечность со знаком."""

    FINITE = "finite"
    POSITIVE_INFINITY = "positive_infinity"
    NEGATIVE_INFINITY = "negative_infinity"


# =============================================================================
# NORMALIZED DECIMAL
# =============================================================================


@dataclass(frozen=True, repr=False)
class NormalizedDecimal:
    """
    Нормализованное десятичное число.

    NormalizedDecimal(mantissa, exponent) принимает произвольную пару и
    нормализует её: NormalizedDecimal(50000, 0) == NormalizedDecimal(500, 2).

    Для бесконечностей (kind != FINITE) mantissa хранит знак (±1), exponent
    равен 0; переданные mantissa/exponent игнорируются.
    """

    mantissa: int = 0
    exponent: int = ZERO_EXPONENT
    kind: NumberKind = NumberKind.FINITE

    def __post_init__(self) -> None:
        kind = NumberKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is not NumberKind.FINITE:
            object.__setattr__(self, "mantissa", 1 if kind is NumberKind.POSITIVE_INFINITY else -1)
            object.__setattr__(self, "exponent", 0)
            return

        for name in ("mantissa", "exponent"):
            raw = getattr(self, name)
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise TypeError(f"{name} must be an int, got {type(raw).__name__}")

        mantissa, exponent = normalize_pair(self.mantissa, self.exponent)
        try:
            validate_int32(exponent, "exponent")
        except ValueError as exc:
            raise ExponentOverflowError(
                f"Exponent {exponent} outside int32 range [{INT32_MIN}, {INT32_MAX}]"
            ) from exc

        object.__setattr__(self, "mantissa", mantissa)
        object.__setattr__(self, "exponent", exponent)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.kind is NumberKind.FINITE and self.mantissa == 0

    @property
    def is_finite(self) -> bool:
        return self.kind is NumberKind.FINITE

    @property
    def is_infinite(self) -> bool:
        return self.kind is not NumberKind.FINITE

    @property
    def sign(self) -> int:
        """Знак значения: -1, 0 или 1."""
        if self.mantissa > 0:
            return 1
        if self.mantissa < 0:
            return -1
        return 0

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def normalize(cls, raw_mantissa: int, raw_exponent: int) -> "NormalizedDecimal":
        """
        Нормализация произвольной пары.

        Args:
            raw_mantissa: Целая мантисса любого размера
            raw_exponent: Порядок

        Returns:
            Нормализованное значение

        Raises:
            ExponentOverflowError: Если итоговый порядок вне int32
        """
        return cls(raw_mantissa, raw_exponent)

    @classmethod
    def from_int(cls, value: int) -> "NormalizedDecimal":
        """
        Конверсия целого: normalize(value, 0).

        Цифры сверх девятой усекаются: from_int(2000000007) → 2000000000.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an int, got {type(value).__name__}")
        return cls(value, 0)

    @classmethod
    def from_float(cls, value: float) -> "NormalizedDecimal":
        """
        Конверсия single precision float (~7 значащих цифр).

        Значение сначала округляется до float32, как при передаче float
        в API с 32-битным float; конечные значения за пределами float32
        становятся бесконечностью.

        Args:
            value: Число с плавающей точкой

        Returns:
            Нормализованное значение

        Raises:
            ValueError: Если value равно NaN
        """
        return cls._from_binary_float(
            to_single_precision(_as_float(value)), FLOAT_PRECISION_OFFSET, FLT_TRUE_MIN
        )

    @classmethod
    def from_double(cls, value: float) -> "NormalizedDecimal":
        """
        Конверсия double (~9 значащих цифр).

        Целые за пределами диапазона double становятся бесконечностью.

        Raises:
            ValueError: Если value равно NaN
        """
        return cls._from_binary_float(_as_float(value), DOUBLE_PRECISION_OFFSET, DBL_TRUE_MIN)

    @classmethod
    def _from_binary_float(
        cls, value: float, precision_offset: int, smallest: float
    ) -> "NormalizedDecimal":
        if math.isnan(value):
            raise ValueError("NaN cannot be represented as NormalizedDecimal")

        if math.isinf(value):
            return POSITIVE_INFINITY if value > 0 else NEGATIVE_INFINITY

        if abs(value) < smallest:
            return ZERO

        exponent = math.floor(math.log10(abs(value))) - precision_offset
        mantissa = round(scale_by_power_of_ten(value, -exponent))

        return cls(mantissa, exponent)

    @classmethod
    def from_string(cls, text: str) -> "NormalizedDecimal":
        """
        Best-effort разбор строки. Никогда не бросает исключение.

        Десятичная/научная запись разбирается структурно, остальное
        передаётся в float(). Любая ошибка (нераспознанный текст, NaN,
        переполнение порядка) даёт ZERO.

        Examples:
            >>> NormalizedDecimal.from_string("1.23e-8").to_scientific_string()
            '1.23e-8'
            >>> NormalizedDecimal.from_string("garbage") == ZERO
            True
        """
        try:
            parsed = parse_number(text)
            if parsed is None:
                logger.debug("No structural match for %r, falling back to float()", text)
                return cls.from_double(float(text))

            leading = cls.from_double(parsed.leading)
            return cls(leading.mantissa, leading.exponent + parsed.exponent)
        except (TypeError, ValueError, NormalizedDecimalError) as exc:
            logger.debug("Cannot parse %r as NormalizedDecimal, using zero: %s", text, exc)
            return ZERO

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "NormalizedDecimal":
        if self.kind is NumberKind.POSITIVE_INFINITY:
            return NEGATIVE_INFINITY
        if self.kind is NumberKind.NEGATIVE_INFINITY:
            return POSITIVE_INFINITY
        return NormalizedDecimal(-self.mantissa, self.exponent)

    def add(self, other: "NormalizedDecimal") -> "NormalizedDecimal":
        """
        Сложение с политикой пренебрежимого слагаемого.

        Операнды упорядочиваются так, чтобы a имел больший порядок. Если
        разница порядков >= SIGNIFICANT_DIGITS, b не попадает в окно точности
        a и результат равен a. Иначе мантисса a масштабируется до порядка b.

        Нулевые операнды обрабатываются отдельно: x + 0 == x при любом порядке x.

        Raises:
            UndefinedOperationError: inf + (-inf)
        """
        if self.is_infinite or other.is_infinite:
            if self.is_infinite and other.is_infinite and self.kind is not other.kind:
                raise UndefinedOperationError(f"Undefined operation: {self!r} + {other!r}")
            return self if self.is_infinite else other

        if other.mantissa == 0:
            return self
        if self.mantissa == 0:
            return other

        a, b = (self, other) if self.exponent >= other.exponent else (other, self)

        exponent_gap = a.exponent - b.exponent
        if exponent_gap >= SIGNIFICANT_DIGITS:
            return a

        return NormalizedDecimal(a.mantissa * int_power(exponent_gap) + b.mantissa, b.exponent)

    def subtract(self, other: "NormalizedDecimal") -> "NormalizedDecimal":
        return self.add(other.negate())

    def multiply(self, other: "NormalizedDecimal") -> "NormalizedDecimal":
        """
        Умножение: произведение мантисс, сумма порядков, нормализация.

        Raises:
            UndefinedOperationError: inf * 0
        """
        if self.is_infinite or other.is_infinite:
            if self.is_zero or other.is_zero:
                raise UndefinedOperationError(f"Undefined operation: {self!r} * {other!r}")
            return _signed_infinity(self.sign * other.sign)

        return NormalizedDecimal(self.mantissa * other.mantissa, self.exponent + other.exponent)

    def divide(self, other: "NormalizedDecimal") -> "NormalizedDecimal":
        """
        Деление с предварительным масштабированием делимого на 10^9.

        Масштабирование сохраняет ~9 цифр частного несмотря на целочисленное
        деление. Частное усекается к нулю.

        Raises:
            DivisionByZeroError: Делитель равен нулю
            UndefinedOperationError: inf / inf
        """
        if other.is_zero:
            raise DivisionByZeroError(f"Division by zero: {self!r} / {other!r}")

        if self.is_infinite or other.is_infinite:
            if self.is_infinite and other.is_infinite:
                raise UndefinedOperationError(f"Undefined operation: {self!r} / {other!r}")
            if other.is_infinite:
                return ZERO
            return _signed_infinity(self.sign * other.sign)

        quotient = abs(self.mantissa) * NORMALIZE_MAX // abs(other.mantissa)
        if (self.mantissa < 0) != (other.mantissa < 0):
            quotient = -quotient

        return NormalizedDecimal(quotient, self.exponent - SIGNIFICANT_DIGITS - other.exponent)

    def increment(self) -> "NormalizedDecimal":
        return self.add(ONE)

    def decrement(self) -> "NormalizedDecimal":
        return self.subtract(ONE)

    def __neg__(self) -> "NormalizedDecimal":
        return self.negate()

    def __pos__(self) -> "NormalizedDecimal":
        return self

    def __abs__(self) -> "NormalizedDecimal":
        return self.negate() if self.sign < 0 else self

    def __add__(self, other: object) -> "NormalizedDecimal":
        if not isinstance(other, NormalizedDecimal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "NormalizedDecimal":
        if not isinstance(other, NormalizedDecimal):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "NormalizedDecimal":
        if not isinstance(other, NormalizedDecimal):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "NormalizedDecimal":
        if not isinstance(other, NormalizedDecimal):
            return NotImplemented
        return self.divide(other)

    def __bool__(self) -> bool:
        return not self.is_zero

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: object) -> int:
        """
        Трёхзначное сравнение: -1, 0 или 1.

        1. Бесконечности меньше/больше любого конечного значения
        2. Если одна из мантисс нулевая или порядки равны — сравниваются мантиссы
        3. Если знаки разные — больше положительное
        4. Иначе сравниваются порядки (для отрицательных — инвертированно)

        Args:
            other: NormalizedDecimal или None (None меньше любого значения)

        Returns:
            -1, 0 или 1

        Raises:
            UnsupportedOperandError: other другого типа
        """
        if other is None:
            return 1

        if not isinstance(other, NormalizedDecimal):
            raise UnsupportedOperandError(
                f"Cannot compare NormalizedDecimal with {type(other).__name__}"
            )

        rank, other_rank = self._infinity_rank(), other._infinity_rank()
        if rank != other_rank:
            return _sign_of(rank - other_rank)
        if rank != 0:
            return 0

        if self.mantissa == 0 or other.mantissa == 0 or self.exponent == other.exponent:
            return _sign_of(self.mantissa - other.mantissa)

        if self.mantissa > 0 and other.mantissa < 0:
            return 1
        if self.mantissa < 0 and other.mantissa > 0:
            return -1

        exponent_order = _sign_of(self.exponent - other.exponent)
        return exponent_order if self.mantissa > 0 else -exponent_order

    def _infinity_rank(self) -> int:
        if self.kind is NumberKind.POSITIVE_INFINITY:
            return 1
        if self.kind is NumberKind.NEGATIVE_INFINITY:
            return -1
        return 0

    def _require_comparable(self, other: object) -> "NormalizedDecimal":
        if not isinstance(other, NormalizedDecimal):
            raise UnsupportedOperandError(
                f"Cannot compare NormalizedDecimal with {type(other).__name__}"
            )
        return other

    def __lt__(self, other: object) -> bool:
        return self.compare_to(self._require_comparable(other)) < 0

    def __le__(self, other: object) -> bool:
        return self.compare_to(self._require_comparable(other)) <= 0

    def __gt__(self, other: object) -> bool:
        return self.compare_to(self._require_comparable(other)) > 0

    def __ge__(self, other: object) -> bool:
        return self.compare_to(self._require_comparable(other)) >= 0

    # -------------------------------------------------------------------------
    # Конверсии в float
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Конверсия в single precision float с saturation.

        Значения за пределами float32 (порядок > 38) и бесконечности
        заменяются на ±FLT_MAX. Никогда не бросает исключение и не
        возвращает inf.
        """
        result = self._to_binary_float(FLT_MAX, FLT_MAX_DECIMAL_ORDER)
        return saturate(to_single_precision(result), FLT_MAX)

    def to_double(self) -> float:
        """Конверсия в double с saturation до ±DBL_MAX."""
        return self._to_binary_float(DBL_MAX, DBL_MAX_DECIMAL_ORDER)

    def _to_binary_float(self, limit: float, max_decimal_order: int) -> float:
        if self.mantissa == 0:
            return 0.0

        decimal_order = self.exponent + SIGNIFICANT_DIGITS - 1
        if self.is_infinite or decimal_order > max_decimal_order:
            logger.debug("Saturating %s to %s", self.to_scientific_string(), limit)
            return limit if self.mantissa > 0 else -limit

        return saturate(scale_by_power_of_ten(float(self.mantissa), self.exponent), limit)

    def __float__(self) -> float:
        return self.to_double()

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_plain_string(self) -> str:
        """Plain decimal форма: "123.45", "400000000000000000000"."""
        if self.is_infinite:
            return self._infinity_text()
        return render_plain(self.mantissa, self.exponent)

    def to_scientific_string(self) -> str:
        """Научная форма: "1.2345e2", "1.23e-8"."""
        if self.is_infinite:
            return self._infinity_text()
        return render_scientific(self.mantissa, self.exponent)

    def to_string(
        self,
        format_tag: str | None = None,
        formatters: FormatterRegistry | None = None,
    ) -> str:
        """
        Форматирование через цепочку форматтеров.

        Args:
            format_tag: Тег формата ("e" — научная форма в реестре по умолчанию)
            formatters: Реестр форматтеров (default: DEFAULT_FORMATTERS)

        Returns:
            Строка от первого ответившего hook либо plain decimal форма
        """
        registry = DEFAULT_FORMATTERS if formatters is None else formatters
        return registry.format(self, format_tag)

    def _infinity_text(self) -> str:
        return INFINITY_TEXT if self.mantissa > 0 else f"-{INFINITY_TEXT}"

    def __str__(self) -> str:
        return self.to_plain_string()

    def __format__(self, format_spec: str) -> str:
        """
        Протокол format(): спецификация сначала передаётся как тег в
        DEFAULT_FORMATTERS ("e" — научная форма), иначе применяется к
        plain decimal строке как строковая спецификация (">12", "^9").

        Raises:
            ValueError: Спецификация недопустима для str (например, ".2f")
        """
        if not format_spec:
            return self.to_string()
        rendered = DEFAULT_FORMATTERS.render(self, format_spec)
        if rendered is not None:
            return rendered
        return format(self.to_plain_string(), format_spec)

    def __repr__(self) -> str:
        if self.is_infinite:
            return f"NormalizedDecimal(kind={self.kind.name})"
        return f"NormalizedDecimal(mantissa={self.mantissa}, exponent={self.exponent})"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[NormalizedDecimal] = NormalizedDecimal(0, ZERO_EXPONENT)
ONE: Final[NormalizedDecimal] = NormalizedDecimal(1, 0)
POSITIVE_INFINITY: Final[NormalizedDecimal] = NormalizedDecimal(kind=NumberKind.POSITIVE_INFINITY)
NEGATIVE_INFINITY: Final[NormalizedDecimal] = NormalizedDecimal(kind=NumberKind.NEGATIVE_INFINITY)


# =============================================================================
# STATIC HELPERS
# =============================================================================


def max_of(left: NormalizedDecimal, right: NormalizedDecimal) -> NormalizedDecimal:
    """Большее из двух значений (при равенстве — right)."""
    return left if left.compare_to(right) > 0 else right


def min_of(left: NormalizedDecimal, right: NormalizedDecimal) -> NormalizedDecimal:
    """Меньшее из двух значений (при равенстве — right)."""
    return left if left.compare_to(right) < 0 else right


def lerp(start: NormalizedDecimal, end: NormalizedDecimal, t: float) -> NormalizedDecimal:
    """
    Линейная интерполяция start + (end - start) × t.

    t ограничивается диапазоном [0, 1] и переводится в NormalizedDecimal
    через from_double.

    Args:
        start: Значение при t = 0
        end: Значение при t = 1
        t: Параметр интерполяции

    Returns:
        Интерполированное значение

    Raises:
        ValueError: Если t равно NaN
    """
    if math.isnan(t):
        raise ValueError("t must not be NaN")

    fraction = NormalizedDecimal.from_double(clamp(t, 0.0, 1.0))
    return start + (end - start) * fraction


def floor(value: NormalizedDecimal, digits: int = 0) -> NormalizedDecimal:
    """
    Усечение до digits дробных десятичных разрядов.

    Младшие цифры мантиссы, лежащие ниже 10^-digits, обнуляются.
    Усечение выполняется к нулю (для отрицательных значений это не
    математический floor): floor(-1.75) → -1.

    Args:
        value: Исходное значение
        digits: Количество сохраняемых дробных разрядов (>= 0)

    Returns:
        Усечённое значение; ZERO, если все цифры ниже порога;
        value без изменений, если порог не задевает мантиссу

    Raises:
        DigitsOutOfRangeError: Если digits < 0 или не int

    Examples:
        >>> str(floor(NormalizedDecimal(12345123, -3), 1))
        '12345.1'
    """
    try:
        validate_non_negative(digits, "digits")
    except (TypeError, ValueError) as exc:
        raise DigitsOutOfRangeError(str(exc)) from exc

    if value.is_infinite or value.is_zero:
        return value

    threshold = -digits - value.exponent
    if threshold > SIGNIFICANT_DIGITS:
        return ZERO
    if threshold <= 0:
        return value

    return NormalizedDecimal(truncate_low_digits(value.mantissa, threshold), value.exponent)


# =============================================================================
# ВНУТРЕННИЕ УТИЛИТЫ
# =============================================================================


def _as_float(value: float) -> float:
    # float() переполняется на int вне диапазона double
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _sign_of(value: int) -> int:
    return (value > 0) - (value < 0)


def _signed_infinity(sign: int) -> NormalizedDecimal:
    return POSITIVE_INFINITY if sign > 0 else NEGATIVE_INFINITY
