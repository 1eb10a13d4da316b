"""
Тесты для NormalizedDecimal

Проверяет:
1. Конструирование и нормализацию (from_int, from_float, from_double)
2. Структурное равенство и hash
3. Арифметику и политики потери точности
4. Сравнение и порядок
5. Бесконечности (tagged representation)
6. Конверсию в float с saturation
"""

import dataclasses
import math

import pytest

from normdec import (
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    DivisionByZeroError,
    ExponentOverflowError,
    NormalizedDecimal,
    NormalizedDecimalError,
    NumberKind,
    UndefinedOperationError,
    UnsupportedOperandError,
)
from normdec.core.math.numerical_safeguards import (
    DBL_MAX,
    FLT_MAX,
    INT32_MAX,
    to_single_precision,
)

ND = NormalizedDecimal


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def sample_values() -> list[NormalizedDecimal]:
    """Набор значений разных знаков и порядков."""
    return [
        ZERO,
        ONE,
        ND.from_int(-987654321),
        ND(123456789, 30),
        ND(123456789, -29),
        ND.from_float(3.14),
        ND.from_float(-123.456),
        ND(7574, 12),
        ND(-3, 450),
    ]


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestConstruction:
    """Тесты конструктора и нормальной формы"""

    def test_constructor_normalizes(self) -> None:
        """Конструктор приводит пару к 9 цифрам"""
        value = ND(50000, 0)
        assert value.mantissa == 500_000_000
        assert value.exponent == -4

    def test_zero_is_canonical(self) -> None:
        """Все нули имеют одну и ту же пару"""
        assert ND(0, 17) == ZERO
        assert ND(0, 17).exponent == 0
        assert ND().is_zero

    def test_normalize_classmethod(self) -> None:
        """normalize эквивалентен конструктору"""
        assert ND.normalize(314, -2) == ND(314, -2)

    def test_normalization_idempotent(self, sample_values) -> None:
        """Инвариант: повторная нормализация ничего не меняет"""
        for value in sample_values:
            assert ND(value.mantissa, value.exponent) == value

    def test_non_int_mantissa_rejected(self) -> None:
        """Мантисса должна быть int"""
        with pytest.raises(TypeError, match="mantissa must be an int"):
            ND(1.5, 0)
        with pytest.raises(TypeError, match="exponent must be an int"):
            ND(1, 2.0)

    def test_immutable(self) -> None:
        """Значение неизменяемо"""
        value = ND.from_int(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.mantissa = 1  # type: ignore[misc]

    def test_exponent_overflow(self) -> None:
        """Порядок вне int32 после нормализации"""
        assert ND(1, INT32_MAX).exponent == INT32_MAX - 8
        with pytest.raises(ExponentOverflowError):
            ND(1_000_000_000, INT32_MAX)
        with pytest.raises(OverflowError):
            ND(1, 2**31 + 100)

    def test_exponent_overflow_message(self) -> None:
        """Сообщение указывает диапазон int32"""
        with pytest.raises(ExponentOverflowError, match="outside int32 range"):
            ND(1, 2**31 + 100)

    def test_repr(self) -> None:
        """repr показывает нормализованную пару"""
        assert repr(ND(314, -2)) == "NormalizedDecimal(mantissa=314000000, exponent=-8)"
        assert repr(POSITIVE_INFINITY) == "NormalizedDecimal(kind=POSITIVE_INFINITY)"


class TestFromInt:
    """Тесты для from_int"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (123, "123"),
            (7000000, "7000000"),
            (-987654321, "-987654321"),
            (-1987654321, "-1987654320"),
            (2000000007, "2000000000"),
            (0, "0"),
        ],
    )
    def test_to_string(self, value: int, expected: str) -> None:
        """Цифры сверх девятой усекаются"""
        assert str(ND.from_int(value)) == expected

    def test_rejects_float(self) -> None:
        """Неявные конверсии запрещены"""
        with pytest.raises(TypeError, match="value must be an int"):
            ND.from_int(1.0)

    def test_rejects_bool(self) -> None:
        """bool не является числом для from_int"""
        with pytest.raises(TypeError):
            ND.from_int(True)


class TestFromFloat:
    """Тесты для from_float / from_double"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (3.14, "3.14"),
            (-123.456, "-123.456"),
            (7e8, "700000000"),
            (123e-10, "0.0000000123"),
            (4e20, "400000000000000000000"),
            (12345.12345, "12345.12"),
        ],
    )
    def test_single_precision_to_string(self, value: float, expected: str) -> None:
        """from_float сохраняет ~7 значащих цифр"""
        assert str(ND.from_float(value)) == expected

    def test_double_precision_keeps_nine_digits(self) -> None:
        """from_double сохраняет 9 значащих цифр"""
        assert str(ND.from_double(12345.6789)) == "12345.6789"
        assert ND.from_double(1.23456789) == ND(123456789, -8)

    def test_float_equals_constructed(self) -> None:
        """from_float(5e4) == (500, 2)"""
        assert ND.from_float(5e4) == ND(500, 2)

    def test_zero(self) -> None:
        """Ноль и значения ниже минимального subnormal"""
        assert ND.from_float(0.0) == ZERO
        assert ND.from_double(-0.0) == ZERO
        assert ND.from_float(1e-50) == ZERO

    def test_tiny_double(self) -> None:
        """Subnormal double за пределами таблицы степеней"""
        value = ND.from_double(1e-320)
        assert value.mantissa > 0
        assert value.to_double() == pytest.approx(1e-320, rel=1e-3)

    def test_huge_double(self) -> None:
        """Порядок около предела double"""
        assert ND.from_double(1e308) == ND(1, 308)

    def test_infinity(self) -> None:
        """Бесконечности сохраняют знак"""
        assert ND.from_double(math.inf) is POSITIVE_INFINITY
        assert ND.from_double(-math.inf) is NEGATIVE_INFINITY
        assert ND.from_float(math.inf) == POSITIVE_INFINITY

    def test_float32_overflow_becomes_infinity(self) -> None:
        """Значение вне float32 при from_float становится бесконечностью"""
        assert ND.from_float(1e39) == POSITIVE_INFINITY
        assert ND.from_float(-1e39) == NEGATIVE_INFINITY
        assert ND.from_double(1e39) == ND(1, 39)

    def test_int_beyond_double_range(self) -> None:
        """Целое вне диапазона double становится бесконечностью"""
        assert ND.from_double(10**400) is POSITIVE_INFINITY
        assert ND.from_double(-(10**400)) is NEGATIVE_INFINITY
        assert ND.from_float(10**400) is POSITIVE_INFINITY

    def test_nan_rejected(self) -> None:
        """NaN не представим"""
        with pytest.raises(ValueError, match="NaN"):
            ND.from_double(math.nan)
        with pytest.raises(ValueError, match="NaN"):
            ND.from_float(math.nan)


# =============================================================================
# ТЕСТЫ РАВЕНСТВА
# =============================================================================


class TestEquality:
    """Тесты структурного равенства и hash"""

    def test_constructor_independent(self) -> None:
        """Разные исходные пары одного значения равны"""
        assert ND(50000, 0) == ND(500, 2)
        assert ND(-31400000, -7) == ND(-314, -2)
        assert ND.from_int(1000) == ND(1, 3)
        assert ND.from_int(1000) == ND(10, 2)

    def test_reflexive_symmetric_transitive(self, sample_values) -> None:
        """Свойства отношения эквивалентности"""
        for value in sample_values:
            assert value == value
        a, b, c = ND(1, 3), ND(10, 2), ND.from_int(1000)
        assert a == b and b == a
        assert b == c and a == c

    def test_hash_consistent(self) -> None:
        """Равные значения имеют одинаковый hash"""
        assert hash(ND(50000, 0)) == hash(ND(500, 2))
        assert len({ND(50000, 0), ND(500, 2), ND(5, 4)}) == 1

    def test_not_equal_to_native_numbers(self) -> None:
        """Нет неявной конверсии при сравнении на равенство"""
        assert ND.from_int(1) != 1
        assert ND.from_int(1) != 1.0

    def test_kind_participates(self) -> None:
        """Бесконечность не равна конечному значению"""
        assert POSITIVE_INFINITY != ONE
        assert POSITIVE_INFINITY.kind is NumberKind.POSITIVE_INFINITY
        assert ND(kind=NumberKind.POSITIVE_INFINITY) == POSITIVE_INFINITY


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestAdd:
    """Тесты сложения"""

    def test_basic(self) -> None:
        """Обычное сложение"""
        assert ND.from_int(3) + ND.from_int(7) == ND.from_int(10)
        assert ND.from_float(111.111) + ND.from_float(222.222) == ND.from_float(333.333)
        assert ND.from_int(10) + ND.from_int(-2) == ND.from_int(8)

    def test_negligible_operand_dropped(self) -> None:
        """Слагаемое на 9+ порядков меньше отбрасывается"""
        assert ND.from_float(5e10) + ND.from_float(1.0) == ND.from_float(5e10)
        assert ND.from_float(5e9) + ND.from_float(1.0) == ND.from_float(5e9)

    def test_within_precision_window(self) -> None:
        """Разница порядков < 9: результат точный"""
        assert ND.from_float(5e8) + ND.from_float(1.0) == ND.from_int(500000001)

    def test_zero_operand(self) -> None:
        """x + 0 == x для любого порядка x"""
        tiny = ND(1, -20)
        assert tiny + ZERO == tiny
        assert ZERO + tiny == tiny
        assert ZERO + ZERO == ZERO

    def test_cancellation(self) -> None:
        """x + (-x) == 0"""
        value = ND.from_float(-123.456)
        assert value + (-value) == ZERO

    @pytest.mark.parametrize(
        "a,b",
        [
            (ND(1, 0), ND(2, 0)),
            (ND(123456789, 30), ND(5, 30)),
            (ND(123456789, 31), ND(-5, 30)),
            (ND(-42, -7), ND(17, 1)),
            (ND(1, 100), ND(1, -100)),
            (ZERO, ND(-3, -15)),
        ],
    )
    def test_commutative(self, a: NormalizedDecimal, b: NormalizedDecimal) -> None:
        """Инвариант: a + b == b + a"""
        assert a + b == b + a

    def test_increment(self) -> None:
        """increment прибавляет единицу"""
        assert ND.from_int(41).increment() == ND.from_int(42)
        assert ND.from_int(-1).increment() == ZERO

    def test_native_operand_rejected(self) -> None:
        """Сложение с int требует явной конверсии"""
        with pytest.raises(TypeError):
            ONE + 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            1.0 + ONE  # type: ignore[operator]


class TestSubtract:
    """Тесты вычитания"""

    def test_basic(self) -> None:
        """Вычитание единицы"""
        assert ND.from_int(1000000) - ONE == ND.from_int(999999)
        assert ND.from_int(-999999) - ONE == ND.from_int(-1000000)

    def test_large_exponents(self) -> None:
        """Вычитание в пределах и за пределами окна точности"""
        assert ND(123456789, 30) - ND(5, 30) == ND(123456784, 30)
        assert ND(123456789, 31) - ND(5, 30) == ND(123456789, 31)
        assert ND(123456789, -30) - ND(5, -30) == ND(123456784, -30)
        assert ND(123456789, -29) - ND(5, -30) == ND(123456789, -29)

    def test_decrement(self) -> None:
        """decrement вычитает единицу"""
        assert ND.from_int(42).decrement() == ND.from_int(41)
        assert ZERO.decrement() == ND.from_int(-1)


class TestNegate:
    """Тесты смены знака и модуля"""

    def test_negate(self) -> None:
        """Смена знака сохраняет порядок"""
        value = ND(123456789, 7)
        assert (-value).mantissa == -123456789
        assert (-value).exponent == 7
        assert -(-value) == value
        assert -ZERO == ZERO

    def test_abs(self) -> None:
        """Модуль"""
        assert abs(ND.from_int(-5)) == ND.from_int(5)
        assert abs(ND.from_int(5)) == ND.from_int(5)
        assert abs(NEGATIVE_INFINITY) == POSITIVE_INFINITY

    def test_unary_plus(self) -> None:
        """Унарный плюс возвращает то же значение"""
        value = ND.from_int(-5)
        assert +value is value


class TestMultiply:
    """Тесты умножения"""

    def test_basic(self) -> None:
        """Умножение мантисс и сложение порядков"""
        assert ND(1, 70) * ND.from_int(250) == ND(250, 70)
        assert ND.from_float(-333.2222) * ND.from_float(-3e10) == ND.from_float(9.996666e12)
        assert ND.from_int(50000) * ND.from_float(0.2) == ND.from_int(10000)

    def test_by_zero(self) -> None:
        """Умножение на ноль даёт канонический ноль"""
        assert ND(123456789, 40) * ZERO == ZERO

    def test_exponent_overflow(self) -> None:
        """Переполнение порядка при умножении"""
        big = ND(1, 2**30)
        with pytest.raises(ExponentOverflowError):
            big * big


class TestDivide:
    """Тесты деления"""

    def test_basic(self) -> None:
        """Масштабирование на 10^9 сохраняет 9 цифр частного"""
        assert ND(100, 330) / ND(3, 330) == ND(333333333, -7)
        assert -ND.from_float(791.2) / ND.from_float(4.5) == ND(-175822222, -6)

    def test_exact_quotient(self) -> None:
        """Точное частное"""
        assert ND.from_int(10) / ND.from_int(4) == ND(25, -1)
        assert ND.from_int(-9) / ND.from_int(3) == ND.from_int(-3)

    def test_zero_dividend(self) -> None:
        """0 / x == 0"""
        assert ZERO / ND.from_int(7) == ZERO

    def test_division_by_zero(self) -> None:
        """Деление на ноль явно сигнализируется"""
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            ONE / ZERO
        with pytest.raises(ZeroDivisionError):
            ND.from_int(5) / ZERO

    def test_division_by_zero_message_compact(self) -> None:
        """Сообщение об ошибке не разворачивает порядок в цифры"""
        with pytest.raises(DivisionByZeroError) as exc_info:
            ND(1, 2_000_000_000) / ZERO
        message = str(exc_info.value)
        assert len(message) < 200
        assert "exponent=1999999992" in message

    def test_undefined_operation_message_compact(self) -> None:
        """Сообщение для inf / inf не зависит от значений"""
        with pytest.raises(UndefinedOperationError) as exc_info:
            POSITIVE_INFINITY / NEGATIVE_INFINITY
        assert len(str(exc_info.value)) < 200

    @pytest.mark.parametrize(
        "a,b",
        [
            (ND.from_int(100), ND.from_int(3)),
            (ND.from_float(791.2), ND.from_float(-4.5)),
            (ND(7574, 12), ND(3, -40)),
            (ND(1, -300), ND(7, 300)),
        ],
    )
    def test_approximate_inverse(self, a: NormalizedDecimal, b: NormalizedDecimal) -> None:
        """Инвариант: (a / b) * b ≈ a в пределах 9 цифр"""
        restored = (a / b) * b
        assert restored.exponent in (a.exponent, a.exponent - 1)
        assert restored.to_double() == pytest.approx(a.to_double(), rel=1e-8)


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestCompareTo:
    """Тесты compare_to"""

    def test_zero_and_sign(self) -> None:
        """Сравнение с нулём определяется знаком"""
        assert ND.from_int(0).compare_to(ND.from_int(0)) == 0
        assert ND.from_int(1).compare_to(ND.from_int(0)) > 0
        assert ND.from_int(0).compare_to(ND.from_int(-1)) > 0
        assert ND.from_int(0).compare_to(ND.from_int(1)) < 0
        assert ND.from_int(-1).compare_to(ND.from_int(0)) < 0

    def test_same_exponent(self) -> None:
        """Равные порядки: сравниваются мантиссы"""
        assert ND.from_int(72).compare_to(ND.from_int(80)) < 0

    def test_different_exponents(self) -> None:
        """Разные порядки: для отрицательных сравнение инвертируется"""
        assert ND.from_float(-8.774e24).compare_to(ND.from_float(-5.34e25)) > 0
        assert ND.from_float(8.774e24).compare_to(ND.from_float(5.34e25)) < 0

    def test_int_and_float_sources_equal(self) -> None:
        """Одинаковые значения из разных источников"""
        assert ND.from_int(1234567000).compare_to(ND.from_float(1.234567e9)) == 0

    def test_none_is_smaller(self) -> None:
        """Любое значение больше None"""
        assert ZERO.compare_to(None) == 1

    def test_unsupported_type(self) -> None:
        """Сравнение с int/str сигнализирует ошибку типа"""
        with pytest.raises(UnsupportedOperandError, match="Cannot compare"):
            ONE.compare_to(1)
        with pytest.raises(TypeError):
            ONE.compare_to("1")


class TestCompareOperators:
    """Тесты операторов <, <=, >, >="""

    def test_basic(self) -> None:
        """Базовые операторы"""
        assert ZERO < ONE
        assert not ONE < ONE
        assert ONE <= ONE
        assert ONE >= ONE
        assert ONE > ZERO

    def test_across_exponents(self) -> None:
        """Порядок согласован со знаком и величиной"""
        assert not ND(7574, 12) > ND(3, 450)
        assert ND(7574, 12) > ND(-3, 450)
        assert ND(7574, 12) > ND(3, -450)
        assert ND(-7574, 12) < ND(-3, -450)

    def test_native_operand_rejected(self) -> None:
        """Операторы не конвертируют int/float неявно"""
        with pytest.raises(UnsupportedOperandError):
            ONE < 1  # type: ignore[operator]
        with pytest.raises(TypeError):
            ONE >= 1.0  # type: ignore[operator]

    def test_total_order(self, sample_values) -> None:
        """sorted согласован с to_double для конечных значений"""
        finite = [v for v in sample_values if abs(v.exponent) < 300]
        ordered = sorted(finite)
        doubles = [v.to_double() for v in ordered]
        assert doubles == sorted(doubles)

    def test_max_min_builtins(self) -> None:
        """Встроенные max/min работают через операторы"""
        values = [ND.from_int(3), ND(-1, 40), ND(2, 5)]
        assert max(values) == ND(2, 5)
        assert min(values) == ND(-1, 40)


# =============================================================================
# ТЕСТЫ БЕСКОНЕЧНОСТЕЙ
# =============================================================================


class TestInfinity:
    """Тесты tagged-представления бесконечностей"""

    def test_flags(self) -> None:
        """Свойства бесконечностей"""
        assert POSITIVE_INFINITY.is_infinite
        assert not POSITIVE_INFINITY.is_finite
        assert not POSITIVE_INFINITY.is_zero
        assert POSITIVE_INFINITY.sign == 1
        assert NEGATIVE_INFINITY.sign == -1

    def test_negate(self) -> None:
        """Смена знака меняет вид бесконечности"""
        assert -POSITIVE_INFINITY == NEGATIVE_INFINITY
        assert -NEGATIVE_INFINITY == POSITIVE_INFINITY

    def test_add(self) -> None:
        """inf ± finite == inf; inf - inf не определено"""
        assert POSITIVE_INFINITY + ND(9, 99) == POSITIVE_INFINITY
        assert ND(9, 99) - POSITIVE_INFINITY == NEGATIVE_INFINITY
        assert POSITIVE_INFINITY + POSITIVE_INFINITY == POSITIVE_INFINITY
        with pytest.raises(UndefinedOperationError):
            POSITIVE_INFINITY + NEGATIVE_INFINITY
        with pytest.raises(ArithmeticError):
            POSITIVE_INFINITY - POSITIVE_INFINITY

    def test_multiply(self) -> None:
        """Знак произведения; inf * 0 не определено"""
        assert POSITIVE_INFINITY * ND.from_int(-2) == NEGATIVE_INFINITY
        assert NEGATIVE_INFINITY * NEGATIVE_INFINITY == POSITIVE_INFINITY
        with pytest.raises(UndefinedOperationError):
            POSITIVE_INFINITY * ZERO

    def test_divide(self) -> None:
        """Деление с бесконечностями"""
        assert ONE / POSITIVE_INFINITY == ZERO
        assert POSITIVE_INFINITY / ND.from_int(-3) == NEGATIVE_INFINITY
        with pytest.raises(UndefinedOperationError):
            POSITIVE_INFINITY / NEGATIVE_INFINITY
        with pytest.raises(DivisionByZeroError):
            POSITIVE_INFINITY / ZERO

    def test_ordering(self) -> None:
        """Бесконечности ограничивают все конечные значения"""
        assert NEGATIVE_INFINITY < ND(-9, 2_000_000_000)
        assert ND(9, 2_000_000_000) < POSITIVE_INFINITY
        assert POSITIVE_INFINITY.compare_to(POSITIVE_INFINITY) == 0
        assert NEGATIVE_INFINITY < POSITIVE_INFINITY

    def test_to_string(self) -> None:
        """Текстовое представление совместимо с float()"""
        assert str(POSITIVE_INFINITY) == "inf"
        assert str(NEGATIVE_INFINITY) == "-inf"
        assert NEGATIVE_INFINITY.to_scientific_string() == "-inf"

    def test_is_error_hierarchy(self) -> None:
        """Все ошибки наследуют общий базовый класс"""
        assert issubclass(UndefinedOperationError, NormalizedDecimalError)
        assert issubclass(DivisionByZeroError, NormalizedDecimalError)


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ В FLOAT
# =============================================================================


class TestToFloat:
    """Тесты to_float / to_double"""

    def test_zero(self) -> None:
        """Ноль"""
        assert ZERO.to_float() == 0.0
        assert ZERO.to_double() == 0.0

    def test_regular_values(self) -> None:
        """Обычные значения"""
        assert ND.from_int(123).to_float() == 123.0
        assert ND.from_float(3.14).to_float() == to_single_precision(3.14)
        assert ND(123456789, -10).to_double() == pytest.approx(0.0123456789)

    def test_single_precision_saturation(self) -> None:
        """Порядок > 38 насыщается до ±FLT_MAX"""
        assert ND(1, 50).to_float() == FLT_MAX
        assert ND(-1, 50).to_float() == -FLT_MAX
        assert ND(35, 37).to_float() == FLT_MAX

    def test_double_precision_saturation(self) -> None:
        """Порядок > 308 насыщается до ±DBL_MAX"""
        assert ND(1, 400).to_double() == DBL_MAX
        assert ND(-1, 400).to_double() == -DBL_MAX
        assert ND(1, 50).to_double() == pytest.approx(1e50)

    def test_infinity_saturates(self) -> None:
        """Бесконечности не дают inf"""
        assert POSITIVE_INFINITY.to_float() == FLT_MAX
        assert NEGATIVE_INFINITY.to_double() == -DBL_MAX

    def test_underflow(self) -> None:
        """Очень малые значения дают 0.0"""
        assert ND(5, -400).to_double() == 0.0
        assert ND(5, -60).to_float() == 0.0

    def test_float_protocol(self) -> None:
        """float() использует double precision"""
        assert float(ND.from_double(0.1)) == pytest.approx(0.1)

    def test_bool(self) -> None:
        """Ноль — единственное ложное значение"""
        assert not ZERO
        assert ONE
        assert ND(-1, -300)
