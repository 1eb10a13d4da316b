"""
Исключения NormalizedDecimal

Каждое исключение наследует и общий базовый класс NormalizedDecimalError,
и соответствующее встроенное исключение, чтобы вызывающий код мог ловить
любое из них.
"""


class NormalizedDecimalError(Exception):
    """Базовое исключение для всех ошибок NormalizedDecimal."""

    pass


class DigitsOutOfRangeError(NormalizedDecimalError, ValueError):
    """
    Недопустимое количество дробных разрядов для floor.

    Количество разрядов должно быть неотрицательным целым.
    """

    pass


class DivisionByZeroError(NormalizedDecimalError, ZeroDivisionError):
    """Деление на значение с нулевой мантиссой."""

    pass


class UnsupportedOperandError(NormalizedDecimalError, TypeError):
    """
    Сравнение с операндом неподдерживаемого типа.

    Неявные конверсии int/float не выполняются: используйте from_int,
    from_float или from_double.
    """

    pass


class ExponentOverflowError(NormalizedDecimalError, OverflowError):
    """Порядок после нормализации вышел за пределы signed 32-bit."""

    pass


class UndefinedOperationError(NormalizedDecimalError, ArithmeticError):
    """
    Операция не имеет значения без NaN: inf - inf, inf * 0, inf / inf.
    """

    pass
