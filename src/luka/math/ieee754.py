"""
IEEE-754 Primitives — Total Double-Precision Arithmetic

Модуль приводит встроенную арифметику Python к семантике IEEE-754 double:
- Деление на ноль возвращает ±inf или NaN вместо ZeroDivisionError
- Остаток от деления усечённый (знак делимого), а не floored как у `%`
- Возведение в степень не бросает ValueError/OverflowError (C99 Annex F)
- Явная работа со знаковым нулём (-0.0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на числовых граничных случаях
2. NaN/Inf пропагируют как значения (никакой санитизации)
3. Знак нуля сохраняется, пока не вызван normalize_zero
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, SupportsFloat

# =============================================================================
# IDENTITY-ЭЛЕМЕНТЫ
# =============================================================================

# Нейтральный элемент сложения: x + 0.0 == x
ADDITIVE_IDENTITY: Final[float] = 0.0

# Нейтральный элемент умножения: x * 1.0 == x
MULTIPLICATIVE_IDENTITY: Final[float] = 1.0


# =============================================================================
# КОЕРСИЯ И ЗНАКОВЫЙ НОЛЬ
# =============================================================================


def to_double(value: SupportsFloat) -> float:
    """
    Приведение операнда к double.

    int/bool/float и любые объекты с __float__ допустимы.
    Значения за пределами диапазона double (например, 10**400) округляются
    до ±inf, как при IEEE-754 округлении, вместо OverflowError.
    Для остального float() бросает TypeError/ValueError (нарушение контракта вызова).

    Examples:
        >>> to_double(7)
        7.0
        >>> to_double(True)
        1.0
        >>> to_double(-(10**400))
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        # copysign(inf, value) снова вызвал бы float(value): знак через сравнение
        return math.inf if value > 0 else -math.inf


def is_negative_zero(value: float) -> bool:
    """
    Проверка, является ли значение отрицательным нулём (-0.0).

    -0.0 == 0.0 в Python, поэтому знак определяется через copysign.

    Examples:
        >>> is_negative_zero(-0.0)
        True
        >>> is_negative_zero(0.0)
        False
    """
    return value == 0.0 and math.copysign(1.0, value) < 0.0


def normalize_zero(value: float) -> float:
    """
    Замена -0.0 на +0.0. Остальные значения (включая NaN) не меняются.

    Examples:
        >>> normalize_zero(-0.0)
        0.0
        >>> normalize_zero(-3.5)
        -3.5
    """
    if value == 0.0:
        return 0.0
    return value


def is_odd_integer(value: float) -> bool:
    """
    Проверка, является ли значение конечным нечётным целым.

    Используется для определения знака результата pow(x, y) при x < 0 или x == -0.0.
    """
    return math.isfinite(value) and value.is_integer() and math.fmod(value, 2.0) != 0.0


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def true_divide(x: SupportsFloat, y: SupportsFloat) -> float:
    """
    Деление x / y по IEEE-754.

    Python бросает ZeroDivisionError для float / 0.0; здесь результат — значение:
    - nonzero / ±0 → ±inf (знак = sign(x) * sign(y), учитывая -0.0)
    - 0 / 0, NaN / 0 → NaN

    Args:
        x: Делимое
        y: Делитель

    Returns:
        Частное как float (никогда не бросает на числовых значениях)

    Examples:
        >>> true_divide(14, 2)
        7.0
        >>> true_divide(1, 0)
        inf
        >>> true_divide(1, -0.0)
        -inf
        >>> true_divide(0, 0)
        nan
    """
    dividend = to_double(x)
    divisor = to_double(y)

    if divisor == 0.0:
        if dividend == 0.0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)

    return dividend / divisor


# =============================================================================
# ОСТАТОК ОТ ДЕЛЕНИЯ
# =============================================================================


def truncating_remainder(x: SupportsFloat, y: SupportsFloat) -> float:
    """
    Усечённый остаток x / y: знак результата совпадает со знаком делимого.

    В отличие от Python `%` (знак делителя): rem(11, -5) == 1, а 11 % -5 == -4.

    Граничные случаи:
    - NaN в любом операнде → NaN
    - x == ±inf → NaN
    - y == ±0 → NaN
    - x конечный, y == ±inf → x без изменений

    Examples:
        >>> truncating_remainder(11, -5)
        1.0
        >>> truncating_remainder(-11, 5)
        -1.0
        >>> truncating_remainder(15, 7)
        1.0
    """
    dividend = to_double(x)
    divisor = to_double(y)

    # math.fmod бросает ValueError на inf делимом и нулевом делителе
    if math.isnan(dividend) or math.isnan(divisor):
        return math.nan
    if math.isinf(dividend) or divisor == 0.0:
        return math.nan

    return math.fmod(dividend, divisor)


# =============================================================================
# ВОЗВЕДЕНИЕ В СТЕПЕНЬ
# =============================================================================


def power(x: SupportsFloat, y: SupportsFloat) -> float:
    """
    Возведение x в степень y по C99 Annex F без исключений.

    math.pow сигнализирует граничные случаи исключениями; здесь они
    отображаются обратно в значения:
    - OverflowError → ±inf (минус только для x < 0 и нечётного целого y)
    - ±0 ** отрицательное → +inf (или -inf для -0.0 и нечётного целого y)
    - отрицательное конечное x ** нецелое y → NaN

    Args:
        x: Основание
        y: Показатель степени

    Returns:
        x ** y как float

    Examples:
        >>> power(2, 7)
        128.0
        >>> power(0.0, -1)
        inf
        >>> power(-8, 1 / 3)
        nan
        >>> power(10, 400)
        inf
    """
    base = to_double(x)
    exponent = to_double(y)

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # Полюс: знак сохраняется только для нечётного целого показателя
            if is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
