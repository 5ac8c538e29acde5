"""
Numerical Safeguards — IEEE-754 Float Primitives

Модуль обеспечивает IEEE-754 семантику для операций над double, где
стандартный Python поднимает исключение вместо NaN/Inf:
- Деление на ноль (`/` → ZeroDivisionError)
- Возведение в степень (`math.pow` → OverflowError / ValueError)
- Тригонометрия от бесконечности (`math.cos(inf)` → ValueError)

А также конверсия в double без OverflowError и epsilon-сравнения float
с учётом машинной точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не поднимает исключение на NaN/Inf входах
2. Результаты совпадают с IEEE-754 double (как pow/деление в C99)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, SupportsFloat

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close и Complex.is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Защищает сравнения около нуля, где относительная толерантность вырождается
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 КОНВЕРСИЯ
# =============================================================================


def to_ieee_float(value: SupportsFloat) -> float:
    """
    Конверсия числа в double с IEEE-754 переполнением.

    `float()` поднимает OverflowError для int и Fraction вне диапазона
    double; здесь такие значения становятся ±inf.

    Args:
        value: int, float, Decimal, Fraction или numpy скаляр

    Returns:
        Ближайший double, ±inf при переполнении

    Examples:
        >>> to_ieee_float(3)
        3.0
        >>> to_ieee_float(10**400)
        inf
        >>> to_ieee_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой для нулевого знаменателя.

    В отличие от оператора `/`, никогда не поднимает ZeroDivisionError:
    - x / 0 → ±inf (знак = знак x XOR знак нуля)
    - 0 / 0 → NaN
    - NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления по правилам IEEE-754

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# IEEE-754 СТЕПЕНЬ
# =============================================================================


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень с IEEE-754 семантикой (pow из C99).

    `math.pow` поднимает исключения там, где C возвращает специальные значения:
    - переполнение → ±inf
    - 0 ** (отрицательная степень) → inf
    - (отрицательное) ** (нецелая степень) → NaN

    Конвенции `0 ** 0 == 1` и `NaN ** 0 == 1` наследуются от math.pow.

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent по правилам IEEE-754

    Examples:
        >>> ieee_pow(2.0, 10.0)
        1024.0
        >>> ieee_pow(0.0, 0.0)
        1.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(1e200, 2.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # pow(-0, -odd) сохраняет знак нуля
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


# =============================================================================
# IEEE-754 ТРИГОНОМЕТРИЯ
# =============================================================================


def ieee_cos(value: float) -> float:
    """cos(x); NaN для ±inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def ieee_sin(value: float) -> float:
    """sin(x); NaN для ±inf вместо ValueError."""
    if math.isinf(value):
        return math.nan
    return math.sin(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
