"""
Complex — Модель комплексного числа

Immutable Pydantic модель комплексного числа a + bi:
- Алгебраическая форма (real, imaginary) хранится
- Полярная форма (modulus, argument) вычисляется по запросу, без кэша
- Арифметика через именованные методы и операторы Python
- Степени и корни через полярную форму

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляр никогда не изменяется (frozen=True), каждая операция создаёт новый
2. Равенство точное по обеим компонентам, без epsilon (NaN != NaN);
   равные значения (включая действительные скаляры) имеют равный hash
3. Деление на ноль и степени нуля дают NaN/Inf, а не исключение
4. Скаляры (int, float, Decimal, Fraction, numpy) расширяются до Complex(n, 0)
"""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Final, Iterator, List, Optional, Union

from pydantic import BaseModel, Field

from complex_math.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_cos,
    ieee_divide,
    ieee_pow,
    ieee_sin,
    is_close,
    to_ieee_float,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Множитель для комбинирования hash компонент (порядок важен)
HASH_MULTIPLIER: Final[int] = 397


# =============================================================================
# ТИПЫ
# =============================================================================


class Quadrant(IntEnum):
    """
    Квадрант комплексной плоскости.

    Граничные случаи:
    - Положительные полуоси (real ≥ 0, imaginary ≥ 0) → FIRST
    - Отрицательная действительная полуось (imaginary ≥ 0) → SECOND
    - Точки с imaginary < 0 и real ≥ 0 → FOURTH
    """

    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4


ComplexLike = Union["Complex", numbers.Real, Decimal, complex]


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число real + imaginary·i.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.

    Examples:
        >>> Complex(4, 3) * Complex(6, 7)
        Complex(real=3.0, imaginary=46.0)
        >>> str(Complex(4, -5))
        '4-5i'
        >>> Complex(3, 4).modulus
        5.0
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    def __init__(self, real: float, imaginary: float = 0.0) -> None:
        super().__init__(real=real, imaginary=imaginary)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_polar(cls, modulus: float, argument: float) -> "Complex":
        """
        Создание комплексного числа из полярных координат.

        Отрицательный modulus отражает точку через начало координат;
        argument не ограничен (периодичность sin/cos).

        Args:
            modulus: Расстояние от начала координат
            argument: Угол от положительной действительной оси (радианы)

        Returns:
            Complex(modulus·cos(argument), modulus·sin(argument))
        """
        return cls(modulus * ieee_cos(argument), modulus * ieee_sin(argument))

    @classmethod
    def from_scalar(cls, value: Union[numbers.Real, Decimal]) -> "Complex":
        """
        Расширение действительного скаляра до комплексного числа.

        Поддерживает int любой разрядности, float, Decimal, Fraction
        и numpy скаляры, все через один конструктор от double. Значения
        вне диапазона double становятся ±inf.

        Returns:
            Complex(to_ieee_float(value), 0)
        """
        return cls(to_ieee_float(value), 0.0)

    @classmethod
    def from_builtin(cls, value: complex) -> "Complex":
        """Конверсия из встроенного complex Python."""
        return cls(value.real, value.imag)

    # -------------------------------------------------------------------------
    # Производные свойства (вычисляются по запросу)
    # -------------------------------------------------------------------------

    @property
    def modulus(self) -> float:
        """Модуль: sqrt(real² + imaginary²), всегда ≥ 0 (или NaN)."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    @property
    def argument(self) -> float:
        """Аргумент: atan2(imaginary, real) в диапазоне (−π, π]."""
        return math.atan2(self.imaginary, self.real)

    @property
    def quadrant(self) -> Quadrant:
        """Квадрант комплексной плоскости (1–4)."""
        if self.real >= 0 and self.imaginary >= 0:
            return Quadrant.FIRST
        if self.real < 0 and self.imaginary >= 0:
            return Quadrant.SECOND
        if self.real < 0 and self.imaginary < 0:
            return Quadrant.THIRD
        return Quadrant.FOURTH

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def conjugate(self) -> "Complex":
        """Сопряжённое число: (real, −imaginary)."""
        return Complex(self.real, -self.imaginary)

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def add(self, other: ComplexLike) -> "Complex":
        other = as_complex(other)
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: ComplexLike) -> "Complex":
        other = as_complex(other)
        return Complex(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: ComplexLike) -> "Complex":
        other = as_complex(other)
        real = (self.real * other.real) - (self.imaginary * other.imaginary)
        imaginary = (self.real * other.imaginary) + (self.imaginary * other.real)
        return Complex(real, imaginary)

    def divide(self, other: ComplexLike) -> "Complex":
        """
        Деление через сопряжённое: (a · conj(b)) / |b|².

        Делитель с нулевым модулем даёт NaN/±Inf компоненты (IEEE-754),
        исключение не поднимается.
        """
        other = as_complex(other)
        numerator = self.multiply(other.conjugate())
        denominator = other.real * other.real + other.imaginary * other.imaginary
        return Complex(
            ieee_divide(numerator.real, denominator),
            ieee_divide(numerator.imaginary, denominator),
        )

    # -------------------------------------------------------------------------
    # Степени и корни
    # -------------------------------------------------------------------------

    def power(self, power: float) -> "Complex":
        """
        Возведение в действительную степень через полярную форму.

        Формула: from_polar(modulus ** power, argument · power)

        Args:
            power: Показатель степени

        Returns:
            Комплексное число в степени power
        """
        return Complex.from_polar(ieee_pow(self.modulus, power), self.argument * power)

    def all_roots(self, root: float) -> "RootSequence":
        """
        Все корни степени root.

        Последовательность ленивая и перезапускаемая: каждая итерация
        вычисляет корни заново.

        Args:
            root: Степень корня (ожидается положительное целое)

        Returns:
            RootSequence — корни в порядке возрастания угла
        """
        return RootSequence(value=self, root=root)

    def first_root(self, root: float) -> "Complex":
        """
        Главный корень (первый элемент all_roots).

        Raises:
            ValueError: Если последовательность корней пуста (root ≤ 0 или NaN)
        """
        for value in self.all_roots(root):
            return value
        raise ValueError(f"Root sequence is empty for root={root}")

    # -------------------------------------------------------------------------
    # Квадратные уравнения
    # -------------------------------------------------------------------------

    @staticmethod
    def solve_quadratic(a: ComplexLike, b: ComplexLike, c: ComplexLike) -> List["Complex"]:
        """Решение ax² + bx + c = 0 (см. complex_math.core.domain.quadratic)."""
        from complex_math.core.domain.quadratic import solve_quadratic

        return solve_quadratic(a, b, c)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def equals(self, other: object) -> bool:
        """
        Точное равенство обеих компонент.

        Действительный скаляр равен Complex(n, 0); прочие типы не равны.
        """
        return bool(self._compare(other))

    def is_close(
        self,
        other: ComplexLike,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение с толерантностью по каждой компоненте.

        Args:
            other: Сравниваемое значение
            rel_tol: Относительная толерантность (default: 1e-9)
            abs_tol: Абсолютная толерантность (default: 1e-12)

        Returns:
            True если обе компоненты близки
        """
        other = as_complex(other)
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Строковое представление в алгебраической форме.

        Examples:
            >>> Complex(1, 2).to_string()
            '1+2i'
            >>> Complex(0, 3).to_string()
            '3i'
            >>> Complex(4, 0).to_string()
            '4'
            >>> Complex(-6, -7).to_string()
            '-6-7i'
        """
        if self.imaginary == 0:
            return _format_component(self.real)
        if self.real == 0:
            return f"{_format_component(self.imaginary)}i"
        sign = "+" if self.imaginary > 0 else ""
        return f"{_format_component(self.real)}{sign}{_format_component(self.imaginary)}i"

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def _compare(self, other: object) -> Optional[bool]:
        if isinstance(other, Complex):
            return self.real == other.real and self.imaginary == other.imaginary
        # Скаляр сравнивается в своём типе: Decimal("0.1") != 0.1, как и в Python
        if isinstance(other, (numbers.Real, Decimal)):
            return bool(self.imaginary == 0 and self.real == other)
        return None

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        if result is None:
            return NotImplemented
        return result

    def __hash__(self) -> int:
        """
        hash(imaginary) · 397 XOR hash(real), приведённый к диапазону hash.

        При imaginary == 0 совпадает с hash(real), поэтому равные
        действительные скаляры (int, Fraction, Decimal) имеют тот же hash.
        """
        return hash((hash(self.imaginary) * HASH_MULTIPLIER) ^ hash(self.real))

    def __str__(self) -> str:
        return self.to_string()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __abs__(self) -> float:
        return self.modulus

    def __neg__(self) -> "Complex":
        return self.negate()

    def __add__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: ComplexLike) -> "Complex":
        other = _widen(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __pow__(self, power: float) -> "Complex":
        if not isinstance(power, (numbers.Real, Decimal)):
            return NotImplemented
        return self.power(to_ieee_float(power))


# =============================================================================
# ROOT SEQUENCE
# =============================================================================


@dataclass(frozen=True)
class RootSequence:
    """
    Ленивая последовательность корней степени root.

    Корень i (i = 0, 1, ... пока i < root):
        from_polar(modulus ** (1/root), argument/root + i · 2π/root)

    Каждый вызов iter() начинает вычисление заново, общего курсора нет.
    """

    value: Complex
    root: float

    def __iter__(self) -> Iterator[Complex]:
        modulus = ieee_pow(self.value.modulus, ieee_divide(1.0, self.root))
        argument = ieee_divide(self.value.argument, self.root)
        step = ieee_divide(2 * math.pi, self.root)

        i = 0
        while i < self.root:
            yield Complex.from_polar(modulus, argument + step * i)
            i += 1


# =============================================================================
# HELPERS
# =============================================================================


def _widen(value: object) -> Optional[Complex]:
    """Расширение операнда до Complex; None для нечисловых типов."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, (numbers.Real, Decimal)):
        return Complex.from_scalar(value)
    if isinstance(value, complex):
        return Complex.from_builtin(value)
    return None


def as_complex(value: object) -> Complex:
    """
    Приведение значения к Complex (неявное расширение скаляров).

    Raises:
        TypeError: Если значение не является числом
    """
    widened = _widen(value)
    if widened is None:
        raise TypeError(f"Unsupported operand type for Complex: {type(value).__name__}")
    return widened


def _format_component(value: float) -> str:
    # Кратчайшее round-trip представление, целые без ".0"
    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text
