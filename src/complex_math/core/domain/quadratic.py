"""
Quadratic — Решение квадратного уравнения ax² + bx + c = 0

Два варианта с одинаковым контрактом:
- solve_quadratic_real: действительные коэффициенты
- solve_quadratic_complex: комплексные коэффициенты
- solve_quadratic: точка входа, выбирает вариант по типам коэффициентов

Вариант с действительными коэффициентами использует sqrt(|delta|) без
ветвления по знаку дискриминанта: при delta > 0 мнимая часть решений
ненулевая.
"""

import logging
import math
from typing import Any, List

from complex_math.core.domain.complex_number import Complex, ComplexLike, as_complex
from complex_math.core.math.numerical_safeguards import ieee_divide, to_ieee_float

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidQuadraticCoefficientError(ValueError):
    """
    Квадратичный коэффициент равен нулю: уравнение не является квадратным.

    Поднимается обоими вариантами решателя и не перехватывается библиотекой.
    """

    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(
            f"The quadratic coefficient must be different from zero "
            f"({parameter}={value})."
        )


# =============================================================================
# РЕШАТЕЛИ
# =============================================================================


def solve_quadratic_real(a: float, b: float, c: float) -> List[Complex]:
    """
    Решение квадратного уравнения с действительными коэффициентами.

    Формулы:
        delta = b² − 4ac
        real = −b / (2a)
        imaginary = sqrt(|delta|) / (2a)

    Args:
        a: Квадратичный коэффициент (≠ 0)
        b: Линейный коэффициент
        c: Свободный член

    Returns:
        [Complex(real, imaginary), Complex(real, −imaginary)]

    Raises:
        InvalidQuadraticCoefficientError: Если a == 0

    Examples:
        >>> solve_quadratic_real(1, -4, 13)
        [Complex(real=2.0, imaginary=3.0), Complex(real=2.0, imaginary=-3.0)]
    """
    if a == 0:
        logger.debug("Rejected real quadratic coefficient a=%r", a)
        raise InvalidQuadraticCoefficientError("a", a)

    a, b, c = to_ieee_float(a), to_ieee_float(b), to_ieee_float(c)

    delta = b * b - 4 * a * c

    real = ieee_divide(-b, 2 * a)
    imaginary = ieee_divide(math.sqrt(abs(delta)), 2 * a)

    return [Complex(real, imaginary), Complex(real, -imaginary)]


def solve_quadratic_complex(a: ComplexLike, b: ComplexLike, c: ComplexLike) -> List[Complex]:
    """
    Решение квадратного уравнения с комплексными коэффициентами.

    Формулы:
        delta = b² − 4ac
        delta_sqrt = главный квадратный корень delta
        x = (−b ± delta_sqrt) / 2a

    Args:
        a: Квадратичный коэффициент (≠ 0)
        b: Линейный коэффициент
        c: Свободный член

    Returns:
        [(−b + delta_sqrt) / 2a, (−b − delta_sqrt) / 2a]

    Raises:
        InvalidQuadraticCoefficientError: Если a == 0
    """
    a, b, c = as_complex(a), as_complex(b), as_complex(c)

    if a.equals(0):
        logger.debug("Rejected complex quadratic coefficient a=%s", a)
        raise InvalidQuadraticCoefficientError("a", a)

    ac = a * c
    delta = b.power(2) - Complex(4 * ac.real, 4 * ac.imaginary)

    delta_sqrt = delta.first_root(2)
    denominator = Complex(a.real * 2, a.imaginary * 2)

    return [(-b + delta_sqrt) / denominator, (-b - delta_sqrt) / denominator]


def solve_quadratic(a: ComplexLike, b: ComplexLike, c: ComplexLike) -> List[Complex]:
    """
    Решение ax² + bx + c = 0.

    Если хотя бы один коэффициент является Complex (или встроенным complex),
    используется solve_quadratic_complex, иначе solve_quadratic_real.

    Raises:
        InvalidQuadraticCoefficientError: Если a == 0
    """
    if any(isinstance(coefficient, (Complex, complex)) for coefficient in (a, b, c)):
        logger.debug("Solving quadratic with complex coefficients")
        return solve_quadratic_complex(a, b, c)

    logger.debug("Solving quadratic with real coefficients")
    return solve_quadratic_real(a, b, c)
