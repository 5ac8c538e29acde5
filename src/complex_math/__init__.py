"""
complex-math — комплексные числа

Immutable тип Complex: арифметика, полярная форма, степени и корни,
решение квадратных уравнений.
"""

from complex_math.core.domain import (
    Complex,
    InvalidQuadraticCoefficientError,
    Quadrant,
    RootSequence,
    solve_quadratic,
    solve_quadratic_complex,
    solve_quadratic_real,
)
from complex_math.core.math import to_degrees, to_radians

__version__ = "1.0.0"

__all__ = [
    "Complex",
    "InvalidQuadraticCoefficientError",
    "Quadrant",
    "RootSequence",
    "solve_quadratic",
    "solve_quadratic_complex",
    "solve_quadratic_real",
    "to_degrees",
    "to_radians",
]
