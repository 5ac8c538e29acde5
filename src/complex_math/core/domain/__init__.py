"""
Domain models and value objects.

Contains the Complex value type and the quadratic equation solver built on it.
"""

from complex_math.core.domain.complex_number import (
    HASH_MULTIPLIER,
    Complex,
    ComplexLike,
    Quadrant,
    RootSequence,
    as_complex,
)
from complex_math.core.domain.quadratic import (
    InvalidQuadraticCoefficientError,
    solve_quadratic,
    solve_quadratic_complex,
    solve_quadratic_real,
)

__all__ = [
    # Complex model
    "HASH_MULTIPLIER",
    "Complex",
    "ComplexLike",
    "Quadrant",
    "RootSequence",
    "as_complex",
    # Quadratic solver
    "InvalidQuadraticCoefficientError",
    "solve_quadratic",
    "solve_quadratic_complex",
    "solve_quadratic_real",
]
