"""
Core math modules для complex-math

Численные примитивы над double с IEEE-754 семантикой и конверсия углов.
"""

# Numerical Safeguards
from complex_math.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-754 operations
    ieee_cos,
    ieee_divide,
    ieee_pow,
    ieee_sin,
    # Comparisons
    is_close,
    # Conversion
    to_ieee_float,
)

# Angles
from complex_math.core.math.angles import to_degrees, to_radians

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE-754 operations
    "ieee_cos",
    "ieee_divide",
    "ieee_pow",
    "ieee_sin",
    # Numerical Safeguards — Comparisons
    "is_close",
    # Numerical Safeguards — Conversion
    "to_ieee_float",
    # Angles
    "to_degrees",
    "to_radians",
]
