"""
Тесты для решателя квадратных уравнений

Проверяемые инварианты:
1. a == 0 → InvalidQuadraticCoefficientError (оба варианта)
2. Действительный вариант: буквальная формула sqrt(|delta|)
3. Комплексный вариант: решения удовлетворяют уравнению
4. Выбор варианта по типам коэффициентов
"""

import logging
from decimal import Decimal

import pytest

from complex_math.core.domain import (
    Complex,
    InvalidQuadraticCoefficientError,
    solve_quadratic,
    solve_quadratic_complex,
    solve_quadratic_real,
)


def _by_imaginary(solutions):
    return sorted(solutions, key=lambda value: value.imaginary)


def _evaluate(a: Complex, b: Complex, c: Complex, z: Complex) -> Complex:
    return a * z * z + b * z + c


# =============================================================================
# ТЕСТЫ: Действительные коэффициенты
# =============================================================================


class TestSolveQuadraticReal:
    """Тесты solve_quadratic_real"""

    def test_negative_discriminant(self) -> None:
        """delta = 16 - 52 = -36"""
        assert solve_quadratic_real(1, -4, 13) == [Complex(2, 3), Complex(2, -3)]

    def test_negative_discriminant_second_case(self) -> None:
        """delta = 64 - 80 = -16"""
        assert solve_quadratic_real(1, -8, 20) == [Complex(4, 2), Complex(4, -2)]

    def test_positive_discriminant_uses_absolute_delta(self) -> None:
        """delta = 9 - 8 = 1: мнимая часть sqrt(|delta|)/(2a), а не действительное смещение"""
        assert solve_quadratic_real(1, -3, 2) == [Complex(1.5, 0.5), Complex(1.5, -0.5)]

    def test_zero_discriminant(self) -> None:
        assert solve_quadratic_real(1, -2, 1) == [Complex(1, 0), Complex(1, 0)]

    def test_negative_leading_coefficient(self) -> None:
        assert solve_quadratic_real(-1, 0, 4) == [Complex(0, -2), Complex(0, 2)]

    def test_solutions_are_conjugates(self) -> None:
        first, second = solve_quadratic_real(2, 3, 5)
        assert second == first.conjugate()

    def test_zero_coefficient_raises(self) -> None:
        with pytest.raises(InvalidQuadraticCoefficientError, match="must be different from zero"):
            solve_quadratic_real(0, 1, 1)

        with pytest.raises(InvalidQuadraticCoefficientError):
            solve_quadratic_real(0.0, -4, 13)

        with pytest.raises(InvalidQuadraticCoefficientError):
            solve_quadratic_real(Decimal("0"), 1, 1)

    def test_error_is_value_error_with_parameter(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            solve_quadratic_real(0, 1, 1)

        assert isinstance(exc_info.value, InvalidQuadraticCoefficientError)
        assert exc_info.value.parameter == "a"
        assert exc_info.value.value == 0


# =============================================================================
# ТЕСТЫ: Комплексные коэффициенты
# =============================================================================


class TestSolveQuadraticComplex:
    """Тесты solve_quadratic_complex"""

    def test_real_valued_coefficients(self) -> None:
        solutions = _by_imaginary(solve_quadratic_complex(Complex(1, 0), Complex(-4, 0), Complex(13, 0)))

        assert solutions[0].is_close(Complex(2, -3), abs_tol=1e-9)
        assert solutions[1].is_close(Complex(2, 3), abs_tol=1e-9)

    def test_complex_coefficients(self) -> None:
        """(z - (1+i))(z - (2-i)) = z² - 3z + (3+i)"""
        solutions = _by_imaginary(solve_quadratic_complex(Complex(1, 0), Complex(-3, 0), Complex(3, 1)))

        assert solutions[0].is_close(Complex(2, -1), abs_tol=1e-9)
        assert solutions[1].is_close(Complex(1, 1), abs_tol=1e-9)

    def test_solutions_satisfy_equation(self) -> None:
        a = Complex(2, -1)
        b = Complex(-1, 3)
        c = Complex(4, 0.5)

        for z in solve_quadratic_complex(a, b, c):
            assert _evaluate(a, b, c, z).is_close(Complex(0, 0), abs_tol=1e-9)

    def test_returns_two_solutions(self) -> None:
        assert len(solve_quadratic_complex(Complex(1, 1), Complex(0, 0), Complex(-1, 0))) == 2

    def test_scalar_coefficients_are_widened(self) -> None:
        solutions = _by_imaginary(solve_quadratic_complex(1, -4, 13))
        assert solutions[1].is_close(Complex(2, 3), abs_tol=1e-9)

    def test_zero_coefficient_raises(self) -> None:
        with pytest.raises(InvalidQuadraticCoefficientError, match="must be different from zero"):
            solve_quadratic_complex(Complex(0, 0), Complex(1, 0), Complex(1, 0))

        with pytest.raises(InvalidQuadraticCoefficientError):
            solve_quadratic_complex(Complex(-0.0, 0), Complex(1, 0), Complex(1, 0))

    def test_nonzero_imaginary_leading_coefficient_accepted(self) -> None:
        solutions = solve_quadratic_complex(Complex(0, 1), Complex(0, 0), Complex(1, 0))
        assert len(solutions) == 2


# =============================================================================
# ТЕСТЫ: Точка входа
# =============================================================================


class TestSolveQuadratic:
    """Тесты выбора варианта решателя"""

    def test_real_dispatch(self) -> None:
        assert solve_quadratic(1, -4, 13) == [Complex(2, 3), Complex(2, -3)]

    def test_real_dispatch_keeps_literal_formula(self) -> None:
        assert solve_quadratic(1, -3, 2) == [Complex(1.5, 0.5), Complex(1.5, -0.5)]

    def test_complex_dispatch_when_any_coefficient_is_complex(self) -> None:
        solutions = _by_imaginary(solve_quadratic(1, -3, Complex(3, 1)))

        assert solutions[0].is_close(Complex(2, -1), abs_tol=1e-9)
        assert solutions[1].is_close(Complex(1, 1), abs_tol=1e-9)

    def test_builtin_complex_dispatch(self) -> None:
        solutions = _by_imaginary(solve_quadratic(1, -3, 3 + 1j))
        assert solutions[1].is_close(Complex(1, 1), abs_tol=1e-9)

    def test_static_method_delegates(self) -> None:
        assert Complex.solve_quadratic(1, -8, 20) == [Complex(4, 2), Complex(4, -2)]

    def test_zero_coefficient_raises_for_both_variants(self) -> None:
        with pytest.raises(InvalidQuadraticCoefficientError):
            solve_quadratic(0, 1, 1)

        with pytest.raises(InvalidQuadraticCoefficientError):
            solve_quadratic(Complex(0, 0), Complex(1, 0), Complex(1, 0))

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="complex_math.core.domain.quadratic"):
            with pytest.raises(InvalidQuadraticCoefficientError):
                solve_quadratic(0, 1, 1)

        assert "Rejected real quadratic coefficient" in caplog.text
