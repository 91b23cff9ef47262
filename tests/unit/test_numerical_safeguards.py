"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf валидацию
2. Epsilon-сравнения float
3. Epsilon-проверку целочисленности и округление
4. Валидацию целочисленных коэффициентов
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_INTEGRALITY,
    is_close,
    is_integral,
    is_negative,
    is_positive,
    is_valid_float,
    is_zero,
    nearest_int,
    validate_integer,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e300)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestEpsilonComparisons:
    """Тесты для is_close / is_zero / is_positive / is_negative"""

    def test_is_close_within_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.1)

    def test_is_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(EPS_FLOAT_COMPARE_ABS / 2)
        assert not is_zero(1e-6)

    def test_is_positive_respects_tolerance(self) -> None:
        """Значения в пределах tol не считаются положительными"""
        assert is_positive(1.0)
        assert not is_positive(1e-13)
        assert not is_positive(1e-7, tol=1e-6)

    def test_is_negative_respects_tolerance(self) -> None:
        assert is_negative(-1.0)
        assert not is_negative(-1e-13)
        assert not is_negative(0.0)


# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННОСТИ
# =============================================================================


class TestIsIntegral:
    """Тесты для is_integral"""

    def test_exact_integers(self) -> None:
        assert is_integral(0.0)
        assert is_integral(3.0)
        assert is_integral(-7.0)

    def test_float_noise_accepted(self) -> None:
        """Погрешность вычислений в пределах eps допустима"""
        assert is_integral(2.9999999999999996)
        assert is_integral(3.0000000000000004)
        assert is_integral(math.sqrt(49))

    def test_fractional_rejected(self) -> None:
        assert not is_integral(2.5)
        assert not is_integral(math.sqrt(2))
        assert not is_integral(-0.5)

    def test_nan_inf_never_integral(self) -> None:
        assert not is_integral(float("nan"))
        assert not is_integral(float("inf"))

    def test_custom_eps(self) -> None:
        assert is_integral(3.001, eps=1e-2)
        assert not is_integral(3.001, eps=EPS_INTEGRALITY)

    def test_invalid_eps_raises(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            is_integral(1.0, eps=0.0)


class TestNearestInt:
    """Тесты для nearest_int: округление, не усечение"""

    def test_rounds_instead_of_truncating(self) -> None:
        assert int(2.9999999999999996) == 2
        assert nearest_int(2.9999999999999996) == 3
        assert nearest_int(-2.9999999999999996) == -3

    def test_returns_int(self) -> None:
        assert isinstance(nearest_int(4.0), int)

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            nearest_int(float("nan"))


class TestValidateInteger:
    """Тесты для validate_integer"""

    def test_integers_pass(self) -> None:
        validate_integer(0, "a")
        validate_integer(-12, "b")

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="a must be an integer"):
            validate_integer(2.0, "a")

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="c must be an integer"):
            validate_integer(True, "c")
