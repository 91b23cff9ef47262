"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость проверок, которые движок факторизации
выполняет над float-значениями:
- NaN/Inf валидация (sqrt от отрицательного дискриминанта, переполнения)
- Epsilon-сравнения float с учётом машинной точности
- Epsilon-проверка целочисленности (вместо строковых проверок вида "ends with .0")
- Валидация целочисленных коэффициентов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целочисленность float проверяется только через abs(x - round(x)) < eps
2. Конверсия float → int выполняется округлением, никогда не усечением
3. NaN/Inf никогда не считаются целыми числами
4. Все операции детерминированы и воспроизводимы
"""

import math
from numbers import Integral
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для проверки целочисленности корней и квадратных корней
# Коэффициенты вводятся человеком и малы, поэтому 1e-9 с запасом покрывает
# погрешность math.sqrt
EPS_INTEGRALITY: Final[float] = 1e-9

# Epsilon для знака значения параболы в вершине
# y_v = 0 означает касание оси (двойной корень) и допустимо
EPS_VERTEX: Final[float] = 1e-9

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


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

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_zero(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """True если abs(value) <= tol."""
    return abs(value) <= tol


def is_positive(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, является ли значение положительным с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если value > tol
    """
    return value > tol


def is_negative(value: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> bool:
    """
    Проверка, является ли значение отрицательным с учётом толерантности.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        True если value < -tol
    """
    return value < -tol


# =============================================================================
# ЦЕЛОЧИСЛЕННОСТЬ
# =============================================================================


def is_integral(value: float, eps: float = EPS_INTEGRALITY) -> bool:
    """
    Epsilon-проверка, что float представляет целое число.

    Заменяет ненадёжную проверку текстового представления float
    (например, суффикса ".0").

    Алгоритм:
        abs(value - round(value)) < eps

    Args:
        value: Проверяемое значение
        eps: Толерантность (default: EPS_INTEGRALITY)

    Returns:
        True если value в пределах eps от ближайшего целого.
        NaN/Inf никогда не считаются целыми.

    Examples:
        >>> is_integral(3.0)
        True
        >>> is_integral(2.9999999999999996)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float('nan'))
        False
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if not is_valid_float(value):
        return False

    return abs(value - round(value)) < eps


def nearest_int(value: float) -> int:
    """
    Конверсия float → int округлением (не усечением).

    int(2.9999999999999996) == 2, а nearest_int(2.9999999999999996) == 3.

    Raises:
        ValueError: Если value содержит NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"Cannot convert NaN/Inf to int: {value}")

    return int(round(value))


def validate_integer(value: object, name: str) -> None:
    """
    Валидация, что значение является целым числом (bool не допускается).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не целое число
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}: {value!r}")
