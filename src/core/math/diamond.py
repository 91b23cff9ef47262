"""
Diamond Solver — sum-product задача для area model

Находит два числа, произведение которых равно a·c, а сумма равна b.
Числа являются корнями t² - bt + ac = 0:

    left  = (-b - sqrt(b² - 4ac)) / -2
    right = (-b + sqrt(b² - 4ac)) / -2

Так как sqrt >= 0, всегда left >= right.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. left + right == b
2. left * right == a * c
3. Целочисленность корней проверяется через epsilon (is_integral),
   конверсия в int только округлением
4. Отрицательный дискриминант или дробные корни → NonIntegerFactors
"""

import math
from typing import Final, NamedTuple

from src.core.math.errors import NonIntegerFactors
from src.core.math.numerical_safeguards import (
    EPS_INTEGRALITY,
    is_integral,
    nearest_int,
    validate_integer,
)

# =============================================================================
# DIAMOND EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность целочисленности корней по умолчанию
INTEGRALITY_TOL: Final[float] = EPS_INTEGRALITY


# =============================================================================
# TYPES
# =============================================================================


class FactorPair(NamedTuple):
    """Решение diamond problem: left + right == b, left * right == a·c."""

    left: int
    right: int

    @property
    def total(self) -> int:
        return self.left + self.right

    @property
    def product(self) -> int:
        return self.left * self.right


# =============================================================================
# DIAMOND
# =============================================================================


def discriminant(a: int, b: int, c: int) -> int:
    """b² - 4ac в точной целочисленной арифметике."""
    return b * b - 4 * a * c


def diamond(a: int, b: int, c: int, eps: float = INTEGRALITY_TOL) -> FactorPair:
    """
    Решение diamond problem для трёхчлена ax² + bx + c.

    Для приведённого трёхчлена (a == 1) произведение равно c, и пара
    сразу даёт линейные множители (x + left)(x + right). Для a != 1 пара
    заполняет углы box-сетки.

    Args:
        a: Коэффициент при x² (после сокращения на GCF)
        b: Коэффициент при x (целевая сумма)
        c: Свободный член
        eps: Толерантность целочисленности корней

    Returns:
        FactorPair(left, right), left >= right

    Raises:
        NonIntegerFactors: если дискриминант < 0 или корни не целые
        TypeError: если коэффициенты не целые

    Examples:
        >>> diamond(1, 5, 6)
        FactorPair(left=3, right=2)
        >>> diamond(2, 7, 3)
        FactorPair(left=6, right=1)
        >>> diamond(1, 1, 1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NonIntegerFactors: ...
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    validate_integer(c, "c")

    d = discriminant(a, b, c)
    if d < 0:
        raise NonIntegerFactors(
            f"Cannot solve diamond problem for a={a}, b={b}, c={c}: "
            f"discriminant {d} is negative"
        )

    root = math.sqrt(d)
    left = (-b - root) / -2
    right = (-b + root) / -2

    if not (is_integral(left, eps) and is_integral(right, eps)):
        raise NonIntegerFactors(
            f"Cannot solve diamond problem for a={a}, b={b}, c={c}: "
            f"solutions {left:.6g} and {right:.6g} are not integers"
        )

    return FactorPair(nearest_int(left), nearest_int(right))
