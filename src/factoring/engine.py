"""Factoring Engine — факторизация целочисленного ax² + bx + c.

Entry points по набору ненулевых коэффициентов:
- factor(a)            — ax²
- factor_ab(a, b)      — ax² + bx, вынос GCF и x
- factor_ac(a, c)      — ax² + c, difference of squares
- factor_abc(a, b, c)  — общий трёхчлен: diamond method (a == 1 после GCF)
                         или box method (a != 1)
- factor_quadratic     — dispatcher по форме выражения

Каждый вызов — чистое однопроходное вычисление без разделяемого состояния.
Результат — FactoredResult(plain, latex) или типизированный отказ
(FactoringError); частичные строки никогда не возвращаются.

Порядок проверок factor_abc:
1. Вершина параболы (NoRealRoots)
2. Сокращение на GCF(a, b, c), нормализация знака a
3. Diamond (a == 1) или box (a != 1) — NonIntegerFactors
"""

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

from src.core.domain.coefficients import CoefficientTriple
from src.core.math.errors import NoRealRoots, NotDifferenceOfSquares, NotPerfectSquare
from src.core.math.diamond import diamond
from src.core.math.hcf import hcf, hcf_many
from src.core.math.numerical_safeguards import (
    EPS_INTEGRALITY,
    EPS_VERTEX,
    is_integral,
    is_negative,
    is_positive,
    nearest_int,
    validate_integer,
)
from src.factoring.box_method import BoxGrid, factor_grid
from src.factoring.rendering import (
    FactoredResult,
    gcf_prefix,
    linear_factor,
    make_result,
    negative_prefix,
    simplify_coefficient,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FactoringConfig:
    """Конфигурация движка факторизации.

    Толерантности float-проверок; коэффициенты малы и вводятся человеком,
    значения по умолчанию подходят для любых практических входов.
    """

    integrality_tol: float = EPS_INTEGRALITY  # корни diamond и sqrt в factor_ac
    vertex_tol: float = EPS_VERTEX  # |y_v| <= tol считается касанием оси


_DEFAULT_CONFIG = FactoringConfig()


# =============================================================================
# VERTEX
# =============================================================================


class Vertex(NamedTuple):
    """Вершина параболы y = ax² + bx + c."""

    x: float
    y: float


def parabola_vertex(a: int, b: int, c: int) -> Vertex:
    """x_v = -b / (2a), y_v = a·x_v² + b·x_v + c."""
    x = -b / (2.0 * a)
    y = a * x**2 + b * x + c
    return Vertex(x, y)


def crosses_x_axis(a: int, b: int, c: int, tol: float = EPS_VERTEX) -> bool:
    """Парабола пересекает или касается оси x.

    Ветви вверх (a > 0) — вершина не выше оси; ветви вниз — не ниже.
    """
    y = parabola_vertex(a, b, c).y
    if a > 0:
        return not is_positive(y, tol)
    return not is_negative(y, tol)


# =============================================================================
# ENTRY POINTS
# =============================================================================


def factor(a: int) -> FactoredResult:
    """
    Факторизованная форма ax².

    Examples:
        >>> factor(1).plain
        'x^2'
        >>> factor(-3).plain
        '-3x^2'
    """
    validate_integer(a, "a")
    return make_result(f"{simplify_coefficient(a)}x^2")


def factor_ab(a: int, b: int) -> FactoredResult:
    """
    Факторизованная форма ax² + bx: [-][g]x([a]x ± |b|).

    x всегда общий множитель при c = 0, поэтому отказов нет.

    Args:
        a: Коэффициент при x² (не равен 0)
        b: Коэффициент при x

    Returns:
        FactoredResult

    Examples:
        >>> factor_ab(2, 4).plain
        '2x(x + 2)'
        >>> factor_ab(-3, 6).plain
        '-3x(x - 2)'
    """
    validate_integer(a, "a")
    validate_integer(b, "b")

    negative = a < 0
    if negative:
        a, b = -a, -b

    gcf = hcf(a, b)
    a //= gcf
    b //= gcf

    logger.debug("factor_ab: gcf=%d reduced=(%d, %d) negative=%s", gcf, a, b, negative)

    plain = f"{negative_prefix(negative)}{gcf_prefix(gcf)}x{linear_factor(a, b)}"
    return make_result(plain)


def factor_ac(
    a: int, c: int, config: FactoringConfig | None = None
) -> FactoredResult:
    """
    Факторизованная форма ax² + c как difference of squares.

    Рендеринг использует литерал c (отрицательный после нормализации),
    а не |c|: factor_ac(1, -9) → "(x + -9)(x - -9)".

    Args:
        a: Коэффициент при x² (не равен 0)
        c: Свободный член
        config: Конфигурация толерантностей (optional)

    Returns:
        FactoredResult

    Raises:
        NotPerfectSquare: если |a| или |c| не полный квадрат
        NotDifferenceOfSquares: если выражение является суммой квадратов
    """
    validate_integer(a, "a")
    validate_integer(c, "c")
    config = config or _DEFAULT_CONFIG

    negative = a < 0
    if a < 0 and c >= 0:
        a, c = -a, -c

    root_a = math.sqrt(abs(a))
    root_c = math.sqrt(abs(c))
    tol = config.integrality_tol

    if not (is_integral(root_a, tol) and is_integral(root_c, tol)):
        raise NotPerfectSquare(
            f"Unable to factor {a}x^2 + {c}: difference of squares contains decimals "
            f"(sqrt|a|={root_a:.6g}, sqrt|c|={root_c:.6g})"
        )

    if c > 0 or a < 0:
        raise NotDifferenceOfSquares(
            f"Unable to factor {a}x^2 + {c}: an addition of squares was provided, "
            f"not a difference of squares"
        )

    coef = simplify_coefficient(nearest_int(root_a))

    logger.debug("factor_ac: sqrt(a)=%s c=%d negative=%s", coef or "1", c, negative)

    plain = f"{negative_prefix(negative)}({coef}x + {c})({coef}x - {c})"
    return make_result(plain)


def factor_abc(
    a: int, b: int, c: int, config: FactoringConfig | None = None
) -> FactoredResult:
    """
    Факторизованная форма общего трёхчлена ax² + bx + c.

    После сокращения на GCF(a, b, c) и нормализации знака:
    - a == 1: diamond method, (x ± m)(x ± n), меньшая константа первой
    - a != 1: box method, (r·x ± s)(p·x ± q)

    Вынесенный GCF печатается перед множителями, если он больше 1.

    Args:
        a: Коэффициент при x² (не равен 0)
        b: Коэффициент при x
        c: Свободный член
        config: Конфигурация толерантностей (optional)

    Returns:
        FactoredResult

    Raises:
        NoRealRoots: если парабола не пересекает ось x
        NonIntegerFactors: если трёхчлен не раскладывается в целых

    Examples:
        >>> factor_abc(1, 5, 6).plain
        '(x + 2)(x + 3)'
        >>> factor_abc(2, 7, 3).plain
        '(2x + 1)(x + 3)'
    """
    validate_integer(a, "a")
    validate_integer(b, "b")
    validate_integer(c, "c")
    config = config or _DEFAULT_CONFIG

    if not crosses_x_axis(a, b, c, config.vertex_tol):
        raise NoRealRoots(
            f"Unable to factor {a}x^2 + {b}x + {c}: it does not intersect the x-axis "
            f"(vertex at {parabola_vertex(a, b, c)})"
        )

    gcf = hcf_many(a, b, c)
    a, b, c = a // gcf, b // gcf, c // gcf

    negative = a < 0
    if negative:
        a, b, c = -a, -b, -c

    prefix = f"{negative_prefix(negative)}{gcf_prefix(gcf)}"

    if a == 1:
        pair = diamond(a, b, c, config.integrality_tol)
        low, high = sorted(pair)

        logger.debug(
            "factor_abc: diamond method gcf=%d pair=%s negative=%s", gcf, pair, negative
        )

        return make_result(f"{prefix}{linear_factor(1, low)}{linear_factor(1, high)}")

    grid = BoxGrid.from_trinomial(a, b, c, config.integrality_tol)
    factors = factor_grid(grid)

    logger.debug(
        "factor_abc: box method gcf=%d grid=%s factors=%s negative=%s",
        gcf, grid, factors, negative,
    )

    plain = (
        prefix
        + linear_factor(factors.column_left, factors.column_right)
        + linear_factor(factors.row_top, factors.row_bottom)
    )
    return make_result(plain)


# =============================================================================
# DISPATCHER
# =============================================================================


def factor_quadratic(
    a: int, b: int = 0, c: int = 0, config: FactoringConfig | None = None
) -> FactoredResult:
    """
    Факторизация ax² + bx + c с выбором entry point по форме выражения.

    Raises:
        pydantic.ValidationError: если a == 0 или коэффициенты не целые
        FactoringError: отказ выбранного entry point
    """
    triple = CoefficientTriple(a=a, b=b, c=c)

    if triple.is_monomial:
        logger.debug("factor_quadratic: %s -> factor", triple.as_tuple())
        return factor(triple.a)
    if triple.is_binomial_ab:
        logger.debug("factor_quadratic: %s -> factor_ab", triple.as_tuple())
        return factor_ab(triple.a, triple.b)
    if triple.is_binomial_ac:
        logger.debug("factor_quadratic: %s -> factor_ac", triple.as_tuple())
        return factor_ac(triple.a, triple.c, config)

    logger.debug("factor_quadratic: %s -> factor_abc", triple.as_tuple())
    return factor_abc(triple.a, triple.b, triple.c, config)
