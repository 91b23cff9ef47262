"""Factoring — движок факторизации квадратных выражений.

- Entry points factor / factor_ab / factor_ac / factor_abc
- Dispatcher factor_quadratic
- Box method с именованными правилами знаков
- Plain/LaTeX рендеринг
"""

from .box_method import (
    SIGN_RULES,
    BoxFactors,
    BoxGrid,
    Corner,
    PairSignRule,
    extract_factor,
    factor_grid,
)
from .engine import (
    FactoringConfig,
    Vertex,
    crosses_x_axis,
    factor,
    factor_ab,
    factor_abc,
    factor_ac,
    factor_quadratic,
    parabola_vertex,
)
from .rendering import FactoredResult, simplify_coefficient, to_latex

__all__ = [
    # Engine
    "FactoringConfig",
    "FactoredResult",
    "factor",
    "factor_ab",
    "factor_ac",
    "factor_abc",
    "factor_quadratic",
    "Vertex",
    "parabola_vertex",
    "crosses_x_axis",
    # Box method
    "BoxGrid",
    "BoxFactors",
    "Corner",
    "PairSignRule",
    "SIGN_RULES",
    "extract_factor",
    "factor_grid",
    # Rendering
    "simplify_coefficient",
    "to_latex",
]
