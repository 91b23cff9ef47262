"""Box Method — факторизация трёхчлена с a != 1 через area model 2×2.

Сетка для ax² + bx + c, где (left, right) — решение diamond problem:

    +-------------+----------------+
    | top_left=a  | top_right=right|
    +-------------+----------------+
    | bottom_left | bottom_right=c |
    |   =left     |                |
    +-------------+----------------+

Если трёхчлен равен (r·x + s)(p·x + q), то углы раскладываются как
top_left = r·p, top_right = s·p, bottom_left = r·q, bottom_right = s·q.
Отсюда:
- HCF столбцов даёт первый множитель (r·x + s)
- HCF строк (после деления на множители столбцов) даёт второй (p·x + q)

Знаки. HCF всегда неотрицателен, поэтому знак каждого извлечённого множителя
восстанавливается по именованному правилу пары углов: множитель берёт знак
anchor-угла пары (угла, делящего строку или столбец с top_left).
Для нормализованной сетки top_left > 0, поэтому r > 0 и p > 0.

Сетка должна быть построена из трёхчлена без общего множителя (GCF = 1)
и с a > 0; движок обеспечивает это до вызова.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.math.diamond import INTEGRALITY_TOL, diamond
from src.core.math.hcf import hcf


# =============================================================================
# CORNERS & SIGN RULES
# =============================================================================


class Corner(str, Enum):
    """Угол box-сетки."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class PairSignRule:
    """Правило знака множителя, извлечённого из пары углов.

    Attributes:
        name: имя пары (столбец или строка сетки)
        corners: углы пары в порядке (первый, второй)
        anchor: угол, знак которого наследует множитель
    """

    name: str
    corners: tuple[Corner, Corner]
    anchor: Corner


LEFT_COLUMN: Final[PairSignRule] = PairSignRule(
    "left_column", (Corner.TOP_LEFT, Corner.BOTTOM_LEFT), Corner.TOP_LEFT
)
RIGHT_COLUMN: Final[PairSignRule] = PairSignRule(
    "right_column", (Corner.TOP_RIGHT, Corner.BOTTOM_RIGHT), Corner.TOP_RIGHT
)
TOP_ROW: Final[PairSignRule] = PairSignRule(
    "top_row", (Corner.TOP_LEFT, Corner.TOP_RIGHT), Corner.TOP_LEFT
)
BOTTOM_ROW: Final[PairSignRule] = PairSignRule(
    "bottom_row", (Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT), Corner.BOTTOM_LEFT
)

SIGN_RULES: Final[tuple[PairSignRule, ...]] = (LEFT_COLUMN, RIGHT_COLUMN, TOP_ROW, BOTTOM_ROW)


# =============================================================================
# GRID
# =============================================================================


@dataclass(frozen=True)
class BoxGrid:
    """Area model 2×2."""

    top_left: int
    top_right: int
    bottom_left: int
    bottom_right: int

    @classmethod
    def from_trinomial(
        cls, a: int, b: int, c: int, eps: float = INTEGRALITY_TOL
    ) -> "BoxGrid":
        """Сетка из diamond-пары: top_right = right, bottom_left = left.

        Raises:
            NonIntegerFactors: если diamond problem не решается в целых
        """
        pair = diamond(a, b, c, eps)
        return cls(
            top_left=a,
            top_right=pair.right,
            bottom_left=pair.left,
            bottom_right=c,
        )

    def corner(self, corner: Corner) -> int:
        return getattr(self, corner.value)

    def divided(self, column_left: int, column_right: int) -> "BoxGrid":
        """Сетка после деления столбцов на их множители (точное деление)."""
        return BoxGrid(
            top_left=self.top_left // column_left,
            top_right=self.top_right // column_right,
            bottom_left=self.bottom_left // column_left,
            bottom_right=self.bottom_right // column_right,
        )


@dataclass(frozen=True)
class BoxFactors:
    """Результат box method: (column_left·x + column_right)(row_top·x + row_bottom)."""

    column_left: int
    column_right: int
    row_top: int
    row_bottom: int


# =============================================================================
# FACTOR EXTRACTION
# =============================================================================


def extract_factor(grid: BoxGrid, rule: PairSignRule) -> int:
    """HCF пары углов со знаком anchor-угла.

    Raises:
        InvalidInput: если оба угла пары равны нулю
    """
    first, second = (grid.corner(c) for c in rule.corners)
    factor = hcf(first, second)
    return -factor if grid.corner(rule.anchor) < 0 else factor


def factor_grid(grid: BoxGrid) -> BoxFactors:
    """Извлечение множителей столбцов, затем строк из поделённой сетки.

    Examples:
        >>> factor_grid(BoxGrid(2, 1, 6, 3))
        BoxFactors(column_left=2, column_right=1, row_top=1, row_bottom=3)
    """
    column_left = extract_factor(grid, LEFT_COLUMN)
    column_right = extract_factor(grid, RIGHT_COLUMN)

    reduced = grid.divided(column_left, column_right)
    row_top = extract_factor(reduced, TOP_ROW)
    row_bottom = extract_factor(reduced, BOTTOM_ROW)

    return BoxFactors(
        column_left=column_left,
        column_right=column_right,
        row_top=row_top,
        row_bottom=row_bottom,
    )
