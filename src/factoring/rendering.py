"""Rendering — plain/LaTeX представление факторизованного выражения.

Единственная реализация правил форматирования, общая для всех entry points:
- simplify-coefficient: 1 → "", -1 → "-", иначе десятичный литерал
- знак между членами: "+" для value >= 0, иначе "-", литерал |value|
- LaTeX: "(" → "\\left(", ")" → "\\right)", других отличий нет
"""

from typing import NamedTuple


class FactoredResult(NamedTuple):
    """Факторизованная форма в двух синтаксисах.

    Распаковывается как обычная пара: plain, latex = factor(...)
    """

    plain: str
    latex: str

    def to_dict(self) -> dict[str, str]:
        """Payload для контракта factored_result.json."""
        return {"plain": self.plain, "latex": self.latex}


def simplify_coefficient(value: int) -> str:
    """Коэффициент перед x: 1 → "", -1 → "-", иначе str(value)."""
    if value == 1:
        return ""
    if value == -1:
        return "-"
    return str(value)


def sign_symbol(value: int) -> str:
    return "+" if value >= 0 else "-"


def negative_prefix(negative: bool) -> str:
    return "-" if negative else ""


def gcf_prefix(gcf: int) -> str:
    """Вынесенный GCF: единица не печатается."""
    return "" if gcf == 1 else str(gcf)


def linear_factor(coef: int, const: int) -> str:
    """(coef·x ± |const|) с упрощённым коэффициентом.

    Examples:
        >>> linear_factor(2, 1)
        '(2x + 1)'
        >>> linear_factor(1, -3)
        '(x - 3)'
    """
    return f"({simplify_coefficient(coef)}x {sign_symbol(const)} {abs(const)})"


def to_latex(plain: str) -> str:
    return plain.replace("(", "\\left(").replace(")", "\\right)")


def make_result(plain: str) -> FactoredResult:
    """Единая точка построения результата: latex всегда выводится из plain."""
    return FactoredResult(plain, to_latex(plain))
