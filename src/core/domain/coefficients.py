"""
CoefficientTriple — Модель коэффициентов квадратного выражения

Immutable Pydantic модель ax² + bx + c с целыми коэффициентами.
Существует только в пределах одного вызова движка факторизации.
"""

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# COEFFICIENT TRIPLE MODEL
# =============================================================================


class CoefficientTriple(BaseModel):
    """
    Коэффициенты квадратного выражения ax² + bx + c.

    Immutable модель (frozen=True). Коэффициенты строго целые: float и bool
    отвергаются (strict), a != 0 (степень выражения равна 2).
    """

    a: int = Field(..., strict=True, description="Коэффициент при x² (не равен 0)")
    b: int = Field(0, strict=True, description="Коэффициент при x")
    c: int = Field(0, strict=True, description="Свободный член")

    model_config = {"frozen": True}  # Immutable

    @field_validator("a")
    @classmethod
    def validate_degree_two(cls, v: int) -> int:
        """a == 0 вырождает выражение в линейное."""
        if v == 0:
            raise ValueError("a must be non-zero for a quadratic expression")
        return v

    @property
    def is_monomial(self) -> bool:
        """ax²"""
        return self.b == 0 and self.c == 0

    @property
    def is_binomial_ab(self) -> bool:
        """ax² + bx"""
        return self.b != 0 and self.c == 0

    @property
    def is_binomial_ac(self) -> bool:
        """ax² + c"""
        return self.b == 0 and self.c != 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)
