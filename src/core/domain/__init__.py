"""
Domain models and value objects.

Contains the immutable inputs of the factoring engine.
"""

from src.core.domain.coefficients import CoefficientTriple

__all__ = [
    "CoefficientTriple",
]
