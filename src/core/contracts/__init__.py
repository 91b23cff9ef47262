"""
Contract Validation Module

Модуль для валидации JSON контрактов движка факторизации.
"""

from .validators import (
    CoefficientTripleValidator,
    ContractValidator,
    FactoredResultValidator,
    SchemaLoader,
    validate_coefficient_triple,
    validate_factored_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoefficientTripleValidator",
    "FactoredResultValidator",
    # Functions
    "validate_coefficient_triple",
    "validate_factored_result",
]
