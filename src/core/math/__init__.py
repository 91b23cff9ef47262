"""
Core math modules для движка факторизации

Целочисленные и float-примитивы: HCF, diamond solver, epsilon-защиты,
таксономия ошибок.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    EPS_INTEGRALITY,
    EPS_VERTEX,
    # NaN/Inf validation
    is_valid_float,
    # Epsilon comparisons
    is_close,
    is_negative,
    is_positive,
    is_zero,
    # Integrality
    is_integral,
    nearest_int,
    validate_integer,
)

# Errors
from src.core.math.errors import (
    FactoringError,
    InvalidInput,
    NoRealRoots,
    NonIntegerFactors,
    NotDifferenceOfSquares,
    NotPerfectSquare,
)

# HCF
from src.core.math.hcf import common_factors, hcf, hcf_many

# Diamond
from src.core.math.diamond import (
    INTEGRALITY_TOL,
    FactorPair,
    diamond,
    discriminant,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "EPS_INTEGRALITY",
    "EPS_VERTEX",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "validate_integer",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "is_negative",
    "is_positive",
    "is_zero",
    # Numerical Safeguards — Integrality
    "is_integral",
    "nearest_int",
    # Errors
    "FactoringError",
    "InvalidInput",
    "NoRealRoots",
    "NonIntegerFactors",
    "NotDifferenceOfSquares",
    "NotPerfectSquare",
    # HCF
    "common_factors",
    "hcf",
    "hcf_many",
    # Diamond
    "INTEGRALITY_TOL",
    "FactorPair",
    "diamond",
    "discriminant",
]
