"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the factoring
engine: integer/float primitives, value objects, and JSON contracts.
"""
