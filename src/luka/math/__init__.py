"""
Math primitives для luka

Double-precision примитивы с семантикой IEEE-754 (без исключений на граничных случаях).
"""

# IEEE-754 primitives
from src.luka.math.ieee754 import (
    # Identity elements
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
    # Coercion & signed zero
    is_negative_zero,
    is_odd_integer,
    normalize_zero,
    to_double,
    # Total arithmetic
    power,
    true_divide,
    truncating_remainder,
)

__all__ = [
    # Identity elements
    "ADDITIVE_IDENTITY",
    "MULTIPLICATIVE_IDENTITY",
    # Coercion & signed zero
    "to_double",
    "is_negative_zero",
    "is_odd_integer",
    "normalize_zero",
    # Total arithmetic
    "true_divide",
    "truncating_remainder",
    "power",
]
