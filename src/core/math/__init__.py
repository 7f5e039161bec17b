"""
Core math modules

Fixed-point денежная арифметика для движка сдачи.
"""

from src.core.math.money import (
    CENT,
    CENTS_PER_UNIT,
    DEFAULT_ROUNDING,
    ZERO,
    format_amount,
    from_cents,
    is_finite_amount,
    is_whole_cents,
    round2,
    subtract,
    to_cents,
    to_decimal,
)

__all__ = [
    # Constants
    "CENT",
    "CENTS_PER_UNIT",
    "DEFAULT_ROUNDING",
    "ZERO",
    # Functions
    "format_amount",
    "from_cents",
    "is_finite_amount",
    "is_whole_cents",
    "round2",
    "subtract",
    "to_cents",
    "to_decimal",
]
