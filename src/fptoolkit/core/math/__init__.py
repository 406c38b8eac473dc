"""
Core math modules для fptoolkit

Числовые примитивы, на которых строятся канонические comparers.
"""

from fptoolkit.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Sign and NaN
    is_nan,
    sign,
    # Three-way comparisons
    compare_native,
    compare_with_tolerance,
    # Equality
    equals_nan_aware,
    equals_with_tolerance,
    # Validation
    validate_tolerance,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Sign and NaN
    "is_nan",
    "sign",
    # Three-way comparisons
    "compare_native",
    "compare_with_tolerance",
    # Equality
    "equals_nan_aware",
    "equals_with_tolerance",
    # Validation
    "validate_tolerance",
]
