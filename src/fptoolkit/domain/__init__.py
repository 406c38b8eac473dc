"""
Data wrappers built on the comparer algebra.

Modules are exported whole, the same way as fptoolkit.core.comparers:

    from fptoolkit.domain import deferred, non_empty_array, nullable
"""

from fptoolkit.domain import array, deferred, non_empty_array, nullable
from fptoolkit.domain.deferred import Deferred, InProgress, NotStarted, Resolved
from fptoolkit.domain.non_empty_array import Destructured, NonEmptyArray
from fptoolkit.domain.nullable import Nullable

__all__ = [
    # Modules
    "array",
    "deferred",
    "non_empty_array",
    "nullable",
    # Deferred types
    "Deferred",
    "NotStarted",
    "InProgress",
    "Resolved",
    # NonEmptyArray types
    "NonEmptyArray",
    "Destructured",
    # Nullable types
    "Nullable",
]
