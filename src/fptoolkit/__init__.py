"""
fptoolkit — composable functional-programming primitives.

Contains:
- fptoolkit.core.comparers : EqualityComparer / OrderingComparer algebra
- fptoolkit.core.prelude   : pipe, flow, Const / Call handlers
- fptoolkit.domain         : Deferred, NonEmptyArray, Nullable, array helpers
- fptoolkit.contracts      : JSON Schema contract for serialized Deferred
"""

from fptoolkit.core.comparers import (
    EqualityComparer,
    OrderingComparer,
    equality_comparer,
    ordering_comparer,
)
from fptoolkit.core.prelude import Call, Const, flow, pipe

__version__ = "0.1.0"

__all__ = [
    "EqualityComparer",
    "OrderingComparer",
    "equality_comparer",
    "ordering_comparer",
    "Call",
    "Const",
    "flow",
    "pipe",
]
