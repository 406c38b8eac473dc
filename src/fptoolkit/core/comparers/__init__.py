"""
Comparer algebra — EqualityComparer и OrderingComparer.

Модули экспортируются целиком, чтобы одноимённые комбинаторы
(derive_from, DEFAULT, NUMBER, ...) не конфликтовали:

    from fptoolkit.core.comparers import ordering_comparer as oc
    by_age_desc = oc.derive_from(oc.reverse(oc.NUMBER), lambda cat: cat.age)
"""

from fptoolkit.core.comparers import equality_comparer, ordering_comparer
from fptoolkit.core.comparers.equality_comparer import EqualityComparer
from fptoolkit.core.comparers.ordering_comparer import OrderingComparer

__all__ = [
    # Types
    "EqualityComparer",
    "OrderingComparer",
    # Modules
    "equality_comparer",
    "ordering_comparer",
]
