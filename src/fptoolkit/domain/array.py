"""
Array — curried helpers для последовательностей, потребляющие comparers.

Все функции возвращают новые tuple и не изменяют вход.
"""

from typing import Any, Callable, Sequence, Tuple, TypeVar

from fptoolkit.core.comparers import equality_comparer, ordering_comparer
from fptoolkit.core.comparers.equality_comparer import EqualityComparer, of_equals
from fptoolkit.core.comparers.ordering_comparer import OrderingComparer

A = TypeVar("A")


def get_equality_comparer(element_comparer: EqualityComparer[A]) -> EqualityComparer[Sequence[A]]:
    """
    Структурное равенство последовательностей.

    Алгоритм:
    1. Разная длина → False (без сравнения элементов)
    2. Поэлементное сравнение по индексу, первое несовпадение → False
    3. Иначе True

    Args:
        element_comparer: EqualityComparer для элементов

    Examples:
        >>> equals = get_equality_comparer(equality_comparer.NUMBER).equals
        >>> equals([1, 2, 3], [1, 2])
        False
        >>> equals([1, 2, 3], [1, 2, 3])
        True
    """
    element_equals = element_comparer.equals

    def equals(first: Sequence[A], second: Sequence[A]) -> bool:
        if len(first) != len(second):
            return False

        for a, b in zip(first, second):
            if not element_equals(a, b):
                return False

        return True

    return of_equals(equals)


def sort(
    comparer: OrderingComparer[A] = ordering_comparer.DEFAULT,
) -> Callable[[Sequence[A]], Tuple[A, ...]]:
    """
    Стабильная сортировка по comparer; comparer — единственный источник порядка.

    Examples:
        >>> sort(ordering_comparer.NUMBER)([4, 8, -1])
        (-1, 4, 8)
    """
    key = comparer.key()
    return lambda items: tuple(sorted(items, key=key))


def distinct(
    comparer: EqualityComparer[A] = equality_comparer.DEFAULT,
) -> Callable[[Sequence[A]], Tuple[A, ...]]:
    """
    Удаление дубликатов согласно comparer.

    Сохраняется первое вхождение каждого класса эквивалентности, порядок
    исходный. O(n²) сравнений: EqualityComparer не даёт hash.

    Examples:
        >>> distinct(equality_comparer.NUMBER)([1, 2, 1, 3, 2])
        (1, 2, 3)
    """
    equals = comparer.equals

    def run(items: Sequence[A]) -> Tuple[A, ...]:
        kept: list[Any] = []
        for item in items:
            if not any(equals(seen, item) for seen in kept):
                kept.append(item)
        return tuple(kept)

    return run
