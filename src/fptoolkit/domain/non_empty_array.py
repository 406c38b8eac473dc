"""
NonEmptyArray — последовательность, гарантированно содержащая хотя бы один элемент

Моделирует случаи, где пустая последовательность абсурдна, и делает безопасными
head / destruct. Представление — обычный tuple, поэтому функции модуля array
тоже применимы к NonEmptyArray.

Гарантия проверяется в from_sequence; остальные конструкторы (of, make,
range_inclusive) не могут вернуть пустой tuple.
"""

import math
from typing import Any, Callable, NamedTuple, Sequence, Tuple, TypeVar

from fptoolkit.core.comparers import ordering_comparer
from fptoolkit.core.comparers.equality_comparer import EqualityComparer
from fptoolkit.core.comparers.ordering_comparer import OrderingComparer
from fptoolkit.domain import array

A = TypeVar("A")
B = TypeVar("B")

NonEmptyArray = Tuple[A, ...]


class Destructured(NamedTuple):
    """Результат destruct: первый элемент и остаток."""

    head: Any
    tail: Tuple[Any, ...]


# =============================================================================
# CONSTRUCTORS
# =============================================================================


def from_sequence(items: Sequence[A]) -> NonEmptyArray[A]:
    """
    Проверенное преобразование последовательности в NonEmptyArray.

    Raises:
        ValueError: Если последовательность пустая
    """
    result = tuple(items)
    if not result:
        raise ValueError("NonEmptyArray requires at least one element, got empty sequence")
    return result


def of(a: A) -> NonEmptyArray[A]:
    """NonEmptyArray из ровно одного элемента."""
    return (a,)


def range_inclusive(start_inclusive: float, end_inclusive: float) -> NonEmptyArray[int]:
    """
    Целые числа от start до end включительно.

    Обе границы округляются вниз (floor). Если start >= end, результат — (start,).

    Examples:
        >>> range_inclusive(1, 5)
        (1, 2, 3, 4, 5)
        >>> range_inclusive(2, -5)
        (2,)
        >>> range_inclusive(4.1142, 6.0034)
        (4, 5, 6)
    """
    start = math.floor(start_inclusive)
    end = math.floor(end_inclusive)

    if start >= end:
        return (start,)

    return tuple(range(start, end + 1))


def make(length: float, create_element: Callable[[int], A]) -> NonEmptyArray[A]:
    """
    NonEmptyArray заданной длины; элемент i строится функцией create_element(i).

    Args:
        length: Нормализуется к целому >= 1

    Examples:
        >>> make(3, lambda i: f"{i}")
        ('0', '1', '2')
        >>> make(-20.11, lambda i: "a")
        ('a',)
    """
    return tuple(create_element(i) for i in range(max(1, math.floor(length))))


# =============================================================================
# PATTERN MATCHING
# =============================================================================


def head(items: NonEmptyArray[A]) -> A:
    """Первый элемент."""
    return items[0]


first = head


def destruct(items: NonEmptyArray[A]) -> Destructured:
    """
    Разбор на head и tail.

    Examples:
        >>> destruct((1, 2, 3))
        Destructured(head=1, tail=(2, 3))
    """
    return Destructured(head=items[0], tail=tuple(items[1:]))


# =============================================================================
# MAPPING
# =============================================================================


def map(fn: Callable[[A], B]) -> Callable[[NonEmptyArray[A]], NonEmptyArray[B]]:
    """Curried map, сохраняющий непустоту."""
    return lambda items: tuple(fn(item) for item in items)


def bind(
    fn: Callable[[A], NonEmptyArray[B]],
) -> Callable[[NonEmptyArray[A]], NonEmptyArray[B]]:
    """
    map, где каждый элемент отображается в NonEmptyArray, с последующим flatten.
    """
    return lambda items: tuple(result for item in items for result in fn(item))


flat_map = bind


# =============================================================================
# UTILS
# =============================================================================


def reverse(items: NonEmptyArray[A]) -> NonEmptyArray[A]:
    """Элементы в обратном порядке."""
    return tuple(reversed(items))


def sort(
    comparer: OrderingComparer[A] = ordering_comparer.DEFAULT,
) -> Callable[[NonEmptyArray[A]], NonEmptyArray[A]]:
    """Сортировка по comparer (по умолчанию — нативный порядок)."""
    return array.sort(comparer)


def get_equality_comparer(
    element_comparer: EqualityComparer[A],
) -> EqualityComparer[NonEmptyArray[A]]:
    """
    Структурное равенство NonEmptyArray: длина, затем поэлементно.
    """
    return array.get_equality_comparer(element_comparer)
