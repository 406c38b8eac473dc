"""
OrderingComparer — полный порядок как first-class значение

Immutable capability-объект с единственной операцией compare(a, b) -> -1 | 0 | 1,
плюс комбинаторы, выводящие новые порядки и отношения из существующих.

ИНВАРИАНТЫ:
1. compare(x, x) == 0
2. Антисимметричность: sign(compare(a, b)) == -sign(compare(b, a))
3. Транзитивность для рукописных compare-функций — обязательство вызывающей
   стороны; все комбинаторы модуля (reverse, derive_from, get_composite)
   сохраняют её, если она выполняется для входов
4. Результат compare всегда нормализован к -1 / 0 / 1

Сортировка стандартными средствами:
    sorted(items, key=NUMBER.key())
"""

import logging
from dataclasses import dataclass
from datetime import date
from functools import cmp_to_key
from typing import Any, Callable, Final, Generic, TypeVar

from fptoolkit.core.comparers.equality_comparer import EqualityComparer, of_equals
from fptoolkit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    compare_native,
    compare_with_tolerance,
    sign,
    validate_tolerance,
)

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


# =============================================================================
# ORDERING COMPARER
# =============================================================================


@dataclass(frozen=True)
class OrderingComparer(Generic[A]):
    """
    Полный порядок над типом A.

    Предусловие: compare задаёт полный порядок. Нарушение законов порядка
    не проверяется и молча даёт несогласованную сортировку.

    Результат compare нормализуется к -1 / 0 / 1 при создании записи.
    """

    compare: Callable[[A, A], int]

    def __post_init__(self) -> None:
        raw = self.compare
        object.__setattr__(self, "compare", lambda a, b: sign(raw(a, b)))

    def key(self) -> Callable[[A], Any]:
        """Key-обёртка для sorted / list.sort / min / max."""
        return cmp_to_key(self.compare)


def of_compare(compare: Callable[[A, A], float]) -> OrderingComparer[A]:
    """
    Создание OrderingComparer из трёхсторонней функции сравнения.

    Значим только знак результата; величина отбрасывается
    нормализацией к -1 / 0 / 1.

    Examples:
        >>> desc = of_compare(lambda a, b: b - a)
        >>> desc.compare(100, 0)
        -1
    """
    return OrderingComparer(compare)


# =============================================================================
# КАНОНИЧЕСКИЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

# Нативный порядок операндов (операторы < и >); NaN в конце порядка
DEFAULT: Final[OrderingComparer[Any]] = OrderingComparer(compare_native)

# Числа по возрастанию, NaN после +inf
NUMBER: Final[OrderingComparer[float]] = OrderingComparer(compare_native)

# Строки лексикографически (по code point)
STRING: Final[OrderingComparer[str]] = OrderingComparer(compare_native)

# date / datetime хронологически
DATE: Final[OrderingComparer[date]] = OrderingComparer(compare_native)


def float_with_tolerance(tol: float = EPS_FLOAT_COMPARE_ABS) -> OrderingComparer[float]:
    """
    Порядок float, в котором значения ближе tol считаются равными.

    ВАЖНО: отношение "равно в пределах tol" не транзитивно, поэтому такой
    comparer — полный порядок только на множествах, где значения либо
    совпадают, либо различаются больше чем на tol.

    NaN равен NaN и стоит после всех чисел, как в NUMBER.

    Raises:
        ValueError: Если tol отрицательная или NaN/Inf
    """
    validate_tolerance(tol, "tol")
    return OrderingComparer(lambda a, b: compare_with_tolerance(a, b, tol=tol))


# =============================================================================
# КОМБИНАТОРЫ
# =============================================================================


def reverse(ordering_comparer: OrderingComparer[A]) -> OrderingComparer[A]:
    """
    Обратный порядок: compare(a, b) = -ordering_comparer.compare(a, b).

    Ноль остаётся нулём.
    """
    inner = ordering_comparer.compare
    return OrderingComparer(lambda a, b: -inner(a, b))


def derive_from(
    ordering_comparer: OrderingComparer[A],
    key: Callable[[B], A],
) -> OrderingComparer[B]:
    """
    Порядок над внешним типом через проекцию key.

    compare(a, b) = ordering_comparer.compare(key(a), key(b))

    Examples:
        >>> by_name = derive_from(STRING, lambda p: p["name"])
        >>> sorted([{"name": "Larry"}, {"name": "Amy"}], key=by_name.key())
        [{'name': 'Amy'}, {'name': 'Larry'}]
    """
    inner = ordering_comparer.compare
    return OrderingComparer(lambda a, b: inner(key(a), key(b)))


def get_composite(*ordering_comparers: OrderingComparer[A]) -> OrderingComparer[A]:
    """
    Лексикографическая композиция ("and then by").

    Comparers вычисляются по порядку аргументов; возвращается первый
    ненулевой результат. Если все вернули 0, значения считаются равными
    по всем критериям (ties остаются ties, это не ошибка).

    Examples:
        by_name_then_age = get_composite(by_name, by_age)
    """
    compares = tuple(oc.compare for oc in ordering_comparers)
    if not compares:
        logger.debug("get_composite called without comparers, every pair ties")

    def compare(a: A, b: A) -> int:
        for inner in compares:
            result = inner(a, b)
            if result != 0:
                return result
        return 0

    return OrderingComparer(compare)


def derive_equality_comparer(ordering_comparer: OrderingComparer[A]) -> EqualityComparer[A]:
    """
    EqualityComparer из порядка: equals(a, b) = (compare(a, b) == 0).
    """
    inner = ordering_comparer.compare
    return of_equals(lambda a, b: inner(a, b) == 0)


# =============================================================================
# ОТНОШЕНИЯ
# =============================================================================


def gt(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], bool]:
    """a > b согласно ordering_comparer."""
    return lambda a, b: ordering_comparer.compare(a, b) > 0


def geq(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], bool]:
    """a >= b согласно ordering_comparer."""
    return lambda a, b: ordering_comparer.compare(a, b) >= 0


def lt(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], bool]:
    """a < b согласно ordering_comparer."""
    return lambda a, b: ordering_comparer.compare(a, b) < 0


def leq(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], bool]:
    """a <= b согласно ordering_comparer."""
    return lambda a, b: ordering_comparer.compare(a, b) <= 0


def is_between(
    ordering_comparer: OrderingComparer[A],
) -> Callable[[A, A], Callable[[A], bool]]:
    """
    Проверка попадания в диапазон [lower, upper] (включительно).

    Обе границы проверяются одним и тем же comparer, поэтому работает для
    любого упорядоченного типа: числа, строки, даты.

    Examples:
        >>> is_between(NUMBER)(1, 5)(3)
        True
        >>> is_between(NUMBER)(1, 5)(6)
        False
    """
    less_or_equal = leq(ordering_comparer)

    def bounds(lower: A, upper: A) -> Callable[[A], bool]:
        return lambda test: less_or_equal(lower, test) and less_or_equal(test, upper)

    return bounds


def minimum(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], A]:
    """Меньшее из двух значений; при равенстве — первое."""
    return lambda a, b: b if ordering_comparer.compare(b, a) < 0 else a


def maximum(ordering_comparer: OrderingComparer[A]) -> Callable[[A, A], A]:
    """Большее из двух значений; при равенстве — первое."""
    return lambda a, b: b if ordering_comparer.compare(b, a) > 0 else a


def clamp(
    ordering_comparer: OrderingComparer[A],
) -> Callable[[A, A], Callable[[A], A]]:
    """
    Ограничение значения диапазоном [lower, upper] согласно ordering_comparer.

    Работает для любого упорядоченного типа: числа, строки, даты.

    Raises:
        ValueError: Если lower > upper согласно ordering_comparer

    Examples:
        >>> clamp(NUMBER)(0, 10)(15)
        10
    """
    compare = ordering_comparer.compare

    def bounds(lower: A, upper: A) -> Callable[[A], A]:
        if compare(lower, upper) > 0:
            raise ValueError(f"lower bound {lower!r} must be <= upper bound {upper!r}")

        def clamp_value(value: A) -> A:
            if compare(value, lower) < 0:
                return lower
            if compare(value, upper) > 0:
                return upper
            return value

        return clamp_value

    return bounds
