"""
Nullable — curried helpers для Optional значений в pipelines

Единственное "отсутствующее" значение — None. Falsy значения ("", 0, [], {})
считаются присутствующими.

Example:
    pipe(
        name,
        nullable.map(lambda s: f"¡{s}!"),
        nullable.default_value(""),
    )  # "¡ahoy!" если name == "ahoy"; "" если name is None
"""

from typing import Callable, Optional, TypeVar

from fptoolkit.core.comparers.equality_comparer import EqualityComparer, of_equals

A = TypeVar("A")
B = TypeVar("B")

Nullable = Optional[A]


def get_equality_comparer(comparer: EqualityComparer[A]) -> EqualityComparer[Nullable[A]]:
    """
    EqualityComparer с учётом None.

    - None и None → True
    - None и значение → False
    - два значения → comparer.equals

    Examples:
        >>> equals = get_equality_comparer(equality_comparer.NUMBER).equals
        >>> equals(None, None), equals(3, None), equals(4, 4)
        (True, False, True)
    """
    inner = comparer.equals

    def equals(a: Nullable[A], b: Nullable[A]) -> bool:
        if a is None or b is None:
            return a is None and b is None
        return inner(a, b)

    return of_equals(equals)


def default_value(a: A) -> Callable[[Nullable[A]], A]:
    """
    Fallback значение для None.

    Examples:
        >>> pipe(None, default_value(""))
        ''
    """
    return lambda value: value if value is not None else a


def default_with(fn: Callable[[], A]) -> Callable[[Nullable[A]], A]:
    """Fallback, вычисляемый fn() только для None."""
    return lambda value: value if value is not None else fn()


def map(fn: Callable[[A], B]) -> Callable[[Nullable[A]], Nullable[B]]:
    """fn применяется к присутствующему значению; None проходит без изменений."""
    return lambda value: fn(value) if value is not None else None


def iterate(fn: Callable[[A], None]) -> Callable[[Nullable[A]], None]:
    """
    Побочный эффект fn для присутствующего значения.

    Терминальная функция pipeline: значение дальше не передаётся.
    """

    def run(value: Nullable[A]) -> None:
        if value is not None:
            fn(value)

    return run


def bind(fn: Callable[[A], Nullable[B]]) -> Callable[[Nullable[A]], Nullable[B]]:
    """
    map с функцией, которая сама может вернуть None.

    Examples:
        pipe(person, bind(lambda p: p.name), default_value(""))
    """
    return lambda value: fn(value) if value is not None else None


flat_map = bind
