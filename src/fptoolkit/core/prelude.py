"""
Prelude — композиция функций и handler-юнион для pattern matching.

pipe / flow — левосторонняя композиция для curried функций модулей
fptoolkit.domain:

    pipe(
        request_state,
        deferred.match_or_else(resolved=Call(lambda r: r.body), or_else=""),
    )

Handler каждого case — либо константа (Const), либо отложенное вычисление
(Call). Оба разрешаются единственной функцией resolve_handler, без проверки
callable() у произвольного значения.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, TypeVar, Union

R = TypeVar("R")


# =============================================================================
# КОМПОЗИЦИЯ
# =============================================================================


def pipe(value: Any, *functions: Callable[[Any], Any]) -> Any:
    """
    Последовательное применение функций слева направо.

    Examples:
        >>> pipe(3, lambda n: n * 2, str)
        '6'
    """
    return reduce(lambda acc, fn: fn(acc), functions, value)


def flow(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    Композиция функций слева направо без начального значения.

    Examples:
        >>> flow(lambda n: n + 1, str)(41)
        '42'
    """
    return lambda value: pipe(value, *functions)


# =============================================================================
# HANDLERS
# =============================================================================


@dataclass(frozen=True)
class Const(Generic[R]):
    """Handler, возвращающий фиксированное значение."""

    value: R


@dataclass(frozen=True)
class Call(Generic[R]):
    """Handler, вычисляющий результат функцией от данных case (если они есть)."""

    fn: Callable[..., R]


Handler = Union[Const[R], Call[R]]


def as_handler(handler: Union[Const[R], Call[R], R]) -> Handler[R]:
    """Значение, не являющееся Const/Call, оборачивается в Const."""
    if isinstance(handler, (Const, Call)):
        return handler
    return Const(handler)


def resolve_handler(handler: Union[Const[R], Call[R], R], *args: Any) -> R:
    """
    Разрешение handler: Const → value, Call → fn(*args).

    Args:
        handler: Const, Call или произвольное значение (трактуется как Const)
        *args: данные case, передаваемые в Call

    Returns:
        Результат handler
    """
    resolved = as_handler(handler)
    if isinstance(resolved, Call):
        return resolved.fn(*args)
    return resolved.value
