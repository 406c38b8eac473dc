"""
EqualityComparer — отношение эквивалентности как first-class значение

Immutable capability-объект с единственной операцией equals(a, b) -> bool.
Не иерархия классов: комбинаторы (derive_from, of_struct) создают новый
экземпляр, замыкающий исходные.

ИНВАРИАНТЫ:
1. Рефлексивность: equals(x, x) is True для всех x домена
2. Симметричность: equals(a, b) == equals(b, a)
3. Транзитивность — обязательство вызывающей стороны, не проверяется

Политика DEFAULT (явная, по семействам типов):
- числа (numbers.Number, включая bool), str, bytes, None → равенство значений (==)
- всё остальное (list, dict, объекты, date/datetime) → идентичность (is)
DEFAULT — это НЕ глубокое структурное равенство. Для контейнеров используйте
array.get_equality_comparer / of_struct.
"""

from dataclasses import dataclass
from datetime import date
from numbers import Number
from typing import Any, Callable, Final, Generic, TypeVar

from fptoolkit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    equals_nan_aware,
    equals_with_tolerance,
    validate_tolerance,
)

A = TypeVar("A")
B = TypeVar("B")

# Семейства типов, для которых DEFAULT использует равенство значений
_VALUE_TYPES: Final[tuple[type, ...]] = (Number, str, bytes, type(None))


# =============================================================================
# EQUALITY COMPARER
# =============================================================================


@dataclass(frozen=True)
class EqualityComparer(Generic[A]):
    """
    Отношение эквивалентности над типом A.

    Предусловие: equals рефлексивна и симметрична. Некорректный предикат
    молча даёт несогласованные результаты.
    """

    equals: Callable[[A, A], bool]


def of_equals(equals: Callable[[A, A], bool]) -> EqualityComparer[A]:
    """
    Создание EqualityComparer из произвольного бинарного предиката.

    Валидация рефлексивности/симметричности не выполняется.

    Examples:
        >>> ec = of_equals(lambda a, b: a.lower() == b.lower())
        >>> ec.equals("Abc", "aBC")
        True
    """
    return EqualityComparer(equals)


# =============================================================================
# КАНОНИЧЕСКИЕ ЭКЗЕМПЛЯРЫ
# =============================================================================


def _default_equals(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, _VALUE_TYPES) and isinstance(b, _VALUE_TYPES):
        if isinstance(a, Number) and isinstance(b, Number):
            return equals_nan_aware(a, b)
        return a == b
    return False


DEFAULT: Final[EqualityComparer[Any]] = of_equals(_default_equals)

NUMBER: Final[EqualityComparer[float]] = of_equals(equals_nan_aware)

STRING: Final[EqualityComparer[str]] = of_equals(lambda a, b: a == b)

DATE: Final[EqualityComparer[date]] = of_equals(lambda a, b: a == b)


# =============================================================================
# КОМБИНАТОРЫ
# =============================================================================


def derive_from(
    equality_comparer: EqualityComparer[A],
    key: Callable[[B], A],
) -> EqualityComparer[B]:
    """
    Производный comparer: сравнение по проекции key.

    equals(a, b) = equality_comparer.equals(key(a), key(b))

    Examples:
        >>> by_name = derive_from(STRING, lambda p: p["name"])
        >>> by_name.equals({"name": "Amy", "age": 3}, {"name": "Amy", "age": 40})
        True
    """
    inner = equality_comparer.equals
    return of_equals(lambda a, b: inner(key(a), key(b)))


def of_struct(**field_comparers: EqualityComparer[Any]) -> EqualityComparer[Any]:
    """
    Структурное равенство записи по именованным атрибутам.

    Каждое поле сравнивается своим comparer, в порядке передачи аргументов;
    первое несовпадение завершает проверку (short-circuit). Атрибуты, не
    перечисленные в field_comparers, игнорируются.

    Args:
        **field_comparers: имя атрибута → EqualityComparer для его значения

    Examples:
        person_equals = of_struct(name=STRING, age=NUMBER)
    """
    fields = tuple(field_comparers.items())

    def equals(a: Any, b: Any) -> bool:
        for name, comparer in fields:
            if not comparer.equals(getattr(a, name), getattr(b, name)):
                return False
        return True

    return of_equals(equals)


def float_with_tolerance(
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> EqualityComparer[float]:
    """
    Равенство float с учётом толерантности (через equals_with_tolerance).

    Два NaN равны, NaN не равен никакому числу: так же, как NUMBER.

    ВАЖНО: такое отношение не транзитивно. Использовать для проверок
    "почти равно", но не для дедупликации по классам эквивалентности.

    Raises:
        ValueError: Если толерантность отрицательная или NaN/Inf
    """
    validate_tolerance(rel_tol, "rel_tol")
    validate_tolerance(abs_tol, "abs_tol")
    return of_equals(lambda a, b: equals_with_tolerance(a, b, rel_tol=rel_tol, abs_tol=abs_tol))
