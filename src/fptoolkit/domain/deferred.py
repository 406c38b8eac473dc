"""
Deferred — состояние асинхронной операции как tagged union

Операция находится ровно в одном из трёх состояний:
- NotStarted — работа не начиналась
- InProgress — работа выполняется
- Resolved — работа завершена, результат доступен в поле resolved

Вместо набора неявно связанных флагов (not_started, loading, result) состояние
моделируется одним значением, и данные присутствуют только у Resolved.

Immutable Pydantic модели (frozen=True), дискриминатор — поле tag.

Example:
    pipe(
        deferred,
        match(
            not_started="Not Started",
            in_progress="In Progress",
            resolved=Call(lambda response: response.body),
        ),
    )
"""

from typing import Annotated, Any, Callable, Dict, Final, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field, TypeAdapter

from fptoolkit.contracts.validators import validate_deferred
from fptoolkit.core.comparers import equality_comparer
from fptoolkit.core.comparers.equality_comparer import EqualityComparer
from fptoolkit.core.prelude import Call, Const, resolve_handler

A = TypeVar("A")
R = TypeVar("R")


# =============================================================================
# MODELS
# =============================================================================


class NotStarted(BaseModel):
    """Работа не начиналась."""

    tag: Literal["NotStarted"] = "NotStarted"

    model_config = {"frozen": True}


class InProgress(BaseModel):
    """Работа выполняется."""

    tag: Literal["InProgress"] = "InProgress"

    model_config = {"frozen": True}


class Resolved(BaseModel, Generic[A]):
    """Работа завершена с результатом resolved."""

    tag: Literal["Resolved"] = "Resolved"
    resolved: A = Field(..., description="Результат асинхронной операции")

    model_config = {"frozen": True}


Deferred = Union[NotStarted, InProgress, Resolved]

_DEFERRED_ADAPTER: Final[TypeAdapter] = TypeAdapter(
    Annotated[
        Union[NotStarted, InProgress, Resolved[Any]],
        Field(discriminator="tag"),
    ]
)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

NOT_STARTED: Final[NotStarted] = NotStarted()

IN_PROGRESS: Final[InProgress] = InProgress()


def resolved(a: A) -> Resolved[A]:
    """Новый Resolved с данными a."""
    return Resolved(resolved=a)


def parse(data: Dict[str, Any]) -> Deferred:
    """
    Разбор dict (например, из JSON) в вариант Deferred по полю tag.

    Payload сначала проверяется контрактом deferred.json: неизвестный tag,
    Resolved без resolved и лишние ключи отклоняются до построения модели.

    Raises:
        jsonschema.ValidationError: Если payload нарушает контракт
    """
    validate_deferred(data)
    return _DEFERRED_ADAPTER.validate_python(data)


def to_payload(deferred: Deferred) -> Dict[str, Any]:
    """JSON-совместимое представление; соответствует контракту deferred.json."""
    return deferred.model_dump(mode="json")


# =============================================================================
# PATTERN MATCHING
# =============================================================================


def match(
    not_started: Union[Const[R], Call[R], R],
    in_progress: Union[Const[R], Call[R], R],
    resolved: Union[Const[R], Call[R], R],
) -> Callable[[Deferred], R]:
    """
    Исчерпывающий pattern matching по Deferred.

    Каждый handler — Const, Call или значение. Call для resolved получает
    данные Resolved; Call для остальных case вызывается без аргументов.

    Raises:
        TypeError: Если значение не является вариантом Deferred

    Examples:
        >>> pipe(
        ...     resolved(200),
        ...     match(not_started="", in_progress="Loading...", resolved=Call(str)),
        ... )
        '200'
    """

    def run(deferred: Deferred) -> R:
        if isinstance(deferred, NotStarted):
            return resolve_handler(not_started)
        if isinstance(deferred, InProgress):
            return resolve_handler(in_progress)
        if isinstance(deferred, Resolved):
            return resolve_handler(resolved, deferred.resolved)
        raise TypeError(f"Not a Deferred value: {deferred!r}")

    return run


def match_or_else(
    or_else: Union[Const[R], Call[R], R],
    not_started: Union[Const[R], Call[R], R, None] = None,
    in_progress: Union[Const[R], Call[R], R, None] = None,
    resolved: Union[Const[R], Call[R], R, None] = None,
) -> Callable[[Deferred], R]:
    """
    Неисчерпывающий pattern matching по Deferred.

    Не переданные (None) handlers проваливаются в or_else. Константу None
    можно вернуть явно через Const(None).

    Examples:
        pipe(
            deferred,
            match_or_else(resolved=Call(lambda code: f"Status: {code}"), or_else="Not Finished"),
        )
    """

    def run(deferred: Deferred) -> R:
        if isinstance(deferred, NotStarted) and not_started is not None:
            return resolve_handler(not_started)
        if isinstance(deferred, InProgress) and in_progress is not None:
            return resolve_handler(in_progress)
        if isinstance(deferred, Resolved) and resolved is not None:
            return resolve_handler(resolved, deferred.resolved)
        return resolve_handler(or_else)

    return run


# =============================================================================
# UTILS
# =============================================================================


def is_unresolved(deferred: Deferred) -> bool:
    """NotStarted или InProgress."""
    return match_or_else(resolved=False, or_else=True)(deferred)


def is_in_progress(deferred: Deferred) -> bool:
    """Работа выполняется."""
    return match_or_else(in_progress=True, or_else=False)(deferred)


def is_resolved(deferred: Deferred) -> bool:
    """Работа завершена."""
    return match_or_else(resolved=True, or_else=False)(deferred)


def is_resolved_with(
    expected: A,
    equality_comparer: EqualityComparer[A] = equality_comparer.DEFAULT,
) -> Callable[[Deferred], bool]:
    """
    Resolved с данными, равными expected согласно equality_comparer.

    По умолчанию — equality_comparer.DEFAULT (значение для чисел/строк,
    идентичность для остального).

    Examples:
        >>> pipe(resolved(101), is_resolved_with(100, equality_comparer.NUMBER))
        False
    """
    return match_or_else(
        resolved=Call(lambda actual: equality_comparer.equals(actual, expected)),
        or_else=False,
    )
