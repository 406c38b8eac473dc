"""
Numerical Safeguards — числовые примитивы comparer-алгебры

Всё, на чём стоят канонические NUMBER-экземпляры и float_with_tolerance:
- Нормализация результата трёхстороннего сравнения к -1 / 0 / 1
- Полный порядок с NaN: NaN равен NaN и больше любого числа (включая +inf)
- Равенство float с толерантностью, согласованное с тем же правилом для NaN
- Проверка параметров толерантности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. sign() всегда возвращает ровно -1, 0 или 1 (включая -0.0 → 0)
2. compare_native(x, x) == 0 и compare_with_tolerance(x, x) == 0, в том числе для NaN
3. Антисимметричность: result(a, b) == -result(b, a), в том числе для NaN
4. equals_nan_aware(a, b) тогда и только тогда, когда compare_native(a, b) == 0
"""

import math
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность по умолчанию для equals_with_tolerance
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность по умолчанию для equals_with_tolerance
# и compare_with_tolerance
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ЗНАК И NaN
# =============================================================================


def sign(value: float) -> int:
    """
    Знак числа, нормализованный к -1 / 0 / 1.

    Приводит результат произвольной compare-функции (где значим только
    знак, но не величина) к каноническому виду.

    Examples:
        >>> sign(-42)
        -1
        >>> sign(0.5)
        1
        >>> sign(-0.0)
        0
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def is_nan(value: Any) -> bool:
    """NaN — единственное значение, не равное самому себе."""
    return value != value


def _nan_order(a_is_nan: bool, b_is_nan: bool) -> int:
    # NaN в конце порядка; два NaN равны
    return int(a_is_nan) - int(b_is_nan)


# =============================================================================
# ТРЁХСТОРОННИЕ СРАВНЕНИЯ
# =============================================================================


def compare_native(a: Any, b: Any) -> int:
    """
    Трёхстороннее сравнение через нативные операторы < и >.

    Работает для любых значений с rich comparison (числа, строки,
    date/datetime, tuple). NaN не сравним ни с чем через < и >, поэтому
    ставится в конец порядка: compare_native(nan, inf) == 1,
    compare_native(nan, nan) == 0.
    """
    a_is_nan, b_is_nan = is_nan(a), is_nan(b)
    if a_is_nan or b_is_nan:
        return _nan_order(a_is_nan, b_is_nan)
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_with_tolerance(a: float, b: float, tol: float = EPS_FLOAT_COMPARE_ABS) -> int:
    """
    Порядок float, в котором значения ближе tol друг к другу равны.

    NaN упорядочивается так же, как в compare_native.

    Examples:
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
        >>> compare_with_tolerance(float("nan"), 1e300)
        1
    """
    a_is_nan, b_is_nan = is_nan(a), is_nan(b)
    if a_is_nan or b_is_nan:
        return _nan_order(a_is_nan, b_is_nan)
    if abs(a - b) <= tol:
        return 0
    return -1 if a < b else 1


# =============================================================================
# РАВЕНСТВО
# =============================================================================


def equals_nan_aware(a: Any, b: Any) -> bool:
    """Равенство значений, в котором NaN равен NaN."""
    return a == b or (is_nan(a) and is_nan(b))


def equals_with_tolerance(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Равенство float по math.isclose, дополненное правилом NaN == NaN.

    ВАЖНО: отношение не транзитивно (a≈b и b≈c не влечёт a≈c).
    """
    a_is_nan, b_is_nan = is_nan(a), is_nan(b)
    if a_is_nan or b_is_nan:
        return a_is_nan and b_is_nan
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Толерантность должна быть конечным неотрицательным числом.

    Raises:
        ValueError: Если value NaN/Inf или отрицательная
    """
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
