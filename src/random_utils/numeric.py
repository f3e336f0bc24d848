"""
Numeric Bounds — типы границ диапазона

Модуль определяет, какие числовые типы допустимы в качестве границ
диапазона [low, high], и предоставляет примитивы для работы с ними:
- Классификация границ (INTEGER / FLOAT)
- Единичный инкремент для перехода от [low, high) к [low, high]
- Следующее представимое float значение (next_up)
- NaN/Inf проверки для float границ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не принимается как числовая граница
2. Смешанная пара int/float всегда классифицируется как FLOAT
3. next_up(x) > x для любого конечного x
"""

import math
import numbers
from enum import Enum
from typing import Any, Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Единичный инкремент для целочисленных границ
INTEGER_UNIT: Final[int] = 1

# Единичный инкремент для float границ (исторический режим COMPAT)
FLOAT_UNIT: Final[float] = 1.0


# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Семантика выборки для пары границ."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"


# =============================================================================
# КЛАССИФИКАЦИЯ ГРАНИЦ
# =============================================================================


def classify_bound(value: Any) -> NumericKind:
    """
    Определение семантики выборки для одной границы.

    Args:
        value: Граница диапазона

    Returns:
        NumericKind.INTEGER для целых (int, numpy integers),
        NumericKind.FLOAT для остальных вещественных (float, Fraction, numpy floats)

    Raises:
        TypeError: Если value не является вещественным числом или является bool

    Examples:
        >>> classify_bound(10)
        <NumericKind.INTEGER: 'INTEGER'>
        >>> classify_bound(0.5)
        <NumericKind.FLOAT: 'FLOAT'>
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a valid range bound, got {value!r}")

    if isinstance(value, numbers.Integral):
        return NumericKind.INTEGER

    if isinstance(value, numbers.Real):
        return NumericKind.FLOAT

    raise TypeError(
        f"Range bound must be an integer or real number, "
        f"got {type(value).__name__}: {value!r}"
    )


def resolve_kind(low: Any, high: Any) -> NumericKind:
    """
    Семантика выборки для пары (low, high).

    INTEGER только если обе границы целые. Смешанная пара int/float
    следует числовой башне Python и даёт FLOAT.

    Raises:
        TypeError: Если одна из границ не поддерживается
    """
    low_kind = classify_bound(low)
    high_kind = classify_bound(high)

    if low_kind is NumericKind.INTEGER and high_kind is NumericKind.INTEGER:
        return NumericKind.INTEGER
    return NumericKind.FLOAT


def one_unit(kind: NumericKind) -> int | float:
    """Единичный инкремент для данной семантики: 1 или 1.0."""
    if kind is NumericKind.INTEGER:
        return INTEGER_UNIT
    return FLOAT_UNIT


# =============================================================================
# FLOAT ПРИМИТИВЫ
# =============================================================================


def next_up(value: float) -> float:
    """
    Следующее представимое float значение выше value.

    Используется как исключающая верхняя граница, при которой
    полуоткрытый интервал [low, next_up(high)) содержит ровно
    те же float значения, что и замкнутый [low, high].

    Examples:
        >>> next_up(1.0) > 1.0
        True
        >>> next_up(0.0)
        5e-324
    """
    return math.nextafter(value, math.inf)


def is_valid_float(value: float) -> bool:
    """True если значение конечно (не NaN, не Inf)."""
    return math.isfinite(value)


def validate_finite_bound(value: Any, name: str) -> None:
    """
    Валидация, что float граница конечна.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value равно NaN или Inf, или не представимо как float
    """
    try:
        as_float = float(value)
    except OverflowError:
        raise ValueError(
            f"{name} is too large to be represented as a float, got {value}"
        ) from None

    if not is_valid_float(as_float):
        raise ValueError(f"{name} must be a finite number (not NaN/Inf), got {value}")
