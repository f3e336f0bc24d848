"""
Тесты для модуля Numeric Bounds

Проверяет:
1. Классификацию границ (INTEGER / FLOAT / отказ)
2. Семантику смешанных пар int/float
3. Единичный инкремент
4. next_up и NaN/Inf валидацию
"""

import math
import sys
from decimal import Decimal
from fractions import Fraction

import pytest

from src.random_utils.numeric import (
    FLOAT_UNIT,
    INTEGER_UNIT,
    NumericKind,
    classify_bound,
    is_valid_float,
    next_up,
    one_unit,
    resolve_kind,
    validate_finite_bound,
)

# =============================================================================
# ТЕСТЫ КЛАССИФИКАЦИИ
# =============================================================================


class TestClassifyBound:
    """Тесты для classify_bound"""

    def test_int_is_integer(self) -> None:
        assert classify_bound(0) is NumericKind.INTEGER
        assert classify_bound(-10) is NumericKind.INTEGER
        assert classify_bound(10**30) is NumericKind.INTEGER

    def test_float_is_float(self) -> None:
        assert classify_bound(0.0) is NumericKind.FLOAT
        assert classify_bound(-1.5) is NumericKind.FLOAT

    def test_fraction_is_float(self) -> None:
        """Рациональные нецелые типы используют float семантику"""
        assert classify_bound(Fraction(1, 3)) is NumericKind.FLOAT

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError, match="bool is not a valid range bound"):
            classify_bound(True)

    @pytest.mark.parametrize("value", ["10", None, Decimal("1.5"), 1 + 2j, [1]])
    def test_non_real_rejected(self, value) -> None:
        with pytest.raises(TypeError, match="must be an integer or real number"):
            classify_bound(value)

    def test_numpy_scalars(self) -> None:
        np = pytest.importorskip("numpy")

        assert classify_bound(np.int64(3)) is NumericKind.INTEGER
        assert classify_bound(np.uint8(3)) is NumericKind.INTEGER
        assert classify_bound(np.float32(0.5)) is NumericKind.FLOAT


class TestResolveKind:
    """Тесты для resolve_kind"""

    def test_both_integers(self) -> None:
        assert resolve_kind(1, 6) is NumericKind.INTEGER

    def test_both_floats(self) -> None:
        assert resolve_kind(1.0, 6.0) is NumericKind.FLOAT

    def test_mixed_pair_is_float(self) -> None:
        """Смешанная пара следует числовой башне Python"""
        assert resolve_kind(0, 1.5) is NumericKind.FLOAT
        assert resolve_kind(0.5, 2) is NumericKind.FLOAT

    def test_invalid_high_rejected(self) -> None:
        with pytest.raises(TypeError):
            resolve_kind(1, "6")


class TestOneUnit:
    """Тесты для one_unit"""

    def test_integer_unit(self) -> None:
        assert one_unit(NumericKind.INTEGER) == INTEGER_UNIT == 1
        assert isinstance(one_unit(NumericKind.INTEGER), int)

    def test_float_unit(self) -> None:
        assert one_unit(NumericKind.FLOAT) == FLOAT_UNIT == 1.0
        assert isinstance(one_unit(NumericKind.FLOAT), float)


# =============================================================================
# ТЕСТЫ FLOAT ПРИМИТИВОВ
# =============================================================================


class TestNextUp:
    """Тесты для next_up"""

    @pytest.mark.parametrize("value", [0.0, 1.0, -1.0, 1e300, -1e-300, 0.1])
    def test_strictly_greater(self, value: float) -> None:
        assert next_up(value) > value

    def test_no_float_in_between(self) -> None:
        """Между x и next_up(x) нет представимых значений"""
        x = 1.0
        up = next_up(x)
        assert (x + up) / 2 in (x, up)

    def test_max_float_overflows_to_inf(self) -> None:
        assert next_up(sys.float_info.max) == math.inf


class TestFiniteValidation:
    """Тесты для is_valid_float и validate_finite_bound"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_invalid(self, value: float) -> None:
        assert not is_valid_float(value)

    def test_validate_passes_finite(self) -> None:
        validate_finite_bound(1.5, "low")
        validate_finite_bound(Fraction(1, 3), "high")

    def test_validate_rejects_nan_with_name(self) -> None:
        with pytest.raises(ValueError, match="low must be a finite number"):
            validate_finite_bound(math.nan, "low")

    def test_validate_rejects_integer_beyond_float(self) -> None:
        with pytest.raises(ValueError, match="low is too large to be represented"):
            validate_finite_bound(-(10**400), "low")

    def test_validate_rejects_inf(self) -> None:
        with pytest.raises(ValueError, match="high must be a finite number"):
            validate_finite_bound(math.inf, "high")
