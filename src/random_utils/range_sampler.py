"""
RangeSampler — равномерная выборка из замкнутого диапазона [low, high]

Источники случайности выбирают из полуоткрытого интервала [a, b).
RangeSampler переводит это в контракт, включительный с обеих сторон:
    high_adjusted = high + one_unit(T)     (целые, float в режиме COMPAT)
    high_adjusted = next_up(high)          (float в режиме EXACT)
и делает ровно одну выборку из [low, high_adjusted).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. low > high → InvalidRange (никогда не sentinel и не перестановка границ)
2. Валидация выполняется до любой выборки: отклонённый вызов не потребляет энтропию
3. low == high → всегда low
4. Результат всегда в [low, high] (кроме документированного FloatMode.COMPAT)
5. Между вызовами не сохраняется состояние, кроме состояния источника
"""

import logging
import operator
from typing import Any, NamedTuple, Optional

from src.random_utils.config import FloatMode, SamplerConfig
from src.random_utils.numeric import (
    NumericKind,
    is_valid_float,
    next_up,
    one_unit,
    resolve_kind,
    validate_finite_bound,
)
from src.random_utils.sources import RandomSource, ThreadLocalSource

logger = logging.getLogger(__name__)

# Общий источник по умолчанию: отдельный генератор на поток, энтропия ОС
DEFAULT_SOURCE = ThreadLocalSource()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRange(ValueError):
    """
    Нарушение предусловия low <= high.

    Ошибка программиста, а не восстанавливаемое состояние: распространяется
    к вызывающему немедленно. Обе границы доступны как атрибуты для диагностики.
    """

    def __init__(self, low: Any, high: Any) -> None:
        self.low = low
        self.high = high
        super().__init__(f"Low({low}) is higher than high({high}).")


# =============================================================================
# RESULT TYPES
# =============================================================================


class SampleOutcome(NamedTuple):
    """Результат try_sample: либо value, либо error."""

    value: Any
    error: Optional[InvalidRange]

    @property
    def ok(self) -> bool:
        return self.error is None


class _PreparedRange(NamedTuple):
    low: Any
    high_exclusive: Any
    kind: NumericKind
    result_type: type
    # Исходные границы вызывающего; None если приведение не ограничивается
    bounds: Optional[tuple]


# =============================================================================
# RANGE SAMPLER
# =============================================================================


class RangeSampler:
    """
    Равномерная выборка из [low, high] для целых и float границ.

    Args:
        config: Конфигурация (default: SamplerConfig())
        source: Источник случайности. Если не задан: ThreadLocalSource(seed)
            при config.seed, иначе общий DEFAULT_SOURCE.

    Examples:
        >>> sampler = RangeSampler(SamplerConfig(seed=42))
        >>> 1 <= sampler.sample(1, 6) <= 6
        True
        >>> sampler.sample(10, 10)
        10
    """

    def __init__(
        self,
        config: Optional[SamplerConfig] = None,
        source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config if config is not None else SamplerConfig()

        if source is not None:
            self.source = source
        elif self.config.seed is not None:
            self.source = ThreadLocalSource(seed=self.config.seed)
        else:
            self.source = DEFAULT_SOURCE

        if self.config.float_mode is FloatMode.COMPAT:
            logger.warning(
                "RangeSampler in COMPAT float mode: float draws lie in "
                "[low, high + 1.0) and may exceed high"
            )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def sample(self, low, high):
        """
        Одно равномерно распределённое значение из [low, high].

        Args:
            low: Нижняя граница (включительно)
            high: Верхняя граница (включительно)

        Returns:
            Значение v: low <= v <= high, в типе границ

        Raises:
            InvalidRange: Если low > high
            TypeError: Если граница не целое и не вещественное число
            ValueError: Если float граница равна NaN или Inf
        """
        prepared = self._prepare(low, high)
        if prepared is None:
            return low
        return self._draw(prepared)

    def try_sample(self, low, high) -> SampleOutcome:
        """
        sample() с контрактом результата вместо исключения InvalidRange.

        Только InvalidRange превращается в SampleOutcome.error;
        TypeError и ValueError распространяются как в sample().
        """
        try:
            return SampleOutcome(value=self.sample(low, high), error=None)
        except InvalidRange as exc:
            return SampleOutcome(value=None, error=exc)

    def sample_many(self, low, high, count: int) -> list:
        """
        count независимых значений из [low, high].

        Границы валидируются один раз до первой выборки.

        Raises:
            ValueError: Если count < 0
            InvalidRange: Если low > high
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        prepared = self._prepare(low, high)
        if prepared is None:
            return [low] * count
        return [self._draw(prepared) for _ in range(count)]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _prepare(self, low, high) -> Optional[_PreparedRange]:
        """Валидация и расчёт исключающей верхней границы. None: выборка не нужна."""
        kind = resolve_kind(low, high)

        if kind is NumericKind.FLOAT:
            validate_finite_bound(low, "low")
            validate_finite_bound(high, "high")

        if low > high:
            logger.debug("Rejected range low=%r high=%r", low, high)
            raise InvalidRange(low, high)

        # Тип вызывающего сохраняется только для однотипной пары:
        # (np.int8(0), 1000) не помещается в int8
        if type(low) is type(high):
            result_type = type(low)
        elif kind is NumericKind.INTEGER:
            result_type = int
        else:
            result_type = float

        if kind is NumericKind.INTEGER:
            int_low = operator.index(low)
            int_high = operator.index(high)
            return _PreparedRange(
                int_low, int_high + one_unit(kind), kind, result_type, None
            )

        float_low = float(low)
        float_high = float(high)
        high_exclusive = self._float_upper(float_high)

        if not is_valid_float(high_exclusive):
            # high == максимальный float: next_up переполняется в inf
            if float_low == float_high:
                return None
            high_exclusive = float_high

        bounds = None if self.config.float_mode is FloatMode.COMPAT else (low, high)
        return _PreparedRange(float_low, high_exclusive, kind, result_type, bounds)

    def _float_upper(self, high: float) -> float:
        if self.config.float_mode is FloatMode.COMPAT:
            adjusted = high + one_unit(NumericKind.FLOAT)
            # Для больших |high| единица теряется при округлении
            if adjusted > high:
                return adjusted
        return next_up(high)

    def _draw(self, prepared: _PreparedRange):
        value = self.source.draw_uniform(prepared.low, prepared.high_exclusive)
        return _restore_type(value, prepared)


def _restore_type(value, prepared: _PreparedRange):
    """Приведение к общему типу границ вызывающего (numpy.int64 → numpy.int64)."""
    result_type = prepared.result_type
    if result_type in (int, float):
        return value
    restored = result_type(value)
    if prepared.bounds is None:
        return restored

    # Обратное приведение float, например в Fraction, может выйти
    # за исходную границу на одно округление
    low, high = prepared.bounds
    if restored < low:
        return result_type(low)
    if restored > high:
        return result_type(high)
    return restored


# =============================================================================
# DEFAULT SAMPLER
# =============================================================================

# Глобальный экземпляр sampler
_DEFAULT_SAMPLER = RangeSampler()


def get_default_sampler() -> RangeSampler:
    """Текущий sampler, используемый random_range и try_random_range."""
    return _DEFAULT_SAMPLER


def configure_default_sampler(
    config: Optional[SamplerConfig] = None,
    source: Optional[RandomSource] = None,
) -> RangeSampler:
    """
    Замена глобального sampler.

    Returns:
        Новый sampler по умолчанию
    """
    global _DEFAULT_SAMPLER
    _DEFAULT_SAMPLER = RangeSampler(config=config, source=source)
    return _DEFAULT_SAMPLER


def random_range(low, high):
    """
    Возвращает случайное число из диапазона [low, high].

    Числа равномерно распределены по [low, high].

    Raises:
        InvalidRange: Если low > high

    Examples:
        >>> random_range(10, 10)
        10
        >>> 0.0 <= random_range(0.0, 1.0) <= 1.0
        True
    """
    return _DEFAULT_SAMPLER.sample(low, high)


def try_random_range(low, high) -> SampleOutcome:
    """random_range() с контрактом результата вместо InvalidRange."""
    return _DEFAULT_SAMPLER.try_sample(low, high)
