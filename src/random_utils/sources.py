"""
Random Sources — источники равномерных случайных значений

Модуль реализует внешний источник случайности для RangeSampler:
    draw_uniform(low, high_exclusive) -> значение из [low, high_exclusive)

Источник отвечает за свой жизненный цикл (seeding, состояние генератора).
RangeSampler только запрашивает одно значение на вызов.

Реализации:
- PyRandomSource: один random.Random
- ThreadLocalSource: отдельный генератор на каждый поток (без блокировок)
- LockedSource: один общий генератор под threading.Lock
- CountingSource: обёртка со счётчиком выборок (диагностика)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в полуоткрытом интервале [low, high_exclusive)
2. Пустой интервал (high_exclusive <= low) → ValueError
3. ThreadLocalSource никогда не разделяет состояние генератора между потоками
"""

import logging
import random
import threading
from typing import Optional, Protocol, runtime_checkable

from src.random_utils.numeric import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class RandomSource(Protocol):
    """Источник равномерных значений на полуоткрытом интервале."""

    def draw_uniform(self, low, high_exclusive):
        """Одно значение из [low, high_exclusive): int для int границ, float для float."""
        ...


# =============================================================================
# PYTHON RANDOM SOURCE
# =============================================================================


class PyRandomSource:
    """
    Источник на базе одного random.Random.

    Не потокобезопасен сам по себе: для конкурентного использования
    оборачивается ThreadLocalSource или LockedSource.
    """

    def __init__(self, seed: Optional[int | str] = None) -> None:
        self._rng = random.Random(seed)

    def draw_uniform(self, low, high_exclusive):
        """
        Равномерная выборка из [low, high_exclusive).

        Args:
            low: Нижняя граница (включительно)
            high_exclusive: Верхняя граница (исключительно)

        Returns:
            int если обе границы int, иначе float

        Raises:
            ValueError: Если интервал пуст (high_exclusive <= low)
        """
        if not high_exclusive > low:
            raise ValueError(
                f"Empty half-open interval [{low}, {high_exclusive})"
            )

        if isinstance(low, int) and isinstance(high_exclusive, int):
            return self._rng.randrange(low, high_exclusive)

        return self._draw_float(float(low), float(high_exclusive))

    def _draw_float(self, low: float, high_exclusive: float) -> float:
        if not (is_valid_float(low) and is_valid_float(high_exclusive)):
            raise ValueError(
                f"Float interval bounds must be finite, got [{low}, {high_exclusive})"
            )

        # Выпуклая комбинация не переполняется для конечных границ,
        # в отличие от low + (high - low) * u
        while True:
            u = self._rng.random()
            value = low * (1.0 - u) + high_exclusive * u
            # Округление может дать значение за пределами интервала
            if low <= value < high_exclusive:
                return value


# =============================================================================
# THREAD-LOCAL SOURCE
# =============================================================================


class ThreadLocalSource:
    """
    Отдельный PyRandomSource на каждый поток.

    Генератор потока создаётся лениво при первом вызове из этого потока.
    Конкурентные вызовы из разных потоков не блокируют друг друга.

    С seed генератор потока инициализируется из (seed, имя потока):
    один и тот же seed и те же имена потоков дают те же последовательности.
    Если имя потока в момент создания генератора носит ещё хотя бы один
    живой поток, в seed добавляется threading.get_ident(): такие потоки
    получают разные последовательности, но без гарантии воспроизводимости.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._local = threading.local()

    def _thread_source(self) -> PyRandomSource:
        source = getattr(self._local, "source", None)
        if source is None:
            thread_name = threading.current_thread().name
            if self.seed is None:
                source = PyRandomSource()
            else:
                source = PyRandomSource(self._thread_seed(thread_name))
            self._local.source = source
            logger.debug(
                "Created random source for thread %s (seeded=%s)",
                thread_name,
                self.seed is not None,
            )
        return source

    def _thread_seed(self, thread_name: str) -> str:
        namesakes = sum(1 for t in threading.enumerate() if t.name == thread_name)
        if namesakes > 1:
            return f"{self.seed}:{thread_name}:{threading.get_ident()}"
        return f"{self.seed}:{thread_name}"

    def draw_uniform(self, low, high_exclusive):
        return self._thread_source().draw_uniform(low, high_exclusive)


# =============================================================================
# LOCKED SOURCE
# =============================================================================


class LockedSource:
    """Один общий генератор, доступ сериализован через threading.Lock."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._source = PyRandomSource(seed)
        self._lock = threading.Lock()

    def draw_uniform(self, low, high_exclusive):
        with self._lock:
            return self._source.draw_uniform(low, high_exclusive)


# =============================================================================
# COUNTING SOURCE
# =============================================================================


class CountingSource:
    """
    Обёртка, считающая количество выборок.

    Позволяет наблюдать, что отклонённый вызов не потребляет энтропию.
    """

    def __init__(self, inner: RandomSource) -> None:
        self.inner = inner
        self.draw_count = 0
        self._lock = threading.Lock()

    def draw_uniform(self, low, high_exclusive):
        value = self.inner.draw_uniform(low, high_exclusive)
        with self._lock:
            self.draw_count += 1
        return value
