"""
random_utils — утилиты генерации случайных чисел

Равномерная выборка из замкнутого диапазона [low, high] для целых и float границ.
"""

# Numeric bounds
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

# Random sources
from src.random_utils.sources import (
    CountingSource,
    LockedSource,
    PyRandomSource,
    RandomSource,
    ThreadLocalSource,
)

# Configuration
from src.random_utils.config import FloatMode, SamplerConfig

# Range sampler
from src.random_utils.range_sampler import (
    DEFAULT_SOURCE,
    InvalidRange,
    RangeSampler,
    SampleOutcome,
    configure_default_sampler,
    get_default_sampler,
    random_range,
    try_random_range,
)

__all__ = [
    # Numeric — Constants
    "FLOAT_UNIT",
    "INTEGER_UNIT",
    # Numeric — Types
    "NumericKind",
    # Numeric — Functions
    "classify_bound",
    "is_valid_float",
    "next_up",
    "one_unit",
    "resolve_kind",
    "validate_finite_bound",
    # Sources
    "RandomSource",
    "PyRandomSource",
    "ThreadLocalSource",
    "LockedSource",
    "CountingSource",
    # Configuration
    "FloatMode",
    "SamplerConfig",
    # Range sampler — Exceptions
    "InvalidRange",
    # Range sampler — Types
    "RangeSampler",
    "SampleOutcome",
    # Range sampler — Defaults
    "DEFAULT_SOURCE",
    # Range sampler — Functions
    "configure_default_sampler",
    "get_default_sampler",
    "random_range",
    "try_random_range",
]
