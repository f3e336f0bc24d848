"""
SamplerConfig — конфигурация RangeSampler

Immutable Pydantic модель. Неизвестные ключи отклоняются.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class FloatMode(str, Enum):
    """
    Способ получения включительной верхней границы для float.

    EXACT: исключающая граница = следующее представимое float после high,
           все значения в [low, high], high достижим.
    COMPAT: исторический режим, исключающая граница = high + 1.0,
            значения в [low, high + 1.0). Только для воспроизведения
            старого поведения.
    """

    EXACT = "EXACT"
    COMPAT = "COMPAT"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class SamplerConfig(BaseModel):
    """Параметры RangeSampler."""

    float_mode: FloatMode = Field(
        default=FloatMode.EXACT,
        description="Способ расчёта включительной верхней границы для float",
    )
    seed: int | None = Field(
        default=None,
        description="Seed для thread-local источника (None = энтропия ОС)",
    )

    model_config = {"frozen": True, "extra": "forbid"}
