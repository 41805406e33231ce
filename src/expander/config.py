from __future__ import annotations

from dataclasses import dataclass, replace

from expander.constants import (
    ARRIVAL_TOLERANCE,
    LINEAR_OUTER_EXTRA,
    LINEAR_SPEED,
    MAX_STEP_MS,
    SPRING_OUTER_EXTRA,
    SPRING_STIFFNESS,
    SPRING_VISCOSITY,
    TICK_PERIOD_MS,
)


@dataclass(frozen=True, slots=True)
class MotionConfig:
    """Tunable numbers for one border animation.

    ``model`` selects the motion strategy by name (see ``expander.motion``).
    The remaining fields are shared by both strategies; each strategy only
    reads the ones it needs.
    """

    model: str = "spring"
    stiffness: float = SPRING_STIFFNESS
    viscosity: float = SPRING_VISCOSITY
    speed: float = LINEAR_SPEED
    tolerance: float = ARRIVAL_TOLERANCE
    max_step_ms: float = MAX_STEP_MS
    tick_period_ms: float = TICK_PERIOD_MS
    outer_extra: float = SPRING_OUTER_EXTRA

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.stiffness <= 0:
            raise ValueError("stiffness must be > 0")
        if not 0.0 < self.viscosity < 1.0:
            raise ValueError("viscosity must be between 0 and 1 (exclusive)")
        if self.speed <= 0:
            raise ValueError("speed must be > 0")
        if self.tolerance <= 0:
            raise ValueError("tolerance must be > 0")
        if self.max_step_ms <= 0:
            raise ValueError("max_step_ms must be > 0")
        if self.tick_period_ms <= 0:
            raise ValueError("tick_period_ms must be > 0")
        if self.outer_extra < 0:
            raise ValueError("outer_extra must be >= 0")

    def with_overrides(self, **changes) -> "MotionConfig":
        return replace(self, **changes)


def spring_config(**overrides) -> MotionConfig:
    """Settings of the spring-driven button."""
    return MotionConfig(model="spring", outer_extra=SPRING_OUTER_EXTRA).with_overrides(**overrides)


def linear_config(**overrides) -> MotionConfig:
    """Settings of the constant-speed button."""
    return MotionConfig(model="linear", outer_extra=LINEAR_OUTER_EXTRA).with_overrides(**overrides)


def config_for_model(model: str, **overrides) -> MotionConfig:
    if model == "spring":
        return spring_config(**overrides)
    if model == "linear":
        return linear_config(**overrides)
    raise KeyError(f"Motion model '{model}' is not registered")
