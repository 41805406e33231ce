"""Pluggable per-point motion models."""
from __future__ import annotations

from expander.config import MotionConfig
from .base import MotionStrategy
from .linear import LinearMotion
from .spring import SpringMotion

MOTION_MODELS: dict[str, type[MotionStrategy]] = {
    SpringMotion.name: SpringMotion,
    LinearMotion.name: LinearMotion,
}


def create_motion(config: MotionConfig) -> MotionStrategy:
    try:
        strategy_cls = MOTION_MODELS[config.model]
    except KeyError as exc:
        raise KeyError(f"Motion model '{config.model}' is not registered") from exc
    return strategy_cls(config)


__all__ = [
    "MOTION_MODELS",
    "LinearMotion",
    "MotionStrategy",
    "SpringMotion",
    "create_motion",
]
