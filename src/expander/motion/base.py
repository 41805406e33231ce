from __future__ import annotations

from abc import ABC, abstractmethod

from expander.components.border_point import BorderPoint
from expander.config import MotionConfig, config_for_model


class MotionStrategy(ABC):
    """Update rule applied to one border point per tick.

    Time is always passed in explicitly (milliseconds) so a strategy never
    reads a clock of its own.
    """

    name: str = ""

    def __init__(self, config: MotionConfig | None = None) -> None:
        self.config = config or config_for_model(self.name)

    def elapsed(self, point: BorderPoint, now: float) -> float:
        """Consume the time since the point's last tick, clamped to [0, max_step_ms]."""
        dt = min(self.config.max_step_ms, now - point.last_tick)
        point.last_tick = now
        if dt < 0.0:
            return 0.0
        return dt

    def place(self, point: BorderPoint, x: float, y: float, now: float) -> None:
        """Put the point at rest on (x, y)."""
        point.x = point.target_x = x
        point.y = point.target_y = y
        point.vx = point.vy = 0.0
        point.last_tick = now

    def retarget(self, point: BorderPoint, target_x: float, target_y: float, now: float) -> None:
        point.target_x = target_x
        point.target_y = target_y
        point.last_tick = now
        self._on_retarget(point)

    def is_finished(self, point: BorderPoint) -> bool:
        return point.is_within(self.config.tolerance)

    def settle(self, point: BorderPoint) -> None:
        """Called once the whole outline has arrived; leaves the point at rest."""

    @abstractmethod
    def advance(self, point: BorderPoint, now: float) -> None:
        ...

    def _on_retarget(self, point: BorderPoint) -> None:
        """Hook for strategies whose transient state depends on the new target."""
