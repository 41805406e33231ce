from __future__ import annotations

from expander.components.border_point import BorderPoint
from expander.motion.base import MotionStrategy


def _direction(target: float, current: float, speed: float) -> float:
    return speed if target > current else -speed


class LinearMotion(MotionStrategy):
    """Constant per-axis speed, clamped so a point stops exactly on its target."""

    name = "linear"

    def place(self, point: BorderPoint, x: float, y: float, now: float) -> None:
        super().place(point, x, y, now)
        self._on_retarget(point)

    def _on_retarget(self, point: BorderPoint) -> None:
        speed = self.config.speed
        point.vx = _direction(point.target_x, point.x, speed)
        point.vy = _direction(point.target_y, point.y, speed)

    def advance(self, point: BorderPoint, now: float) -> None:
        dt = self.elapsed(point, now)

        x = point.x + point.vx * dt
        y = point.y + point.vy * dt

        point.x = min(x, point.target_x) if point.vx > 0 else max(x, point.target_x)
        point.y = min(y, point.target_y) if point.vy > 0 else max(y, point.target_y)
