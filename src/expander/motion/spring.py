from __future__ import annotations

from expander.components.border_point import BorderPoint
from expander.motion.base import MotionStrategy


class SpringMotion(MotionStrategy):
    """Hooke's-law pull toward the target with geometric velocity decay.

    Unit mass, explicit Euler. Velocity is in units/second while ``dt`` is in
    milliseconds, hence the /1000 on the position step. Velocity survives a
    retarget, so reversing mid-flight keeps the point's momentum.
    """

    name = "spring"

    def advance(self, point: BorderPoint, now: float) -> None:
        dt = self.elapsed(point, now)
        k = self.config.stiffness
        viscosity = self.config.viscosity

        ax = k * (point.target_x - point.x)
        ay = k * (point.target_y - point.y)

        point.vx = (point.vx + ax * dt) * viscosity
        point.vy = (point.vy + ay * dt) * viscosity

        point.x += point.vx * dt / 1000
        point.y += point.vy * dt / 1000

    def settle(self, point: BorderPoint) -> None:
        # Arrival is judged on position only, so a point may still be swinging.
        point.x = point.target_x
        point.y = point.target_y
        point.vx = point.vy = 0.0
