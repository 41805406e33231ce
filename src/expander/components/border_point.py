from dataclasses import dataclass


@dataclass(slots=True)
class BorderPoint:
    """One vertex of a border outline.

    ``vx``/``vy`` hold whatever transient motion state the active strategy
    keeps: velocity in units/second for the spring model, signed speed in
    units/ms for the linear model.
    """
    x: float
    y: float
    target_x: float
    target_y: float
    last_tick: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def resting(cls, x: float, y: float, now: float) -> "BorderPoint":
        return cls(x=x, y=y, target_x=x, target_y=y, last_tick=now)

    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def target(self) -> tuple[float, float]:
        return (self.target_x, self.target_y)

    def is_within(self, tolerance: float) -> bool:
        return abs(self.x - self.target_x) <= tolerance and abs(self.y - self.target_y) <= tolerance
