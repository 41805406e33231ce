from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from expander.components.border_point import BorderPoint

if TYPE_CHECKING:
    from expander.config import MotionConfig
    from expander.motion.base import MotionStrategy


@dataclass(slots=True)
class BorderShape:
    """Closed rectangle outline animated by a single motion strategy.

    ``points`` is empty until the widget is first measured, then always holds
    four corners followed by a copy of the first corner.
    """
    motion: MotionStrategy
    points: list[BorderPoint] = field(default_factory=list)
    expanded: bool = False

    @property
    def config(self) -> MotionConfig:
        return self.motion.config

    def is_measured(self) -> bool:
        return bool(self.points)

    def is_finished(self) -> bool:
        return all(self.motion.is_finished(point) for point in self.points)
