from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Padding:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass(slots=True)
class WidgetBox:
    """Bounds of a widget on its surface plus its content margins.

    ``left``/``bottom`` place the box in surface coordinates (arcade origin,
    bottom-left). Outline geometry is computed in box-local coordinates with
    the origin at the top-left corner and y growing downwards.
    """
    left: float
    bottom: float
    width: float
    height: float
    padding: Padding = field(default_factory=Padding)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def top(self) -> float:
        return self.bottom + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def to_surface(self, local_x: float, local_y: float) -> tuple[float, float]:
        return (self.left + local_x, self.top - local_y)
