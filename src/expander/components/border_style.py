from dataclasses import dataclass

from expander.constants import BORDER_COLOR, BORDER_STROKE


@dataclass(slots=True)
class BorderStyle:
    color: tuple[int, int, int, int] = BORDER_COLOR
    stroke_width: float = BORDER_STROKE

    def __post_init__(self) -> None:
        if self.stroke_width < 0:
            raise ValueError("stroke_width must be >= 0")
