from __future__ import annotations

from esper import World

from expander.components.border_shape import BorderShape
from expander.components.border_style import BorderStyle
from expander.components.widget_box import Padding, WidgetBox
from expander.config import MotionConfig, spring_config
from expander.motion import create_motion
from expander.systems.outline_ops import compute_resting_outline


def create_border_widget(
    world: World,
    left: float,
    bottom: float,
    width: float,
    height: float,
    *,
    padding: Padding | None = None,
    config: MotionConfig | None = None,
    style: BorderStyle | None = None,
    now: float | None = None,
) -> int:
    """Create a widget entity; pass ``now`` to measure its resting outline immediately."""
    box = WidgetBox(left=left, bottom=bottom, width=width, height=height, padding=padding or Padding())
    shape = BorderShape(motion=create_motion(config or spring_config()))
    ent = world.create_entity(box, style or BorderStyle(), shape)
    if now is not None:
        compute_resting_outline(shape, box, now)
    return ent
