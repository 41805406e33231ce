from typing import Dict, List, Tuple

from esper import World

from expander.components.border_shape import BorderShape
from expander.components.border_style import BorderStyle
from expander.components.widget_box import WidgetBox
from expander.systems.outline_ops import current_outline_path

SurfacePath = List[Tuple[float, float]]


class BorderRenderer:
    """Strokes every measured widget outline as a line strip."""

    def __init__(self, world: World):
        self.world = world
        self.last_paths: Dict[int, SurfacePath] = {}

    def surface_path(self, entity: int) -> SurfacePath:
        """Current outline of ``entity`` in surface (bottom-left origin) coordinates."""
        try:
            shape = self.world.component_for_entity(entity, BorderShape)
            box = self.world.component_for_entity(entity, WidgetBox)
        except KeyError:
            return []
        return [box.to_surface(x, y) for x, y in current_outline_path(shape)]

    def render(self, arcade, headless: bool = False) -> None:
        self.last_paths = {}
        for ent, shape in self.world.get_component(BorderShape):
            if not shape.is_measured():
                continue
            path = self.surface_path(ent)
            if not path:
                continue
            self.last_paths[ent] = path
            if headless:
                continue
            style = self.world.try_component(ent, BorderStyle) or BorderStyle()
            arcade.draw_line_strip(path, style.color, style.stroke_width)
