from __future__ import annotations

from typing import Callable

from esper import World

from expander.clock import monotonic_ms
from expander.components.border_shape import BorderShape
from expander.components.widget_box import Padding, WidgetBox
from expander.events.bus import EVENT_WIDGET_RESIZED, EventBus
from expander.interfaces import RenderSurface
from expander.systems.outline_ops import compute_resting_outline


class LayoutSystem:
    """Keeps widget boxes in sync with the host and re-measures their outlines."""

    def __init__(self, world: World, event_bus: EventBus, *, clock: Callable[[], float] | None = None):
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic_ms
        event_bus.subscribe(EVENT_WIDGET_RESIZED, self.on_widget_resized)

    def on_widget_resized(self, sender, **kwargs):
        entity = kwargs.get('entity')
        if entity is None or not self.world.entity_exists(entity):
            return
        try:
            box = self.world.component_for_entity(entity, WidgetBox)
        except KeyError:
            return
        for name in ('left', 'bottom', 'width', 'height'):
            value = kwargs.get(name)
            if value is not None:
                setattr(box, name, float(value))
        padding = kwargs.get('padding')
        if isinstance(padding, Padding):
            box.padding = padding
        self.measure(entity)

    def measure(self, entity: int, surface: RenderSurface | None = None) -> None:
        """Rebuild the resting outline of ``entity``.

        When a surface is given its size and margins replace the stored box
        geometry first.
        """
        try:
            box = self.world.component_for_entity(entity, WidgetBox)
            shape = self.world.component_for_entity(entity, BorderShape)
        except KeyError:
            return
        if surface is not None:
            box.width, box.height = surface.bounds()
            box.padding = surface.content_margins()
        compute_resting_outline(shape, box, self._clock())
