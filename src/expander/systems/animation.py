from __future__ import annotations

import logging
from typing import Callable

from esper import World

from expander.clock import monotonic_ms
from expander.components.border_shape import BorderShape
from expander.components.border_style import BorderStyle
from expander.components.widget_box import WidgetBox
from expander.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_PRESS_END,
    EVENT_PRESS_START,
    EventBus,
)
from expander.interfaces import RenderSurface, Scheduler
from expander.systems.outline_ops import (
    compute_contracted_target,
    compute_expanded_target,
    outer_inset,
)

logger = logging.getLogger(__name__)


class BorderAnimationSystem:
    """Drives the border animation of a single widget entity.

    The entity id is the only handle kept on the widget: every tick checks
    ``World.entity_exists`` first, so deleting the entity quietly ends the
    tick chain. At most one tick is pending at any time.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        entity: int,
        scheduler: Scheduler,
        surface: RenderSurface | None = None,
        *,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.entity = entity
        self.scheduler = scheduler
        self.surface = surface
        self._clock = clock or monotonic_ms
        self._running = False
        self.ticks = 0
        event_bus.subscribe(EVENT_PRESS_START, self.on_press_start)
        event_bus.subscribe(EVENT_PRESS_END, self.on_press_end)

    @property
    def running(self) -> bool:
        return self._running

    def is_alive(self) -> bool:
        return self.world.entity_exists(self.entity)

    def on_press_start(self, sender, **kwargs):
        if kwargs.get('entity') != self.entity:
            return
        self.expand()

    def on_press_end(self, sender, **kwargs):
        if kwargs.get('entity') != self.entity:
            return
        self.contract()

    def expand(self) -> None:
        parts = self._widget_parts()
        if parts is None:
            return
        shape, box, style = parts
        compute_expanded_target(shape, box, outer_inset(style, shape), self._clock())
        self._animate('expand')

    def contract(self) -> None:
        parts = self._widget_parts()
        if parts is None:
            return
        shape, box, _ = parts
        compute_contracted_target(shape, box, self._clock())
        self._animate('contract')

    def tick(self) -> None:
        if not self.is_alive():
            logger.debug("dropping tick for discarded widget %s", self.entity)
            self._running = False
            return
        try:
            shape = self.world.component_for_entity(self.entity, BorderShape)
        except KeyError:
            self._running = False
            return

        now = self._clock()
        motion = shape.motion
        finished = True
        for point in shape.points:
            motion.advance(point, now)
            finished = motion.is_finished(point) and finished
        self.ticks += 1
        if finished:
            for point in shape.points:
                motion.settle(point)
        if self.surface is not None:
            self.surface.request_redraw()

        if finished:
            self._running = False
            logger.debug("widget %s settled after %d ticks", self.entity, self.ticks)
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, entity=self.entity, expanded=shape.expanded)
            return
        self.scheduler.post_delayed(self.tick, shape.config.tick_period_ms)

    def _animate(self, kind: str) -> None:
        # A retarget always wins over a pending stop or tick.
        self.scheduler.cancel(self.tick)
        self.scheduler.post_now(self.tick)
        self._running = True
        self.ticks = 0
        logger.debug("widget %s: %s animation scheduled", self.entity, kind)
        self.event_bus.emit(EVENT_ANIMATION_START, entity=self.entity, kind=kind)

    def _widget_parts(self) -> tuple[BorderShape, WidgetBox, BorderStyle] | None:
        if not self.is_alive():
            return None
        try:
            shape = self.world.component_for_entity(self.entity, BorderShape)
            box = self.world.component_for_entity(self.entity, WidgetBox)
        except KeyError:
            return None
        style = self.world.try_component(self.entity, BorderStyle) or BorderStyle()
        return shape, box, style
