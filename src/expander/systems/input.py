from __future__ import annotations

from typing import Any

from esper import World

from expander.components.widget_box import WidgetBox
from expander.events.bus import (
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_PRESS_END,
    EVENT_PRESS_START,
    EventBus,
)

PRIMARY_BUTTON = 1


class PressInputSystem:
    """Turns raw mouse presses into per-widget press start/end events.

    The release is delivered to the widget that took the press, wherever the
    pointer is when the button comes up.
    """

    def __init__(self, world: World, event_bus: EventBus, *, button: int = PRIMARY_BUTTON):
        self.world = world
        self.event_bus = event_bus
        self.button = button
        self.pressed_entity: int | None = None
        event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self.on_mouse_press)
        event_bus.subscribe(EVENT_MOUSE_RELEASE_RAW, self.on_mouse_release)

    def on_mouse_press(self, sender: Any, **payload: Any) -> None:
        point = self._coerce(payload)
        if point is None:
            return
        entity = self.widget_at(*point)
        if entity is None:
            return
        self.pressed_entity = entity
        self.event_bus.emit(EVENT_PRESS_START, entity=entity)

    def on_mouse_release(self, sender: Any, **payload: Any) -> None:
        if self._coerce(payload) is None:
            return
        entity = self.pressed_entity
        self.pressed_entity = None
        if entity is None or not self.world.entity_exists(entity):
            return
        self.event_bus.emit(EVENT_PRESS_END, entity=entity)

    def widget_at(self, x: float, y: float) -> int | None:
        hit = None
        # Later widgets are drawn on top; the last hit wins.
        for ent, box in self.world.get_component(WidgetBox):
            if box.contains(x, y):
                hit = ent
        return hit

    def _coerce(self, payload: dict[str, Any]) -> tuple[float, float] | None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return None
        try:
            xf = float(x)
            yf = float(y)
            button_int = int(button)
        except (TypeError, ValueError):
            return None
        if button_int != self.button:
            return None
        return xf, yf
