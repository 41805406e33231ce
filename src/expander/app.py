"""Demo window hosting expanding-border buttons.

Press and hold a button to expand its border; release to let it settle back.
"""
from __future__ import annotations

import argparse
import logging

import arcade
from arcade import Window, run, set_background_color, color

from expander.clock import monotonic_ms
from expander.components.widget_box import Padding, WidgetBox
from expander.config import config_for_model
from expander.constants import (
    BUTTON_GAP,
    BUTTON_HEIGHT,
    BUTTON_PADDING,
    BUTTON_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)
from expander.events.bus import (
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE_RAW,
    EVENT_WIDGET_RESIZED,
    EventBus,
)
from expander.rendering.border_renderer import BorderRenderer
from expander.scheduling import ArcadeScheduler
from expander.systems.input import PressInputSystem
from expander.systems.layout import LayoutSystem
from expander.world import create_world, spawn_animated_widget

logger = logging.getLogger(__name__)

MODELS = ("spring", "linear")


class WidgetSurface:
    """Render surface handed to one widget's driver."""

    def __init__(self, window: "ExpanderWindow", entity: int | None = None):
        self.window = window
        self.entity = entity
        self.redraw_requests = 0

    def request_redraw(self) -> None:
        # arcade redraws the window every frame; only the count is kept.
        self.redraw_requests += 1

    def bounds(self) -> tuple[float, float]:
        box = self.window.world.component_for_entity(self.entity, WidgetBox)
        return box.width, box.height

    def content_margins(self) -> Padding:
        return self.window.world.component_for_entity(self.entity, WidgetBox).padding


class ExpanderWindow(Window):
    def __init__(self, models=MODELS, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT):
        super().__init__(width, height, WINDOW_TITLE, resizable=True)
        self.event_bus = EventBus()
        self.world = create_world()
        self.scheduler = ArcadeScheduler(arcade)
        self.layout_system = LayoutSystem(self.world, self.event_bus, clock=monotonic_ms)
        self.input_system = PressInputSystem(self.world, self.event_bus, button=arcade.MOUSE_BUTTON_LEFT)
        self.renderer = BorderRenderer(self.world)

        self.widgets: list[int] = []
        self.drivers = []
        padding = Padding(BUTTON_PADDING, BUTTON_PADDING, BUTTON_PADDING, BUTTON_PADDING)
        for left, bottom in self._button_origins(len(models)):
            model = models[len(self.widgets)]
            surface = WidgetSurface(self)
            ent, driver = spawn_animated_widget(
                self.world,
                self.event_bus,
                self.scheduler,
                left,
                bottom,
                BUTTON_WIDTH,
                BUTTON_HEIGHT,
                clock=monotonic_ms,
                padding=padding,
                config=config_for_model(model),
                surface=surface,
            )
            surface.entity = ent
            self.widgets.append(ent)
            self.drivers.append(driver)
            logger.info("created %s button as entity %s", model, ent)

        set_background_color(color.BLACK)

    def _button_origins(self, count: int) -> list[tuple[float, float]]:
        total = count * BUTTON_WIDTH + max(0, count - 1) * BUTTON_GAP
        start_x = (self.width - total) / 2
        bottom = (self.height - BUTTON_HEIGHT) / 2
        return [(start_x + i * (BUTTON_WIDTH + BUTTON_GAP), bottom) for i in range(count)]

    def on_resize(self, width: int, height: int):
        widgets = getattr(self, "widgets", [])
        for ent, (left, bottom) in zip(widgets, self._button_origins(len(widgets))):
            self.event_bus.emit(EVENT_WIDGET_RESIZED, entity=ent, left=left, bottom=bottom)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.renderer.render(arcade)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS_RAW, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE_RAW, x=x, y=y, button=button, modifiers=modifiers)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Expanding border button demo")
    parser.add_argument("--model", choices=(*MODELS, "both"), default="both",
                        help="motion model of the buttons (default: one of each)")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    models = MODELS if args.model == "both" else (args.model,)
    ExpanderWindow(models=models, width=args.width, height=args.height)
    run()


if __name__ == "__main__":
    main()
