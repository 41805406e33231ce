from __future__ import annotations

from esper import World

from expander.components.widget_box import Padding
from expander.config import MotionConfig
from expander.events.bus import EventBus
from expander.scheduling import ManualScheduler
from expander.world import create_world, spawn_animated_widget


class RecordingSurface:
    """Render surface stand-in counting redraw requests."""

    def __init__(self, width: float = 100.0, height: float = 100.0, padding: Padding | None = None) -> None:
        self.width = width
        self.height = height
        self.padding = padding or Padding()
        self.redraw_requests = 0

    def request_redraw(self) -> None:
        self.redraw_requests += 1

    def bounds(self) -> tuple[float, float]:
        return self.width, self.height

    def content_margins(self) -> Padding:
        return self.padding


class HeadlessArcade:
    """Collects draw calls instead of touching a GL context."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def draw_line_strip(self, point_list, color, line_width=1):
        self.calls.append(("draw_line_strip", (list(point_list), color, line_width)))

    def __getattr__(self, name):  # pragma: no cover - defensive path
        raise AssertionError(f"Unexpected draw call: {name}")


def build_widget(
    config: MotionConfig | None = None,
    *,
    width: float = 100.0,
    height: float = 100.0,
    padding: Padding | None = None,
    world: World | None = None,
    bus: EventBus | None = None,
    scheduler: ManualScheduler | None = None,
):
    """Measured widget with its driver, wired to a virtual-time scheduler."""
    if world is None:
        world = create_world()
    if bus is None:
        bus = EventBus()
    if scheduler is None:
        scheduler = ManualScheduler()
    surface = RecordingSurface(width, height, padding)
    ent, driver = spawn_animated_widget(
        world,
        bus,
        scheduler,
        0.0,
        0.0,
        width,
        height,
        clock=scheduler.clock,
        padding=padding,
        config=config,
        surface=surface,
    )
    return world, bus, scheduler, surface, ent, driver
