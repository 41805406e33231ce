from esper import World

from expander.components.widget_box import Padding
from expander.config import MotionConfig
from expander.events.bus import EventBus
from expander.factories.widgets import create_border_widget
from expander.interfaces import RenderSurface, Scheduler
from expander.systems.animation import BorderAnimationSystem


def create_world() -> World:
    return World()


def spawn_animated_widget(
    world: World,
    event_bus: EventBus,
    scheduler: Scheduler,
    left: float,
    bottom: float,
    width: float,
    height: float,
    *,
    clock,
    padding: Padding | None = None,
    config: MotionConfig | None = None,
    surface: RenderSurface | None = None,
) -> tuple[int, BorderAnimationSystem]:
    """Create a measured widget entity together with its animation driver."""
    ent = create_border_widget(
        world, left, bottom, width, height, padding=padding, config=config, now=clock(),
    )
    driver = BorderAnimationSystem(world, event_bus, ent, scheduler, surface, clock=clock)
    return ent, driver
