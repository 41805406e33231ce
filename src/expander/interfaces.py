"""Contracts for the host collaborators the border animation relies on."""
from __future__ import annotations

from typing import Callable, Protocol

from expander.components.widget_box import Padding

TickFn = Callable[[], None]


class RenderSurface(Protocol):
    """Drawable host of one widget."""

    def request_redraw(self) -> None:
        ...

    def bounds(self) -> tuple[float, float]:
        """Return (width, height) of the widget."""
        ...

    def content_margins(self) -> Padding:
        ...


class Scheduler(Protocol):
    """Posts tick callbacks on the thread that delivers input events."""

    def post_now(self, fn: TickFn) -> None:
        ...

    def post_delayed(self, fn: TickFn, delay_ms: float) -> None:
        ...

    def cancel(self, fn: TickFn) -> None:
        ...
